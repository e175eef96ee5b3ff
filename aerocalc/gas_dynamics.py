"""
gas_dynamics.py – Isentropic flow, normal-shock and oblique-shock relations.

All functions assume a calorically perfect ideal gas with constant γ.
References: Anderson, *Modern Compressible Flow* (isentropic relations,
area-Mach, Prandtl-Meyer, normal shock, Rayleigh pitot formula and the
θ-β-M relation).
"""

from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np

GAMMA_AIR = 1.4


def _check_gamma(gamma: float) -> None:
    if gamma <= 1.0:
        raise ValueError("Specific heat ratio must be greater than 1")


# ──────────────────────────────────────────────────────────────────────
# Isentropic static / stagnation ratios
# ──────────────────────────────────────────────────────────────────────

def isentropic_temperature_ratio(M: float, gamma: float = GAMMA_AIR) -> float:
    """T / T₀  =  (1 + (γ-1)/2 · M²)⁻¹"""
    return (1.0 + 0.5 * (gamma - 1.0) * M * M) ** (-1.0)


def isentropic_pressure_ratio(M: float, gamma: float = GAMMA_AIR) -> float:
    """p / p₀  =  (T/T₀)^(γ/(γ-1))"""
    return isentropic_temperature_ratio(M, gamma) ** (gamma / (gamma - 1.0))


def isentropic_density_ratio(M: float, gamma: float = GAMMA_AIR) -> float:
    """ρ / ρ₀  =  (T/T₀)^(1/(γ-1))"""
    return isentropic_temperature_ratio(M, gamma) ** (1.0 / (gamma - 1.0))


def mach_from_pressure_ratio(pressure_ratio: float,
                             gamma: float = GAMMA_AIR) -> float:
    """
    Invert p/p₀ for Mach number (closed form).

        M² = (2/(γ-1)) · [ (p/p₀)^(-(γ-1)/γ) - 1 ]
    """
    if pressure_ratio <= 0.0 or pressure_ratio > 1.0:
        raise ValueError("Pressure ratio must be between 0 and 1")
    _check_gamma(gamma)
    gm1 = gamma - 1.0
    M_sq = (2.0 / gm1) * (pressure_ratio ** (-gm1 / gamma) - 1.0)
    return math.sqrt(max(M_sq, 0.0))


# ──────────────────────────────────────────────────────────────────────
# Area-Mach relation  A/A*
# ──────────────────────────────────────────────────────────────────────

def area_mach_relation(M: float, gamma: float = GAMMA_AIR) -> float:
    """
    A/A* for a given Mach number and γ.

        A/A* = (1/M) · [ (2/(γ+1)) · (1 + (γ-1)/2 · M²) ]^((γ+1)/(2(γ-1)))
    """
    gp1 = gamma + 1.0
    gm1 = gamma - 1.0
    return (1.0 / M) * ((2.0 / gp1) * (1.0 + 0.5 * gm1 * M * M)) ** (gp1 / (2.0 * gm1))


def mach_from_area_ratio(area_ratio: float, gamma: float = GAMMA_AIR,
                         supersonic: bool = True) -> float:
    """
    Invert the area-Mach relation for the supersonic (default) or subsonic
    branch using Newton-Raphson iteration.

    Parameters
    ----------
    area_ratio : A/A*  (must be >= 1)
    gamma      : ratio of specific heats
    supersonic : if True return the supersonic root, else the subsonic root

    Returns
    -------
    Mach number
    """
    if area_ratio < 1.0:
        raise ValueError("area_ratio must be >= 1.0")

    gm1 = gamma - 1.0
    exp = (gamma + 1.0) / (2.0 * gm1)

    def _f(M):
        return area_mach_relation(M, gamma) - area_ratio

    # d(A/A*)/dM via logarithmic differentiation
    def _df(M):
        bracket = 1.0 + 0.5 * gm1 * M * M
        return area_mach_relation(M, gamma) * (-1.0 / M + exp * gm1 * M / bracket)

    if supersonic:
        M = max(1.0 + 0.5 * math.log(area_ratio), 1.01)
    else:
        M = 0.5

    for _ in range(100):
        dfval = _df(M)
        if abs(dfval) < 1e-30:
            break
        dM = -_f(M) / dfval
        M += dM
        if M < 1e-6:
            M = 1e-6
        if abs(dM) < 1e-12:
            break

    return M


# ──────────────────────────────────────────────────────────────────────
# Wave angles
# ──────────────────────────────────────────────────────────────────────

def mach_angle(M: float) -> float:
    """Mach angle μ = asin(1/M) in **radians** (M ≥ 1)."""
    if M < 1.0:
        raise ValueError("Mach angle is undefined for M < 1")
    return math.asin(1.0 / M)


def prandtl_meyer(M: float, gamma: float = GAMMA_AIR) -> float:
    """
    Prandtl-Meyer function ν(M) in **radians**.

        ν(M) = sqrt((γ+1)/(γ-1)) · arctan(sqrt((γ-1)/(γ+1)·(M²-1)))
               - arctan(sqrt(M²-1))
    """
    if M < 1.0:
        raise ValueError("Prandtl-Meyer function is undefined for M < 1")
    gp1 = gamma + 1.0
    gm1 = gamma - 1.0
    q = math.sqrt(gp1 / gm1)
    msq = M * M - 1.0
    return q * math.atan(math.sqrt(gm1 / gp1 * msq)) - math.atan(math.sqrt(msq))


# ──────────────────────────────────────────────────────────────────────
# Normal shock
# ──────────────────────────────────────────────────────────────────────

def rayleigh_pitot_ratio(M: float, gamma: float = GAMMA_AIR) -> float:
    """
    Pitot pressure over free-stream static pressure, p₀₂/p₁, for M ≥ 1.

        p₀₂/p₁ = [(γ+1)M²/2]^(γ/(γ-1)) · [(γ+1)/(2γM² - (γ-1))]^(1/(γ-1))
    """
    gp1 = gamma + 1.0
    gm1 = gamma - 1.0
    term1 = (0.5 * gp1 * M * M) ** (gamma / gm1)
    term2 = (gp1 / (2.0 * gamma * M * M - gm1)) ** (1.0 / gm1)
    return term1 * term2


@dataclass
class NormalShock:
    """Property ratios across a stationary normal shock."""
    mach1: float
    mach2: float
    pressure_ratio: float          # p₂/p₁
    temperature_ratio: float       # T₂/T₁
    density_ratio: float           # ρ₂/ρ₁
    total_pressure_ratio: float    # p₀₂/p₀₁
    entropy_change: float          # Δs/R
    gamma: float


def normal_shock(mach1: float, gamma: float = GAMMA_AIR) -> NormalShock:
    """
    Normal-shock relations for upstream Mach number ``mach1`` (> 1).
    """
    if mach1 <= 1.0:
        raise ValueError("Upstream Mach number must be greater than 1 (supersonic)")
    _check_gamma(gamma)

    gp1 = gamma + 1.0
    gm1 = gamma - 1.0
    m1sq = mach1 * mach1

    mach2 = math.sqrt((1.0 + 0.5 * gm1 * m1sq) / (gamma * m1sq - 0.5 * gm1))
    p_ratio = 1.0 + (2.0 * gamma / gp1) * (m1sq - 1.0)
    T_ratio = (p_ratio * (1.0 + 0.5 * gm1 * mach2 * mach2)
               / (1.0 + 0.5 * gm1 * m1sq))
    rho_ratio = p_ratio / T_ratio

    # p₀₂/p₀₁ = [(γ+1)M²/((γ-1)M²+2)]^(γ/(γ-1)) · [(γ+1)/(2γM²-(γ-1))]^(1/(γ-1))
    p0_ratio = ((gp1 * m1sq / (gm1 * m1sq + 2.0)) ** (gamma / gm1)
                * (gp1 / (2.0 * gamma * m1sq - gm1)) ** (1.0 / gm1))

    return NormalShock(
        mach1=mach1, mach2=mach2,
        pressure_ratio=p_ratio, temperature_ratio=T_ratio,
        density_ratio=rho_ratio, total_pressure_ratio=p0_ratio,
        entropy_change=-math.log(p0_ratio), gamma=gamma,
    )


def normal_shock_from_pitot_ratio(pitot_ratio: float,
                                  gamma: float = GAMMA_AIR) -> NormalShock:
    """
    Recover the free-stream Mach number from a measured pitot ratio p₀₂/p₁
    (Newton-Raphson on the Rayleigh pitot formula) and return the shock.
    """
    _check_gamma(gamma)
    sonic = rayleigh_pitot_ratio(1.0, gamma)
    if pitot_ratio <= sonic:
        raise ValueError(
            f"Pitot pressure ratio must exceed the sonic value {sonic:.4f} "
            f"for supersonic flow")

    gm1 = gamma - 1.0
    M = 2.0
    for _ in range(100):
        f = rayleigh_pitot_ratio(M, gamma)
        # d(ln f)/dM
        dlnf = (2.0 * gamma / (gm1 * M)
                - 4.0 * gamma * M / (gm1 * (2.0 * gamma * M * M - gm1)))
        dM = -(f - pitot_ratio) / (f * dlnf)
        M += dM
        if M <= 1.0:
            M = 1.0001
        if abs(dM) < 1e-12:
            break

    return normal_shock(M, gamma)


def normal_shock_table(mach_min: float = 1.05, mach_max: float = 10.0,
                       n_points: int = 20,
                       gamma: float = GAMMA_AIR) -> list[NormalShock]:
    """Normal-shock properties on an evenly spaced Mach grid."""
    if mach_min <= 1.0:
        mach_min = 1.05
    return [normal_shock(float(M), gamma)
            for M in np.linspace(mach_min, mach_max, n_points)]


# ──────────────────────────────────────────────────────────────────────
# Oblique shock  (θ-β-M relation)
# ──────────────────────────────────────────────────────────────────────

def theta_beta_mach(mach1: float, beta: float,
                    gamma: float = GAMMA_AIR) -> float:
    """
    Flow deflection θ [rad] behind an oblique shock of wave angle β [rad].

        tan θ = 2 cot β · (M² sin²β - 1) / (M² (γ + cos 2β) + 2)
    """
    m1sq = mach1 * mach1
    sin_b = math.sin(beta)
    num = 2.0 * (math.cos(beta) / sin_b) * (m1sq * sin_b * sin_b - 1.0)
    den = m1sq * (gamma + math.cos(2.0 * beta)) + 2.0
    return math.atan(num / den)


def max_deflection_angle(mach1: float,
                         gamma: float = GAMMA_AIR) -> tuple[float, float]:
    """
    Detachment limit for an attached oblique shock.

    Returns
    -------
    (θ_max, β at θ_max), both in **degrees**
    """
    if mach1 <= 1.0:
        raise ValueError("Upstream Mach number must be greater than 1 (supersonic)")
    _check_gamma(gamma)

    # Closed form for the wave angle at maximum deflection
    m1sq = mach1 * mach1
    gp1 = gamma + 1.0
    root = math.sqrt(gp1 * (gp1 * m1sq * m1sq / 16.0
                            + 0.5 * (gamma - 1.0) * m1sq + 1.0))
    sin_sq = (0.25 * gp1 * m1sq - 1.0 + root) / (gamma * m1sq)
    beta = math.asin(math.sqrt(min(sin_sq, 1.0)))
    theta = theta_beta_mach(mach1, beta, gamma)
    return math.degrees(theta), math.degrees(beta)


def _solve_wave_angle(mach1: float, theta: float, gamma: float,
                      lo: float, hi: float, rising: bool) -> float:
    # θ(β) is monotonic on each branch, so bisection always converges
    for _ in range(200):
        mid = 0.5 * (lo + hi)
        above = theta_beta_mach(mach1, mid, gamma) > theta
        if above == rising:
            hi = mid
        else:
            lo = mid
        if hi - lo < 1e-14:
            break
    return 0.5 * (lo + hi)


@dataclass
class ObliqueShock:
    """Property ratios across an attached oblique shock."""
    mach1: float
    mach2: float
    wave_angle: float              # β  [deg]
    deflection_angle: float        # θ  [deg]
    pressure_ratio: float          # p₂/p₁
    temperature_ratio: float       # T₂/T₁
    density_ratio: float           # ρ₂/ρ₁
    total_pressure_ratio: float    # p₀₂/p₀₁
    mach_angle: float              # μ  [deg]
    max_deflection_angle: float    # θ_max  [deg]
    weak: bool
    gamma: float


def oblique_shock(mach1: float, theta_deg: float, gamma: float = GAMMA_AIR,
                  weak: bool = True) -> ObliqueShock:
    """
    Oblique shock generated by a wedge of half-angle ``theta_deg``.

    Parameters
    ----------
    mach1     : upstream Mach number  (> 1)
    theta_deg : flow deflection angle  [deg], 0 ≤ θ ≤ θ_max
    gamma     : ratio of specific heats
    weak      : weak-shock branch (the one normally observed); False for
                the strong branch

    The normal-shock relations are applied to M₁ₙ = M₁ sin β, and
    M₂ = M₂ₙ / sin(β - θ).  θ = 0 degenerates to a Mach wave.
    """
    if mach1 <= 1.0:
        raise ValueError("Upstream Mach number must be greater than 1 (supersonic)")
    if theta_deg < 0.0:
        raise ValueError("Deflection angle cannot be negative")
    _check_gamma(gamma)

    mu = math.asin(1.0 / mach1)
    theta_max, beta_star = max_deflection_angle(mach1, gamma)
    if theta_deg > theta_max + 1e-9:
        raise ValueError(
            f"Deflection angle {theta_deg:.2f}° exceeds the maximum "
            f"{theta_max:.2f}° for M1 = {mach1:g}; the shock detaches")

    if theta_deg == 0.0:
        beta = mu if weak else 0.5 * math.pi
    else:
        theta = math.radians(theta_deg)
        if weak:
            beta = _solve_wave_angle(mach1, theta, gamma,
                                     mu, math.radians(beta_star), rising=True)
        else:
            beta = _solve_wave_angle(mach1, theta, gamma,
                                     math.radians(beta_star), 0.5 * math.pi,
                                     rising=False)

    m1n = mach1 * math.sin(beta)
    if m1n <= 1.0:
        # Zero-strength wave: nothing changes across it
        mach2 = mach1
        p_ratio = T_ratio = rho_ratio = p0_ratio = 1.0
    else:
        ns = normal_shock(m1n, gamma)
        mach2 = ns.mach2 / math.sin(beta - math.radians(theta_deg))
        p_ratio = ns.pressure_ratio
        T_ratio = ns.temperature_ratio
        rho_ratio = ns.density_ratio
        p0_ratio = ns.total_pressure_ratio

    return ObliqueShock(
        mach1=mach1, mach2=mach2,
        wave_angle=math.degrees(beta), deflection_angle=theta_deg,
        pressure_ratio=p_ratio, temperature_ratio=T_ratio,
        density_ratio=rho_ratio, total_pressure_ratio=p0_ratio,
        mach_angle=math.degrees(mu), max_deflection_angle=theta_max,
        weak=weak, gamma=gamma,
    )


# ──────────────────────────────────────────────────────────────────────
# Combined isentropic-flow table row
# ──────────────────────────────────────────────────────────────────────

@dataclass
class IsentropicFlow:
    mach: float
    pressure_ratio: float          # p/p₀
    temperature_ratio: float       # T/T₀
    density_ratio: float           # ρ/ρ₀
    area_ratio: float              # A/A*
    mach_angle: float              # μ  [deg], NaN if subsonic
    prandtl_meyer_angle: float     # ν  [deg], 0 if subsonic
    pitot_pressure_ratio: float    # p₀₂/p  (pitot over static)
    gamma: float


def isentropic_flow(M: float, gamma: float = GAMMA_AIR) -> IsentropicFlow:
    """
    All isentropic relations at one Mach number.

    For supersonic flow the pitot ratio includes the normal shock standing
    ahead of the pitot tube (Rayleigh); for subsonic flow it is simply p₀/p.
    """
    if M < 0.0:
        raise ValueError("Mach number must be positive")
    _check_gamma(gamma)

    p_ratio = isentropic_pressure_ratio(M, gamma)
    area_ratio = math.inf if M == 0.0 else area_mach_relation(M, gamma)

    if M >= 1.0:
        mu = math.degrees(mach_angle(M))
        nu = math.degrees(prandtl_meyer(M, gamma))
        pitot = rayleigh_pitot_ratio(M, gamma)
    else:
        mu = math.nan
        nu = 0.0
        pitot = 1.0 / p_ratio

    return IsentropicFlow(
        mach=M,
        pressure_ratio=p_ratio,
        temperature_ratio=isentropic_temperature_ratio(M, gamma),
        density_ratio=isentropic_density_ratio(M, gamma),
        area_ratio=area_ratio,
        mach_angle=mu,
        prandtl_meyer_angle=nu,
        pitot_pressure_ratio=pitot,
        gamma=gamma,
    )
