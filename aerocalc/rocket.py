"""
rocket.py – Rocket-equation bookkeeping.

    propellant_mass_fraction(m0, mf)   mass split of a stage
    ideal_delta_v(Isp, m0, mf)         Tsiolkovsky  Δv = Isp·g0·ln(m0/mf)
    convert_specific_impulse(v, unit)  Isp in s, m/s, ft/s, km/s
    delta_v_budget(phases)             mission Δv summed by category
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field

g0 = 9.80665          # m/s²
FT_PER_M = 3.28084


# ──────────────────────────────────────────────────────────────────────
# Mass fraction and the rocket equation
# ──────────────────────────────────────────────────────────────────────

@dataclass
class MassFraction:
    initial_mass: float                 # kg
    propellant_mass: float              # kg
    structural_mass: float              # kg  (everything that is not burnt)
    propellant_mass_fraction: float     # m_prop / m0
    structural_mass_fraction: float     # m_dry / m0

    @property
    def mass_ratio(self) -> float:
        """m0 / mf"""
        return self.initial_mass / self.structural_mass


def propellant_mass_fraction(initial_mass: float,
                             final_mass: float) -> MassFraction:
    """
    Split a vehicle of ``initial_mass`` [kg] into propellant and dry mass,
    ``final_mass`` [kg] being what remains at burnout.
    """
    if initial_mass <= 0 or final_mass < 0:
        raise ValueError(
            "Initial mass must be positive, and final mass cannot be negative.")
    if final_mass >= initial_mass:
        raise ValueError("Final mass (dry mass) must be less than the initial mass.")

    m_prop = initial_mass - final_mass
    return MassFraction(
        initial_mass=initial_mass,
        propellant_mass=m_prop,
        structural_mass=final_mass,
        propellant_mass_fraction=m_prop / initial_mass,
        structural_mass_fraction=final_mass / initial_mass,
    )


def ideal_delta_v(isp: float, initial_mass: float, final_mass: float) -> float:
    """Tsiolkovsky ideal Δv [m/s] for specific impulse ``isp`` [s]."""
    if isp <= 0:
        raise ValueError("Specific impulse must be positive.")
    if final_mass <= 0 or final_mass > initial_mass:
        raise ValueError("Final mass must be positive and not exceed the initial mass.")
    return isp * g0 * math.log(initial_mass / final_mass)


# ──────────────────────────────────────────────────────────────────────
# Specific impulse
# ──────────────────────────────────────────────────────────────────────

# unit → factor that turns a value in that unit into seconds
_ISP_TO_SECONDS = {
    "s":    1.0,
    "m/s":  1.0 / g0,
    "ft/s": 1.0 / (g0 * FT_PER_M),
    "km/s": 1000.0 / g0,
}

_ISP_CATEGORIES = (
    (200.0, "Low Performance",
     ("Cold gas thrusters", "Some monopropellants")),
    (300.0, "Moderate Performance",
     ("Hydrazine monopropellant", "Some bipropellants")),
    (400.0, "Good Performance",
     ("LOX/RP-1", "LOX/LH2", "Most bipropellants")),
    (500.0, "High Performance",
     ("LOX/LH2 (optimized)", "Advanced bipropellants")),
    (1000.0, "Very High Performance",
     ("Electric propulsion", "Ion engines", "Hall thrusters")),
)

# Reference values in seconds
COMMON_ISP = {
    "Cold Gas Thruster": 150.0,
    "Hydrazine Monopropellant": 230.0,
    "LOX/RP-1": 350.0,
    "LOX/LH2": 450.0,
    "Hall Thruster": 1500.0,
    "Ion Engine": 3000.0,
}


@dataclass
class SpecificImpulse:
    seconds: float
    meters_per_second: float     # = effective exhaust velocity = F / ṁ
    feet_per_second: float
    kilometers_per_second: float
    category: str
    typical_applications: tuple[str, ...]


def isp_category(seconds: float) -> tuple[str, tuple[str, ...]]:
    for upper, label, uses in _ISP_CATEGORIES:
        if seconds < upper:
            return label, uses
    return ("Exceptional Performance",
            ("Advanced electric propulsion", "Nuclear thermal", "Fusion concepts"))


def convert_specific_impulse(value: float, unit: str = "s") -> SpecificImpulse:
    """
    Express a specific impulse in every common unit.

    Parameters
    ----------
    value : specific impulse in ``unit``
    unit  : one of 's', 'm/s', 'ft/s', 'km/s'
    """
    if unit not in _ISP_TO_SECONDS:
        raise ValueError(
            f"Unknown unit '{unit}'.  Available: {list(_ISP_TO_SECONDS)}")
    if not value > 0:
        raise ValueError("Specific impulse must be positive.")

    seconds = value * _ISP_TO_SECONDS[unit]
    ve = seconds * g0
    label, uses = isp_category(seconds)
    return SpecificImpulse(
        seconds=seconds,
        meters_per_second=ve,
        feet_per_second=ve * FT_PER_M,
        kilometers_per_second=ve / 1000.0,
        category=label,
        typical_applications=uses,
    )


# ──────────────────────────────────────────────────────────────────────
# Mission Δv budget
# ──────────────────────────────────────────────────────────────────────

PHASE_CATEGORIES = ("launch", "transfer", "orbital", "landing", "other")

_COMPLEXITY = (
    (2000.0, "Low Complexity"),
    (5000.0, "Moderate Complexity"),
    (10000.0, "High Complexity"),
    (20000.0, "Very High Complexity"),
)


@dataclass
class MissionPhase:
    name: str
    delta_v: float              # m/s
    category: str = "other"
    enabled: bool = True
    description: str = ""

    def __post_init__(self):
        if self.category not in PHASE_CATEGORIES:
            raise ValueError(
                f"Unknown phase category '{self.category}'.  "
                f"Available: {list(PHASE_CATEGORIES)}")
        if self.delta_v < 0:
            raise ValueError("Phase delta-v cannot be negative.")


@dataclass
class DeltaVBudget:
    phases: list[MissionPhase]
    total_delta_v: float            # m/s, all phases
    enabled_total_delta_v: float    # m/s, enabled phases only
    breakdown: dict[str, float] = field(default_factory=dict)
    complexity: str = "No Mission Defined"


def mission_complexity(delta_v: float) -> str:
    for upper, label in _COMPLEXITY:
        if delta_v < upper:
            return label
    return "Extreme Complexity"


def delta_v_budget(phases: list[MissionPhase]) -> DeltaVBudget:
    """
    Sum a mission's Δv.  Disabled phases count toward ``total_delta_v``
    only; the per-category breakdown and complexity use enabled phases.
    """
    phases = list(phases)
    breakdown = {c: 0.0 for c in PHASE_CATEGORIES}
    if not phases:
        return DeltaVBudget(phases=[], total_delta_v=0.0,
                            enabled_total_delta_v=0.0, breakdown=breakdown)

    enabled = 0.0
    for ph in phases:
        if ph.enabled:
            breakdown[ph.category] += ph.delta_v
            enabled += ph.delta_v

    return DeltaVBudget(
        phases=phases,
        total_delta_v=sum(ph.delta_v for ph in phases),
        enabled_total_delta_v=enabled,
        breakdown=breakdown,
        complexity=mission_complexity(enabled),
    )


# Typical mission legs  (name, Δv [m/s], category)
COMMON_PHASES = (
    ("Launch to LEO", 9400.0, "launch"),
    ("LEO to GTO", 2400.0, "transfer"),
    ("GTO to GEO", 1500.0, "orbital"),
    ("LEO to Moon", 3200.0, "transfer"),
    ("Moon Landing", 1800.0, "landing"),
    ("Moon to Earth", 800.0, "transfer"),
    ("LEO to Mars", 3600.0, "transfer"),
    ("Mars Landing", 2000.0, "landing"),
    ("Mars to Earth", 2100.0, "transfer"),
    ("Station Keeping", 50.0, "orbital"),
    ("Deorbit", 100.0, "orbital"),
)


def common_phase(name: str) -> MissionPhase:
    """A ``MissionPhase`` from the reference table, by case-insensitive name."""
    for label, dv, cat in COMMON_PHASES:
        if label.lower() == name.lower().strip():
            return MissionPhase(label, dv, cat)
    raise KeyError(
        f"Unknown phase '{name}'.  Available: {[p[0] for p in COMMON_PHASES]}")
