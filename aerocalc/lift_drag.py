"""
lift_drag.py – Finite-wing lift and drag at a flight condition.

Thin-airfoil lift slope (2π per radian) capped at C_L,max, a linear
post-stall drop, and the parabolic drag polar

    C_D = C_D0 + C_L² / (π · AR · e)

Air density comes from the ISA model at the given altitude.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field

import numpy as np

from aerocalc.atmosphere import isa_from_altitude

CL_ALPHA = 2.0 * math.pi      # per radian
POST_STALL_SLOPE = 0.1        # C_L lost per degree beyond stall
POST_STALL_FLOOR = 0.3


@dataclass
class Airfoil:
    name: str
    cl_max: float
    cl0: float                  # C_L at zero angle of attack
    cd0: float                  # zero-lift drag coefficient
    oswald_efficiency: float
    stall_angle: float          # deg


@dataclass
class LiftDragResult:
    velocity: float             # m/s
    altitude: float             # m
    density: float              # kg/m³
    dynamic_pressure: float     # Pa
    aspect_ratio: float
    angle_of_attack: float      # deg
    cl: float
    cd: float
    lift: float                 # N
    drag: float                 # N
    max_lift_to_drag: float
    optimal_angle_of_attack: float   # deg
    stall_speed: float | None   # m/s, needs a weight
    is_stalled: bool
    airfoil: str
    warnings: list[str] = field(default_factory=list)

    @property
    def lift_to_drag(self) -> float:
        return self.cl / self.cd


# ── Airfoil database ────────────────────────────────────────────────

AIRFOIL_DB: dict[str, Airfoil] = {}


def _register(a: Airfoil):
    AIRFOIL_DB[a.name.lower()] = a


_register(Airfoil("NACA 2412", 1.4, 0.25, 0.006, 0.85, 16.0))
_register(Airfoil("NACA 4412", 1.5, 0.35, 0.007, 0.87, 18.0))
_register(Airfoil("NACA 23012", 1.6, 0.30, 0.005, 0.90, 17.0))
_register(Airfoil("Clark Y", 1.45, 0.40, 0.0065, 0.88, 16.5))


def get_airfoil(name: str) -> Airfoil:
    """Lookup by case-insensitive name ('naca-2412' also matches)."""
    key = name.lower().strip().replace("-", " ")
    if key in AIRFOIL_DB:
        return AIRFOIL_DB[key]
    raise KeyError(
        f"Unknown airfoil '{name}'.  Available: {list(AIRFOIL_DB.keys())}"
    )


def list_airfoils() -> list[str]:
    return [v.name for v in AIRFOIL_DB.values()]


def custom_airfoil(cl_max: float = 1.2, cl0: float = 0.2, cd0: float = 0.008,
                   oswald_efficiency: float = 0.8,
                   stall_angle: float = 15.0) -> Airfoil:
    if cd0 <= 0:
        raise ValueError("Zero-lift drag coefficient must be positive.")
    if not 0 < oswald_efficiency <= 1:
        raise ValueError("Oswald efficiency must be in (0, 1].")
    return Airfoil("Custom", cl_max, cl0, cd0, oswald_efficiency, stall_angle)


# ── Coefficients ────────────────────────────────────────────────────

def lift_coefficient(alpha_deg: float, airfoil: Airfoil) -> float:
    def _linear(a):
        return min(airfoil.cl0 + CL_ALPHA * math.radians(a), airfoil.cl_max)

    if alpha_deg <= airfoil.stall_angle:
        return _linear(alpha_deg)
    drop = POST_STALL_SLOPE * (alpha_deg - airfoil.stall_angle)
    return max(_linear(airfoil.stall_angle) - drop, POST_STALL_FLOOR)


def induced_drag_factor(aspect_ratio: float, oswald_efficiency: float) -> float:
    """k = 1 / (π · AR · e)"""
    return 1.0 / (math.pi * aspect_ratio * oswald_efficiency)


def drag_coefficient(cl: float, airfoil: Airfoil, aspect_ratio: float) -> float:
    return airfoil.cd0 + cl * cl * induced_drag_factor(
        aspect_ratio, airfoil.oswald_efficiency)


def max_lift_to_drag(airfoil: Airfoil, aspect_ratio: float) -> float:
    """(L/D)max = ½ · sqrt(π AR e / C_D0)"""
    return 0.5 * math.sqrt(
        math.pi * aspect_ratio * airfoil.oswald_efficiency / airfoil.cd0)


def optimal_angle_of_attack(airfoil: Airfoil, aspect_ratio: float) -> float:
    """Angle [deg] at which C_L = sqrt(C_D0 π AR e), i.e. (L/D)max."""
    cl_opt = math.sqrt(
        airfoil.cd0 * math.pi * aspect_ratio * airfoil.oswald_efficiency)
    return math.degrees((cl_opt - airfoil.cl0) / CL_ALPHA)


def stall_speed(weight: float, density: float, wing_area: float,
                cl_max: float) -> float:
    """V_s = sqrt(2W / (ρ S C_L,max))"""
    return math.sqrt(2.0 * weight / (density * wing_area * cl_max))


# ── Main entry point ────────────────────────────────────────────────

def lift_and_drag(velocity: float, altitude: float, alpha_deg: float,
                  wing_area: float, wing_span: float,
                  airfoil: Airfoil | str = "NACA 2412",
                  weight: float | None = None) -> LiftDragResult:
    """
    Parameters
    ----------
    velocity  : true airspeed  [m/s]
    altitude  : geometric altitude  [m]  (ISA domain)
    alpha_deg : angle of attack  [deg]
    wing_area : S  [m²]
    wing_span : b  [m]   (AR = b²/S)
    airfoil   : database name or ``Airfoil``
    weight    : aircraft weight  [N]; enables the stall-speed estimate
    """
    if velocity <= 0:
        raise ValueError("Velocity must be positive")
    if wing_area <= 0:
        raise ValueError("Wing area must be positive")
    if wing_span <= 0:
        raise ValueError("Wing span must be positive")
    if weight is not None and weight <= 0:
        raise ValueError("Weight must be positive")
    if isinstance(airfoil, str):
        airfoil = get_airfoil(airfoil)

    rho = isa_from_altitude(altitude).density
    q = 0.5 * rho * velocity * velocity
    ar = wing_span * wing_span / wing_area

    cl = lift_coefficient(alpha_deg, airfoil)
    cd = drag_coefficient(cl, airfoil, ar)
    v_stall = (stall_speed(weight, rho, wing_area, airfoil.cl_max)
               if weight is not None else None)
    stalled = alpha_deg > airfoil.stall_angle

    warnings = []
    if stalled:
        warnings.append("Wing is stalled - lift coefficient is unreliable")
    if v_stall is not None and velocity < 1.1 * v_stall:
        warnings.append("Velocity is within 10% of stall speed")
    if alpha_deg > 25.0:
        warnings.append("Angle of attack is very high - results may be inaccurate")

    return LiftDragResult(
        velocity=velocity, altitude=altitude, density=rho,
        dynamic_pressure=q, aspect_ratio=ar, angle_of_attack=alpha_deg,
        cl=cl, cd=cd, lift=cl * q * wing_area, drag=cd * q * wing_area,
        max_lift_to_drag=max_lift_to_drag(airfoil, ar),
        optimal_angle_of_attack=optimal_angle_of_attack(airfoil, ar),
        stall_speed=v_stall, is_stalled=stalled, airfoil=airfoil.name,
        warnings=warnings,
    )


def lift_drag_curve(velocity: float, altitude: float, wing_area: float,
                    wing_span: float, airfoil: Airfoil | str = "NACA 2412",
                    alpha_min: float = -5.0, alpha_max: float = 20.0,
                    n_points: int = 26) -> dict:
    """
    Sweep the angle of attack.

    Returns
    -------
    dict with arrays 'alpha' [deg], 'cl', 'cd', 'ld', 'lift' [N], 'drag' [N]
    """
    alphas = np.linspace(alpha_min, alpha_max, n_points)
    cl = np.zeros(n_points)
    cd = np.zeros(n_points)
    lift = np.zeros(n_points)
    drag = np.zeros(n_points)

    for i, a in enumerate(alphas):
        res = lift_and_drag(velocity, altitude, float(a), wing_area,
                            wing_span, airfoil)
        cl[i] = res.cl
        cd[i] = res.cd
        lift[i] = res.lift
        drag[i] = res.drag

    return {'alpha': alphas, 'cl': cl, 'cd': cd, 'ld': cl / cd,
            'lift': lift, 'drag': drag}
