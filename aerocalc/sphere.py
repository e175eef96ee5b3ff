"""
sphere.py – Flow past a smooth sphere.

Drag coefficient from empirical C_D(Re) correlations (Stokes, Oseen,
Schiller-Naumann, the drag crisis), plus rough estimates of the separation
angle, wake length, boundary-layer thickness and surface pressure
distribution.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np

from aerocalc.atmosphere import P0_ISA, R_AIR, sutherland_viscosity
from aerocalc.reynolds import Fluid, get_fluid

RE_CRITICAL = 2e5     # approximate onset of the drag crisis

_REGIMES = (
    (1.0, "Stokes Flow (Creeping Flow)"),
    (10.0, "Low Reynolds Number"),
    (100.0, "Transitional Flow"),
    (1000.0, "Subcritical Flow"),
    (RE_CRITICAL, "Critical Flow"),
)


@dataclass
class SphereFlow:
    reynolds_number: float
    drag_coefficient: float
    drag_force: float               # N
    separation_angle: float         # deg from the front stagnation point
    density: float                  # kg/m³
    dynamic_viscosity: float        # Pa·s
    kinematic_viscosity: float      # m²/s
    flow_regime: str
    wake_length: float              # m
    boundary_layer_thickness: float # m
    pressure_coefficient: np.ndarray   # C_p at 0..180 deg, 1 deg steps


def air_at_temperature(temperature: float, pressure: float = P0_ISA) -> Fluid:
    """Dry air at ``temperature`` [K] and ``pressure`` [Pa] (ideal gas + Sutherland)."""
    if temperature <= 0:
        raise ValueError("Temperature must be positive")
    return Fluid(name=f"Air @ {temperature:.1f} K",
                 density=pressure / (R_AIR * temperature),
                 dynamic_viscosity=sutherland_viscosity(temperature))


def sphere_drag_coefficient(re: float) -> float:
    """Empirical C_D of a smooth sphere at Reynolds number ``re`` (> 0)."""
    if re <= 0:
        raise ValueError("Reynolds number must be positive")
    if re < 0.1:
        return 24.0 / re
    if re < 1.0:
        return 24.0 / re * (1.0 + 3.0 * re / 16.0)
    if re < 10.0:
        return 24.0 / re * (1.0 + 0.15 * re ** 0.687)
    if re < 1000.0:
        return (24.0 / re * (1.0 + 0.15 * re ** 0.687)
                + 0.42 / (1.0 + 42500.0 / re ** 1.16))
    if re < RE_CRITICAL:
        log_re = math.log10(re)
        if log_re < 4.5:
            return 0.4
        if log_re < 5.0:
            return 0.4 - 0.2 * (log_re - 4.5) / 0.5
    return 0.2


def separation_angle(re: float) -> float:
    """Boundary-layer separation angle [deg]; 180 means attached flow."""
    if re < 1.0:
        return 180.0
    if re < 10.0:
        return 180.0 - 10.0 * math.log10(re)
    if re < 1000.0:
        return 120.0 - 20.0 * math.log10(re / 10.0)
    if re < RE_CRITICAL:
        return 100.0 - 20.0 * math.log10(re / 1000.0)
    return 80.0


def sphere_flow_regime(re: float) -> str:
    for upper, label in _REGIMES:
        if re < upper:
            return label
    return "Supercritical Flow"


def pressure_distribution(re: float) -> np.ndarray:
    """
    Surface C_p at 0..180 deg.  Potential flow (1 - 9/4 sin²θ) ahead of
    separation; constant -0.5 in the wake once the flow is critical.
    """
    angles = np.arange(181.0)
    cp = 1.0 - 2.25 * np.sin(np.radians(angles)) ** 2
    if re < 1.0:
        return cp
    sep = separation_angle(re)
    if re < 1000.0:
        return cp * np.exp(-(angles - sep) ** 2 / 100.0)
    return np.where(angles < sep, cp, -0.5)


def sphere_flow(diameter: float, velocity: float,
                temperature: float = 288.15,
                fluid: Fluid | str = "air") -> SphereFlow:
    """
    Parameters
    ----------
    diameter    : sphere diameter  [m]
    velocity    : free-stream speed  [m/s]
    temperature : air temperature  [K] (only used when fluid is 'air')
    fluid       : 'air', another database name, or a ``Fluid``
    """
    if diameter <= 0:
        raise ValueError("Sphere diameter must be positive")
    if velocity <= 0:
        raise ValueError("Flow velocity must be positive")

    if isinstance(fluid, str):
        if fluid.lower().strip() == "air":
            fluid = air_at_temperature(temperature)
        else:
            fluid = get_fluid(fluid)

    rho = fluid.density
    mu = fluid.dynamic_viscosity
    re = rho * velocity * diameter / mu
    cd = sphere_drag_coefficient(re)
    area = 0.25 * math.pi * diameter * diameter

    if re < 1.0:
        wake = 10.0 * diameter
        delta = 0.5 * diameter
    elif re < 1000.0:
        wake = diameter * (5.0 + 2.0 * math.log10(re))
        delta = diameter / math.sqrt(re)
    else:
        wake = diameter * (2.0 + 1.0 / math.log10(re))
        delta = diameter / math.sqrt(re)

    return SphereFlow(
        reynolds_number=re,
        drag_coefficient=cd,
        drag_force=0.5 * rho * velocity * velocity * area * cd,
        separation_angle=separation_angle(re),
        density=rho,
        dynamic_viscosity=mu,
        kinematic_viscosity=fluid.kinematic_viscosity,
        flow_regime=sphere_flow_regime(re),
        wake_length=wake,
        boundary_layer_thickness=delta,
        pressure_coefficient=pressure_distribution(re),
    )
