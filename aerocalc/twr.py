"""
twr.py – Thrust-to-weight ratio.

Solve for any one of TWR, thrust or mass given the other two; weight is
taken at standard gravity.
"""

from __future__ import annotations
from dataclasses import dataclass

g0 = 9.80665   # m/s²

_CAPABILITY = (
    (0.5, "Very low thrust - suitable for horizontal flight only"),
    (1.0, "Low thrust - horizontal flight, gliding capability"),
    (1.5, "Moderate thrust - capable of vertical takeoff"),
    (2.0, "Good thrust - excellent vertical performance"),
    (3.0, "High thrust - rocket-like performance"),
)


@dataclass
class TWRResult:
    twr: float
    thrust: float            # N
    weight: float            # N
    mass: float              # kg
    thrust_per_mass: float   # N/kg
    capability: str

    @property
    def can_lift_off(self) -> bool:
        """True when thrust exceeds weight (vertical flight possible)."""
        return self.twr > 1.0


def flight_capability(twr: float) -> str:
    for upper, label in _CAPABILITY:
        if twr < upper:
            return label
    return "Very high thrust - ballistic flight capability"


def _positive(value: float, label: str) -> None:
    if value <= 0:
        raise ValueError(f"{label} must be positive.")


def _result(twr: float, thrust: float, mass: float) -> TWRResult:
    return TWRResult(
        twr=twr, thrust=thrust, weight=mass * g0, mass=mass,
        thrust_per_mass=thrust / mass, capability=flight_capability(twr),
    )


def thrust_to_weight(thrust: float, mass: float) -> TWRResult:
    """TWR = F / (m·g0)"""
    _positive(thrust, "Thrust")
    _positive(mass, "Mass")
    return _result(thrust / (mass * g0), thrust, mass)


def required_thrust(twr: float, mass: float) -> TWRResult:
    """Thrust [N] needed to reach ``twr`` with ``mass`` [kg]."""
    _positive(twr, "TWR")
    _positive(mass, "Mass")
    return _result(twr, twr * mass * g0, mass)


def maximum_mass(thrust: float, twr: float) -> TWRResult:
    """Largest mass [kg] that ``thrust`` [N] can carry at ``twr``."""
    _positive(thrust, "Thrust")
    _positive(twr, "TWR")
    return _result(twr, thrust, thrust / twr / g0)
