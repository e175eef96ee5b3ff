"""
mach.py – Mach number and true airspeed at altitude.

The local speed of sound comes from the ISA temperature, so the altitude
domain (0–86 km) and its errors are those of ``aerocalc.atmosphere``.
"""

from __future__ import annotations
from dataclasses import dataclass

from aerocalc.atmosphere import isa_from_altitude, speed_of_sound
from aerocalc.units import kelvin_to_celsius, kelvin_to_fahrenheit

# (upper bound, label); the last regime is open-ended
_REGIMES = (
    (0.8, "Subsonic"),
    (1.0, "Transonic"),
    (3.0, "Supersonic"),
    (5.0, "High Supersonic"),
    (10.0, "Hypersonic"),
)


@dataclass
class MachResult:
    mach: float
    speed_of_sound: float   # m/s
    airspeed: float         # m/s (true airspeed)
    altitude: float         # m
    temperature: float      # K
    temperature_c: float    # °C
    temperature_f: float    # °F
    regime: str

    @property
    def is_subsonic(self) -> bool:
        return self.mach < 1.0

    @property
    def is_supersonic(self) -> bool:
        return self.mach >= 1.0

    @property
    def is_hypersonic(self) -> bool:
        return self.mach >= 5.0


def flight_regime(mach: float) -> str:
    for upper, label in _REGIMES:
        if mach < upper:
            return label
    return "High Hypersonic"


def _result(mach: float, airspeed: float, altitude: float,
            T: float, a: float) -> MachResult:
    return MachResult(
        mach=mach, speed_of_sound=a, airspeed=airspeed, altitude=altitude,
        temperature=T,
        temperature_c=kelvin_to_celsius(T),
        temperature_f=kelvin_to_fahrenheit(T),
        regime=flight_regime(mach),
    )


def mach_number(airspeed: float, altitude: float) -> MachResult:
    """
    Mach number for a true airspeed [m/s] at a geometric altitude [m].
    """
    if airspeed < 0:
        raise ValueError("Airspeed cannot be negative.")
    T = isa_from_altitude(altitude).temperature
    a = speed_of_sound(T)
    return _result(airspeed / a, airspeed, altitude, T, a)


def airspeed_from_mach(mach: float, altitude: float) -> MachResult:
    """
    True airspeed [m/s] for a Mach number at a geometric altitude [m].
    """
    if mach < 0:
        raise ValueError("Mach number cannot be negative.")
    T = isa_from_altitude(altitude).temperature
    a = speed_of_sound(T)
    return _result(mach, mach * a, altitude, T, a)
