"""
units.py – Conversions to and from SI used at the edges of the calculators.
"""

from __future__ import annotations

FT_PER_M = 3.28084
M_PER_NMI = 1852.0
PA_PER_HPA = 100.0
PA_PER_INHG = 3386.389
MS_PER_KNOT = 1852.0 / 3600.0
KELVIN_OFFSET = 273.15


def meters_to_feet(m: float) -> float:
    return m * FT_PER_M


def feet_to_meters(ft: float) -> float:
    return ft / FT_PER_M


def meters_to_nautical_miles(m: float) -> float:
    return m / M_PER_NMI


def nautical_miles_to_meters(nmi: float) -> float:
    return nmi * M_PER_NMI


def meters_to_kilometers(m: float) -> float:
    return m / 1000.0


def kilometers_to_meters(km: float) -> float:
    return km * 1000.0


def pa_to_hpa(pa: float) -> float:
    return pa / PA_PER_HPA


def hpa_to_pa(hpa: float) -> float:
    return hpa * PA_PER_HPA


def pa_to_inhg(pa: float) -> float:
    return pa / PA_PER_INHG


def inhg_to_pa(inhg: float) -> float:
    return inhg * PA_PER_INHG


def kelvin_to_celsius(k: float) -> float:
    return k - KELVIN_OFFSET


def celsius_to_kelvin(c: float) -> float:
    return c + KELVIN_OFFSET


def kelvin_to_fahrenheit(k: float) -> float:
    return kelvin_to_celsius(k) * 9.0 / 5.0 + 32.0


def fahrenheit_to_kelvin(f: float) -> float:
    return celsius_to_kelvin((f - 32.0) * 5.0 / 9.0)


def knots_to_ms(kt: float) -> float:
    return kt * MS_PER_KNOT


def ms_to_knots(ms: float) -> float:
    return ms / MS_PER_KNOT
