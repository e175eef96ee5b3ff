"""
orbital.py – Circular orbits and Hohmann transfers around Earth.

Two-body, impulsive-burn, coplanar circular orbits.  Altitudes are given in
km above a spherical Earth of mean radius 6371 km.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

G = 6.6743e-11             # m³/(kg·s²)
M_EARTH = 5.972e24         # kg
MU_EARTH = G * M_EARTH     # m³/s²
R_EARTH_KM = 6371.0
R_EARTH = R_EARTH_KM * 1000.0   # m


@dataclass
class CircularOrbit:
    altitude_km: float
    radius: float     # m
    velocity: float   # m/s
    period: float     # s


@dataclass
class HohmannTransfer:
    initial_altitude_km: float
    final_altitude_km: float
    initial_radius: float        # m
    final_radius: float          # m
    transfer_sma: float          # semi-major axis  [m]
    delta_v1: float              # m/s
    delta_v2: float              # m/s
    delta_v_total: float         # m/s
    transfer_time: float         # s


def _clamp_altitude(altitude_km: float, label: str) -> float:
    """Reject altitudes below the Earth's centre; clamp small negatives to 0."""
    if altitude_km < -R_EARTH_KM:
        raise ValueError("Altitude cannot be below the center of the Earth.")
    if altitude_km < -1e-6:
        logger.warning("%s altitude %.3f km is negative, treating as surface level",
                       label, altitude_km)
        return 0.0
    return altitude_km


def circular_velocity(radius: float) -> float:
    """v = sqrt(μ/r)  [m/s]"""
    return math.sqrt(MU_EARTH / radius)


def circular_orbit(altitude_km: float) -> CircularOrbit:
    """Velocity and period of a circular orbit at ``altitude_km``."""
    altitude_km = _clamp_altitude(altitude_km, "Orbit")
    r = R_EARTH + altitude_km * 1000.0
    return CircularOrbit(
        altitude_km=altitude_km, radius=r,
        velocity=circular_velocity(r),
        period=2.0 * math.pi * math.sqrt(r ** 3 / MU_EARTH),
    )


def hohmann_transfer(initial_altitude_km: float,
                     final_altitude_km: float) -> HohmannTransfer:
    """
    Two-burn Hohmann transfer between circular orbits.

    Works for raising and lowering; Δv values are magnitudes.

    Parameters
    ----------
    initial_altitude_km : starting orbit altitude  [km]
    final_altitude_km   : target orbit altitude  [km]
    """
    h1 = _clamp_altitude(initial_altitude_km, "Initial")
    h2 = _clamp_altitude(final_altitude_km, "Final")
    r1 = R_EARTH + h1 * 1000.0
    r2 = R_EARTH + h2 * 1000.0

    if abs(r1 - r2) < 1e-6:
        raise ValueError(
            "Initial and final altitudes cannot be the same for a Hohmann transfer.")

    a_t = 0.5 * (r1 + r2)
    v1 = circular_velocity(r1)
    v2 = circular_velocity(r2)
    # vis-viva at each end of the transfer ellipse
    vt1 = math.sqrt(MU_EARTH * (2.0 / r1 - 1.0 / a_t))
    vt2 = math.sqrt(MU_EARTH * (2.0 / r2 - 1.0 / a_t))

    dv1 = abs(vt1 - v1)
    dv2 = abs(v2 - vt2)

    return HohmannTransfer(
        initial_altitude_km=h1, final_altitude_km=h2,
        initial_radius=r1, final_radius=r2, transfer_sma=a_t,
        delta_v1=dv1, delta_v2=dv2, delta_v_total=dv1 + dv2,
        transfer_time=math.pi * math.sqrt(a_t ** 3 / MU_EARTH),
    )
