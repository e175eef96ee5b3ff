"""
coordinates.py – Geodetic (WGS84) ↔ ECEF conversion and DMS helpers.

ECEF axes: X through (0° lat, 0° lon), Y through (0° lat, 90° E),
Z through the North Pole.
"""

from __future__ import annotations
import math
from typing import NamedTuple

# WGS84 ellipsoid
WGS84_A = 6378137.0                      # semi-major axis  [m]
WGS84_F = 1.0 / 298.257223563            # flattening
WGS84_E2 = WGS84_F * (2.0 - WGS84_F)     # first eccentricity²
WGS84_B = WGS84_A * (1.0 - WGS84_F)      # semi-minor axis  [m]
WGS84_EP2 = (WGS84_A ** 2 - WGS84_B ** 2) / WGS84_B ** 2   # second eccentricity²

POLE_TOLERANCE = 1e-9   # m, distance from the spin axis treated as on-axis


class LLA(NamedTuple):
    lat_deg: float
    lon_deg: float
    alt: float        # m above the ellipsoid


class ECEF(NamedTuple):
    x: float
    y: float
    z: float


class DMS(NamedTuple):
    degrees: int      # signed whole degrees
    minutes: int
    seconds: float
    negative: bool = False   # holds the sign when whole degrees are 0


def _prime_vertical_radius(sin_lat: float) -> float:
    """N(φ) = a / sqrt(1 - e² sin²φ)"""
    return WGS84_A / math.sqrt(1.0 - WGS84_E2 * sin_lat * sin_lat)


def lla_to_ecef(lla: LLA) -> ECEF:
    """Geodetic latitude/longitude [deg] and height [m] to ECEF [m]."""
    lat = math.radians(lla.lat_deg)
    lon = math.radians(lla.lon_deg)
    sin_lat = math.sin(lat)
    cos_lat = math.cos(lat)
    N = _prime_vertical_radius(sin_lat)

    return ECEF(
        x=(N + lla.alt) * cos_lat * math.cos(lon),
        y=(N + lla.alt) * cos_lat * math.sin(lon),
        z=(N * (1.0 - WGS84_E2) + lla.alt) * sin_lat,
    )


def ecef_to_lla(ecef: ECEF) -> LLA:
    """
    ECEF [m] to geodetic coordinates using Bowring's closed-form method.

    On the spin axis longitude is undefined; it is reported as 0 and the
    latitude as ±90°.
    """
    x, y, z = ecef
    p = math.hypot(x, y)

    if p < POLE_TOLERANCE:
        N = _prime_vertical_radius(1.0)
        alt = abs(z) - N * (1.0 - WGS84_E2)
        return LLA(lat_deg=90.0 if z >= 0 else -90.0, lon_deg=0.0, alt=alt)

    theta = math.atan2(z * WGS84_A, p * WGS84_B)
    sin_t = math.sin(theta)
    cos_t = math.cos(theta)

    lon = math.atan2(y, x)
    lat = math.atan2(z + WGS84_EP2 * WGS84_B * sin_t ** 3,
                     p - WGS84_E2 * WGS84_A * cos_t ** 3)
    N = _prime_vertical_radius(math.sin(lat))
    alt = p / math.cos(lat) - N

    return LLA(lat_deg=math.degrees(lat), lon_deg=math.degrees(lon), alt=alt)


def degrees_to_dms(deg: float) -> DMS:
    abs_deg = abs(deg)
    d = math.floor(abs_deg)
    minutes_f = (abs_deg - d) * 60.0
    m = math.floor(minutes_f)
    s = (minutes_f - m) * 60.0
    negative = deg < 0
    return DMS(degrees=-d if negative else d, minutes=m, seconds=s,
               negative=negative)


def dms_to_degrees(dms: DMS) -> float:
    sign = -1.0 if dms.negative or dms.degrees < 0 else 1.0
    return sign * (abs(dms.degrees) + dms.minutes / 60.0 + dms.seconds / 3600.0)
