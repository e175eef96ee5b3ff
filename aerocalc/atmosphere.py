"""
atmosphere.py – International Standard Atmosphere (ISA) model.

Layered piecewise model of temperature, pressure and density from sea level
to 86 km geometric altitude.  Three entry points:

    isa_from_altitude(h)     h  →  T, p, ρ
    isa_from_pressure(p)     p  →  h, T, ρ
    isa_from_temperature(T)  T  →  h, p, ρ

Every call is independent; the layer table is built once at import time and
never mutated.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

# ISA reference constants
T0_ISA = 288.15      # K
P0_ISA = 101325.0    # Pa
R_AIR = 287.05       # J/(kg·K)
g0 = 9.80665         # m/s²
GAMMA_AIR = 1.4

H_CEILING = 86000.0  # m
ISOTHERMAL_EPS = 1e-10

# Sutherland's law for air
MU0_SUTHERLAND = 1.7894e-5   # Pa·s at T_ref
T_REF_SUTHERLAND = 288.15    # K
S_SUTHERLAND = 110.4         # K


class IsaError(ValueError):
    """Base class for a rejected ISA computation."""


class IsaInputError(IsaError):
    """Input outside the domain of the model."""


class IsaConsistencyError(IsaError):
    """A derived quantity failed its postcondition (should never happen)."""


@dataclass(frozen=True)
class AtmosphericLayer:
    name: str
    base_altitude: float      # m
    lapse_rate: float         # K/m  (positive: T falls with height)
    base_temperature: float   # K
    base_pressure: float      # Pa
    base_density: float       # kg/m³

    @property
    def isothermal(self) -> bool:
        return abs(self.lapse_rate) < ISOTHERMAL_EPS


@dataclass(frozen=True)
class IsaResult:
    """Self-consistent atmospheric state at one point."""
    altitude: float       # m
    temperature: float    # K
    pressure: float       # Pa
    density: float        # kg/m³
    layer: str

    @property
    def speed_of_sound(self) -> float:
        """a = sqrt(γ·R·T)  [m/s]"""
        return speed_of_sound(self.temperature)

    @property
    def dynamic_viscosity(self) -> float:
        """μ [Pa·s] from Sutherland's law."""
        return sutherland_viscosity(self.temperature)


# ──────────────────────────────────────────────────────────────────────
# Layer table
# ──────────────────────────────────────────────────────────────────────

# (name, base altitude [m], lapse rate [K/m])
_LAYER_DEFS = (
    ("Troposphere",      0.0,     0.0065),
    ("Tropopause",       11000.0, 0.0),
    ("Stratosphere I",   20000.0, -0.001),
    ("Stratosphere II",  32000.0, -0.0028),
    ("Stratopause",      47000.0, 0.0),
    ("Mesosphere I",     51000.0, 0.0028),
    ("Mesosphere II",    71000.0, 0.002),
    ("Mesopause",        84852.0, 0.0),
)


def _layer_state(layer: AtmosphericLayer, h: float) -> tuple[float, float]:
    """Temperature and pressure at altitude h inside ``layer``."""
    dh = h - layer.base_altitude
    T = layer.base_temperature - layer.lapse_rate * dh
    if layer.isothermal:
        p = layer.base_pressure * math.exp(
            -g0 * dh / (R_AIR * layer.base_temperature))
    else:
        p = layer.base_pressure * (T / layer.base_temperature) ** (
            g0 / (R_AIR * layer.lapse_rate))
    return T, p


def _build_layers() -> tuple[AtmosphericLayer, ...]:
    # Base values are propagated from sea level so each layer starts
    # exactly where the one below ends.
    layers: list[AtmosphericLayer] = []
    T, p = T0_ISA, P0_ISA
    for name, h_base, lapse in _LAYER_DEFS:
        if layers:
            T, p = _layer_state(layers[-1], h_base)
        layers.append(AtmosphericLayer(
            name=name, base_altitude=h_base, lapse_rate=lapse,
            base_temperature=T, base_pressure=p,
            base_density=p / (R_AIR * T),
        ))
    return tuple(layers)


ISA_LAYERS: tuple[AtmosphericLayer, ...] = _build_layers()


def find_layer(altitude: float) -> AtmosphericLayer:
    """Highest layer whose base altitude is at or below ``altitude``."""
    for layer in reversed(ISA_LAYERS):
        if altitude >= layer.base_altitude:
            return layer
    return ISA_LAYERS[0]


# ──────────────────────────────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────────────────────────────

def speed_of_sound(temperature: float, gamma: float = GAMMA_AIR) -> float:
    """Speed of sound [m/s] in dry air at temperature [K]."""
    return math.sqrt(gamma * R_AIR * temperature)


def sutherland_viscosity(temperature: float) -> float:
    """Dynamic viscosity of air [Pa·s] at temperature [K]."""
    return (MU0_SUTHERLAND * (temperature / T_REF_SUTHERLAND) ** 1.5
            * (T_REF_SUTHERLAND + S_SUTHERLAND)
            / (temperature + S_SUTHERLAND))


def _fault(message: str) -> IsaConsistencyError:
    logger.error("ISA consistency fault: %s", message)
    return IsaConsistencyError(message)


def _density(pressure: float, temperature: float) -> float:
    rho = pressure / (R_AIR * temperature)
    if rho <= 0:
        raise _fault("Calculated density is non-positive.")
    return rho


# ──────────────────────────────────────────────────────────────────────
# Forward and inverse evaluations
# ──────────────────────────────────────────────────────────────────────

def isa_from_altitude(altitude: float) -> IsaResult:
    """
    ISA state at a geometric altitude.

    Parameters
    ----------
    altitude : geometric altitude  [m], 0 ≤ h ≤ 86 000

    Returns
    -------
    IsaResult

    Raises
    ------
    IsaInputError       : altitude not finite, negative or above the ceiling
    IsaConsistencyError : non-positive pressure or density
    """
    if not math.isfinite(altitude):
        raise IsaInputError("Altitude must be a finite number.")
    if altitude < 0:
        raise IsaInputError("Altitude cannot be negative.")
    if altitude > H_CEILING:
        raise IsaInputError(
            "Calculations are valid up to 86,000 m based on standard ISA tables.")

    layer = find_layer(altitude)
    T, p = _layer_state(layer, altitude)
    if p <= 0:
        raise _fault("Calculated pressure is non-positive.")
    rho = _density(p, T)

    return IsaResult(altitude=altitude, temperature=T, pressure=p,
                     density=rho, layer=layer.name)


def _layer_for_pressure(pressure: float) -> AtmosphericLayer:
    for i in range(1, len(ISA_LAYERS)):
        if pressure > ISA_LAYERS[i].base_pressure:
            return ISA_LAYERS[i - 1]
    # Below the mesopause base pressure the table runs out of resolution.
    return ISA_LAYERS[-2]


def isa_from_pressure(pressure: float) -> IsaResult:
    """
    Pressure altitude and the matching ISA state.

    Parameters
    ----------
    pressure : static pressure  [Pa], 0 < p ≤ 101 325

    Raises
    ------
    IsaInputError       : pressure non-positive or above sea-level standard
    IsaConsistencyError : negative altitude or non-positive density
    """
    if not math.isfinite(pressure):
        raise IsaInputError("Pressure must be a finite number.")
    if pressure <= 0:
        raise IsaInputError("Pressure must be positive.")
    if pressure > P0_ISA:
        raise IsaInputError(
            "Pressure cannot be greater than sea level standard pressure (P0).")

    layer = _layer_for_pressure(pressure)

    if layer.isothermal:
        T = layer.base_temperature
        h = layer.base_altitude - (R_AIR * T / g0) * math.log(
            pressure / layer.base_pressure)
    else:
        exponent = R_AIR * layer.lapse_rate / g0
        T = layer.base_temperature * (pressure / layer.base_pressure) ** exponent
        h = layer.base_altitude + (layer.base_temperature - T) / layer.lapse_rate

    if h < 0:
        raise _fault("Calculated altitude is negative.")
    rho = _density(pressure, T)

    return IsaResult(altitude=h, temperature=T, pressure=pressure,
                     density=rho, layer=layer.name)


def _layers_for_temperature(temperature: float) -> list[AtmosphericLayer]:
    matches = []
    for layer, upper in zip(ISA_LAYERS[:-1], ISA_LAYERS[1:]):
        if layer.isothermal:
            continue
        T_top = layer.base_temperature - layer.lapse_rate * (
            upper.base_altitude - layer.base_altitude)
        lo, hi = min(layer.base_temperature, T_top), max(layer.base_temperature, T_top)
        if lo <= temperature <= hi:
            matches.append(layer)
    return matches


def isa_from_temperature(temperature: float) -> IsaResult:
    """
    Altitude and ISA state for a temperature.

    Only layers with a non-zero lapse rate are searched; temperature cannot
    locate a point inside an isothermal layer.  The profile is not monotonic
    (it cools, warms, then cools again), so one temperature can fall in
    several layers.  The lowest matching layer is used: a modelling
    simplification, not a uniqueness guarantee.  216.65 K, for instance,
    resolves to the top of the troposphere rather than the base of
    Stratosphere I.

    Raises
    ------
    IsaInputError       : non-positive temperature, or no variable-lapse
                          layer contains it
    IsaConsistencyError : derived altitude out of range, non-positive p / ρ
    """
    if not math.isfinite(temperature):
        raise IsaInputError("Temperature must be a finite number.")
    if temperature <= 0:
        raise IsaInputError("Temperature must be positive (in Kelvin).")

    matches = _layers_for_temperature(temperature)
    if not matches:
        raise IsaInputError(
            f"Temperature {temperature:.2f} K is not in a layer with "
            f"variable temperature.")
    layer = matches[0]

    h = layer.base_altitude + (layer.base_temperature - temperature) / layer.lapse_rate
    if h < 0 or h > H_CEILING:
        raise _fault("Calculated altitude is outside valid range (0-86,000 m).")

    p = layer.base_pressure * (temperature / layer.base_temperature) ** (
        g0 / (R_AIR * layer.lapse_rate))
    if p <= 0:
        raise _fault("Calculated pressure is non-positive.")
    rho = _density(p, temperature)

    return IsaResult(altitude=h, temperature=temperature, pressure=p,
                     density=rho, layer=layer.name)


# ──────────────────────────────────────────────────────────────────────
# Profile sampling
# ──────────────────────────────────────────────────────────────────────

def isa_profile(altitudes: np.ndarray | list[float]) -> dict:
    """
    Evaluate the model over a set of altitudes.

    Returns
    -------
    dict with arrays:
        'h'     : altitudes  [m]
        'T'     : temperatures  [K]
        'p'     : pressures  [Pa]
        'rho'   : densities  [kg/m³]
        'a'     : speeds of sound  [m/s]
        'layer' : list of layer names
    """
    h = np.asarray(altitudes, dtype=float)
    n = h.size
    T = np.zeros(n)
    p = np.zeros(n)
    rho = np.zeros(n)
    a = np.zeros(n)
    names = []

    for i, hi in enumerate(h):
        res = isa_from_altitude(float(hi))
        T[i] = res.temperature
        p[i] = res.pressure
        rho[i] = res.density
        a[i] = res.speed_of_sound
        names.append(res.layer)

    return {'h': h, 'T': T, 'p': p, 'rho': rho, 'a': a, 'layer': names}


def standard_profile(h_max: float = H_CEILING, n_points: int = 87) -> dict:
    """``isa_profile`` on an evenly spaced grid from sea level to ``h_max``."""
    return isa_profile(np.linspace(0.0, h_max, n_points))
