"""
reynolds.py – Reynolds number and a small fluid-property database.

Fields
------
density             : ρ  [kg/m³]
dynamic_viscosity   : μ  [Pa·s]
kinematic_viscosity : ν = μ/ρ  [m²/s]   (derived at construction)

Liquids are tabulated at 20 °C, gases at standard conditions.  Air at
altitude is built from the ISA model with Sutherland viscosity.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from aerocalc.atmosphere import isa_from_altitude

# Flow-regime thresholds  (laminar below first, turbulent above second)
RE_INTERNAL = (2300.0, 4000.0)
RE_EXTERNAL = (3e5, 5e5)


@dataclass
class Fluid:
    name: str
    density: float            # kg/m³
    dynamic_viscosity: float  # Pa·s

    kinematic_viscosity: float = field(init=False)

    def __post_init__(self):
        self.kinematic_viscosity = kinematic_viscosity(
            self.density, self.dynamic_viscosity)


@dataclass
class ReynoldsResult:
    reynolds_number: float
    flow_regime: str
    velocity: float               # m/s
    characteristic_length: float  # m
    kinematic_viscosity: float    # m²/s
    fluid_name: str
    used_kinematic_formula: bool
    # Not known when Re is computed from ν alone
    density: float | None = None
    dynamic_viscosity: float | None = None


# ── Built-in fluid database ─────────────────────────────────────────

FLUID_DB: dict[str, Fluid] = {}


def _register(f: Fluid):
    FLUID_DB[f.name.lower()] = f


def kinematic_viscosity(density: float, dynamic_viscosity: float) -> float:
    """ν = μ / ρ"""
    if density <= 0:
        raise ValueError("Density must be positive.")
    if dynamic_viscosity <= 0:
        raise ValueError("Dynamic viscosity must be positive.")
    return dynamic_viscosity / density


def dynamic_viscosity(density: float, kinematic_viscosity: float) -> float:
    """μ = ν · ρ"""
    if density <= 0:
        raise ValueError("Density must be positive.")
    if kinematic_viscosity <= 0:
        raise ValueError("Kinematic viscosity must be positive.")
    return kinematic_viscosity * density


_register(Fluid("Air", 1.225, 1.789e-5))
_register(Fluid("Water", 998.2, 1.002e-3))
_register(Fluid("Seawater", 1025.0, 1.08e-3))
_register(Fluid("Glycerin", 1260.0, 1.41))
_register(Fluid("Engine Oil (SAE 30)", 891.0, 0.29))
_register(Fluid("Gasoline", 750.0, 2.92e-4))
_register(Fluid("Hydrogen", 0.0899, 8.4e-6))
_register(Fluid("Oxygen", 1.429, 1.92e-5))
_register(Fluid("Methane", 0.668, 1.1e-5))


def get_fluid(name: str) -> Fluid:
    """Lookup by case-insensitive name.  Raises KeyError if not found."""
    key = name.lower().strip()
    if key in FLUID_DB:
        return FLUID_DB[key]
    for k, v in FLUID_DB.items():
        if k.split(" ")[0] == key:
            return v
    raise KeyError(
        f"Unknown fluid '{name}'.  Available: {list(FLUID_DB.keys())}"
    )


def list_fluids() -> list[str]:
    return [v.name for v in FLUID_DB.values()]


def custom_fluid(density: float, dynamic_viscosity: float) -> Fluid:
    return Fluid(name="Custom", density=density,
                 dynamic_viscosity=dynamic_viscosity)


def air_at_altitude(altitude: float) -> Fluid:
    """ISA air at a geometric altitude [m]."""
    state = isa_from_altitude(altitude)
    return Fluid(name=f"Air @ {altitude:.0f} m", density=state.density,
                 dynamic_viscosity=state.dynamic_viscosity)


# ── Reynolds number ─────────────────────────────────────────────────

def flow_regime(re: float, internal: bool = False) -> str:
    """Laminar / Transitional / Turbulent for pipe (internal) or body flow."""
    lower, upper = RE_INTERNAL if internal else RE_EXTERNAL
    if re < lower:
        return "Laminar"
    if re < upper:
        return "Transitional"
    return "Turbulent"


def _check_flow(velocity: float, length: float) -> None:
    if velocity <= 0:
        raise ValueError("Velocity must be positive.")
    if length <= 0:
        raise ValueError("Characteristic length must be positive.")


def reynolds_number(velocity: float, length: float, density: float,
                    dynamic_viscosity: float, internal: bool = False,
                    fluid_name: str = "Custom") -> ReynoldsResult:
    """
    Re = ρ V L / μ

    Parameters
    ----------
    velocity          : flow speed  [m/s]
    length            : characteristic length  [m] (pipe diameter for
                        internal flow, chord or body length for external)
    density           : ρ  [kg/m³]
    dynamic_viscosity : μ  [Pa·s]
    internal          : pipe/duct flow thresholds instead of external flow
    """
    _check_flow(velocity, length)
    nu = kinematic_viscosity(density, dynamic_viscosity)
    re = density * velocity * length / dynamic_viscosity
    return ReynoldsResult(
        reynolds_number=re, flow_regime=flow_regime(re, internal),
        velocity=velocity, characteristic_length=length,
        kinematic_viscosity=nu, fluid_name=fluid_name,
        used_kinematic_formula=False,
        density=density, dynamic_viscosity=dynamic_viscosity,
    )


def reynolds_number_kinematic(velocity: float, length: float,
                              kinematic_viscosity: float,
                              internal: bool = False,
                              fluid_name: str = "Custom") -> ReynoldsResult:
    """Re = V L / ν"""
    _check_flow(velocity, length)
    if kinematic_viscosity <= 0:
        raise ValueError("Kinematic viscosity must be positive.")
    re = velocity * length / kinematic_viscosity
    return ReynoldsResult(
        reynolds_number=re, flow_regime=flow_regime(re, internal),
        velocity=velocity, characteristic_length=length,
        kinematic_viscosity=kinematic_viscosity, fluid_name=fluid_name,
        used_kinematic_formula=True,
    )


def reynolds_for_fluid(velocity: float, length: float, fluid: Fluid,
                       internal: bool = False) -> ReynoldsResult:
    return reynolds_number(velocity, length, fluid.density,
                           fluid.dynamic_viscosity, internal, fluid.name)
