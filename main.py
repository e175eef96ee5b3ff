#!/usr/bin/env python3
"""
main.py – CLI for the ISA atmosphere calculator.

Usage:
    python main.py                          # interactive mode
    python main.py --help                   # show all flags
    python main.py --altitude 11000         # ISA state at 11 km
    python main.py --pressure 1013.25 --units aviation
    python main.py --temperature 250        # altitude for 250 K
    python main.py --altitude 10000 --mach 0.85
    python main.py --profile 86000 87 --output isa.csv
"""

from __future__ import annotations
import argparse
import logging
import sys

from aerocalc.atmosphere import (
    IsaResult, isa_from_altitude, isa_from_pressure, isa_from_temperature,
    standard_profile,
)
from aerocalc.export import export_profile_csv
from aerocalc.mach import MachResult, mach_number, airspeed_from_mach
from aerocalc.units import (
    feet_to_meters, meters_to_feet, hpa_to_pa, pa_to_hpa,
    celsius_to_kelvin, kelvin_to_celsius, knots_to_ms, ms_to_knots,
)


# ── Pretty-printing helpers ──────────────────────────────────────────

def _header():
    print()
    print("╔══════════════════════════════════════════════════════════╗")
    print("║        International Standard Atmosphere  v1.0          ║")
    print("╚══════════════════════════════════════════════════════════╝")
    print()


def _ask(prompt: str, default=None, cast=float):
    """Prompt user; return default if blank."""
    suffix = f" [{default}]" if default is not None else ""
    raw = input(f"  {prompt}{suffix}: ").strip()
    if raw == "":
        if default is None:
            raise ValueError("No default; value is required.")
        return cast(default) if cast else default
    return cast(raw)


def _ask_str(prompt: str, default: str = "") -> str:
    return _ask(prompt, default=default, cast=str)


# ── Unit handling ────────────────────────────────────────────────────
# SI:       m,  Pa,  K,  m/s
# aviation: ft, hPa, °C, kt

def _altitude_to_si(value: float, units: str) -> float:
    return feet_to_meters(value) if units == "aviation" else value


def _pressure_to_si(value: float, units: str) -> float:
    return hpa_to_pa(value) if units == "aviation" else value


def _temperature_to_si(value: float, units: str) -> float:
    return celsius_to_kelvin(value) if units == "aviation" else value


def _airspeed_to_si(value: float, units: str) -> float:
    return knots_to_ms(value) if units == "aviation" else value


# ── Argparse for batch mode ──────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="International Standard Atmosphere calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  Interactive:   python main.py
  Altitude:      python main.py --altitude 11000
  Pressure:      python main.py --pressure 500 --units aviation
  Mach:          python main.py --altitude 35000 --units aviation --airspeed 480
  Profile:       python main.py --profile 86000 87 --output isa.csv
""",
    )
    # ── Solve for ────────────────────────────────────────────────
    solve = p.add_mutually_exclusive_group()
    solve.add_argument('--altitude', type=float, default=None,
                       help='Geometric altitude [m, or ft with --units aviation]')
    solve.add_argument('--pressure', type=float, default=None,
                       help='Static pressure [Pa, or hPa with --units aviation]')
    solve.add_argument('--temperature', type=float, default=None,
                       help='Temperature [K, or °C with --units aviation]')
    p.add_argument('--units', type=str, default='si',
                   choices=['si', 'aviation'],
                   help='Input/output units (default si)')

    # ── Mach ─────────────────────────────────────────────────────
    speed = p.add_mutually_exclusive_group()
    speed.add_argument('--mach', type=float, default=None,
                       help='Mach number (true airspeed is reported)')
    speed.add_argument('--airspeed', type=float, default=None,
                       help='True airspeed [m/s, or kt with --units aviation]')

    # ── Profile ──────────────────────────────────────────────────
    p.add_argument('--profile', nargs=2, metavar=('H_MAX', 'N'),
                   help='Tabulate the profile: --profile 86000 87  [m]')
    p.add_argument('--output', '--csv', type=str, default=None,
                   help='CSV output path for --profile')

    p.add_argument('-v', '--verbose', action='store_true',
                   help='Enable debug logging')
    return p


def is_batch(args) -> bool:
    """Return True if enough args are given to skip interactive prompts."""
    return (args.altitude is not None or args.pressure is not None
            or args.temperature is not None or args.profile is not None)


# ── Reports ──────────────────────────────────────────────────────────

def _print_state(res: IsaResult, units: str):
    print("  ── Atmospheric State ───────────────────────────────────")
    print(f"    Layer             = {res.layer}")
    if units == "aviation":
        print(f"    Altitude          = {meters_to_feet(res.altitude):.0f} ft  "
              f"({res.altitude:.1f} m)")
        print(f"    Temperature       = {kelvin_to_celsius(res.temperature):.2f} °C  "
              f"({res.temperature:.2f} K)")
        print(f"    Pressure          = {pa_to_hpa(res.pressure):.3f} hPa")
    else:
        print(f"    Altitude          = {res.altitude:.1f} m")
        print(f"    Temperature       = {res.temperature:.2f} K")
        print(f"    Pressure          = {res.pressure:.2f} Pa")
    print(f"    Density           = {res.density:.6f} kg/m³")
    print(f"    Speed of sound    = {res.speed_of_sound:.2f} m/s")
    print(f"    Dynamic viscosity = {res.dynamic_viscosity:.4e} Pa·s")


def _print_mach(m: MachResult, units: str):
    print()
    print("  ── Speed ───────────────────────────────────────────────")
    if units == "aviation":
        print(f"    True airspeed     = {ms_to_knots(m.airspeed):.1f} kt  "
              f"({m.airspeed:.1f} m/s)")
    else:
        print(f"    True airspeed     = {m.airspeed:.2f} m/s")
    print(f"    Mach              = {m.mach:.4f}")
    print(f"    Regime            = {m.regime}")


# ── Batch mode ───────────────────────────────────────────────────────

def run_batch(args):
    """Non-interactive mode: all params from argparse."""
    _header()
    units = args.units

    if args.profile:
        run_profile(args)
        return

    if args.altitude is not None:
        res = isa_from_altitude(_altitude_to_si(args.altitude, units))
    elif args.pressure is not None:
        res = isa_from_pressure(_pressure_to_si(args.pressure, units))
    else:
        res = isa_from_temperature(_temperature_to_si(args.temperature, units))

    _print_state(res, units)

    if args.mach is not None:
        _print_mach(airspeed_from_mach(args.mach, res.altitude), units)
    elif args.airspeed is not None:
        _print_mach(mach_number(_airspeed_to_si(args.airspeed, units),
                                res.altitude), units)

    print("\n  Done.\n")


def run_profile(args):
    h_max, n = float(args.profile[0]), int(args.profile[1])
    prof = standard_profile(h_max, n)

    print(f"  ISA profile, 0 to {h_max:.0f} m ({n} points)\n")
    print(f"  {'h [m]':>10s}  {'T [K]':>8s}  {'p [Pa]':>12s}  "
          f"{'rho [kg/m3]':>12s}  {'a [m/s]':>8s}  layer")
    for h, T, p, rho, a, layer in zip(prof['h'], prof['T'], prof['p'],
                                      prof['rho'], prof['a'], prof['layer']):
        print(f"  {h:10.1f}  {T:8.2f}  {p:12.4e}  {rho:12.4e}  {a:8.2f}  {layer}")

    if args.output:
        csv_path = export_profile_csv(prof, args.output)
        print(f"\n  → CSV: {csv_path}")

    print("\n  Done.\n")


# ── Interactive mode ─────────────────────────────────────────────────

def run_interactive():
    """Prompt for the known quantity, then report the full state."""
    _header()

    print("  Solve from:")
    print("    1. Geometric altitude")
    print("    2. Static pressure")
    print("    3. Temperature")
    print()
    mode = _ask("Choice", default=1, cast=int)
    units = _ask_str("Units (si / aviation)", default="si").lower()
    if units not in ("si", "aviation"):
        units = "si"
    aviation = units == "aviation"

    if mode == 1:
        h = _ask("Altitude [ft]" if aviation else "Altitude [m]", default=0.0)
        res = isa_from_altitude(_altitude_to_si(h, units))
    elif mode == 2:
        p = _ask("Pressure [hPa]" if aviation else "Pressure [Pa]",
                 default=1013.25 if aviation else 101325.0)
        res = isa_from_pressure(_pressure_to_si(p, units))
    else:
        T = _ask("Temperature [°C]" if aviation else "Temperature [K]",
                 default=-56.5 if aviation else 216.65)
        res = isa_from_temperature(_temperature_to_si(T, units))

    print()
    _print_state(res, units)

    do_mach = _ask_str("Compute Mach / airspeed? [y/N]", default="n").lower()
    if do_mach.startswith("y"):
        M = _ask("Mach number", default=0.8)
        _print_mach(airspeed_from_mach(M, res.altitude), units)

    print("\n  Done.\n")


# ── Entry point ──────────────────────────────────────────────────────

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    has_state = (args.altitude is not None or args.pressure is not None
                 or args.temperature is not None)
    if (args.mach is not None or args.airspeed is not None) and not has_state:
        parser.error("--mach/--airspeed need --altitude, --pressure or --temperature")
    if args.output and args.profile is None:
        parser.error("--output requires --profile")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if is_batch(args):
            run_batch(args)
        else:
            run_interactive()
    except ValueError as exc:
        print(f"\n  ✗ {exc}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
