"""
export.py – CSV export for ISA profiles.
"""

from __future__ import annotations
import numpy as np
from pathlib import Path

_COLUMNS = ("h", "T", "p", "rho", "a")
_HEADER = "altitude_m,temperature_K,pressure_Pa,density_kg_m3,speed_of_sound_m_s,layer"


def export_profile_csv(profile: dict, path: str | Path,
                       n_points: int | None = None) -> Path:
    """
    Write an ISA profile to CSV.

    Parameters
    ----------
    profile  : dict returned by ``isa_profile`` / ``standard_profile``
    path     : output file path
    n_points : if given, subsample to this many equally-spaced rows

    Returns
    -------
    Resolved Path of the written file.
    """
    path = Path(path).expanduser().resolve()

    cols = [np.asarray(profile[k]) for k in _COLUMNS]
    layers = list(profile["layer"])

    if n_points is not None and n_points < len(layers):
        idx = np.linspace(0, len(layers) - 1, n_points).astype(int)
        cols = [c[idx] for c in cols]
        layers = [layers[i] for i in idx]

    with open(path, "w") as f:
        f.write(_HEADER + "\n")
        for row in zip(*cols, layers):
            *values, layer = row
            f.write(",".join(f"{v:.8e}" for v in values) + f",{layer}\n")

    return path
