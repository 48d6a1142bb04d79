# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 10:05:17 2026

@author: bboyg
"""

from dataclasses import dataclass, astuple
from pathlib import Path
from typing import Iterable, List

import numpy as np
import pandas as pd


COLUMNS = ["frequency", "incident_direction", "theta", "phi", "rcs"]

# Alternative header names seen in exported tables
_ALIASES = {
    "freq": "frequency",
    "freq_mhz": "frequency",
    "frequency_mhz": "frequency",
    "direction": "incident_direction",
    "dir": "incident_direction",
    "theta_deg": "theta",
    "phi_deg": "phi",
    "rcs_db": "rcs",
    "rcs_dbsm": "rcs",
}


@dataclass(frozen=True)
class RCSSample:
    """
    One measured / simulated RCS sample.

    frequency          : [MHz]
    incident_direction : catalog id of the illumination direction (1..8),
                         stored as float like the rest of the table
    theta, phi         : observation angles [deg]
    rcs                : [dB(m^2)]
    """
    frequency: float
    incident_direction: float
    theta: float
    phi: float
    rcs: float


def samples_from_frame(df: pd.DataFrame) -> List[RCSSample]:
    """
    Convert a DataFrame with the five sample columns into RCSSample records.
    Row order is kept.
    """
    df = df.rename(columns=lambda c: _ALIASES.get(str(c).strip().lower(), str(c).strip().lower()))

    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"RCS table is missing column(s): {missing}")

    values = df[COLUMNS].to_numpy(dtype=float)
    return [RCSSample(*map(float, row)) for row in values]


def samples_to_frame(samples: Iterable[RCSSample]) -> pd.DataFrame:
    return pd.DataFrame([astuple(s) for s in samples], columns=COLUMNS)


def load_rcs_csv(path) -> List[RCSSample]:
    """
    Load RCS samples from disk.

    .csv        : header row with the five columns (aliases accepted)
    .txt / .dat : whitespace separated, no header,
                  frequency incident_direction theta phi rcs
    """
    path = Path(path)

    if path.suffix.lower() in (".txt", ".dat"):
        df = pd.read_csv(path, sep=r"\s+", header=None, comment="#")
        if df.shape[1] != len(COLUMNS):
            raise ValueError(
                f"{path.name}: expected {len(COLUMNS)} columns, found {df.shape[1]}."
            )
        df.columns = COLUMNS
    else:
        df = pd.read_csv(path)

    return samples_from_frame(df)


# ============================================================
# Demo table
# ============================================================

def synthetic_rcs_dataset(
    frequencies=(5.0, 10.0, 20.0, 30.0),
    directions=(1, 2, 3, 4, 5, 6, 7, 8),
    theta_step_deg=15.0,
    phi_step_deg=15.0,
    seed=42,
) -> List[RCSSample]:
    """
    Smooth synthetic RCS table for demos and tests.

    Each incident direction gets its own floor level, a specular lobe
    around phi = 0 and a broad theta ripple; level rises with frequency.
    A small seeded speckle keeps neighbouring cells distinct.
    """
    theta = np.arange(0.0, 180.0 + 1e-9, theta_step_deg)
    phi = np.arange(0.0, 360.0, phi_step_deg)
    th_grid, ph_grid = np.meshgrid(theta, phi, indexing="ij")

    rng = np.random.default_rng(seed)

    rows = []
    for f in frequencies:
        for d in directions:
            floor_db = -20.0 + 1.5 * d + 5.0 * np.log10(f / frequencies[0])
            lobe = 12.0 * np.exp(-((np.minimum(ph_grid, 360.0 - ph_grid)) / 30.0) ** 2)
            ripple = 3.0 * np.cos(np.deg2rad(2.0 * th_grid))
            speckle = rng.normal(0.0, 0.3, size=th_grid.shape)
            rcs_db = floor_db + lobe + ripple + speckle

            for th, ph, val in zip(th_grid.ravel(), ph_grid.ravel(), rcs_db.ravel()):
                rows.append(RCSSample(float(f), float(d), float(th), float(ph), float(val)))

    return rows
