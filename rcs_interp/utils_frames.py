# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 09:12:40 2026

@author: bboyg
"""

import numpy as np
from scipy.spatial.distance import cosine


# ============================================================
# Angle utilities
# ============================================================

def deg2rad(deg: float) -> float:
    """ 
    Converts angle from degrees to radians.

    """
    return deg * np.pi / 180.0


def rad2deg(rad: float) -> float:
    """
    Converts angle from radians to degrees.

    """
    return rad * 180.0 / np.pi


def periodic_delta_deg(delta_deg, period_deg: float = 360.0):
    """
    Shortest separation of two periodic angles, in [0, period/2].

    delta_deg may be a scalar or an array of raw differences (any sign, any
    number of turns).
    """
    d = np.mod(np.abs(delta_deg), period_deg)
    return np.minimum(d, period_deg - d)


# ============================================================
# Spherical <-> Cartesian
# ============================================================

def spherical_to_cartesian(r: float, theta_deg: float, phi_deg: float) -> np.ndarray:
    """
    Spherical -> Cartesian, physics convention.

        theta : polar angle from +Z [deg], theta=90 is the XY plane
        phi   : azimuth from +X towards +Y [deg]

    Returns:
        np.array([x, y, z])
    """
    th = deg2rad(theta_deg)
    ph = deg2rad(phi_deg)

    st = np.sin(th)
    return np.array([
        r * st * np.cos(ph),
        r * st * np.sin(ph),
        r * np.cos(th),
    ], dtype=float)


def cartesian_to_spherical(v):
    """
    Inverse of spherical_to_cartesian.

    Returns:
        r, theta_deg [0, 180], phi_deg [0, 360)
    """
    x, y, z = float(v[0]), float(v[1]), float(v[2])
    r = float(np.sqrt(x * x + y * y + z * z))

    if r < 1e-12:
        return 0.0, 0.0, 0.0

    theta = rad2deg(np.arccos(np.clip(z / r, -1.0, 1.0)))
    phi = rad2deg(np.arctan2(y, x)) % 360.0

    return r, float(theta), float(phi)


# ============================================================
# Direction similarity
# ============================================================

def cosine_distance(v1, v2) -> float:
    """
    Cosine distance 1 - (v1.v2)/(|v1||v2|), range [0, 2].

    Magnitude invariant, so catalog vectors need not be unit length.
    """
    return float(cosine(np.asarray(v1, dtype=float), np.asarray(v2, dtype=float)))
