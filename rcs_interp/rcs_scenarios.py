# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 14:21:09 2026

@author: bboyg
"""

import numpy as np
import pandas as pd

from interpolation_engine import RCSInterpolationEngine
from utils_frames import cartesian_to_spherical


# Arbitrary incident directions (theta, phi) [deg] used in the sweeps
DEFAULT_INCIDENT_ANGLES = [
    (45.0, 45.0),
    (90.0, 90.0),
    (60.0, 120.0),
    (135.0, 270.0),
]

DEFAULT_FREQUENCIES = [5.0, 12.5, 25.0, 30.0, 40.0]


def run_compatibility_scenario(engine: RCSInterpolationEngine, frequency=10.0,
                               incident_direction=1.0, theta=45.0, phi=90.0) -> pd.DataFrame:
    """
    Same geometry through both queries: catalog id, and the spherical
    angles of that catalog direction.
    """
    v = engine.catalog.vector_for(int(round(incident_direction)))
    if v is None:
        raise ValueError(f"Incident direction {incident_direction} is not a catalog direction.")

    _, inc_theta, inc_phi = cartesian_to_spherical(v)

    rcs_id = engine.rcs_at_direction(frequency, incident_direction, theta, phi)
    rcs_sph = engine.rcs_at_spherical(frequency, inc_theta, inc_phi, theta, phi)

    return pd.DataFrame([
        {"query": "direction", "frequency": frequency, "incident_direction": incident_direction,
         "incident_theta": np.nan, "incident_phi": np.nan,
         "theta": theta, "phi": phi, "rcs_db": rcs_id},
        {"query": "spherical", "frequency": frequency, "incident_direction": np.nan,
         "incident_theta": inc_theta, "incident_phi": inc_phi,
         "theta": theta, "phi": phi, "rcs_db": rcs_sph},
    ])


def run_incident_direction_sweep(engine: RCSInterpolationEngine, frequency=10.0,
                                 incident_angles=None, theta=45.0, phi=90.0) -> pd.DataFrame:
    """
    Query B over a list of arbitrary incident directions.
    Also records which catalog directions were blended and with what t.
    """
    if incident_angles is None:
        incident_angles = DEFAULT_INCIDENT_ANGLES

    rows = []
    for inc_theta, inc_phi in incident_angles:
        blend = engine.resolve_spherical_direction(inc_theta, inc_phi)
        rows.append({
            "frequency": float(frequency),
            "incident_theta": float(inc_theta),
            "incident_phi": float(inc_phi),
            "d1": blend.d1,
            "d2": blend.d2,
            "t": blend.t,
            "theta": float(theta),
            "phi": float(phi),
            "rcs_db": engine.rcs_at_spherical(frequency, inc_theta, inc_phi, theta, phi),
        })
    return pd.DataFrame(rows)


def run_frequency_sweep(engine: RCSInterpolationEngine, frequencies=None,
                        incident_theta=45.0, incident_phi=45.0,
                        theta=45.0, phi=90.0) -> pd.DataFrame:
    if frequencies is None:
        frequencies = DEFAULT_FREQUENCIES

    rows = []
    for f in frequencies:
        f1, f2 = engine.bracket_frequency(f)
        rows.append({
            "frequency": float(f),
            "f1": f1,
            "f2": f2,
            "incident_theta": float(incident_theta),
            "incident_phi": float(incident_phi),
            "theta": float(theta),
            "phi": float(phi),
            "rcs_db": engine.rcs_at_spherical(f, incident_theta, incident_phi, theta, phi),
        })
    return pd.DataFrame(rows)


def run_phi_periodicity_check(engine: RCSInterpolationEngine, frequency=10.0,
                              incident_direction=1.0, theta=45.0,
                              phi_a=270.0, phi_b=-90.0, tol_db=0.01) -> pd.DataFrame:
    """
    phi_a and phi_b describe the same azimuth; their RCS must agree to tol_db.
    """
    rcs_a = engine.rcs_at_direction(frequency, incident_direction, theta, phi_a)
    rcs_b = engine.rcs_at_direction(frequency, incident_direction, theta, phi_b)

    return pd.DataFrame([{
        "frequency": float(frequency),
        "incident_direction": float(incident_direction),
        "theta": float(theta),
        "phi_a": float(phi_a),
        "phi_b": float(phi_b),
        "rcs_a_db": rcs_a,
        "rcs_b_db": rcs_b,
        "consistent": bool(abs(rcs_a - rcs_b) < tol_db),
    }])


def run_phi_cut(engine: RCSInterpolationEngine, frequency=10.0, incident_direction=1.0,
                theta=90.0, phi_step_deg=5.0) -> pd.DataFrame:
    phis = np.arange(0.0, 360.0, phi_step_deg)
    rcs = engine.phi_cut(frequency, incident_direction, theta, phis)

    return pd.DataFrame({
        "frequency": float(frequency),
        "incident_direction": float(incident_direction),
        "theta": float(theta),
        "phi": phis,
        "rcs_db": rcs,
    })
