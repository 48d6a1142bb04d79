# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 11:02:36 2026

@author: bboyg
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from direction_catalog import DirectionCatalog
from engine_params import EngineParams
from rcs_data import RCSSample
from utils_frames import periodic_delta_deg, spherical_to_cartesian


# ============================================================
# Errors
# ============================================================

class RCSInterpolationError(ValueError):
    """Base class for interpolation failures."""


class EmptyDatasetError(RCSInterpolationError):
    """No breakpoints to bracket against (empty dataset)."""


class InvalidDirectionParameterError(RCSInterpolationError):
    """Direction blend parameter undefined (both catalog distances are zero)."""


# ============================================================
# Primitives
# ============================================================

def interpolate(y1: float, y2: float, x1: float, x2: float, x: float) -> float:
    """
    Linear interpolation between (x1, y1) and (x2, y2).

    Returns y1 when x1 == x2: a query sitting on a single breakpoint takes
    that breakpoint's value and nothing from the other side.
    """
    if x1 == x2:
        return y1
    return y1 + (y2 - y1) * (x - x1) / (x2 - x1)


def breakpoints(values, x: float) -> Tuple[float, float]:
    """
    Bracket x between the closest distinct values lo <= x <= hi.

    Outside the sampled range both ends clamp to the nearest endpoint.
    On an exact hit lo == hi == x.
    """
    axis = np.unique(np.asarray(values, dtype=float))
    if axis.size == 0:
        raise EmptyDatasetError("Cannot bracket against an empty dataset.")

    if x <= axis[0]:
        return float(axis[0]), float(axis[0])
    if x >= axis[-1]:
        return float(axis[-1]), float(axis[-1])

    i = int(np.searchsorted(axis, x))  # axis[i-1] < x <= axis[i]
    if axis[i] == x:
        return float(axis[i]), float(axis[i])

    return float(axis[i - 1]), float(axis[i])


def direction_blend_parameter(dist1: float, dist2: float,
                              degenerate_t: Optional[float] = 0.5) -> float:
    """
    t = dist1 / (dist1 + dist2); t=0 means 'all d1'.

    If both distances are zero, return degenerate_t, or raise when it is None.
    """
    total = dist1 + dist2
    if total <= 0.0:
        if degenerate_t is None:
            raise InvalidDirectionParameterError(
                f"Direction parameter undefined for distances ({dist1}, {dist2})."
            )
        return float(degenerate_t)
    return dist1 / total


@dataclass(frozen=True)
class DirectionBlend:
    """
    The two catalog directions bracketing an arbitrary incident vector.
    """
    d1: int
    d2: int
    dist1: float
    dist2: float
    t: float


# ============================================================
# Engine
# ============================================================

class RCSInterpolationEngine:
    """
    RCS estimate at arbitrary (frequency, incident direction, theta, phi)
    from a sparse sample table.

    Frequency and incident direction are bracketed and blended linearly
    (direction first, then frequency). Theta/phi take the nearest sample,
    with phi periodic.

    The engine never modifies its data; one instance can be shared.
    """

    def __init__(self, samples: Sequence[RCSSample],
                 catalog: Optional[DirectionCatalog] = None,
                 params: Optional[EngineParams] = None):
        self.samples = tuple(samples)
        self.catalog = catalog if catalog is not None else DirectionCatalog()
        self.p = params if params is not None else EngineParams()

        table = np.array(
            [(s.frequency, s.incident_direction, s.theta, s.phi, s.rcs) for s in self.samples],
            dtype=float,
        ).reshape(-1, 5)
        table.setflags(write=False)

        self._freq = table[:, 0]
        self._dir = table[:, 1]
        self._theta = table[:, 2]
        self._phi = table[:, 3]
        self._rcs = table[:, 4]

    def __len__(self) -> int:
        return len(self.samples)

    # ---------------------------------------------------------
    # Breakpoints
    # ---------------------------------------------------------
    def frequencies(self) -> np.ndarray:
        return np.unique(self._freq)

    def incident_directions(self) -> np.ndarray:
        return np.unique(self._dir)

    def bracket_frequency(self, frequency: float) -> Tuple[float, float]:
        return breakpoints(self._freq, frequency)

    def bracket_direction(self, incident_direction: float) -> Tuple[float, float]:
        return breakpoints(self._dir, incident_direction)

    # ---------------------------------------------------------
    # Nearest-angle lookup
    # ---------------------------------------------------------
    def closest_rcs(self, frequency: float, incident_direction: float,
                    theta: float, phi: float) -> float:
        """
        RCS of the sample nearest to (theta, phi) among those matching
        (frequency, incident_direction) within the match tolerance.

        Distance is hypot(d_theta, d_phi) with d_phi periodic. Ties go to
        the first sample in dataset order. No match -> no_data_rcs_db.
        """
        tol = self.p.match_tolerance
        m = (np.abs(self._freq - frequency) < tol) & (np.abs(self._dir - incident_direction) < tol)
        if not np.any(m):
            return self.p.no_data_rcs_db

        d_theta = self._theta[m] - theta
        d_phi = periodic_delta_deg(self._phi[m] - phi, self.p.phi_period_deg)

        k = int(np.argmin(np.hypot(d_theta, d_phi)))
        return float(self._rcs[m][k])

    def _corners(self, f1, f2, d1, d2, theta, phi):
        return (
            self.closest_rcs(f1, d1, theta, phi),
            self.closest_rcs(f1, d2, theta, phi),
            self.closest_rcs(f2, d1, theta, phi),
            self.closest_rcs(f2, d2, theta, phi),
        )

    # ---------------------------------------------------------
    # Query A: catalog direction id
    # ---------------------------------------------------------
    def rcs_at_direction(self, frequency: float, incident_direction: float,
                         theta: float, phi: float) -> float:
        """
        RCS [dB] for an incident direction given as a catalog id
        (fractional ids blend the two neighbouring directions).
        """
        f1, f2 = self.bracket_frequency(frequency)
        d1, d2 = self.bracket_direction(incident_direction)

        rcs11, rcs12, rcs21, rcs22 = self._corners(f1, f2, d1, d2, theta, phi)

        rcs_f1 = interpolate(rcs11, rcs12, d1, d2, incident_direction)
        rcs_f2 = interpolate(rcs21, rcs22, d1, d2, incident_direction)
        return interpolate(rcs_f1, rcs_f2, f1, f2, frequency)

    # ---------------------------------------------------------
    # Query B: arbitrary spherical incident direction
    # ---------------------------------------------------------
    def resolve_spherical_direction(self, incident_theta: float,
                                    incident_phi: float) -> DirectionBlend:
        v = spherical_to_cartesian(1.0, incident_theta, incident_phi)
        (d1, dist1), (d2, dist2) = self.catalog.nearest_two(v)
        t = direction_blend_parameter(dist1, dist2, self.p.degenerate_direction_t)
        return DirectionBlend(d1=d1, d2=d2, dist1=dist1, dist2=dist2, t=t)

    def rcs_at_spherical(self, frequency: float, incident_theta: float,
                         incident_phi: float, theta: float, phi: float) -> float:
        """
        RCS [dB] for an incident direction given as spherical angles [deg].

        The direction is projected onto the two nearest catalog directions
        by cosine distance and blended with t = dist1 / (dist1 + dist2).
        """
        f1, f2 = self.bracket_frequency(frequency)
        blend = self.resolve_spherical_direction(incident_theta, incident_phi)

        rcs11, rcs12, rcs21, rcs22 = self._corners(
            f1, f2, float(blend.d1), float(blend.d2), theta, phi
        )

        rcs_f1 = interpolate(rcs11, rcs12, 0.0, 1.0, blend.t)
        rcs_f2 = interpolate(rcs21, rcs22, 0.0, 1.0, blend.t)
        return interpolate(rcs_f1, rcs_f2, f1, f2, frequency)

    # ---------------------------------------------------------
    # Sweeps
    # ---------------------------------------------------------
    def phi_cut(self, frequency: float, incident_direction: float,
                theta: float, phis) -> np.ndarray:
        """
        rcs_at_direction evaluated over an array of phi values [deg].
        """
        phis = np.atleast_1d(np.asarray(phis, dtype=float))
        return np.array(
            [self.rcs_at_direction(frequency, incident_direction, theta, float(ph)) for ph in phis],
            dtype=float,
        )
