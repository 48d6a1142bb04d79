# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 10:31:48 2026

@author: bboyg
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Optional, Tuple

import numpy as np

from utils_frames import cosine_distance


@dataclass(frozen=True)
class CatalogDirection:
    """
    Canonical incident direction.

    propagation  : propagation direction (not necessarily unit length)
    polarization : E-field direction, provenance only; interpolation
                   never reads it
    """
    direction_id: int
    propagation: Tuple[float, float, float]
    polarization: Tuple[float, float, float]

    def vector(self) -> np.ndarray:
        return np.array(self.propagation, dtype=float)


# id: (propagation, polarization)
_CANONICAL_DIRECTIONS = (
    (1, (0.0, -1.0, 0.0), (0.0, 0.0, 1.0)),
    (2, (0.0, 0.0, 1.0), (0.0, 1.0, 0.0)),
    (3, (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
    (4, (0.0, 1.0, 0.0), (1.0, 0.0, 0.0)),
    (5, (0.0, 0.0, -1.0), (0.0, 1.0, 0.0)),
    (6, (-1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
    (7, (0.707, 0.707, 0.0), (0.0, 0.0, 1.0)),
    (8, (0.707, 0.0, 0.707), (0.0, 1.0, 0.0)),
)


class DirectionCatalog:
    """
    Fixed table of the 8 incident directions the RCS data was sampled at.

    Built once; the mapping is read-only afterwards.
    """

    def __init__(self):
        self._entries = MappingProxyType({
            d_id: CatalogDirection(d_id, prop, pol)
            for d_id, prop, pol in _CANONICAL_DIRECTIONS
        })

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, direction_id) -> bool:
        return direction_id in self._entries

    def __iter__(self):
        return iter(self._entries[k] for k in self.ids())

    def ids(self) -> List[int]:
        return sorted(self._entries)

    def entry(self, direction_id: int) -> Optional[CatalogDirection]:
        return self._entries.get(direction_id)

    def vector_for(self, direction_id: int) -> Optional[np.ndarray]:
        """
        Propagation vector for a catalog id, or None for an unknown id.
        """
        e = self._entries.get(direction_id)
        if e is None:
            return None
        return e.vector()

    def distances(self, v) -> List[Tuple[int, float]]:
        """
        Cosine distance from v to every catalog direction, in id order.
        """
        return [(e.direction_id, cosine_distance(v, e.vector())) for e in self]

    def nearest_two(self, v):
        """
        The two catalog directions closest to v.

        Returns:
            (d1, dist1), (d2, dist2) with dist1 <= dist2.
            Equal distances resolve to the lower id.
        """
        ranked = sorted(self.distances(v), key=lambda item: (item[1], item[0]))
        return ranked[0], ranked[1]
