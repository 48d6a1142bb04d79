# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 09:40:05 2026

@author: bboyg
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EngineParams:
    """
    Interpolation engine parameter container.

    match_tolerance        : abs tolerance when matching a sample's frequency
                             and incident direction to a breakpoint
    no_data_rcs_db         : value returned for a corner with no samples [dB]
    phi_period_deg         : period of the phi observation angle [deg]
    degenerate_direction_t : direction blend parameter used when both nearest
                             catalog distances are zero. None -> raise.
    """

    match_tolerance: float = 0.1
    no_data_rcs_db: float = -50.0
    phi_period_deg: float = 360.0
    degenerate_direction_t: Optional[float] = 0.5

    def __post_init__(self):
        if self.match_tolerance <= 0:
            raise ValueError("match_tolerance must be > 0")
        if self.phi_period_deg <= 0:
            raise ValueError("phi_period_deg must be > 0")

        t = self.degenerate_direction_t
        if t is not None and not (0.0 <= t <= 1.0):
            raise ValueError(f"degenerate_direction_t must be in [0, 1], got {t}")
