# -*- coding: utf-8 -*-
"""
Created on Mon Feb 02 09:30:11 2026

@author: bboyg
"""

import numpy as np
from utils_frames import (
    periodic_delta_deg,
    spherical_to_cartesian,
    cartesian_to_spherical,
    cosine_distance,
)

def test_periodic_delta_wraps_full_turns():
    assert periodic_delta_deg(360.0) == 0.0
    assert periodic_delta_deg(-90.0 - 270.0) == 0.0
    assert periodic_delta_deg(350.0) == 10.0
    assert periodic_delta_deg(-630.0) == 90.0

def test_periodic_delta_array_input():
    d = periodic_delta_deg(np.array([0.0, 180.0, 190.0, -10.0, 725.0]))
    assert np.allclose(d, [0.0, 180.0, 170.0, 10.0, 5.0])

def test_spherical_to_cartesian_axes():
    # theta=0 -> +Z
    assert np.allclose(spherical_to_cartesian(1.0, 0.0, 0.0), [0, 0, 1], atol=1e-12)
    # theta=90, phi=0 -> +X
    assert np.allclose(spherical_to_cartesian(1.0, 90.0, 0.0), [1, 0, 0], atol=1e-12)
    # theta=90, phi=90 -> +Y
    assert np.allclose(spherical_to_cartesian(1.0, 90.0, 90.0), [0, 1, 0], atol=1e-12)
    # radius scales
    assert np.allclose(spherical_to_cartesian(2.0, 90.0, 270.0), [0, -2, 0], atol=1e-12)

def test_cartesian_to_spherical_inverse():
    r, th, ph = cartesian_to_spherical(np.array([0.0, -1.0, 0.0]))
    assert abs(r - 1.0) < 1e-12
    assert abs(th - 90.0) < 1e-9
    assert abs(ph - 270.0) < 1e-9

    v = spherical_to_cartesian(3.0, 60.0, 120.0)
    r, th, ph = cartesian_to_spherical(v)
    assert abs(r - 3.0) < 1e-12
    assert abs(th - 60.0) < 1e-9
    assert abs(ph - 120.0) < 1e-9

def test_cosine_distance_range_and_scale_invariance():
    assert abs(cosine_distance([0, 0, 1], [0, 0, 1])) < 1e-12
    assert abs(cosine_distance([0, 0, 1], [0, 0, -1]) - 2.0) < 1e-12
    assert abs(cosine_distance([1, 0, 0], [0, 1, 0]) - 1.0) < 1e-12
    # catalog vectors are not unit length
    assert abs(cosine_distance([0.707, 0.0, 0.707], [1.0, 0.0, 1.0])) < 1e-12
