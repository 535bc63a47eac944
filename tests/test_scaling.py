# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for scene scaling functions (distance, body radius, star radius)."""
import math

import pytest

from exohunter.domain.scaling import (
    make_distance_scale,
    make_radius_scale,
    scale_star_radius,
)


# ── Distance scale ────────────────────────────────────────────────

class TestDistanceScale:

    def test_zero_maps_to_zero(self):
        scale = make_distance_scale([0.05, 1.0, 30.0], 200)
        assert scale(0.0) == 0.0

    def test_negative_maps_to_zero(self):
        scale = make_distance_scale([0.05, 1.0, 30.0], 200)
        assert scale(-3.0) == 0.0

    def test_outermost_planet_maps_to_target(self):
        scale = make_distance_scale([0.05, 1.0, 30.0], 200)
        assert scale(30.0) == pytest.approx(200.0)

    def test_bounded_and_monotonic_up_to_max(self):
        """Output stays in [0, T] and never decreases for 0 <= d <= M."""
        scale = make_distance_scale([0.02, 0.4, 5.2, 48.0], 150)
        samples = [i * 48.0 / 200 for i in range(201)]
        values = [scale(d) for d in samples]
        assert all(0.0 <= v <= 150.0 + 1e-9 for v in values)
        assert all(b >= a for a, b in zip(values, values[1:]))

    def test_two_planet_system_increasing(self):
        """1 AU and 100 AU planets land on distinct increasing positions."""
        scale = make_distance_scale([1.0, 100.0], 200)
        inner = scale(1.0)
        outer = scale(100.0)
        assert 0.0 <= inner <= 200.0
        assert 0.0 <= outer <= 200.0
        assert outer > inner
        assert inner == pytest.approx(math.log10(2) / math.log10(101) * 200)

    def test_logarithmic_keeps_inner_planets_visible(self):
        """A 0.05 AU planet is far from the origin next to a 30 AU one."""
        scale = make_distance_scale([0.05, 30.0], 200)
        assert scale(0.05) > 200 * 0.05 / 30.0

    def test_empty_system_returns_zero(self):
        scale = make_distance_scale([], 200)
        assert scale(1.0) == 0.0

    def test_all_non_positive_returns_zero(self):
        scale = make_distance_scale([0.0, -1.0], 200)
        assert scale(5.0) == 0.0

    def test_beyond_max_extrapolates(self):
        scale = make_distance_scale([1.0], 200)
        assert scale(10.0) > 200.0

    def test_vanishing_max_is_nan(self):
        """M = 1e-17 passes M > 0 but log10(M + 1) rounds to zero."""
        scale = make_distance_scale([1e-17], 200)
        assert math.isnan(scale(1e-17))
        assert scale(0.0) == 0.0

    def test_referential_transparency(self):
        scale = make_distance_scale([0.3, 2.0], 200)
        assert scale(1.234) == scale(1.234)

    def test_accepts_generator(self):
        scale = make_distance_scale((d for d in [1.0, 9.0]), 100)
        assert scale(9.0) == pytest.approx(100.0)
        assert scale(9.0) == pytest.approx(100.0)


# ── Radius scale ──────────────────────────────────────────────────

class TestRadiusScale:

    def test_largest_planet_maps_to_target_plus_min(self):
        scale = make_radius_scale([1.0, 11.2, 3.5], target_max=5, min_size=0.8)
        assert scale(11.2) == pytest.approx(5.8)

    def test_never_below_min_size(self):
        scale = make_radius_scale([1.0, 11.2, 3.5], target_max=5, min_size=0.8)
        for r in [0.0, 0.1, 1.0, 3.5, 11.2]:
            assert scale(r) >= 0.8

    def test_zero_radius_is_min_size(self):
        scale = make_radius_scale([2.0], target_max=5, min_size=0.8)
        assert scale(0.0) == 0.8

    def test_linear(self):
        scale = make_radius_scale([4.0], target_max=8, min_size=1.0)
        assert scale(2.0) == pytest.approx(5.0)

    def test_empty_system_returns_min_size(self):
        scale = make_radius_scale([], target_max=5, min_size=0.8)
        assert scale(3.0) == 0.8

    def test_all_zero_radii_returns_min_size(self):
        scale = make_radius_scale([0.0, 0.0], target_max=5, min_size=0.6)
        assert scale(10.0) == 0.6

    def test_defaults(self):
        scale = make_radius_scale([2.0])
        assert scale(2.0) == pytest.approx(5.8)


# ── Star radius ───────────────────────────────────────────────────

class TestStarRadius:

    def test_floor_wins_when_upper_below_floor(self):
        """Typical systems: upper bound log10(201)·0.2 ≈ 0.46 < 3 → 3."""
        assert scale_star_radius(1.0, 200.0) == 3.0

    def test_floor_for_tiny_star(self):
        assert scale_star_radius(0.1, 200.0) == 3.0

    def test_upper_bound_applies_when_above_floor(self):
        """With an upper bound of 4 the large star is capped at 4."""
        assert scale_star_radius(10.0, 1e20) == pytest.approx(4.0)

    def test_base_between_bounds(self):
        r = 1.5
        expected = math.log10(r + 1) * 10
        assert 3.0 < expected < 4.0
        assert scale_star_radius(r, 1e20) == pytest.approx(expected)

    def test_small_star_raised_to_floor_with_wide_bounds(self):
        assert scale_star_radius(0.5, 1e20) == 3.0

    def test_zero_inputs(self):
        assert scale_star_radius(0.0, 0.0) == 3.0
