# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Scene scaling functions.

Maps real astronomical magnitudes (AU, Earth radii, solar radii) of one
planetary system into bounded scene units. Each scale is built once per
system snapshot and closes over that snapshot's maxima, so every caller
(orbit path, planet body, tooltip) agrees on where a planet sits.

No external dependencies — only stdlib math/typing and numpy.
"""
import math
from collections.abc import Iterable
from typing import Callable

import numpy as np

ScalingFunction = Callable[[float], float]

STAR_RADIUS_FLOOR: float = 3.0


def _positive_max(values: Iterable[float]) -> float:
    """Largest value, or 0.0 for an empty sequence."""
    return max(values, default=0.0)


def make_distance_scale(
    planet_distances: Iterable[float],
    target_max: float = 200.0,
) -> ScalingFunction:
    """
    Logarithmic distance scale for one system.

    f(d) = log10(d + 1) / log10(M + 1) · target_max, where M is the
    largest planet distance. The outermost planet lands on target_max and
    inner planets stay distinguishable from the origin.

    Args:
        planet_distances: Mean orbital distances (AU) of the system's planets.
        target_max: Scene distance assigned to the outermost planet.

    Returns:
        Scaling function; returns 0.0 when M <= 0 or d <= 0, and NaN when
        log10(M + 1) underflows to zero.
    """
    max_distance = _positive_max(planet_distances)
    denominator = float(np.log10(max_distance + 1.0)) if max_distance > 0 else 0.0

    def scale(distance_au: float) -> float:
        if max_distance <= 0 or distance_au <= 0:
            return 0.0
        if denominator == 0:
            return math.nan
        return float(np.log10(distance_au + 1.0)) / denominator * target_max

    return scale


def make_radius_scale(
    planet_radii: Iterable[float],
    target_max: float = 5.0,
    min_size: float = 0.8,
) -> ScalingFunction:
    """
    Linear body-radius scale for one system with a visibility floor.

    The largest planet maps to exactly target_max + min_size; every body
    is at least min_size.

    Args:
        planet_radii: Planet radii (Earth radii) of the system's planets.
        target_max: Scene radius added for the largest planet.
        min_size: Radius offset so no body collapses to zero.

    Returns:
        Scaling function; constant min_size when the maximum radius is <= 0.
    """
    max_radius = _positive_max(planet_radii)

    def scale(radius_earth: float) -> float:
        if max_radius <= 0:
            return min_size
        return (radius_earth / max_radius) * target_max + min_size

    return scale


def scale_star_radius(star_radius_solar: float, max_planet_distance_scaled: float) -> float:
    """
    Scene radius of the host star.

    clamp(log10(r + 1) · 10, lower=3, upper=log10(m + 1) · 0.2). The
    upper bound usually falls below the floor of 3; in that case the
    floor wins.
    """
    base = float(np.log10(star_radius_solar + 1.0)) * 10.0
    upper = float(np.log10(max_planet_distance_scaled + 1.0)) * 0.2
    return max(STAR_RADIUS_FLOOR, min(base, upper))
