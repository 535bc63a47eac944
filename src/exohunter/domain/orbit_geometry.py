# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbit geometry for the system view.

Places a body on an inclined ellipse as a function of an orbital angle,
drives that angle from elapsed animation time, and provides the coarse
inverse used for pointer hit-testing on orbit paths.

This is display geometry, not orbital mechanics: the angle advances
uniformly (no Kepler equation) and the star sits at the ellipse centre.
No external dependencies — only stdlib math/dataclasses and numpy.
"""
import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

FASTEST_ORBIT_SECONDS: float = 20.0
DEFAULT_PERIOD_DAYS: float = 1.0


@dataclass(frozen=True)
class CartesianPosition:
    """A point in scene space."""
    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class OrbitalElements:
    """Display orbit of one planet, already in scene units."""
    semi_major_axis: float
    eccentricity: float
    inclination_deg: float
    period_days: float


def position_at_angle(
    a: float,
    e: float,
    inclination_deg: float,
    angle_rad: float,
) -> CartesianPosition:
    """
    Position on an inclined ellipse at a given orbital angle.

    The base ellipse lies in the x-z plane, (a·cos θ, 0, b·sin θ) with
    b = a·sqrt(1 − e²), and is tilted about the x axis by the inclination.

    Args:
        a: Semi-major axis (scene units).
        e: Eccentricity, [0, 1). e = 1 or a = 0 degenerate to a segment/point.
        inclination_deg: Tilt of the orbital plane (degrees).
        angle_rad: Orbital angle (radians), unbounded.

    Returns:
        CartesianPosition in scene units.
    """
    b = a * float(np.sqrt(1.0 - e ** 2))
    inc_rad = float(np.radians(inclination_deg))

    x = a * float(np.cos(angle_rad))
    y = 0.0
    z = b * float(np.sin(angle_rad))

    cos_i = float(np.cos(inc_rad))
    sin_i = float(np.sin(inc_rad))
    rotated_y = y * cos_i - z * sin_i
    rotated_z = y * sin_i + z * cos_i

    return CartesianPosition(x=x, y=rotated_y, z=rotated_z)


def elements_position(elements: OrbitalElements, angle_rad: float) -> CartesianPosition:
    """position_at_angle for an OrbitalElements record."""
    return position_at_angle(
        elements.semi_major_axis,
        elements.eccentricity,
        elements.inclination_deg,
        angle_rad,
    )


def shortest_period(periods: Iterable[float]) -> float:
    """Minimum orbital period of a system (1 day when it has no planets)."""
    return min(periods, default=DEFAULT_PERIOD_DAYS)


def orbit_angle(
    elapsed_s: float,
    period_days: float,
    shortest_period_days: float,
    speed_multiplier: float = 1.0,
    fastest_orbit_seconds: float = FASTEST_ORBIT_SECONDS,
) -> float:
    """
    Animation angle of a body after elapsed_s seconds of wall time.

    The shortest-period planet of the system completes one revolution
    every fastest_orbit_seconds (at speed_multiplier = 1); every other
    planet is slowed by the ratio of the periods. The result grows without
    bound; trig periodicity takes care of wraparound.

    Args:
        elapsed_s: Elapsed animation time (seconds).
        period_days: Orbital period of this body (days).
        shortest_period_days: Minimum period across the system (days).
        speed_multiplier: Global animation speed factor.
        fastest_orbit_seconds: On-screen period of the fastest planet.

    Returns:
        Orbital angle in radians; NaN when period_days or
        fastest_orbit_seconds is zero.
    """
    if period_days == 0 or fastest_orbit_seconds == 0:
        return math.nan
    return (
        (elapsed_s / fastest_orbit_seconds)
        * (shortest_period_days / period_days)
        * 2.0 * math.pi
        * speed_multiplier
    )


def orbit_angular_speed(period_days: float, base_orbit_time_s: float = 30.0) -> float:
    """Log-compressed angular speed (rad/s): 2π / (base · log10(P + 1))."""
    log_period = float(np.log10(period_days + 1.0))
    if log_period == 0 or base_orbit_time_s == 0:
        return math.nan
    return (2.0 * math.pi) / (base_orbit_time_s * log_period)


def angle_from_position(a: float, point: CartesianPosition) -> float:
    """
    Orbital angle under a pointer position, assuming a circular orbit.

    atan2(z / b, x / a) with b = a. This is a coarse inverse for hit
    testing; it ignores eccentricity and inclination. NaN for a = 0.
    """
    e = 0.0
    b = a * math.sqrt(1.0 - e ** 2)
    if b == 0:
        return math.nan
    return float(np.arctan2(point.z / b, point.x / a))


def orbit_path(
    a: float,
    e: float,
    inclination_deg: float,
    segments: int = 128,
) -> list[CartesianPosition]:
    """
    Closed polyline approximating the orbit.

    Returns segments + 1 points; the last point repeats the first.
    """
    points = [
        position_at_angle(a, e, inclination_deg, (i / segments) * 2.0 * math.pi)
        for i in range(segments)
    ]
    points.append(points[0])
    return points


def is_near_orbit(
    a: float,
    e: float,
    inclination_deg: float,
    point: CartesianPosition,
    tolerance_fraction: float = 0.02,
) -> bool:
    """
    Coarse pointer hit test against an orbit path.

    Tilts the pointer back into the orbital plane, looks up the orbit
    point at angle_from_position there, and accepts the pointer when it
    lies within tolerance_fraction · a of that point.
    """
    if a <= 0:
        return False
    inc_rad = float(np.radians(inclination_deg))
    cos_i = float(np.cos(inc_rad))
    sin_i = float(np.sin(inc_rad))
    in_plane = CartesianPosition(
        x=point.x,
        y=point.y * cos_i + point.z * sin_i,
        z=point.z * cos_i - point.y * sin_i,
    )
    angle = angle_from_position(a, in_plane)
    on_orbit = position_at_angle(a, e, inclination_deg, angle)
    distance = float(np.linalg.norm(
        np.array(point.as_tuple()) - np.array(on_orbit.as_tuple())
    ))
    return distance <= tolerance_fraction * a
