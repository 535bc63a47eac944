# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Equatorial coordinates to scene positions.

Scene convention (shared by star placement and camera pointing):
RA=0h, Dec=0° lies on +x, Dec=+90° on +y, RA=6h on +z.

No external dependencies — only stdlib math/dataclasses and numpy.
"""
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from .orbit_geometry import CartesianPosition

STAR_MAP_RADIUS: float = 40.0


@dataclass(frozen=True)
class EquatorialCoordinate:
    """A sky direction: right ascension (hours) and declination (degrees)."""
    right_ascension_hours: float
    declination_deg: float


class _HasRaDec(Protocol):
    name: str
    ra_hours: float | None
    dec_deg: float | None


def ra_dec_to_xyz(ra_hours: float, dec_deg: float, radius: float) -> CartesianPosition:
    """
    Place an RA/Dec direction on a sphere of the given radius.

    Args:
        ra_hours: Right ascension, [0, 24) hours.
        dec_deg: Declination, [-90, 90] degrees.
        radius: Sphere radius (scene units).

    Returns:
        CartesianPosition with x² + y² + z² = radius².
    """
    ra_rad = ra_hours / 24.0 * 2.0 * math.pi
    dec_rad = dec_deg / 180.0 * math.pi
    cos_dec = float(np.cos(dec_rad))
    return CartesianPosition(
        x=radius * cos_dec * float(np.cos(ra_rad)),
        y=radius * float(np.sin(dec_rad)),
        z=radius * cos_dec * float(np.sin(ra_rad)),
    )


def equatorial_to_xyz(coord: EquatorialCoordinate, radius: float) -> CartesianPosition:
    return ra_dec_to_xyz(coord.right_ascension_hours, coord.declination_deg, radius)


def star_map_position(star: _HasRaDec, radius: float = STAR_MAP_RADIUS) -> CartesianPosition:
    """Overview-map position of a catalog star; missing RA/Dec count as 0."""
    ra = star.ra_hours if star.ra_hours is not None else 0.0
    dec = star.dec_deg if star.dec_deg is not None else 0.0
    return ra_dec_to_xyz(ra, dec, radius)


def star_map_positions(
    stars: Iterable[_HasRaDec],
    radius: float = STAR_MAP_RADIUS,
) -> list[tuple[str, CartesianPosition]]:
    return [(star.name, star_map_position(star, radius)) for star in stars]
