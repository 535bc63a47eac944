# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Exohunter

Geometry core for an interactive star/exoplanet catalog viewer: places
catalog stars on the overview sphere, rescales planetary systems into a
bounded scene, animates planets along inclined elliptical orbits, and
turns a device's location and orientation into the sky direction it is
pointing at.
"""

from exohunter.domain.scaling import (
    ScalingFunction,
    make_distance_scale,
    make_radius_scale,
    scale_star_radius,
)
from exohunter.domain.orbit_geometry import (
    CartesianPosition,
    OrbitalElements,
    position_at_angle,
    orbit_angle,
    angle_from_position,
    orbit_path,
    is_near_orbit,
)
from exohunter.domain.celestial_projection import (
    EquatorialCoordinate,
    ra_dec_to_xyz,
    star_map_position,
)
from exohunter.domain.observer_astronomy import (
    ObserverState,
    DeviceOrientation,
    local_sidereal_time_hours,
    hour_angle_deg,
    declination_deg,
    right_ascension_hours,
    azimuth_from_vectors,
    pointing_coordinate,
    pointing_direction,
)
from exohunter.domain.display_formatting import (
    significant_digits,
    format_quantity,
)
from exohunter.domain.catalog import (
    Star,
    Planet,
    PlanetarySystem,
    star_from_record,
    planet_from_record,
    system_from_records,
    filter_stars,
)
from exohunter.domain.scene_config import (
    SceneConfig,
    DEFAULT_SCENE_CONFIG,
)
from exohunter.domain.system_layout import (
    SystemLayout,
    layout_system,
    planet_positions,
)

__version__ = "0.1.0"

__all__ = [
    "ScalingFunction",
    "make_distance_scale",
    "make_radius_scale",
    "scale_star_radius",
    "CartesianPosition",
    "OrbitalElements",
    "position_at_angle",
    "orbit_angle",
    "angle_from_position",
    "orbit_path",
    "is_near_orbit",
    "EquatorialCoordinate",
    "ra_dec_to_xyz",
    "star_map_position",
    "ObserverState",
    "DeviceOrientation",
    "local_sidereal_time_hours",
    "hour_angle_deg",
    "declination_deg",
    "right_ascension_hours",
    "azimuth_from_vectors",
    "pointing_coordinate",
    "pointing_direction",
    "significant_digits",
    "format_quantity",
    "Star",
    "Planet",
    "PlanetarySystem",
    "star_from_record",
    "planet_from_record",
    "system_from_records",
    "filter_stars",
    "SceneConfig",
    "DEFAULT_SCENE_CONFIG",
    "SystemLayout",
    "layout_system",
    "planet_positions",
]
