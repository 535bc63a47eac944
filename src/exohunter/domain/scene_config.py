# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Scene sizing and animation constants."""
from dataclasses import dataclass


@dataclass(frozen=True)
class SceneConfig:
    """Immutable sizing/animation parameters for the 3D scene."""
    distance_target_max: float = 200.0      # scene units for the outermost planet
    radius_target_max: float = 5.0          # scene units added for the largest planet
    radius_min_size: float = 0.8            # smallest planet body radius
    star_map_radius: float = 40.0           # overview sphere radius
    fastest_orbit_seconds: float = 20.0     # on-screen period of the fastest planet
    orbit_speed_multiplier: float = 0.3
    orbit_segments: int = 128
    camera_distance_factor: float = 1.5     # camera z / max scaled distance
    camera_height_factor: float = 0.3       # camera y / max scaled distance


DEFAULT_SCENE_CONFIG: SceneConfig = SceneConfig()
