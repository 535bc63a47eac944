# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Planetary system scene layout.

Composes the scaling functions and orbit geometry into a per-system
layout (scaled orbits, body sizes, star size, camera placement) and a
per-frame snapshot of planet positions at an elapsed animation time.

No external dependencies — only stdlib dataclasses.
"""
from dataclasses import dataclass

from .catalog import PlanetarySystem
from .orbit_geometry import (
    CartesianPosition,
    OrbitalElements,
    elements_position,
    orbit_angle,
    orbit_path,
    shortest_period,
)
from .scaling import (
    ScalingFunction,
    make_distance_scale,
    make_radius_scale,
    scale_star_radius,
)
from .scene_config import DEFAULT_SCENE_CONFIG, SceneConfig


@dataclass(frozen=True)
class SystemScales:
    """Distance and body-radius scales built from one system snapshot."""
    distance: ScalingFunction
    radius: ScalingFunction


@dataclass(frozen=True)
class PlanetLayout:
    """Scaled display data for one planet."""
    name: str
    elements: OrbitalElements
    body_radius: float


@dataclass(frozen=True)
class SystemLayout:
    """Scene layout of a planetary system."""
    name: str
    planets: tuple[PlanetLayout, ...]
    star_radius: float
    max_distance: float
    shortest_period_days: float
    camera_position: tuple[float, float, float]
    habitable_zone: tuple[float, float] | None


@dataclass(frozen=True)
class PlanetPosition:
    """A planet's scene position at one animation instant."""
    name: str
    angle_rad: float
    position: CartesianPosition


def make_system_scales(
    system: PlanetarySystem,
    config: SceneConfig = DEFAULT_SCENE_CONFIG,
) -> SystemScales:
    """Build both scaling functions from a system's planet list."""
    return SystemScales(
        distance=make_distance_scale(
            [p.mean_distance_au for p in system.planets],
            config.distance_target_max,
        ),
        radius=make_radius_scale(
            [p.radius_earth or 0.0 for p in system.planets],
            config.radius_target_max,
            config.radius_min_size,
        ),
    )


def layout_system(
    system: PlanetarySystem,
    config: SceneConfig = DEFAULT_SCENE_CONFIG,
) -> SystemLayout:
    """
    Lay out a planetary system in scene units.

    Args:
        system: Star and planets with catalog defaults applied.
        config: Scene sizing parameters.

    Returns:
        SystemLayout; the habitable zone is None unless the star has
        both bounds.
    """
    scales = make_system_scales(system, config)

    planets = tuple(
        PlanetLayout(
            name=p.name,
            elements=OrbitalElements(
                semi_major_axis=scales.distance(p.mean_distance_au),
                eccentricity=p.eccentricity,
                inclination_deg=p.inclination_deg,
                period_days=p.period_days,
            ),
            body_radius=scales.radius(p.radius_earth or 0.0),
        )
        for p in system.planets
    )

    max_distance_au = max((p.mean_distance_au for p in system.planets), default=0.0)
    max_distance = scales.distance(max_distance_au)

    star = system.star
    habitable_zone = None
    if star.hab_zone_min_au is not None and star.hab_zone_max_au is not None:
        habitable_zone = (
            scales.distance(star.hab_zone_min_au),
            scales.distance(star.hab_zone_max_au),
        )

    return SystemLayout(
        name=system.name,
        planets=planets,
        star_radius=scale_star_radius(star.radius_solar, max_distance),
        max_distance=max_distance,
        shortest_period_days=shortest_period(p.period_days for p in system.planets),
        camera_position=(
            0.0,
            max_distance * config.camera_height_factor,
            max_distance * config.camera_distance_factor,
        ),
        habitable_zone=habitable_zone,
    )


def planet_positions(
    layout: SystemLayout,
    elapsed_s: float,
    config: SceneConfig = DEFAULT_SCENE_CONFIG,
) -> list[PlanetPosition]:
    """Positions of every planet after elapsed_s seconds of animation."""
    positions = []
    for planet in layout.planets:
        angle = orbit_angle(
            elapsed_s,
            planet.elements.period_days,
            layout.shortest_period_days,
            speed_multiplier=config.orbit_speed_multiplier,
            fastest_orbit_seconds=config.fastest_orbit_seconds,
        )
        positions.append(PlanetPosition(
            name=planet.name,
            angle_rad=angle,
            position=elements_position(planet.elements, angle),
        ))
    return positions


def orbit_paths(
    layout: SystemLayout,
    config: SceneConfig = DEFAULT_SCENE_CONFIG,
) -> dict[str, list[CartesianPosition]]:
    """Closed orbit polylines keyed by planet name."""
    return {
        planet.name: orbit_path(
            planet.elements.semi_major_axis,
            planet.elements.eccentricity,
            planet.elements.inclination_deg,
            config.orbit_segments,
        )
        for planet in layout.planets
    }
