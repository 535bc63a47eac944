# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON scene exporter.

Writes the system layout (star size, camera, habitable zone, orbits)
together with planet positions of one animation instant.
"""
import json
from typing import Any

from exohunter.ports.export import SceneExporter
from exohunter.domain.system_layout import PlanetPosition, SystemLayout


def build_scene_document(
    layout: SystemLayout,
    positions: list[PlanetPosition],
    elapsed_s: float = 0.0,
) -> dict[str, Any]:
    """JSON-serialisable snapshot of a system scene."""
    by_name = {p.name: p for p in positions}
    return {
        'system': layout.name,
        'elapsed_s': elapsed_s,
        'star_radius': layout.star_radius,
        'max_distance': layout.max_distance,
        'camera_position': list(layout.camera_position),
        'habitable_zone': list(layout.habitable_zone) if layout.habitable_zone else None,
        'planets': [
            {
                'name': planet.name,
                'semi_major_axis': planet.elements.semi_major_axis,
                'eccentricity': planet.elements.eccentricity,
                'inclination_deg': planet.elements.inclination_deg,
                'period_days': planet.elements.period_days,
                'body_radius': planet.body_radius,
                'angle_rad': by_name[planet.name].angle_rad if planet.name in by_name else None,
                'position': (
                    list(by_name[planet.name].position.as_tuple())
                    if planet.name in by_name else None
                ),
            }
            for planet in layout.planets
        ],
    }


class JsonSceneExporter(SceneExporter):
    """Exports a system scene snapshot to a JSON file."""

    def export(
        self,
        layout: SystemLayout,
        positions: list[PlanetPosition],
        path: str,
        elapsed_s: float = 0.0,
    ) -> int:
        document = build_scene_document(layout, positions, elapsed_s)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
        return len(positions)
