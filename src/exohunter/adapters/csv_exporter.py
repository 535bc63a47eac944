# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV scene exporter.

Exports one animation instant of a system layout as CSV, one row per
planet. External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging
import math

logger = logging.getLogger(__name__)

from exohunter.ports.export import SceneExporter
from exohunter.domain.system_layout import PlanetPosition, SystemLayout


_HEADER = [
    'name', 'elapsed_s', 'angle_rad', 'x', 'y', 'z',
    'semi_major_axis', 'eccentricity', 'inclination_deg',
    'period_days', 'body_radius',
]


class CsvSceneExporter(SceneExporter):
    """Exports planet scene positions to CSV."""

    def export(
        self,
        layout: SystemLayout,
        positions: list[PlanetPosition],
        path: str,
        elapsed_s: float = 0.0,
    ) -> int:
        planets = {p.name: p for p in layout.planets}
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)

            for pos in positions:
                planet = planets[pos.name]
                if not all(math.isfinite(c) for c in pos.position.as_tuple()):
                    logger.warning("Non-finite position for %s at t=%.3fs", pos.name, elapsed_s)
                writer.writerow([
                    pos.name,
                    f'{elapsed_s:.3f}',
                    f'{pos.angle_rad:.6f}',
                    f'{pos.position.x:.6f}',
                    f'{pos.position.y:.6f}',
                    f'{pos.position.z:.6f}',
                    f'{planet.elements.semi_major_axis:.6f}',
                    f'{planet.elements.eccentricity:.6f}',
                    f'{planet.elements.inclination_deg:.4f}',
                    f'{planet.elements.period_days:.6f}',
                    f'{planet.body_radius:.6f}',
                ])

        return len(positions)
