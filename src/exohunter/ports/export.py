# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for scene snapshot export.

Adapters implement this to write a system layout and its planet
positions in various formats (CSV, JSON).
"""
from typing import Protocol, runtime_checkable

from exohunter.domain.system_layout import PlanetPosition, SystemLayout


@runtime_checkable
class SceneExporter(Protocol):
    """Port for exporting a system snapshot to file."""

    def export(
        self,
        layout: SystemLayout,
        positions: list[PlanetPosition],
        path: str,
        elapsed_s: float = 0.0,
    ) -> int:
        """
        Export planet positions of one animation instant to a file.

        Args:
            layout: Scaled system layout.
            positions: Planet positions computed from the layout.
            path: Output file path.
            elapsed_s: Animation time the positions belong to.

        Returns:
            Number of planets exported.
        """
        ...
