# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for star/exoplanet catalog sources.

Adapters handle the actual file or HTTP access.
"""
from typing import Any, Protocol, runtime_checkable

from exohunter.domain.catalog import PlanetarySystem, Star


@runtime_checkable
class CatalogSource(Protocol):
    """Port for fetching catalog stars and planetary systems."""

    def fetch_stars(self) -> list[Star]:
        """Fetch every catalog star."""
        ...

    def fetch_system(self, star_id: int) -> PlanetarySystem:
        """Fetch a star together with its planets."""
        ...

    def fetch_habitable_planets(self) -> list[dict[str, Any]]:
        """Fetch raw habitable-planet records (each naming its host star)."""
        ...
