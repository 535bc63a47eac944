# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON file catalog adapter.

Reads an offline catalog snapshot:

    {
      "stars": [<star record>, ...],
      "planets": {"<star id>": [<planet record>, ...], ...},
      "habitable": [<habitable planet record>, ...]
    }

Records use the same camelCase keys as the catalog REST API.
"""
import json
import logging
from typing import Any

from exohunter.ports.catalog_source import CatalogSource
from exohunter.domain.catalog import (
    PlanetarySystem,
    Star,
    star_from_record,
    system_from_records,
)

logger = logging.getLogger(__name__)


class JsonCatalogAdapter(CatalogSource):
    """Serves catalog data from a JSON snapshot file."""

    def __init__(self, path: str):
        self._path = path
        self._data: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._data is None:
            with open(self._path, encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict) or not isinstance(data.get('stars'), list):
                raise ValueError(f"{self._path}: expected an object with a 'stars' list")
            if not isinstance(data.get('planets', {}), dict):
                raise ValueError(f"{self._path}: 'planets' must map star ids to planet lists")
            if not isinstance(data.get('habitable', []), list):
                raise ValueError(f"{self._path}: 'habitable' must be a list")
            self._data = data
        return self._data

    def fetch_stars(self) -> list[Star]:
        stars = []
        for record in self._load()['stars']:
            try:
                stars.append(star_from_record(record))
            except (KeyError, TypeError, AttributeError) as e:
                logger.warning("Skipping malformed star record %r: %s", record, e)
        return stars

    def fetch_system(self, star_id: int) -> PlanetarySystem:
        data = self._load()
        star_record = next(
            (r for r in data['stars'] if isinstance(r, dict) and r.get('id') == star_id),
            None,
        )
        if star_record is None:
            raise LookupError(f"Star {star_id} not found in {self._path}")
        planet_records = data.get('planets', {}).get(str(star_id), [])
        if not isinstance(planet_records, list):
            raise ValueError(f"{self._path}: planets of star {star_id} must be a list")
        return system_from_records(star_record, planet_records)

    def fetch_habitable_planets(self) -> list[dict[str, Any]]:
        return list(self._load().get('habitable', []))
