# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Exoplanet catalog REST adapter: fetches stars and planetary systems.

External dependencies (urllib, json) are confined to this layer.

Endpoints (relative to the API base URL):
    /Stars                                    all stars
    /Stars/{id}                               one star
    /ExoSolarSystems/GetPlanetsByStarId/{id}  planets of one star
    /ExoSolarSystems/GetHabitablePlanets      habitable planets with host star
"""
import json
import logging
import urllib.error
import urllib.request
from typing import Any

from exohunter.ports.catalog_source import CatalogSource
from exohunter.domain.catalog import (
    PlanetarySystem,
    Star,
    planet_from_record,
    star_from_record,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://exoplanethunter.com/api"


class ExoplanetApiAdapter(CatalogSource):
    """Fetches catalog data from the exoplanet catalog REST API."""

    def __init__(self, base_url: str = BASE_URL, timeout: int = 30):
        self._base_url = base_url.rstrip('/')
        self._timeout = timeout

    def fetch_stars(self) -> list[Star]:
        stars = []
        for record in self._fetch_list("/Stars"):
            try:
                stars.append(star_from_record(record))
            except (KeyError, TypeError, AttributeError) as e:
                logger.warning("Skipping star %s: %s", _record_label(record), e)
        return stars

    def fetch_system(self, star_id: int) -> PlanetarySystem:
        star_record = self._fetch_json(f"/Stars/{star_id}")
        if not isinstance(star_record, dict):
            raise ValueError(f"Unexpected star payload for id {star_id}")
        star = star_from_record(star_record)

        planets = []
        for record in self._fetch_list(f"/ExoSolarSystems/GetPlanetsByStarId/{star_id}"):
            try:
                planets.append(planet_from_record(record))
            except (KeyError, TypeError, AttributeError) as e:
                logger.warning("Skipping planet %s of %s: %s", _record_label(record), star.name, e)
        return PlanetarySystem(star=star, planets=tuple(planets))

    def fetch_habitable_planets(self) -> list[dict[str, Any]]:
        return self._fetch_list("/ExoSolarSystems/GetHabitablePlanets")

    def _fetch_list(self, path: str) -> list[Any]:
        data = self._fetch_json(path)
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON list from {path}, got {type(data).__name__}")
        return data

    def _fetch_json(self, path: str) -> Any:
        """Fetch and decode one JSON document from the catalog API."""
        url = f"{self._base_url}{path}"
        logger.debug("GET %s", url)
        req = urllib.request.Request(url, headers={"User-Agent": "exohunter/0.1"})
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as response:
                text = response.read().decode('utf-8')
        except urllib.error.HTTPError as e:
            raise ConnectionError(f"Catalog API error {e.code}: {e.reason}") from e
        except urllib.error.URLError as e:
            raise ConnectionError(f"Catalog API connection failed: {e.reason}") from e
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON from {url}: {e}") from e


def _record_label(record: Any) -> str:
    if isinstance(record, dict):
        return str(record.get('name', record.get('id', '?')))
    return '?'
