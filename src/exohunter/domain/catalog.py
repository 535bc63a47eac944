# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Star and planet catalog records.

Converts catalog API JSON records (camelCase keys, most numeric fields
optional) into domain objects, applying the per-field defaults every
downstream scaling function assumes, and provides the star list filter
used by the catalog browser.

No external dependencies — only stdlib dataclasses.
"""
from collections.abc import Iterable
from dataclasses import dataclass, field

SUN_NAME = "Sun"

DEFAULT_STAR_MASS: float = 1.0
DEFAULT_STAR_RADIUS: float = 1.0
DEFAULT_PERIOD_DAYS: float = 1.0
DEFAULT_MEAN_DISTANCE_AU: float = 0.1


@dataclass(frozen=True)
class Star:
    """A catalog star (host of zero or more planets)."""
    id: int
    name: str
    ra_hours: float | None = None
    dec_deg: float | None = None
    radius_solar: float = DEFAULT_STAR_RADIUS
    mass_solar: float = DEFAULT_STAR_MASS
    teff_k: float | None = None
    spectral_type: str | None = None
    distance_pc: float | None = None
    constellation: str | None = None
    hab_zone_min_au: float | None = None
    hab_zone_max_au: float | None = None


@dataclass(frozen=True)
class Planet:
    """A catalog planet with display-relevant orbital data."""
    id: int
    name: str
    mean_distance_au: float = DEFAULT_MEAN_DISTANCE_AU
    radius_earth: float | None = None
    eccentricity: float = 0.0
    inclination_deg: float = 0.0
    period_days: float = DEFAULT_PERIOD_DAYS
    mass_earth: float | None = None
    habitable: bool = False


@dataclass(frozen=True)
class PlanetarySystem:
    """A host star together with its planets."""
    star: Star
    planets: tuple[Planet, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return self.star.name


def _or_default(record: dict, key: str, default):
    value = record.get(key)
    return default if value is None else value


def star_from_record(record: dict) -> Star:
    """
    Parse a catalog star record.

    Raises:
        KeyError: If 'id' or 'name' is missing.
    """
    return Star(
        id=record["id"],
        name=record["name"],
        ra_hours=record.get("ra"),
        dec_deg=record.get("dec"),
        radius_solar=_or_default(record, "radius", DEFAULT_STAR_RADIUS),
        mass_solar=_or_default(record, "mass", DEFAULT_STAR_MASS),
        teff_k=record.get("teff"),
        spectral_type=record.get("type"),
        distance_pc=record.get("distance"),
        constellation=record.get("constellation"),
        hab_zone_min_au=record.get("habZoneMin"),
        hab_zone_max_au=record.get("habZoneMax"),
    )


def planet_from_record(record: dict) -> Planet:
    """
    Parse a catalog planet record.

    Mean distance falls back to the semi-major axis, then to 0.1 AU.

    Raises:
        KeyError: If 'id' or 'name' is missing.
    """
    mean_distance = record.get("meanDistance")
    if mean_distance is None:
        mean_distance = _or_default(record, "semMajorAxis", DEFAULT_MEAN_DISTANCE_AU)

    return Planet(
        id=record["id"],
        name=record["name"],
        mean_distance_au=mean_distance,
        radius_earth=record.get("radius"),
        eccentricity=_or_default(record, "eccentricity", 0.0),
        inclination_deg=_or_default(record, "inclination", 0.0),
        period_days=_or_default(record, "period", DEFAULT_PERIOD_DAYS),
        mass_earth=record.get("mass"),
        habitable=bool(_or_default(record, "habitable", False)),
    )


def system_from_records(star_record: dict, planet_records: Iterable[dict]) -> PlanetarySystem:
    return PlanetarySystem(
        star=star_from_record(star_record),
        planets=tuple(planet_from_record(r) for r in planet_records),
    )


def habitable_star_names(habitable_records: Iterable[dict]) -> frozenset[str]:
    """Host star names of habitable-planet records ({'star': {'name': ...}})."""
    names = set()
    for record in habitable_records:
        star = record.get("star") or {}
        name = star.get("name")
        if name:
            names.add(name)
    return frozenset(names)


def has_habitable_planet(star: Star, habitable_names: Iterable[str]) -> bool:
    return star.name == SUN_NAME or star.name in set(habitable_names)


def filter_stars(
    stars: Iterable[Star],
    query: str = "",
    habitable_only: bool = False,
    habitable_names: Iterable[str] = (),
) -> list[Star]:
    """
    Stars matching a name search, optionally restricted to habitable systems.

    Matching is a case-insensitive substring test; the Sun always counts
    as habitable. Results are sorted by name.
    """
    needle = query.lower()
    names = frozenset(habitable_names)
    matches = [
        star for star in stars
        if needle in star.name.lower()
        and (not habitable_only or has_habitable_planet(star, names))
    ]
    return sorted(matches, key=lambda s: s.name)
