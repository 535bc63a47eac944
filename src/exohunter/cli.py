# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for the exoplanet catalog scene core.

Usage:
    # Browse an offline catalog snapshot
    exohunter --catalog catalog.json --list
    exohunter --catalog catalog.json --list --search kepler --habitable-only

    # Browse the live catalog API
    exohunter --live --list

    # Lay out a planetary system and sample planet positions
    exohunter --catalog catalog.json --system 42 --time 12.5
    exohunter --catalog catalog.json --system 42 --time 12.5 --export-csv planets.csv
    exohunter --catalog catalog.json --system 42 --export-json scene.json

    # Sky direction a device is pointing at (lat lon alpha beta)
    exohunter --point 59.33 18.07 180 -45
    exohunter --point 59.33 18.07 180 -45 --at 2026-03-20T21:00:00Z
"""
import argparse
import dataclasses
import logging
import sys
from datetime import datetime, timezone

from exohunter.domain.catalog import filter_stars, habitable_star_names, has_habitable_planet
from exohunter.domain.celestial_projection import star_map_position
from exohunter.domain.display_formatting import format_quantity
from exohunter.domain.observer_astronomy import (
    DeviceOrientation,
    observer_state,
    pointing_coordinate,
    pointing_direction,
)
from exohunter.domain.scene_config import DEFAULT_SCENE_CONFIG, SceneConfig
from exohunter.domain.system_layout import layout_system, planet_positions
from exohunter.ports.catalog_source import CatalogSource


def _open_catalog(args: argparse.Namespace) -> CatalogSource:
    if args.catalog:
        from exohunter.adapters.json_catalog import JsonCatalogAdapter
        return JsonCatalogAdapter(args.catalog)
    from exohunter.adapters.exoplanet_api import ExoplanetApiAdapter
    return ExoplanetApiAdapter(base_url=args.api_url)


def _scene_config(args: argparse.Namespace) -> SceneConfig:
    overrides = {}
    if args.distance_max is not None:
        overrides['distance_target_max'] = args.distance_max
    if args.speed is not None:
        overrides['orbit_speed_multiplier'] = args.speed
    return dataclasses.replace(DEFAULT_SCENE_CONFIG, **overrides)


def _parse_instant(text: str) -> datetime:
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def run_list(
    catalog: CatalogSource,
    query: str = "",
    habitable_only: bool = False,
    config: SceneConfig = DEFAULT_SCENE_CONFIG,
) -> int:
    """Print matching catalog stars with their overview-map positions."""
    stars = catalog.fetch_stars()
    habitable = habitable_star_names(catalog.fetch_habitable_planets())
    matches = filter_stars(stars, query, habitable_only, habitable)

    print(f"Showing {len(matches)} of {len(stars)} stars")
    for star in matches:
        pos = star_map_position(star, config.star_map_radius)
        marker = " *" if has_habitable_planet(star, habitable) else ""
        print(
            f"  {star.id:>6}  {star.name:<28}"
            f" RA {format_quantity(star.ra_hours, 'h'):>10}"
            f"  Dec {format_quantity(star.dec_deg, 'deg'):>12}"
            f"  ({pos.x:8.3f}, {pos.y:8.3f}, {pos.z:8.3f}){marker}"
        )
    return len(matches)


def run_system(
    catalog: CatalogSource,
    star_id: int,
    elapsed_s: float = 0.0,
    config: SceneConfig = DEFAULT_SCENE_CONFIG,
    export_csv: str | None = None,
    export_json: str | None = None,
) -> int:
    """Print a system layout and planet positions; optionally export them."""
    system = catalog.fetch_system(star_id)
    layout = layout_system(system, config)
    positions = planet_positions(layout, elapsed_s, config)

    star = system.star
    print(f"{layout.name}: {len(layout.planets)} planets")
    print(f"  Star radius {format_quantity(star.radius_solar, 'R_sun')}"
          f" -> {format_quantity(layout.star_radius)} units")
    print(f"  Max orbit {format_quantity(layout.max_distance)} units,"
          f" camera at {tuple(round(c, 3) for c in layout.camera_position)}")
    if layout.habitable_zone is not None:
        inner, outer = layout.habitable_zone
        print(f"  Habitable zone {format_quantity(inner)} - {format_quantity(outer)} units")

    elements = {p.name: p for p in layout.planets}
    for pos in positions:
        planet = elements[pos.name]
        print(
            f"  {pos.name:<24} a={format_quantity(planet.elements.semi_major_axis):>9}"
            f" P={format_quantity(planet.elements.period_days, 'd'):>12}"
            f" r={format_quantity(planet.body_radius):>7}"
            f"  ({pos.position.x:9.3f}, {pos.position.y:9.3f}, {pos.position.z:9.3f})"
        )

    if export_csv:
        from exohunter.adapters.csv_exporter import CsvSceneExporter
        count = CsvSceneExporter().export(layout, positions, export_csv, elapsed_s)
        print(f"Exported {count} planets to {export_csv}")
    if export_json:
        from exohunter.adapters.json_exporter import JsonSceneExporter
        count = JsonSceneExporter().export(layout, positions, export_json, elapsed_s)
        print(f"Exported {count} planets to {export_json}")

    return len(positions)


def run_point(
    latitude_deg: float,
    longitude_deg: float,
    alpha_deg: float,
    beta_deg: float,
    now: datetime | None = None,
    config: SceneConfig = DEFAULT_SCENE_CONFIG,
) -> None:
    """Print the sky coordinate and map direction a device is pointing at."""
    observer = observer_state(latitude_deg, longitude_deg, DeviceOrientation(alpha_deg, beta_deg))
    coord = pointing_coordinate(observer, now)
    direction = pointing_direction(observer, config.star_map_radius, now)

    print(f"Azimuth {format_quantity(observer.azimuth_deg, 'deg')},"
          f" altitude {format_quantity(observer.altitude_deg, 'deg')}")
    print(f"RA {format_quantity(coord.right_ascension_hours, 'h')},"
          f" Dec {format_quantity(coord.declination_deg, 'deg')}")
    print(f"Map direction ({direction.x:.3f}, {direction.y:.3f}, {direction.z:.3f})")


def main():
    parser = argparse.ArgumentParser(
        description="Exoplanet catalog scene geometry: star map, system layout, device pointing"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--catalog', help="Path to an offline catalog JSON snapshot")
    source.add_argument(
        '--live', action='store_true', default=False,
        help="Use the live catalog REST API",
    )
    parser.add_argument(
        '--api-url', default="https://exoplanethunter.com/api",
        help="Catalog API base URL (used with --live)",
    )
    parser.add_argument('--verbose', '-v', action='store_true', default=False,
                        help="Enable debug logging")

    mode = parser.add_argument_group('modes')
    mode.add_argument('--list', action='store_true', default=False,
                      help="List catalog stars with star-map positions")
    mode.add_argument('--system', type=int, metavar='STAR_ID',
                      help="Lay out the planetary system of a star")
    mode.add_argument('--point', type=float, nargs=4,
                      metavar=('LAT', 'LON', 'ALPHA', 'BETA'),
                      help="Convert device orientation at a location into RA/Dec")

    listing = parser.add_argument_group('listing')
    listing.add_argument('--search', default="", help="Case-insensitive name filter")
    listing.add_argument('--habitable-only', action='store_true', default=False,
                         help="Only systems with a habitable planet")

    scene = parser.add_argument_group('scene')
    scene.add_argument('--time', type=float, default=0.0,
                       help="Elapsed animation time in seconds (default: 0)")
    scene.add_argument('--distance-max', type=float,
                       help="Scene distance of the outermost planet (default: 200)")
    scene.add_argument('--speed', type=float,
                       help="Orbit animation speed multiplier (default: 0.3)")
    scene.add_argument('--at', help="ISO-8601 instant for --point (default: now)")
    scene.add_argument('--export-csv', help="Export planet positions to CSV (with --system)")
    scene.add_argument('--export-json', help="Export the scene snapshot to JSON (with --system)")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not (args.list or args.system is not None or args.point):
        parser.print_usage(sys.stderr)
        print("Error: choose one of --list, --system or --point", file=sys.stderr)
        sys.exit(1)

    config = _scene_config(args)

    if args.point:
        try:
            now = _parse_instant(args.at) if args.at else None
        except ValueError as e:
            print(f"Error: Invalid --at instant: {e}", file=sys.stderr)
            sys.exit(1)
        lat, lon, alpha, beta = args.point
        run_point(lat, lon, alpha, beta, now=now, config=config)
        return

    if not (args.catalog or args.live):
        print("Error: --list and --system need --catalog <file> or --live", file=sys.stderr)
        sys.exit(1)

    catalog = _open_catalog(args)
    try:
        if args.list:
            run_list(catalog, args.search, args.habitable_only, config)
        else:
            run_system(
                catalog, args.system, args.time, config,
                export_csv=args.export_csv, export_json=args.export_json,
            )
    except FileNotFoundError:
        print(f"Error: Catalog file not found: {args.catalog}", file=sys.stderr)
        sys.exit(1)
    except (LookupError, ConnectionError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
