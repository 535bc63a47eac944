#!/usr/bin/env python3
"""System scene example: star map, system layout, and device pointing.

Loads the bundled catalog snapshot, places its stars on the overview
sphere, animates the TRAPPIST-1 system for a few frames, and shows which
sky direction a phone held up in Stockholm is pointing at.

Usage:
    python examples/system_scene.py
"""
from datetime import datetime, timezone
from pathlib import Path

from exohunter import (
    DeviceOrientation,
    filter_stars,
    format_quantity,
    layout_system,
    planet_positions,
    pointing_coordinate,
    star_map_position,
)
from exohunter.adapters.json_catalog import JsonCatalogAdapter
from exohunter.domain.catalog import habitable_star_names
from exohunter.domain.observer_astronomy import observer_state

SNAPSHOT = Path(__file__).resolve().parent / "catalog_snapshot.json"


def main():
    catalog = JsonCatalogAdapter(str(SNAPSHOT))

    # --- Step 1: Star map ---
    habitable = habitable_star_names(catalog.fetch_habitable_planets())
    print("Habitable systems on the star map:")
    for star in filter_stars(catalog.fetch_stars(), habitable_only=True, habitable_names=habitable):
        p = star_map_position(star)
        print(f"  {star.name:<12} ({p.x:7.2f}, {p.y:7.2f}, {p.z:7.2f})")

    # --- Step 2: System layout and animation frames ---
    layout = layout_system(catalog.fetch_system(2))
    print(f"\n{layout.name}: star radius {format_quantity(layout.star_radius)} units")
    for t in (0.0, 10.0, 20.0):
        print(f"  t = {t:4.1f} s")
        for pos in planet_positions(layout, t):
            print(f"    {pos.name:<14} angle {format_quantity(pos.angle_rad, 'rad'):>12}")

    # --- Step 3: Where is the phone pointing? ---
    observer = observer_state(59.33, 18.07, DeviceOrientation(alpha_deg=180.0, beta_deg=-45.0))
    coord = pointing_coordinate(observer, datetime(2026, 3, 20, 21, 0, tzinfo=timezone.utc))
    print(f"\nPointing at RA {format_quantity(coord.right_ascension_hours, 'h')},"
          f" Dec {format_quantity(coord.declination_deg, 'deg')}")


if __name__ == "__main__":
    main()
