# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Observer pointing astronomy.

Turns a device's geographic position and alt-az orientation into the
equatorial direction (RA/Dec) it is pointing at, so the scene camera can
look at the same patch of sky.

Simplified formulas throughout: a linear sidereal-time approximation
anchored on whole days since the start of the UTC year, and no
precession, nutation, refraction or magnetic declination. Azimuth is
measured from south (Meeus convention) in the hour-angle formulas.

No external dependencies — only stdlib math/dataclasses/datetime and numpy.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone

import numpy as np

from .celestial_projection import EquatorialCoordinate, ra_dec_to_xyz
from .orbit_geometry import CartesianPosition

GST_OFFSET_HOURS: float = 18.697374558
GST_RATE_HOURS_PER_DAY: float = 24.06570982441908

_UP = np.array([0.0, 0.0, 1.0])


@dataclass(frozen=True)
class ObserverState:
    """Observer location and the horizontal direction the device faces."""
    latitude_deg: float
    longitude_deg: float
    azimuth_deg: float
    altitude_deg: float


@dataclass(frozen=True)
class DeviceOrientation:
    """Raw orientation sample: compass heading, pitch and roll (degrees)."""
    alpha_deg: float
    beta_deg: float
    gamma_deg: float = 0.0


def _as_utc(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (treat naive as UTC)."""
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _wrap_hours(hours: float) -> float:
    wrapped = hours % 24.0
    return 0.0 if wrapped == 24.0 else wrapped


def local_sidereal_time_hours(longitude_deg: float, now: datetime | None = None) -> float:
    """
    Approximate local sidereal time.

    GST = 18.697374558 + 24.06570982441908 · D, where D is the number of
    whole days elapsed since 00:00 UTC on 1 January of the current year;
    LST = GST + longitude / 15, wrapped into [0, 24).

    Args:
        longitude_deg: Observer longitude, east positive (degrees).
        now: Instant to evaluate at (default: current UTC time).

    Returns:
        Local sidereal time in hours, [0, 24).
    """
    now = _as_utc(now) if now is not None else datetime.now(tz=timezone.utc)
    now_utc = now.astimezone(timezone.utc)
    start_of_year = datetime(now_utc.year, 1, 1, tzinfo=timezone.utc)
    days = math.floor((now_utc - start_of_year).total_seconds() / 86400.0)

    gst = GST_OFFSET_HOURS + GST_RATE_HOURS_PER_DAY * days
    return _wrap_hours(gst + longitude_deg / 15.0)


def hour_angle_deg(latitude_deg: float, altitude_deg: float, azimuth_deg: float) -> float:
    """Hour angle (degrees) of a horizontal direction."""
    lat = float(np.radians(latitude_deg))
    alt = float(np.radians(altitude_deg))
    az = float(np.radians(azimuth_deg))
    return float(np.degrees(np.arctan2(
        np.sin(az),
        np.cos(az) * np.sin(lat) + np.tan(alt) * np.cos(lat),
    )))


def declination_deg(latitude_deg: float, altitude_deg: float, azimuth_deg: float) -> float:
    """Declination (degrees, [-90, 90]) of a horizontal direction."""
    lat = float(np.radians(latitude_deg))
    alt = float(np.radians(altitude_deg))
    az = float(np.radians(azimuth_deg))
    return float(np.degrees(np.arcsin(
        np.sin(lat) * np.sin(alt) - np.cos(lat) * np.cos(alt) * np.cos(az)
    )))


def right_ascension_hours(
    longitude_deg: float,
    latitude_deg: float,
    altitude_deg: float,
    azimuth_deg: float,
    now: datetime | None = None,
) -> float:
    """Right ascension (hours, [0, 24)) of a horizontal direction: (LST·15 + H) / 15."""
    lst = local_sidereal_time_hours(longitude_deg, now)
    h = hour_angle_deg(latitude_deg, altitude_deg, azimuth_deg)
    return _wrap_hours((lst * 15.0 + h) / 15.0)


def azimuth_from_vectors(
    gravity: tuple[float, float, float],
    reading: tuple[float, float, float],
) -> float:
    """
    Relative azimuth (degrees, [0, 360)) from a gravity/sensor vector pair.

    Angle between g × (0, 0, 1) and g × reading. Needs no magnetic-north
    calibration, so it is only a relative heading. Degenerate inputs
    (gravity parallel to up or to the reading) give NaN.
    """
    g = np.asarray(gravity, dtype=float)
    ref = np.cross(g, _UP)
    obs = np.cross(g, np.asarray(reading, dtype=float))

    norm_product = float(np.linalg.norm(ref) * np.linalg.norm(obs))
    if norm_product == 0.0:
        return math.nan

    cos_angle = float(np.clip(np.dot(ref, obs) / norm_product, -1.0, 1.0))
    return float(np.degrees(np.arccos(cos_angle))) % 360.0


def orientation_to_horizontal(orientation: DeviceOrientation) -> tuple[float, float]:
    """
    (azimuth_deg, altitude_deg) from a device orientation sample.

    Azimuth is the compass heading alpha wrapped into [0, 360); altitude
    maps pitch beta from [-90, 90] onto [0, 180].
    """
    azimuth = (orientation.alpha_deg + 360.0) % 360.0
    altitude = orientation.beta_deg + 90.0
    return azimuth, altitude


def observer_state(
    latitude_deg: float,
    longitude_deg: float,
    orientation: DeviceOrientation,
) -> ObserverState:
    azimuth, altitude = orientation_to_horizontal(orientation)
    return ObserverState(
        latitude_deg=latitude_deg,
        longitude_deg=longitude_deg,
        azimuth_deg=azimuth,
        altitude_deg=altitude,
    )


def pointing_coordinate(observer: ObserverState, now: datetime | None = None) -> EquatorialCoordinate:
    """Equatorial coordinate the observer's device is pointing at."""
    return EquatorialCoordinate(
        right_ascension_hours=right_ascension_hours(
            observer.longitude_deg,
            observer.latitude_deg,
            observer.altitude_deg,
            observer.azimuth_deg,
            now,
        ),
        declination_deg=declination_deg(
            observer.latitude_deg,
            observer.altitude_deg,
            observer.azimuth_deg,
        ),
    )


def pointing_direction(
    observer: ObserverState,
    radius: float,
    now: datetime | None = None,
) -> CartesianPosition:
    """Scene position on a sphere of the given radius in the pointing direction."""
    coord = pointing_coordinate(observer, now)
    return ra_dec_to_xyz(coord.right_ascension_hours, coord.declination_deg, radius)
