# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for observer pointing astronomy (sidereal time, alt-az → RA/Dec)."""
import math
from datetime import datetime, timedelta, timezone

import pytest

from exohunter.domain.observer_astronomy import (
    GST_OFFSET_HOURS,
    GST_RATE_HOURS_PER_DAY,
    DeviceOrientation,
    ObserverState,
    azimuth_from_vectors,
    declination_deg,
    hour_angle_deg,
    local_sidereal_time_hours,
    observer_state,
    orientation_to_horizontal,
    pointing_coordinate,
    pointing_direction,
    right_ascension_hours,
)


_NEW_YEAR = datetime(2026, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


# ── Local sidereal time ───────────────────────────────────────────

class TestLocalSiderealTime:

    def test_start_of_year_at_greenwich(self):
        assert local_sidereal_time_hours(0.0, _NEW_YEAR) == pytest.approx(GST_OFFSET_HOURS)

    def test_one_day_later(self):
        lst = local_sidereal_time_hours(0.0, _NEW_YEAR + timedelta(days=1))
        expected = (GST_OFFSET_HOURS + GST_RATE_HOURS_PER_DAY) % 24
        assert lst == pytest.approx(expected)

    def test_whole_days_only(self):
        """Elapsed time is floored to whole days since 1 January."""
        morning = local_sidereal_time_hours(10.0, _NEW_YEAR + timedelta(days=40, hours=1))
        evening = local_sidereal_time_hours(10.0, _NEW_YEAR + timedelta(days=40, hours=23))
        assert morning == evening

    def test_longitude_shift(self):
        """15° of east longitude adds one hour."""
        at_0 = local_sidereal_time_hours(0.0, _NEW_YEAR)
        at_15 = local_sidereal_time_hours(15.0, _NEW_YEAR)
        assert (at_15 - at_0) % 24 == pytest.approx(1.0)

    def test_range(self):
        for lon in [-180.0, -75.5, 0.0, 18.07, 179.9]:
            for day in [0, 17, 100, 250, 364]:
                lst = local_sidereal_time_hours(lon, _NEW_YEAR + timedelta(days=day, hours=5))
                assert 0.0 <= lst < 24.0

    def test_naive_treated_as_utc(self):
        naive = datetime(2026, 6, 15, 12, 0, 0)
        aware = naive.replace(tzinfo=timezone.utc)
        assert local_sidereal_time_hours(20.0, naive) == local_sidereal_time_hours(20.0, aware)

    def test_other_timezone_converted_to_utc(self):
        """00:30 on 2 Jan at UTC+2 is still 1 January in UTC."""
        plus_two = timezone(timedelta(hours=2))
        local = datetime(2026, 1, 2, 0, 30, 0, tzinfo=plus_two)
        assert local_sidereal_time_hours(0.0, local) == pytest.approx(GST_OFFSET_HOURS)

    def test_stable_within_same_second(self):
        now = _NEW_YEAR + timedelta(days=3, hours=5, minutes=12)
        first = local_sidereal_time_hours(18.07, now)
        second = local_sidereal_time_hours(18.07, now + timedelta(milliseconds=300))
        assert first == pytest.approx(second, abs=1e-3)

    def test_defaults_to_current_time(self):
        lst = local_sidereal_time_hours(18.07)
        assert 0.0 <= lst < 24.0


# ── Horizontal → equatorial ───────────────────────────────────────

class TestHourAngle:

    def test_due_west_on_equator_horizon(self):
        """Azimuth 90° from south (west) on the equator horizon → H = 90°."""
        assert hour_angle_deg(0.0, 0.0, 90.0) == pytest.approx(90.0)

    def test_south_meridian(self):
        assert hour_angle_deg(45.0, 0.0, 0.0) == pytest.approx(0.0, abs=1e-9)

    def test_zenith_on_meridian(self):
        assert hour_angle_deg(52.0, 90.0, 123.0) == pytest.approx(0.0, abs=1e-6)

    def test_range(self):
        for az in range(0, 360, 30):
            h = hour_angle_deg(40.0, 30.0, float(az))
            assert -180.0 <= h <= 180.0


class TestDeclination:

    def test_zenith_equals_latitude(self):
        """alt = 90° ⇒ dec = lat."""
        for lat in [-89.0, -33.9, 0.0, 18.5, 59.33, 89.0]:
            assert declination_deg(lat, 90.0, 0.0) == pytest.approx(lat)

    def test_zenith_at_equator(self):
        assert declination_deg(0.0, 90.0, 0.0) == pytest.approx(0.0, abs=1e-12)

    def test_equator_south_horizon_is_south_pole(self):
        assert declination_deg(0.0, 0.0, 0.0) == pytest.approx(-90.0)

    def test_equator_north_horizon_is_north_pole(self):
        assert declination_deg(0.0, 0.0, 180.0) == pytest.approx(90.0)

    def test_range(self):
        for lat in [-60.0, 0.0, 45.0]:
            for alt in [-10.0, 0.0, 45.0, 90.0]:
                for az in [0.0, 90.0, 200.0]:
                    assert -90.0 <= declination_deg(lat, alt, az) <= 90.0


class TestRightAscension:

    def test_combines_lst_and_hour_angle(self):
        now = _NEW_YEAR + timedelta(days=75)
        lst = local_sidereal_time_hours(18.07, now)
        h = hour_angle_deg(59.33, 40.0, 120.0)
        expected = ((lst * 15 + h) / 15) % 24
        assert right_ascension_hours(18.07, 59.33, 40.0, 120.0, now) == pytest.approx(expected)

    def test_range(self):
        now = _NEW_YEAR + timedelta(days=200)
        for lon in [-120.0, 0.0, 150.0]:
            for az in [0.0, 90.0, 270.0]:
                ra = right_ascension_hours(lon, 30.0, 20.0, az, now)
                assert 0.0 <= ra < 24.0


# ── Device sensors ────────────────────────────────────────────────

class TestAzimuthFromVectors:

    def test_same_direction_zero(self):
        assert azimuth_from_vectors((1.0, 0.0, 0.0), (0.0, 0.0, 1.0)) == pytest.approx(0.0)

    def test_quarter_turn(self):
        assert azimuth_from_vectors((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == pytest.approx(90.0)

    def test_opposite(self):
        assert azimuth_from_vectors((1.0, 0.0, 0.0), (0.0, 0.0, -1.0)) == pytest.approx(180.0)

    def test_range(self):
        az = azimuth_from_vectors((0.3, -9.7, 1.1), (22.0, 5.0, -40.0))
        assert 0.0 <= az < 360.0

    def test_gravity_parallel_to_up_is_nan(self):
        assert math.isnan(azimuth_from_vectors((0.0, 0.0, 9.81), (1.0, 0.0, 0.0)))


class TestOrientation:

    def test_negative_alpha_wrapped(self):
        az, _ = orientation_to_horizontal(DeviceOrientation(-90.0, 0.0))
        assert az == pytest.approx(270.0)

    def test_beta_shifted_to_altitude(self):
        _, alt = orientation_to_horizontal(DeviceOrientation(10.0, -90.0))
        assert alt == pytest.approx(0.0)

    def test_observer_state_fields(self):
        obs = observer_state(59.33, 18.07, DeviceOrientation(400.0, 0.0, 5.0))
        assert obs == ObserverState(
            latitude_deg=59.33, longitude_deg=18.07,
            azimuth_deg=40.0, altitude_deg=90.0,
        )

    def test_observer_state_frozen(self):
        obs = ObserverState(0.0, 0.0, 0.0, 0.0)
        with pytest.raises(AttributeError):
            obs.azimuth_deg = 1.0


class TestPointing:

    def test_coordinate_matches_components(self):
        now = _NEW_YEAR + timedelta(days=10)
        obs = ObserverState(latitude_deg=48.0, longitude_deg=2.35, azimuth_deg=75.0, altitude_deg=35.0)
        coord = pointing_coordinate(obs, now)
        assert coord.declination_deg == pytest.approx(declination_deg(48.0, 35.0, 75.0))
        assert coord.right_ascension_hours == pytest.approx(
            right_ascension_hours(2.35, 48.0, 35.0, 75.0, now)
        )

    def test_direction_on_star_map_sphere(self):
        now = _NEW_YEAR + timedelta(days=10)
        obs = ObserverState(latitude_deg=-33.9, longitude_deg=151.2, azimuth_deg=10.0, altitude_deg=60.0)
        p = pointing_direction(obs, 40.0, now)
        assert math.sqrt(p.x ** 2 + p.y ** 2 + p.z ** 2) == pytest.approx(40.0)

    def test_zenith_pointing_declination_is_latitude(self):
        obs = ObserverState(latitude_deg=59.33, longitude_deg=18.07, azimuth_deg=0.0, altitude_deg=90.0)
        coord = pointing_coordinate(obs, _NEW_YEAR)
        assert coord.declination_deg == pytest.approx(59.33)
