import datetime

import pytest

from windowseat.config import Config
from windowseat.solar import (
    AstropySolarEngine,
    BuiltinSolarEngine,
    get_solar_engine,
)
from windowseat.solar.ephemeris import J2000_JD, greenwich_sidereal_deg, julian_date

UTC = datetime.timezone.utc


def _angle_from_north(az):
    return min(az, 360.0 - az)


def test_julian_date_at_j2000():
    assert julian_date(datetime.datetime(2000, 1, 1, 12, 0, tzinfo=UTC)) == pytest.approx(J2000_JD)


def test_julian_date_naive_is_utc():
    naive = datetime.datetime(2025, 8, 1, 18, 0)
    aware = naive.replace(tzinfo=UTC)
    assert julian_date(naive) == julian_date(aware)


def test_julian_date_converts_offsets():
    ist = datetime.timezone(datetime.timedelta(hours=5, minutes=30))
    local = datetime.datetime(2025, 8, 1, 23, 30, tzinfo=ist)
    assert julian_date(local) == pytest.approx(
        julian_date(datetime.datetime(2025, 8, 1, 18, 0, tzinfo=UTC))
    )


def test_gmst_at_j2000():
    assert greenwich_sidereal_deg(J2000_JD) == pytest.approx(280.46061837)


def test_equinox_noon_on_equator_is_near_zenith():
    engine = BuiltinSolarEngine()
    pos = engine.position(datetime.datetime(2025, 3, 20, 12, 0, tzinfo=UTC), 0.0, 0.0)
    assert pos.elevation_deg > 85.0


def test_equinox_midnight_on_equator_is_deep_below_horizon():
    engine = BuiltinSolarEngine()
    pos = engine.position(datetime.datetime(2025, 3, 20, 0, 0, tzinfo=UTC), 0.0, 0.0)
    assert pos.elevation_deg < -80.0


def test_delhi_morning_sun_is_low_in_the_east():
    engine = BuiltinSolarEngine()
    # 06:00 IST, shortly after sunrise
    pos = engine.position(datetime.datetime(2025, 6, 21, 0, 30, tzinfo=UTC), 28.5562, 77.1000)
    assert 0.0 < pos.elevation_deg < 20.0
    assert 45.0 < pos.azimuth.degrees < 90.0


def test_delhi_evening_sun_is_low_in_the_west():
    engine = BuiltinSolarEngine()
    # 19:00 IST, shortly before sunset
    pos = engine.position(datetime.datetime(2025, 6, 21, 13, 30, tzinfo=UTC), 28.5562, 77.1000)
    assert 0.0 < pos.elevation_deg < 15.0
    assert 270.0 < pos.azimuth.degrees < 310.0


def test_southern_winter_noon_sun_is_north():
    engine = BuiltinSolarEngine()
    # Sydney, 12:00 AEST at the June solstice
    pos = engine.position(datetime.datetime(2025, 6, 21, 2, 0, tzinfo=UTC), -33.9399, 151.1753)
    assert _angle_from_north(pos.azimuth.degrees) < 20.0
    assert 25.0 < pos.elevation_deg < 40.0


def test_positions_follow_waypoint_order(departure):
    from windowseat.analysis.sampler import build_path

    engine = BuiltinSolarEngine()
    path = build_path("DEL", "JAI", departure)
    positions = engine.positions(path)
    assert len(positions) == len(path)
    for waypoint, pos in zip(path, positions):
        single = engine.position(waypoint.time_utc, waypoint.latitude_deg, waypoint.longitude_deg)
        assert pos == single


def test_builtin_is_available():
    assert BuiltinSolarEngine().is_available()["ok"] is True


def test_get_solar_engine_default_is_builtin():
    assert isinstance(get_solar_engine(), BuiltinSolarEngine)
    assert isinstance(get_solar_engine(Config({})), BuiltinSolarEngine)


def test_get_solar_engine_astropy():
    engine = get_solar_engine(Config({"solar": {"backend": "astropy"}}))
    assert isinstance(engine, AstropySolarEngine)


def test_get_solar_engine_unknown_backend():
    with pytest.raises(ValueError):
        get_solar_engine(Config({"solar": {"backend": "sundial"}}))
