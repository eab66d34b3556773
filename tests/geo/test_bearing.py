import pytest

from windowseat.geo import SUNRISE_BEARING, SUNSET_BEARING, Bearing, normalize_degrees


def test_normalize_wraps_into_range():
    assert normalize_degrees(360.0) == 0.0
    assert normalize_degrees(-90.0) == 270.0
    assert normalize_degrees(725.0) == pytest.approx(5.0)


def test_normalize_tiny_negative_stays_below_360():
    value = normalize_degrees(-1e-15)
    assert 0.0 <= value < 360.0


def test_bearing_is_normalized_on_construction():
    assert Bearing(-10.0).degrees == pytest.approx(350.0)
    assert Bearing(370.0).degrees == pytest.approx(10.0)


def test_astronomical_south_is_north():
    assert Bearing.from_astronomical(0.0).degrees == 180.0
    assert Bearing.from_astronomical(180.0).degrees == 0.0
    assert Bearing.from_astronomical(-90.0).degrees == 90.0


def test_astronomical_round_trip():
    for az in (0.0, 45.0, 179.9, 180.0, 270.0):
        assert Bearing.from_astronomical(az).to_astronomical() == pytest.approx(az)


def test_relative_to_wraps_through_north():
    assert Bearing(10.0).relative_to(Bearing(350.0)) == pytest.approx(20.0)
    assert Bearing(350.0).relative_to(Bearing(10.0)) == pytest.approx(340.0)


def test_reversed():
    assert Bearing(30.0).reversed().degrees == pytest.approx(210.0)


def test_event_bearings():
    assert SUNRISE_BEARING.degrees == 90.0
    assert SUNSET_BEARING.degrees == 270.0
