import datetime

import pytest

from windowseat.airports import get_airport
from windowseat.analysis.sampler import (
    MAX_DURATION_MINUTES,
    build_path,
    path_by_cadence,
    path_by_distance,
    sample_timeline,
    segment_count,
)
from windowseat.errors import AirportNotFoundError, InvalidInputError
from windowseat.geo import Coordinate, distance_km

UTC = datetime.timezone.utc


def _assert_monotonic(path):
    times = [w.time_utc for w in path]
    progress = [w.progress for w in path]
    assert all(a < b for a, b in zip(times, times[1:]))
    assert all(a < b for a, b in zip(progress, progress[1:]))
    assert progress[0] == 0.0
    assert progress[-1] == 1.0


def test_segment_count_has_a_floor():
    assert segment_count(10.0) == 5
    assert segment_count(249.9) == 5
    assert segment_count(300.0) == 6
    assert segment_count(1000.0, spacing_km=100.0, min_segments=3) == 10


def test_del_jai_path_shape(departure):
    path = build_path("DEL", "JAI", departure)
    assert len(path) == 6
    assert path[0].coordinate == get_airport("DEL").coordinate
    assert path[-1].coordinate == get_airport("JAI").coordinate
    _assert_monotonic(path)


def test_path_times_use_cruise_speed(departure):
    path = build_path("DEL", "JAI", departure)
    route_km = distance_km(get_airport("DEL").coordinate, get_airport("JAI").coordinate)
    expected = departure + datetime.timedelta(hours=route_km / 800.0)
    assert path[0].time_utc == departure
    assert abs((path[-1].time_utc - expected).total_seconds()) < 1e-3


def test_long_route_scales_with_distance(departure):
    path = build_path("DEL", "LHR", departure)
    route_km = distance_km(get_airport("DEL").coordinate, get_airport("LHR").coordinate)
    assert len(path) == segment_count(route_km) + 1
    assert len(path) > 100
    _assert_monotonic(path)


def test_spacing_is_configurable(departure):
    coarse = build_path("DEL", "JAI", departure)
    fine = build_path("DEL", "JAI", departure, spacing_km=10.0)
    assert len(fine) > len(coarse)
    _assert_monotonic(fine)


def test_naive_departure_is_utc():
    path = build_path("DEL", "JAI", datetime.datetime(2025, 8, 1, 18, 0))
    assert path[0].time_utc == datetime.datetime(2025, 8, 1, 18, 0, tzinfo=UTC)


def test_identical_codes_rejected(departure):
    with pytest.raises(InvalidInputError):
        build_path("DEL", "DEL", departure)


def test_unknown_code_rejected(departure):
    with pytest.raises(AirportNotFoundError) as excinfo:
        build_path("ZZZ", "DEL", departure)
    assert "ZZZ" in str(excinfo.value)


def test_coincident_coordinates_rejected(departure):
    point = Coordinate(10.0, 10.0)
    with pytest.raises(InvalidInputError):
        path_by_distance(point, point, departure)


def test_invalid_speed_rejected(departure):
    with pytest.raises(ValueError):
        path_by_distance(Coordinate(0.0, 0.0), Coordinate(1.0, 1.0), departure, cruise_speed_kmh=0.0)


def test_cadence_on_exact_multiple(departure):
    timeline = sample_timeline("DEL", "JAI", departure, 60)
    offsets = [(w.time_utc - departure).total_seconds() / 60.0 for w in timeline]
    assert offsets == [0.0, 15.0, 30.0, 45.0, 60.0]
    assert all(w.on_cadence for w in timeline)
    _assert_monotonic(timeline)


def test_cadence_appends_arrival_sample(departure):
    timeline = sample_timeline("DEL", "JAI", departure, 50)
    offsets = [(w.time_utc - departure).total_seconds() / 60.0 for w in timeline]
    assert offsets == [0.0, 15.0, 30.0, 45.0, 50.0]
    assert timeline[-1].coordinate == get_airport("JAI").coordinate
    assert [w.on_cadence for w in timeline] == [True, True, True, True, False]
    _assert_monotonic(timeline)


def test_short_flight_still_has_both_ends(departure):
    timeline = sample_timeline("DEL", "JAI", departure, 10)
    assert len(timeline) == 2
    assert timeline[0].coordinate == get_airport("DEL").coordinate
    assert timeline[-1].coordinate == get_airport("JAI").coordinate


def test_cadence_interval_is_configurable(departure):
    timeline = sample_timeline("DEL", "JAI", departure, 60, interval_minutes=10)
    assert len(timeline) == 7


@pytest.mark.parametrize("duration", [0, -15])
def test_non_positive_duration_rejected(departure, duration):
    with pytest.raises(InvalidInputError):
        path_by_cadence(Coordinate(0.0, 0.0), Coordinate(1.0, 1.0), departure, duration)


@pytest.mark.parametrize("duration", [float("inf"), float("nan"), 1e12, MAX_DURATION_MINUTES + 1])
def test_unbounded_duration_rejected(departure, duration):
    with pytest.raises(InvalidInputError):
        path_by_cadence(Coordinate(0.0, 0.0), Coordinate(1.0, 1.0), departure, duration)


def test_longest_allowed_duration_is_accepted(departure):
    timeline = path_by_cadence(
        Coordinate(0.0, 0.0), Coordinate(1.0, 1.0), departure, MAX_DURATION_MINUTES
    )
    assert len(timeline) == MAX_DURATION_MINUTES // 15 + 1
