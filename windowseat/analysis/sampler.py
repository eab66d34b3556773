"""Waypoint sampling along a great-circle route.

Two strategies serve different callers and are not expected to agree on
waypoint count:

* :func:`build_path` spaces waypoints by distance (about one per 50 km) and
  derives timestamps from an assumed constant ground speed. This is the route
  geometry used for the seat recommendation.
* :func:`sample_timeline` steps through an explicit flight duration at a
  fixed cadence (15 minutes by default). This is the sun-event timeline used
  for the flight report.
"""

import datetime
import logging
import math
from typing import Mapping

from windowseat.airports import AIRPORTS, Airport, resolve_route
from windowseat.errors import InvalidInputError
from windowseat.geo import Coordinate, distance_km, interpolate
from .types import Waypoint

logger = logging.getLogger(__name__)

DEFAULT_SPACING_KM = 50.0
DEFAULT_MIN_SEGMENTS = 5
DEFAULT_CRUISE_SPEED_KMH = 800.0
DEFAULT_INTERVAL_MIN = 15
MAX_DURATION_MINUTES = 48 * 60


def as_utc(dt: datetime.datetime) -> datetime.datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=datetime.timezone.utc)
    return dt.astimezone(datetime.timezone.utc)


def validate_duration(duration_minutes: float | None) -> None:
    if duration_minutes is None or not math.isfinite(duration_minutes) or duration_minutes <= 0:
        raise InvalidInputError("Flight duration must be a positive number of minutes")
    if duration_minutes > MAX_DURATION_MINUTES:
        raise InvalidInputError(
            f"Flight duration must not exceed {MAX_DURATION_MINUTES} minutes (48 h)"
        )


def segment_count(
    route_km: float,
    spacing_km: float = DEFAULT_SPACING_KM,
    min_segments: int = DEFAULT_MIN_SEGMENTS,
) -> int:
    return max(min_segments, math.floor(route_km / spacing_km))


def path_by_distance(
    origin: Coordinate,
    destination: Coordinate,
    departure_utc: datetime.datetime,
    spacing_km: float = DEFAULT_SPACING_KM,
    min_segments: int = DEFAULT_MIN_SEGMENTS,
    cruise_speed_kmh: float = DEFAULT_CRUISE_SPEED_KMH,
) -> tuple[Waypoint, ...]:
    if spacing_km <= 0:
        raise ValueError("Waypoint spacing must be positive")
    if min_segments < 1:
        raise ValueError("Minimum segment count must be at least 1")
    if cruise_speed_kmh <= 0:
        raise ValueError("Cruise speed must be positive")

    route_km = distance_km(origin, destination)
    if route_km == 0.0:
        raise InvalidInputError("Departure and arrival coordinates coincide")

    departure = as_utc(departure_utc)
    segments = segment_count(route_km, spacing_km, min_segments)
    flight_hours = route_km / cruise_speed_kmh

    waypoints = []
    for i in range(segments + 1):
        fraction = i / segments
        waypoints.append(
            Waypoint(
                coordinate=interpolate(origin, destination, fraction),
                time_utc=departure + datetime.timedelta(hours=fraction * flight_hours),
                progress=fraction,
            )
        )
    logger.debug(
        f"Distance path: {route_km:.1f} km, {len(waypoints)} waypoints, "
        f"{flight_hours * 60.0:.0f} min at {cruise_speed_kmh:.0f} km/h"
    )
    return tuple(waypoints)


def path_by_cadence(
    origin: Coordinate,
    destination: Coordinate,
    departure_utc: datetime.datetime,
    duration_minutes: float,
    interval_minutes: float = DEFAULT_INTERVAL_MIN,
) -> tuple[Waypoint, ...]:
    """Sample every ``interval_minutes`` from departure to arrival.

    When the cadence does not land on the arrival instant an extra arrival
    waypoint is appended with ``on_cadence=False``; it closes the path but
    is not counted in per-condition tallies.
    """
    validate_duration(duration_minutes)
    if interval_minutes <= 0:
        raise ValueError("Sampling interval must be positive")

    departure = as_utc(departure_utc)
    total = float(duration_minutes)
    steps = math.floor(total / interval_minutes)
    offsets = [(i * interval_minutes, True) for i in range(steps + 1)]
    if offsets[-1][0] < total:
        offsets.append((total, False))

    waypoints = tuple(
        Waypoint(
            coordinate=interpolate(origin, destination, offset / total),
            time_utc=departure + datetime.timedelta(minutes=offset),
            progress=offset / total,
            on_cadence=on_cadence,
        )
        for offset, on_cadence in offsets
    )
    logger.debug(f"Cadence timeline: {len(waypoints)} samples every {interval_minutes} min")
    return waypoints


def build_path(
    from_code: str,
    to_code: str,
    departure_utc: datetime.datetime,
    spacing_km: float = DEFAULT_SPACING_KM,
    min_segments: int = DEFAULT_MIN_SEGMENTS,
    cruise_speed_kmh: float = DEFAULT_CRUISE_SPEED_KMH,
    airports: Mapping[str, Airport] = AIRPORTS,
) -> tuple[Waypoint, ...]:
    origin, destination = resolve_route(from_code, to_code, airports)
    return path_by_distance(
        origin.coordinate,
        destination.coordinate,
        departure_utc,
        spacing_km=spacing_km,
        min_segments=min_segments,
        cruise_speed_kmh=cruise_speed_kmh,
    )


def sample_timeline(
    from_code: str,
    to_code: str,
    departure_utc: datetime.datetime,
    duration_minutes: float,
    interval_minutes: float = DEFAULT_INTERVAL_MIN,
    airports: Mapping[str, Airport] = AIRPORTS,
) -> tuple[Waypoint, ...]:
    origin, destination = resolve_route(from_code, to_code, airports)
    return path_by_cadence(
        origin.coordinate,
        destination.coordinate,
        departure_utc,
        duration_minutes,
        interval_minutes=interval_minutes,
    )
