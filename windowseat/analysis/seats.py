"""Seat-side decision rule.

The passenger looks across the cabin, so the recommended window is on the
side *opposite* the sun's position relative to the nose: a sun clockwise of
the heading (relative bearing 0..180°) means sitting on the LEFT and looking
right, anything else means the RIGHT.
"""

import logging
from typing import Sequence

from windowseat.errors import InsufficientPathError
from windowseat.geo import (
    SUNRISE_BEARING,
    SUNSET_BEARING,
    Bearing,
    Coordinate,
    initial_bearing,
)
from .types import (
    FlightSunReport,
    SeatRecommendation,
    SeatSide,
    SideVisibility,
    SolarSample,
    Waypoint,
)

logger = logging.getLogger(__name__)

MIN_VISIBLE_ELEVATION_DEG = 0.0
MAX_VISIBLE_ELEVATION_DEG = 80.0
NO_SUN_MESSAGE = "No optimal window seat - sun will not be visible during flight"


def flight_bearing(origin: Coordinate, destination: Coordinate) -> Bearing:
    return initial_bearing(origin, destination)


def side_for_relative_bearing(relative_deg: float) -> SeatSide:
    if 0.0 <= relative_deg <= 180.0:
        return SeatSide.LEFT
    return SeatSide.RIGHT


def is_visible(sample: SolarSample) -> bool:
    return MIN_VISIBLE_ELEVATION_DEG < sample.elevation_deg < MAX_VISIBLE_ELEVATION_DEG


def recommend_seat(
    samples: Sequence[SolarSample],
    path: Sequence[Waypoint] | None = None,
) -> SeatRecommendation:
    """Pick the window side facing the sun while it is low enough to see.

    ``path`` defaults to the waypoints carried by ``samples``. The heading is
    the initial great-circle bearing from the first to the last waypoint, and
    the sun direction is the arithmetic mean of the visible azimuths.
    """
    visible = [s for s in samples if is_visible(s)]
    if not visible:
        logger.info("Sun never between horizon and 80° elevation; no seat preference")
        return SeatRecommendation(side=None, message=NO_SUN_MESSAGE)

    if path is None:
        path = [s.waypoint for s in samples]
    if len(path) < 2:
        raise InsufficientPathError("Unable to determine flight direction from fewer than 2 waypoints")

    heading = flight_bearing(path[0].coordinate, path[-1].coordinate)
    mean_azimuth = Bearing.from_north(
        sum(s.azimuth.degrees for s in visible) / len(visible)
    )
    relative = mean_azimuth.relative_to(heading)
    side = side_for_relative_bearing(relative)

    logger.debug(
        f"Heading {heading.degrees:.1f}°, mean sun azimuth {mean_azimuth.degrees:.1f}° "
        f"over {len(visible)} samples, relative {relative:.1f}° -> {side.value}"
    )
    return SeatRecommendation(
        side=side,
        message=f"Sit on the {side.value} side",
        flight_bearing=heading,
        mean_azimuth=mean_azimuth,
        relative_bearing_deg=relative,
        visible_samples=len(visible),
    )


def recommend_for_event(
    origin: Coordinate,
    destination: Coordinate,
    is_sunrise: bool,
) -> SeatSide:
    sun = SUNRISE_BEARING if is_sunrise else SUNSET_BEARING
    return side_for_relative_bearing(sun.relative_to(flight_bearing(origin, destination)))


def side_specific_visibility(
    origin: Coordinate,
    destination: Coordinate,
    side: SeatSide,
    report: FlightSunReport,
) -> SideVisibility:
    sunrise = report.will_see_sunrise and recommend_for_event(origin, destination, True) == side
    sunset = report.will_see_sunset and recommend_for_event(origin, destination, False) == side
    night = report.will_see_night or (report.will_see_sunrise and report.will_see_sunset)
    return SideVisibility(sunrise=sunrise, sunset=sunset, night=night)
