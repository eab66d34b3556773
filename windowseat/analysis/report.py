import dataclasses
import logging
from typing import Iterable, Sequence

from windowseat.geo import Coordinate
from windowseat.util.format import format_clock, minutes_to_hours
from .seats import recommend_for_event, side_specific_visibility
from .types import EventDetection, FlightSunReport, SeatSide, SolarSample

logger = logging.getLogger(__name__)

NIGHT_ESTIMATE_FRACTION = 0.25
FALLBACK_SUMMARY = "Flight analysis requires duration parameter"


def _seat_label(side: SeatSide) -> str:
    return "RIGHT (E, F)" if side == SeatSide.RIGHT else "LEFT (A, B)"


def _night_minutes(
    detection: EventDetection,
    duration_minutes: float,
) -> tuple[float, str]:
    """Night duration for a flight that crossed both a sunrise and a sunset.

    Measured below-horizon time wins, then the sunset-to-sunrise gap, and only
    then a fixed share of the flight.
    """
    if detection.below_horizon_minutes > 0:
        return detection.below_horizon_minutes, "below_horizon"
    if detection.sunrise is not None and detection.sunset is not None:
        gap = (detection.sunrise.time_utc - detection.sunset.time_utc).total_seconds() / 60.0
        if gap > 0:
            return gap, "events"
    return duration_minutes * NIGHT_ESTIMATE_FRACTION, "estimate"


def build_report(
    detection: EventDetection,
    timeline: Sequence[SolarSample],
    origin: Coordinate,
    destination: Coordinate,
    duration_minutes: float,
    mountains: Iterable[str] = (),
) -> FlightSunReport:
    """Turn event detection over a flight timeline into the passenger report.

    Conditions come from whichever classifier built ``timeline``. The default
    is the elevation classifier rather than fixed clock-time buckets; the
    clock buckets are opt-in through ``analysis.classifier = "clock"``.
    """
    saw_sunrise = detection.sunrise is not None
    saw_sunset = detection.sunset is not None
    will_see_night = detection.saw_night
    night_minutes = detection.night_minutes
    night_source = "samples"

    summary: list[str] = []
    recommendations: list[str] = []
    seat = SeatSide.EITHER

    if saw_sunrise and saw_sunset:
        if not will_see_night:
            # A sunrise and a sunset on one flight imply a night between them.
            will_see_night = True
            night_minutes, night_source = _night_minutes(detection, duration_minutes)
            logger.info(f"Night inferred from events: {night_minutes:.0f} min ({night_source})")
        summary.append("You'll see BOTH sunrise AND sunset during this flight!")
        summary.append(f"Sunrise at {format_clock(detection.sunrise.time_utc)}")
        summary.append(f"Sunset at {format_clock(detection.sunset.time_utc)}")
        recommendations.append(
            "This is a rare treat! You'll experience the full sun cycle during your journey."
        )
    elif saw_sunrise:
        seat = recommend_for_event(origin, destination, is_sunrise=True)
        summary.append(
            f"You WILL see a beautiful sunrise at {format_clock(detection.sunrise.time_utc)}!"
        )
        recommendations.append(
            f"Choose a window seat on the {_seat_label(seat)} side for the best sunrise views."
        )
    elif saw_sunset:
        seat = recommend_for_event(origin, destination, is_sunrise=False)
        summary.append(
            f"You WILL see a stunning sunset at {format_clock(detection.sunset.time_utc)}!"
        )
        recommendations.append(
            f"Choose a window seat on the {_seat_label(seat)} side for the best sunset views."
        )

    if will_see_night:
        summary.append(
            f"You'll experience {minutes_to_hours(night_minutes)} hours of night flying"
            " - perfect for stargazing!"
        )
        recommendations.append(
            "Great opportunity for night photography and seeing city lights from above."
        )

    if detection.saw_golden_hour:
        summary.append(
            f"You'll enjoy {minutes_to_hours(detection.golden_hour_minutes)} hours"
            " of golden hour lighting!"
        )

    if not saw_sunrise and not saw_sunset and not will_see_night:
        summary.append("This will be a bright daylight flight with excellent visibility.")
        recommendations.append("Perfect for scenic landscape viewing and aerial photography.")

    if saw_sunrise or saw_sunset:
        recommendations.append("Bring a camera - the views will be spectacular!")
        recommendations.append(
            "Consider booking an earlier check-in to secure your preferred window seat."
        )

    mountain_names = tuple(mountains)
    if mountain_names:
        summary.append(
            f"{len(mountain_names)} notable peak(s) within view: {', '.join(mountain_names)}"
        )

    report = FlightSunReport(
        will_see_sunrise=saw_sunrise,
        will_see_sunset=saw_sunset,
        will_see_night=will_see_night,
        will_see_golden_hour=detection.saw_golden_hour,
        seat_suggestion=seat,
        summary=tuple(summary),
        recommendations=tuple(recommendations),
        sunrise=detection.sunrise,
        sunset=detection.sunset,
        night_minutes=night_minutes,
        day_minutes=detection.day_minutes,
        golden_hour_minutes=detection.golden_hour_minutes,
        night_minutes_source=night_source,
        timeline=tuple(timeline),
        mountains=mountain_names,
    )
    report = dataclasses.replace(
        report,
        left_views=side_specific_visibility(origin, destination, SeatSide.LEFT, report),
        right_views=side_specific_visibility(origin, destination, SeatSide.RIGHT, report),
    )
    logger.info(
        f"Report: sunrise={saw_sunrise} sunset={saw_sunset} night={will_see_night} "
        f"seat={seat.value}"
    )
    return report


def fallback_report() -> FlightSunReport:
    """Degraded report returned when no flight duration is known."""
    return FlightSunReport(
        will_see_sunrise=False,
        will_see_sunset=False,
        will_see_night=False,
        will_see_golden_hour=False,
        seat_suggestion=SeatSide.EITHER,
        summary=(FALLBACK_SUMMARY,),
    )
