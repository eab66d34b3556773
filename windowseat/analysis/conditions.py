"""Sun-visibility classification and sunrise/sunset detection.

Two classification strategies share the :class:`SunConditionClassifier`
interface:

* ``elevation``: buckets the solar elevation (night / twilight / golden hour /
  daylight). Geometry-accurate.
* ``clock``: fixed minute-of-day buckets (golden hour before sunrise, sunrise,
  daylight, golden hour before sunset, sunset, night). Coarse but stable.

Event detection always works on elevation, whichever strategy labelled the
samples.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import datetime
import logging
from typing import Sequence

from .types import EventDetection, SolarSample, SunCondition, SunEvent, Waypoint

logger = logging.getLogger(__name__)

TWILIGHT_MAX_DEG = 6.0
GOLDEN_HOUR_MAX_DEG = 10.0


def classify(elevation_deg: float) -> SunCondition:
    if elevation_deg < 0.0:
        return SunCondition.NIGHT
    if elevation_deg < TWILIGHT_MAX_DEG:
        return SunCondition.TWILIGHT
    if elevation_deg < GOLDEN_HOUR_MAX_DEG:
        return SunCondition.GOLDEN_HOUR
    return SunCondition.DAYLIGHT


@dataclass(frozen=True)
class ClockRange:
    start_min: int
    end_min: int
    condition: SunCondition

    def contains(self, minute: int) -> bool:
        if self.start_min <= self.end_min:
            return self.start_min <= minute <= self.end_min
        # Wraps past midnight
        return minute >= self.start_min or minute <= self.end_min


# Checked in order; boundaries are contiguous and inclusive.
CLOCK_RANGES = (
    ClockRange(4 * 60, 4 * 60 + 59, SunCondition.GOLDEN_HOUR_BEFORE_SUNRISE),
    ClockRange(5 * 60, 8 * 60, SunCondition.SUNRISE),
    ClockRange(8 * 60 + 1, 17 * 60, SunCondition.DAYLIGHT),
    ClockRange(17 * 60 + 1, 17 * 60 + 59, SunCondition.GOLDEN_HOUR_BEFORE_SUNSET),
    ClockRange(18 * 60, 19 * 60, SunCondition.SUNSET),
    ClockRange(19 * 60 + 1, 3 * 60 + 59, SunCondition.NIGHT),
)


def minute_of_day(value: datetime.time | datetime.datetime) -> int:
    return value.hour * 60 + value.minute


def classify_by_clock_time(value: datetime.time | datetime.datetime) -> SunCondition:
    minute = minute_of_day(value)
    for clock_range in CLOCK_RANGES:
        if clock_range.contains(minute):
            return clock_range.condition
    raise ValueError(f"No clock range covers minute {minute}")


class SunConditionClassifier(ABC):
    name: str

    @abstractmethod
    def condition_for(self, waypoint: Waypoint, elevation_deg: float) -> SunCondition:
        raise NotImplementedError


class ElevationClassifier(SunConditionClassifier):
    name = "elevation"

    def condition_for(self, waypoint: Waypoint, elevation_deg: float) -> SunCondition:
        return classify(elevation_deg)


class ClockClassifier(SunConditionClassifier):
    """Clock-bucket classifier.

    ``basis="utc"`` reads the UTC wall clock. ``basis="solar"`` shifts it to
    local mean solar time (15° of longitude per hour), which keeps the buckets
    meaningful away from Greenwich without a timezone database.
    """

    name = "clock"

    def __init__(self, basis: str = "utc"):
        if basis not in ("utc", "solar"):
            raise ValueError("Clock basis must be one of: utc, solar")
        self.basis = basis

    def clock_time(self, waypoint: Waypoint) -> datetime.time:
        t = waypoint.time_utc
        if self.basis == "solar":
            t = t + datetime.timedelta(hours=waypoint.longitude_deg / 15.0)
        return t.time()

    def condition_for(self, waypoint: Waypoint, elevation_deg: float) -> SunCondition:
        return classify_by_clock_time(self.clock_time(waypoint))


def get_classifier(name: str | None = None, clock_basis: str = "utc") -> SunConditionClassifier:
    name = (name or "elevation").lower()
    if name == "elevation":
        return ElevationClassifier()
    if name == "clock":
        return ClockClassifier(basis=clock_basis)
    raise ValueError(f"Unknown sun condition classifier: {name}")


def sample_sun(
    waypoints: Sequence[Waypoint],
    engine,
    classifier: SunConditionClassifier | None = None,
) -> tuple[SolarSample, ...]:
    """Attach one solar position and condition to each waypoint, in order."""
    classifier = classifier or ElevationClassifier()
    positions = engine.positions(waypoints)
    if len(positions) != len(waypoints):
        raise ValueError(
            f"Solar engine returned {len(positions)} positions for {len(waypoints)} waypoints"
        )
    return tuple(
        SolarSample(
            waypoint=waypoint,
            azimuth=position.azimuth,
            elevation_deg=position.elevation_deg,
            condition=classifier.condition_for(waypoint, position.elevation_deg),
        )
        for waypoint, position in zip(waypoints, positions)
    )


def _event_from(kind: str, sample: SolarSample) -> SunEvent:
    return SunEvent(
        kind=kind,
        time_utc=sample.time_utc,
        coordinate=sample.coordinate,
        progress=sample.progress,
    )


def _time_below_horizon(samples: Sequence[SolarSample]) -> float:
    if len(samples) < 2:
        return 0.0
    total = 0.0
    for prev, cur in zip(samples, samples[1:]):
        mid_elevation = (prev.elevation_deg + cur.elevation_deg) / 2.0
        if mid_elevation <= 0.0:
            total += (cur.time_utc - prev.time_utc).total_seconds() / 60.0
    return total


def detect_events(
    samples: Sequence[SolarSample],
    interval_minutes: float = 15,
) -> EventDetection:
    """Find the first sunrise and first sunset and tally time per condition.

    Only the first crossing of each kind is kept; a flight that sees two
    sunrises reports the earlier one. Tallies are sample counts multiplied by
    ``interval_minutes``; an off-cadence arrival sample is left out of the
    tallies but still takes part in event detection.
    """
    sunrise: SunEvent | None = None
    sunset: SunEvent | None = None
    minutes_by_condition: dict[SunCondition, float] = {}
    buckets = {"night": 0.0, "day": 0.0, "golden_hour": 0.0}

    for i, current in enumerate(samples):
        if current.on_cadence:
            minutes_by_condition[current.condition] = (
                minutes_by_condition.get(current.condition, 0.0) + interval_minutes
            )
            buckets[current.condition.tally_bucket] += interval_minutes

        if i == 0:
            continue
        prev = samples[i - 1]
        if sunrise is None and prev.elevation_deg <= 0.0 < current.elevation_deg:
            sunrise = _event_from("sunrise", current)
            logger.info(f"Sunrise detected at {current.time_utc.isoformat()}")
        if sunset is None and prev.elevation_deg > 0.0 >= current.elevation_deg:
            sunset = _event_from("sunset", current)
            logger.info(f"Sunset detected at {current.time_utc.isoformat()}")

    return EventDetection(
        sunrise=sunrise,
        sunset=sunset,
        minutes_by_condition=minutes_by_condition,
        night_minutes=buckets["night"],
        day_minutes=buckets["day"],
        golden_hour_minutes=buckets["golden_hour"],
        below_horizon_minutes=_time_below_horizon(samples),
        interval_minutes=interval_minutes,
    )
