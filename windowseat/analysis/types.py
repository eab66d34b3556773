from dataclasses import dataclass
import datetime
from enum import Enum
from typing import Mapping

from windowseat.geo import Bearing, Coordinate


class SunCondition(str, Enum):
    NIGHT = "NIGHT"
    TWILIGHT = "TWILIGHT"
    GOLDEN_HOUR = "GOLDEN_HOUR"
    DAYLIGHT = "DAYLIGHT"
    GOLDEN_HOUR_BEFORE_SUNRISE = "GOLDEN_HOUR_BEFORE_SUNRISE"
    SUNRISE = "SUNRISE"
    GOLDEN_HOUR_BEFORE_SUNSET = "GOLDEN_HOUR_BEFORE_SUNSET"
    SUNSET = "SUNSET"

    @property
    def tally_bucket(self) -> str:
        # Twilight tallies as night.
        if self in (SunCondition.NIGHT, SunCondition.TWILIGHT):
            return "night"
        if self in (
            SunCondition.GOLDEN_HOUR,
            SunCondition.GOLDEN_HOUR_BEFORE_SUNRISE,
            SunCondition.GOLDEN_HOUR_BEFORE_SUNSET,
        ):
            return "golden_hour"
        return "day"


class SeatSide(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    EITHER = "either"


@dataclass(frozen=True)
class Waypoint:
    coordinate: Coordinate
    time_utc: datetime.datetime
    progress: float
    # False for the arrival sample appended after the last cadence step
    on_cadence: bool = True

    @property
    def latitude_deg(self) -> float:
        return self.coordinate.latitude_deg

    @property
    def longitude_deg(self) -> float:
        return self.coordinate.longitude_deg


@dataclass(frozen=True)
class SolarSample:
    waypoint: Waypoint
    azimuth: Bearing
    elevation_deg: float
    condition: SunCondition

    @property
    def time_utc(self) -> datetime.datetime:
        return self.waypoint.time_utc

    @property
    def coordinate(self) -> Coordinate:
        return self.waypoint.coordinate

    @property
    def progress(self) -> float:
        return self.waypoint.progress

    @property
    def on_cadence(self) -> bool:
        return self.waypoint.on_cadence


@dataclass(frozen=True)
class SunEvent:
    kind: str  # "sunrise" | "sunset"
    time_utc: datetime.datetime
    coordinate: Coordinate
    progress: float

    @property
    def location(self) -> str:
        return self.coordinate.label


@dataclass(frozen=True)
class EventDetection:
    sunrise: SunEvent | None
    sunset: SunEvent | None
    minutes_by_condition: Mapping[SunCondition, float]
    night_minutes: float
    day_minutes: float
    golden_hour_minutes: float
    below_horizon_minutes: float
    interval_minutes: float

    @property
    def saw_night(self) -> bool:
        return self.night_minutes > 0

    @property
    def saw_golden_hour(self) -> bool:
        return self.golden_hour_minutes > 0


@dataclass(frozen=True)
class SeatRecommendation:
    side: SeatSide | None
    message: str
    flight_bearing: Bearing | None = None
    mean_azimuth: Bearing | None = None
    relative_bearing_deg: float | None = None
    visible_samples: int = 0

    @property
    def value(self) -> str:
        if self.side is None:
            return self.message
        return self.side.value


@dataclass(frozen=True)
class SideVisibility:
    sunrise: bool
    sunset: bool
    night: bool


@dataclass(frozen=True)
class FlightSunReport:
    will_see_sunrise: bool
    will_see_sunset: bool
    will_see_night: bool
    will_see_golden_hour: bool
    seat_suggestion: SeatSide
    summary: tuple[str, ...]
    recommendations: tuple[str, ...] = ()
    sunrise: SunEvent | None = None
    sunset: SunEvent | None = None
    night_minutes: float = 0.0
    day_minutes: float = 0.0
    golden_hour_minutes: float = 0.0
    night_minutes_source: str | None = None
    timeline: tuple[SolarSample, ...] = ()
    mountains: tuple[str, ...] = ()
    left_views: SideVisibility | None = None
    right_views: SideVisibility | None = None

    @property
    def mountain_count(self) -> int:
        return len(self.mountains)


@dataclass(frozen=True)
class RouteQuery:
    from_code: str
    to_code: str
    departure_utc: datetime.datetime
    duration_minutes: float | None = None


@dataclass(frozen=True)
class RouteResult:
    query: RouteQuery
    path: tuple[Waypoint, ...]
    sun_positions: tuple[SolarSample, ...]
    recommendation: SeatRecommendation
    enhanced_analysis: FlightSunReport
    flight_bearing: Bearing | None = None
    distance_km: float | None = None
