import datetime
import logging

from windowseat.airports import normalize_code, resolve_route
from windowseat.config import Config
from windowseat.errors import InvalidInputError
from windowseat.geo import distance_km
from windowseat.mountains import mountains_near_path
from windowseat.solar import SolarPositionEngine, get_solar_engine
from .conditions import ElevationClassifier, detect_events, get_classifier, sample_sun
from .report import build_report, fallback_report
from .sampler import as_utc, build_path, sample_timeline, validate_duration
from .seats import flight_bearing, recommend_seat
from .types import RouteQuery, RouteResult

logger = logging.getLogger(__name__)


def parse_datetime(value: str) -> datetime.datetime:
    if not value or not value.strip():
        raise InvalidInputError("Departure time is required")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.datetime.fromisoformat(text)
    except ValueError as e:
        raise InvalidInputError(
            f"Invalid departure time format: {value!r}. Use ISO 8601 (e.g. 2025-08-01T18:00Z)"
        ) from e
    return as_utc(dt)


def parse_route_query(
    from_code: str,
    to_code: str,
    depart: str,
    duration: str | float | None = None,
) -> RouteQuery:
    """Build a validated :class:`RouteQuery` from loosely typed inputs."""
    if not from_code or not to_code or not depart:
        raise InvalidInputError("Missing required parameters: from, to, depart")

    duration_minutes = None
    if duration is not None and str(duration).strip() != "":
        try:
            duration_minutes = float(duration)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Invalid flight duration: {duration!r}") from e

    query = RouteQuery(
        from_code=normalize_code(from_code),
        to_code=normalize_code(to_code),
        departure_utc=parse_datetime(depart),
        duration_minutes=duration_minutes,
    )
    validate_query(query)
    return query


def validate_query(query: RouteQuery) -> None:
    from_code = normalize_code(query.from_code)
    to_code = normalize_code(query.to_code)
    if from_code == to_code:
        raise InvalidInputError(f"Departure and arrival airports are identical: {from_code}")
    if not isinstance(query.departure_utc, datetime.datetime):
        raise InvalidInputError("Departure time must be a datetime")
    if query.duration_minutes is not None:
        validate_duration(query.duration_minutes)


def analyze_route(
    query: RouteQuery,
    config: Config | None = None,
    engine: SolarPositionEngine | None = None,
) -> RouteResult:
    """Run the full route analysis for one query.

    Produces the distance-spaced path with its solar samples and seat
    recommendation, plus the duration-driven sun report. Without a duration
    the report is the fallback payload.

    The report timeline is classified by sun elevation unless the config sets
    ``analysis.classifier = "clock"``, which opts into the fixed clock-time
    buckets instead.
    """
    validate_query(query)
    config = config or Config({})
    engine = engine or get_solar_engine(config)
    departure = as_utc(query.departure_utc)
    origin_airport, destination_airport = resolve_route(query.from_code, query.to_code)
    origin = origin_airport.coordinate
    destination = destination_airport.coordinate

    path = build_path(
        query.from_code,
        query.to_code,
        departure,
        spacing_km=config.path_spacing_km,
        min_segments=config.path_min_segments,
        cruise_speed_kmh=config.path_cruise_speed_kmh,
    )
    sun_positions = sample_sun(path, engine, ElevationClassifier())
    recommendation = recommend_seat(sun_positions, path)

    if query.duration_minutes is None:
        enhanced = fallback_report()
    else:
        interval = config.analysis_interval_min
        timeline = sample_timeline(
            query.from_code,
            query.to_code,
            departure,
            query.duration_minutes,
            interval_minutes=interval,
        )
        classifier = get_classifier(config.analysis_classifier, config.analysis_clock_basis)
        samples = sample_sun(timeline, engine, classifier)
        detection = detect_events(samples, interval_minutes=interval)
        peaks = mountains_near_path(path, max_distance_km=config.mountain_view_distance_km)
        enhanced = build_report(
            detection,
            samples,
            origin,
            destination,
            query.duration_minutes,
            mountains=[m.name for m in peaks],
        )

    logger.info(
        f"{origin_airport.code} -> {destination_airport.code}: "
        f"recommendation {recommendation.value!r} via {engine.name} engine"
    )
    return RouteResult(
        query=query,
        path=path,
        sun_positions=sun_positions,
        recommendation=recommendation,
        enhanced_analysis=enhanced,
        flight_bearing=flight_bearing(origin, destination),
        distance_km=distance_km(origin, destination),
    )
