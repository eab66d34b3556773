from .route import analyze_route, parse_route_query
from .types import (
    EventDetection,
    FlightSunReport,
    RouteQuery,
    RouteResult,
    SeatRecommendation,
    SeatSide,
    SideVisibility,
    SolarSample,
    SunCondition,
    SunEvent,
    Waypoint,
)

__all__ = [
    "analyze_route",
    "parse_route_query",
    "EventDetection",
    "FlightSunReport",
    "RouteQuery",
    "RouteResult",
    "SeatRecommendation",
    "SeatSide",
    "SideVisibility",
    "SolarSample",
    "SunCondition",
    "SunEvent",
    "Waypoint",
]
