from .bearing import SUNRISE_BEARING, SUNSET_BEARING, Bearing, normalize_degrees
from .greatcircle import (
    EARTH_RADIUS_KM,
    central_angle_rad,
    distance_km,
    initial_bearing,
    interpolate,
)
from .types import Coordinate

__all__ = [
    "Bearing",
    "Coordinate",
    "EARTH_RADIUS_KM",
    "SUNRISE_BEARING",
    "SUNSET_BEARING",
    "central_angle_rad",
    "distance_km",
    "initial_bearing",
    "interpolate",
    "normalize_degrees",
]
