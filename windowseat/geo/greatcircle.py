import math

from .bearing import Bearing
from .types import Coordinate

EARTH_RADIUS_KM = 6371.0


def central_angle_rad(a: Coordinate, b: Coordinate) -> float:
    lat1 = math.radians(a.latitude_deg)
    lat2 = math.radians(b.latitude_deg)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude_deg - a.longitude_deg)
    h = math.sin(dlat / 2.0) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    return 2.0 * math.asin(min(1.0, math.sqrt(h)))


def distance_km(a: Coordinate, b: Coordinate) -> float:
    return central_angle_rad(a, b) * EARTH_RADIUS_KM


def interpolate(origin: Coordinate, destination: Coordinate, fraction: float) -> Coordinate:
    if fraction <= 0.0:
        return origin
    if fraction >= 1.0:
        return destination

    d = central_angle_rad(origin, destination)
    if d == 0.0:
        return origin

    lat1 = math.radians(origin.latitude_deg)
    lon1 = math.radians(origin.longitude_deg)
    lat2 = math.radians(destination.latitude_deg)
    lon2 = math.radians(destination.longitude_deg)

    a = math.sin((1.0 - fraction) * d) / math.sin(d)
    b = math.sin(fraction * d) / math.sin(d)

    x = a * math.cos(lat1) * math.cos(lon1) + b * math.cos(lat2) * math.cos(lon2)
    y = a * math.cos(lat1) * math.sin(lon1) + b * math.cos(lat2) * math.sin(lon2)
    z = a * math.sin(lat1) + b * math.sin(lat2)

    lat = math.atan2(z, math.sqrt(x * x + y * y))
    lon = math.atan2(y, x)
    return Coordinate(
        latitude_deg=max(-90.0, min(90.0, math.degrees(lat))),
        longitude_deg=max(-180.0, min(180.0, math.degrees(lon))),
    )


def initial_bearing(origin: Coordinate, destination: Coordinate) -> Bearing:
    lat1 = math.radians(origin.latitude_deg)
    lat2 = math.radians(destination.latitude_deg)
    dlon = math.radians(destination.longitude_deg - origin.longitude_deg)
    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    return Bearing.from_north(math.degrees(math.atan2(y, x)))
