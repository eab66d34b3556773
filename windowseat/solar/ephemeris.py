"""Low-precision analytic solar ephemeris.

Good to roughly 0.01° in declination for dates within a few centuries of
J2000. Elevations are geometric (no refraction).
"""

import datetime
import math

J2000_JD = 2451545.0


def julian_date(dt: datetime.datetime) -> float:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=datetime.timezone.utc)
    dt = dt.astimezone(datetime.timezone.utc)
    year = dt.year
    month = dt.month
    seconds = dt.second + dt.microsecond / 1e6
    day = dt.day + (dt.hour + (dt.minute + seconds / 60.0) / 60.0) / 24.0
    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    return math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b - 1524.5


def sun_equatorial_deg(jd: float) -> tuple[float, float]:
    """Apparent solar right ascension and declination, in degrees."""
    n = jd - J2000_JD
    mean_lon = (280.460 + 0.9856474 * n) % 360.0
    mean_anomaly = math.radians((357.528 + 0.9856003 * n) % 360.0)
    ecliptic_lon = math.radians(
        mean_lon + 1.915 * math.sin(mean_anomaly) + 0.020 * math.sin(2.0 * mean_anomaly)
    )
    obliquity = math.radians(23.439 - 0.0000004 * n)
    ra = math.atan2(math.cos(obliquity) * math.sin(ecliptic_lon), math.cos(ecliptic_lon))
    dec = math.asin(math.sin(obliquity) * math.sin(ecliptic_lon))
    return math.degrees(ra) % 360.0, math.degrees(dec)


def greenwich_sidereal_deg(jd: float) -> float:
    n = jd - J2000_JD
    return (280.46061837 + 360.98564736629 * n) % 360.0


def horizontal_deg(
    ra_deg: float,
    dec_deg: float,
    latitude_deg: float,
    longitude_deg: float,
    jd: float,
) -> tuple[float, float]:
    """Equatorial to horizontal coordinates.

    Returns ``(azimuth, elevation)`` with azimuth measured from North through
    East.
    """
    hour_angle = math.radians(greenwich_sidereal_deg(jd) + longitude_deg - ra_deg)
    lat = math.radians(latitude_deg)
    dec = math.radians(dec_deg)
    sin_el = math.sin(lat) * math.sin(dec) + math.cos(lat) * math.cos(dec) * math.cos(hour_angle)
    elevation = math.asin(max(-1.0, min(1.0, sin_el)))
    azimuth = math.atan2(
        -math.sin(hour_angle) * math.cos(dec),
        math.cos(lat) * math.sin(dec) - math.sin(lat) * math.cos(dec) * math.cos(hour_angle),
    )
    return math.degrees(azimuth) % 360.0, math.degrees(elevation)
