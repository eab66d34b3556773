import datetime

from windowseat.geo import Bearing
from .base import SolarPosition, SolarPositionEngine
from .ephemeris import horizontal_deg, julian_date, sun_equatorial_deg


class BuiltinSolarEngine(SolarPositionEngine):
    name = "builtin"

    def position(
        self,
        instant: datetime.datetime,
        latitude_deg: float,
        longitude_deg: float,
    ) -> SolarPosition:
        jd = julian_date(instant)
        ra_deg, dec_deg = sun_equatorial_deg(jd)
        azimuth_deg, elevation_deg = horizontal_deg(
            ra_deg, dec_deg, latitude_deg, longitude_deg, jd
        )
        return SolarPosition(
            azimuth=Bearing.from_north(azimuth_deg),
            elevation_deg=elevation_deg,
        )

    def is_available(self) -> dict:
        return {"ok": True, "detail": "analytic ephemeris"}
