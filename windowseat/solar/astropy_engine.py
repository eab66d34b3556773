from __future__ import annotations

import datetime
import logging
from typing import TYPE_CHECKING, Sequence

from windowseat.errors import BackendError
from windowseat.geo import Bearing
from .base import SolarPosition, SolarPositionEngine

if TYPE_CHECKING:
    from windowseat.analysis.types import Waypoint

logger = logging.getLogger(__name__)

try:
    from astropy.coordinates import AltAz, EarthLocation, get_sun
    from astropy.time import Time
    import astropy.units as u
    import numpy as np

    ASTROPY_AVAILABLE = True
except ImportError:
    ASTROPY_AVAILABLE = False


def _naive_utc(dt: datetime.datetime) -> datetime.datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(datetime.timezone.utc).replace(tzinfo=None)


class AstropySolarEngine(SolarPositionEngine):
    """Solar positions from astropy's ``get_sun`` in a topocentric AltAz frame.

    No pressure is set on the frame, so elevations are geometric (unrefracted),
    matching the builtin engine. AltAz azimuth is already North-referenced.
    """

    name = "astropy"

    def position(
        self,
        instant: datetime.datetime,
        latitude_deg: float,
        longitude_deg: float,
    ) -> SolarPosition:
        return self._compute([instant], [latitude_deg], [longitude_deg])[0]

    def positions(self, waypoints: Sequence[Waypoint]) -> list[SolarPosition]:
        if not waypoints:
            return []
        return self._compute(
            [w.time_utc for w in waypoints],
            [w.latitude_deg for w in waypoints],
            [w.longitude_deg for w in waypoints],
        )

    def _compute(
        self,
        instants: Sequence[datetime.datetime],
        latitudes_deg: Sequence[float],
        longitudes_deg: Sequence[float],
    ) -> list[SolarPosition]:
        if not ASTROPY_AVAILABLE:
            raise BackendError(
                "astropy is required for the 'astropy' solar backend. "
                "Install it or set solar.backend = \"builtin\"."
            )
        times = Time([_naive_utc(t) for t in instants], scale="utc")
        location = EarthLocation.from_geodetic(
            lon=np.asarray(longitudes_deg, dtype=float) * u.deg,
            lat=np.asarray(latitudes_deg, dtype=float) * u.deg,
        )
        frame = AltAz(obstime=times, location=location)
        try:
            sun = get_sun(times).transform_to(frame)
        except Exception as e:
            raise BackendError(f"astropy solar position failed: {e}") from e
        azimuths = np.atleast_1d(sun.az.to_value(u.deg))
        elevations = np.atleast_1d(sun.alt.to_value(u.deg))
        logger.debug(f"astropy computed {len(azimuths)} solar positions")
        return [
            SolarPosition(azimuth=Bearing.from_north(float(az)), elevation_deg=float(el))
            for az, el in zip(azimuths, elevations)
        ]

    def is_available(self) -> dict:
        if not ASTROPY_AVAILABLE:
            return {"ok": False, "detail": "astropy not installed"}
        return {"ok": True, "detail": "astropy get_sun/AltAz"}
