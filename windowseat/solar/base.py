from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import datetime
from typing import TYPE_CHECKING, Sequence

from windowseat.geo import Bearing

if TYPE_CHECKING:
    from windowseat.analysis.types import Waypoint


@dataclass(frozen=True)
class SolarPosition:
    azimuth: Bearing
    elevation_deg: float


class SolarPositionEngine(ABC):
    """Solar azimuth/elevation for an instant and a place on the ground.

    Azimuths are returned as North-referenced, clockwise bearings. Elevation is
    geometric degrees above (positive) or below (negative) the horizon.
    """

    name: str

    @abstractmethod
    def position(
        self,
        instant: datetime.datetime,
        latitude_deg: float,
        longitude_deg: float,
    ) -> SolarPosition:
        raise NotImplementedError

    def positions(self, waypoints: Sequence[Waypoint]) -> list[SolarPosition]:
        return [
            self.position(w.time_utc, w.latitude_deg, w.longitude_deg)
            for w in waypoints
        ]

    def is_available(self) -> dict:
        """Return a dict with 'ok' (bool) and 'detail' (str) for doctor checks."""
        return {"ok": False, "detail": "not implemented"}
