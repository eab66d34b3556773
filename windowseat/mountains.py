"""Landmark peaks that may be visible from the cabin along a route."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from windowseat.geo import Coordinate, distance_km

logger = logging.getLogger(__name__)

DEFAULT_VIEW_DISTANCE_KM = 200.0


@dataclass(frozen=True)
class Mountain:
    key: str
    name: str
    coordinate: Coordinate
    elevation_m: int
    region: str


_MOUNTAIN_ROWS = (
    ("EVEREST", "Mount Everest", 27.9881, 86.9250, 8849, "Himalayas"),
    ("K2", "K2", 35.8808, 76.5155, 8611, "Karakoram"),
    ("KANCHENJUNGA", "Kanchenjunga", 27.7025, 88.1475, 8586, "Himalayas"),
    ("NANDA_DEVI", "Nanda Devi", 30.3763, 79.9737, 7816, "Himalayas"),
    ("DHAULAGIRI", "Dhaulagiri", 28.6967, 83.4933, 8167, "Himalayas"),
    ("ANNAPURNA", "Annapurna", 28.5967, 83.8203, 8091, "Himalayas"),
    ("ANAMUDI", "Anamudi", 10.1783, 77.0650, 2695, "Western Ghats"),
    ("DODDABETTA", "Doddabetta", 11.4064, 76.7392, 2637, "Nilgiris"),
    ("MULLAYANAGIRI", "Mullayanagiri", 13.3931, 75.7185, 1930, "Western Ghats"),
    ("KALSUBAI", "Kalsubai", 19.6092, 73.7031, 1646, "Sahyadris"),
    ("HARISHCHANDRAGAD", "Harishchandragad", 19.5217, 73.7636, 1424, "Sahyadris"),
    ("MAHENDRAGIRI", "Mahendragiri", 18.8503, 84.2883, 1501, "Eastern Ghats"),
    ("ARMA_KONDA", "Arma Konda", 18.3500, 82.9167, 1680, "Eastern Ghats"),
    ("GURU_SHIKHAR", "Guru Shikhar", 24.5925, 72.7894, 1722, "Aravalli"),
    ("SARAMATI", "Saramati", 26.0000, 94.7667, 3826, "Nagaland Hills"),
    ("BLUE_MOUNTAIN", "Blue Mountain", 23.2833, 92.8167, 2157, "Mizoram Hills"),
    ("MONT_BLANC", "Mont Blanc", 45.8326, 6.8652, 4809, "Alps"),
    ("MATTERHORN", "Matterhorn", 45.9763, 7.6586, 4478, "Alps"),
    ("FUJI", "Mount Fuji", 35.3606, 138.7274, 3776, "Japan"),
    ("DENALI", "Denali", 63.0692, -151.0070, 6190, "Alaska"),
    ("ROCKY_MOUNTAINS", "Rocky Mountains", 39.7392, -104.9903, 4401, "USA"),
)

MOUNTAINS: Mapping[str, Mountain] = MappingProxyType(
    {
        key: Mountain(
            key=key,
            name=name,
            coordinate=Coordinate(lat, lon),
            elevation_m=elevation,
            region=region,
        )
        for key, name, lat, lon, elevation, region in _MOUNTAIN_ROWS
    }
)


def mountains_near_path(
    path: Iterable,
    max_distance_km: float = DEFAULT_VIEW_DISTANCE_KM,
    mountains: Mapping[str, Mountain] = MOUNTAINS,
) -> list[Mountain]:
    """Return peaks within ``max_distance_km`` of any waypoint, in table order."""
    coords = [w.coordinate for w in path]
    visible = [
        mountain
        for mountain in mountains.values()
        if any(distance_km(c, mountain.coordinate) <= max_distance_km for c in coords)
    ]
    logger.debug(f"{len(visible)} of {len(mountains)} peaks within {max_distance_km:.0f} km of path")
    return visible
