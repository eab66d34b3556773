"""Static airport table.

The table is built once at import and exposed read-only; lookups are
case-insensitive on input, codes are stored uppercase.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from windowseat.errors import AirportNotFoundError, InvalidInputError
from windowseat.geo import Coordinate


@dataclass(frozen=True)
class Airport:
    code: str
    name: str
    coordinate: Coordinate


_AIRPORT_ROWS = (
    # India
    ("DEL", "Delhi", 28.5562, 77.1000),
    ("JAI", "Jaipur", 26.8282, 75.8056),
    ("BLR", "Bangalore", 12.9716, 77.5946),
    ("BOM", "Mumbai", 19.0896, 72.8656),
    ("BHO", "Bhopal", 23.2875, 77.3374),
    ("LKO", "Lucknow", 26.7606, 80.8893),
    ("MAA", "Chennai", 12.9941, 80.1709),
    ("CCU", "Kolkata", 22.6547, 88.4467),
    ("HYD", "Hyderabad", 17.2403, 78.4294),
    ("COK", "Kochi", 9.9312, 76.2673),
    ("GOI", "Goa", 15.3808, 73.8314),
    ("AMD", "Ahmedabad", 23.0725, 72.6347),
    ("PNQ", "Pune", 18.5679, 73.9143),
    # International
    ("JFK", "New York JFK", 40.6413, -73.7781),
    ("LHR", "London Heathrow", 51.4700, -0.4543),
    ("NRT", "Tokyo Narita", 35.7720, 140.3929),
    ("LAX", "Los Angeles", 33.9425, -118.4081),
    ("DXB", "Dubai", 25.2532, 55.3657),
    ("SIN", "Singapore Changi", 1.3644, 103.9915),
    ("SYD", "Sydney Kingsford Smith", -33.9399, 151.1753),
    ("CDG", "Paris Charles de Gaulle", 49.0097, 2.5479),
    ("FRA", "Frankfurt", 50.0379, 8.5622),
    ("HKG", "Hong Kong", 22.3080, 113.9185),
    ("ICN", "Seoul Incheon", 37.4602, 126.4407),
    ("BKK", "Bangkok Suvarnabhumi", 13.6900, 100.7501),
    ("DOH", "Doha Hamad", 25.2731, 51.6080),
    ("IST", "Istanbul", 41.2753, 28.7519),
    ("MAD", "Madrid Barajas", 40.4839, -3.5680),
)

AIRPORTS: Mapping[str, Airport] = MappingProxyType(
    {
        code: Airport(code=code, name=name, coordinate=Coordinate(lat, lon))
        for code, name, lat, lon in _AIRPORT_ROWS
    }
)


def normalize_code(code: str | None) -> str:
    if code is None or not str(code).strip():
        raise InvalidInputError("Airport code is required")
    return str(code).strip().upper()


def get_airport(code: str, airports: Mapping[str, Airport] = AIRPORTS) -> Airport:
    key = normalize_code(code)
    airport = airports.get(key)
    if airport is None:
        raise AirportNotFoundError(code)
    return airport


def resolve_route(
    from_code: str,
    to_code: str,
    airports: Mapping[str, Airport] = AIRPORTS,
) -> tuple[Airport, Airport]:
    origin_key = normalize_code(from_code)
    destination_key = normalize_code(to_code)
    if origin_key == destination_key:
        raise InvalidInputError(
            f"Departure and arrival airports must differ (got {origin_key} twice)"
        )
    origin = airports.get(origin_key)
    destination = airports.get(destination_key)
    if origin is None or destination is None:
        raise AirportNotFoundError(from_code, to_code)
    return origin, destination


def list_airports(airports: Mapping[str, Airport] = AIRPORTS) -> list[Airport]:
    return sorted(airports.values(), key=lambda a: a.code)
