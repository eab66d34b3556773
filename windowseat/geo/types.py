from dataclasses import dataclass

from windowseat.errors import InvalidInputError


@dataclass(frozen=True)
class Coordinate:
    latitude_deg: float
    longitude_deg: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude_deg <= 90.0:
            raise InvalidInputError(f"Latitude out of range: {self.latitude_deg}")
        if not -180.0 <= self.longitude_deg <= 180.0:
            raise InvalidInputError(f"Longitude out of range: {self.longitude_deg}")

    @property
    def label(self) -> str:
        return f"{self.latitude_deg:.2f}°, {self.longitude_deg:.2f}°"
