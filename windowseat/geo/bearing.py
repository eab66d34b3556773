"""Horizontal directions with a single, explicit reference frame.

Every azimuth and heading in windowseat is a :class:`Bearing`: measured from
true North, increasing clockwise (0° = N, 90° = E, 180° = S, 270° = W).
Values coming from a South-referenced (astronomical) source must be converted
with :meth:`Bearing.from_astronomical` before they are compared with a heading.
"""

from dataclasses import dataclass


def normalize_degrees(value: float) -> float:
    """Wrap an angle into [0, 360)."""
    wrapped = value % 360.0
    # -1e-15 % 360.0 rounds to 360.0
    if wrapped >= 360.0:
        return 0.0
    return wrapped


@dataclass(frozen=True)
class Bearing:
    degrees: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "degrees", normalize_degrees(self.degrees))

    @classmethod
    def from_north(cls, degrees: float) -> "Bearing":
        return cls(degrees)

    @classmethod
    def from_astronomical(cls, degrees: float) -> "Bearing":
        """Convert an azimuth measured from South, increasing westward."""
        return cls(degrees + 180.0)

    def to_astronomical(self) -> float:
        return normalize_degrees(self.degrees - 180.0)

    def relative_to(self, heading: "Bearing") -> float:
        """Clockwise angle from ``heading`` to this bearing, in [0, 360)."""
        return normalize_degrees(self.degrees - heading.degrees)

    def reversed(self) -> "Bearing":
        return Bearing(self.degrees + 180.0)


SUNRISE_BEARING = Bearing(90.0)
SUNSET_BEARING = Bearing(270.0)
