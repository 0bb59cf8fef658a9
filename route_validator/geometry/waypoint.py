import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Waypoint:
    """A geographic coordinate in decimal degrees"""
    lat: float
    lon: float

    @property
    def is_finite(self) -> bool:
        """Check that both coordinates are finite numbers"""
        return math.isfinite(self.lat) and math.isfinite(self.lon)

    def to_tuple(self) -> Tuple[float, float]:
        """Return (lat, lon) tuple"""
        return (self.lat, self.lon)

    def __str__(self) -> str:
        return f"({self.lat}, {self.lon})"
