# domain/entities/geography.py
import math
from dataclasses import dataclass

from roadgraph.domain.errors import InvalidArgumentError

EARTH_RADIUS_KM = 6371.0


# Core geometry types used by the graph and the searches
@dataclass(frozen=True, order=True)
class Coordinate:
    latitude: float  # degrees
    longitude: float

    def distance(self, other: "Coordinate") -> float:
        """Great-circle distance to ``other`` in kilometres (haversine)."""
        phi1, phi2 = math.radians(self.latitude), math.radians(other.latitude)
        dphi = phi2 - phi1
        dlmb = math.radians(other.longitude - self.longitude)
        a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
        # clamp rounding noise so asin stays in its domain
        a = min(1.0, max(0.0, a))
        return 2.0 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))

    def as_pair(self) -> tuple[float, float]:
        return self.latitude, self.longitude


@dataclass(frozen=True)
class Edge:
    start: Coordinate
    end: Coordinate
    road_name: str
    road_type: str
    length: float  # km, same unit as Coordinate.distance

    def __post_init__(self):
        if not self.length >= 0:
            raise InvalidArgumentError("Length must be a number >= 0.")

    def get_length(self) -> float:
        return self.length
