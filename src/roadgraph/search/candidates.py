# search/candidates.py
from dataclasses import dataclass, replace

from roadgraph.domain.entities.geography import Coordinate


@dataclass(frozen=True)
class RouteCandidate:
    """
    Best known route from the origin to ``destination`` during one search call.

    ``heuristic`` is the fixed remaining-cost estimate (zero for Dijkstra,
    destination-to-goal distance for A*). Frontier order is ``priority``.
    """

    destination: Coordinate
    distance: float
    path: tuple[Coordinate, ...]
    heuristic: float = 0.0

    @property
    def priority(self) -> float:
        return self.distance + self.heuristic

    @classmethod
    def origin(cls, start: Coordinate, heuristic: float = 0.0) -> "RouteCandidate":
        return cls(start, 0.0, (start,), heuristic)

    def extend(self, to: Coordinate, length: float, heuristic: float = 0.0) -> "RouteCandidate":
        return RouteCandidate(to, self.distance + length, (*self.path, to), heuristic)

    def lowered(self, via: "RouteCandidate", length: float) -> "RouteCandidate":
        # cheaper route through ``via``; the heuristic never changes
        return replace(self, distance=via.distance + length, path=(*via.path, self.destination))
