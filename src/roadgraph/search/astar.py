# search/astar.py
from __future__ import annotations

from typing import TYPE_CHECKING

from roadgraph.domain.entities.geography import Coordinate
from roadgraph.search.dijkstra import weighted_search
from roadgraph.search.hooks import SearchHooks, VisitFn

if TYPE_CHECKING:
    from roadgraph.domain.graph import Graph

ALGORITHM = "astar"


def straight_line_heuristic(loc: Coordinate, goal: Coordinate) -> float:
    # admissible while no road is shorter than the great-circle distance
    return loc.distance(goal)


def a_star_search(
    graph: Graph,
    start: Coordinate | None,
    goal: Coordinate | None,
    visit: VisitFn | None = None,
    *,
    hooks: SearchHooks | None = None,
) -> list[Coordinate] | None:
    """
    Shortest path by total edge length, guided by the distance to ``goal``.

    The result is optimal only if ``Coordinate.distance`` never overestimates
    the remaining road distance; the engine cannot check that.
    """
    return weighted_search(
        graph,
        start,
        goal,
        visit,
        heuristic=straight_line_heuristic,
        algorithm=ALGORITHM,
        hooks=hooks,
    )
