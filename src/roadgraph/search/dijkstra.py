# search/dijkstra.py
from __future__ import annotations

import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from roadgraph.domain.entities.geography import Coordinate
from roadgraph.search.candidates import RouteCandidate
from roadgraph.search.common import check_endpoints
from roadgraph.search.frontier import Frontier
from roadgraph.search.hooks import NoopHooks, SearchHooks, VisitFn, no_visit

if TYPE_CHECKING:
    from roadgraph.domain.graph import Graph

# remaining-cost estimate for a location, given the goal
Heuristic = Callable[[Coordinate, Coordinate], float]

ALGORITHM = "dijkstra"


def zero_heuristic(_loc: Coordinate, _goal: Coordinate) -> float:
    return 0.0


def dijkstra(
    graph: Graph,
    start: Coordinate | None,
    goal: Coordinate | None,
    visit: VisitFn | None = None,
    *,
    hooks: SearchHooks | None = None,
) -> list[Coordinate] | None:
    """Shortest path by total edge length (edge lengths must be >= 0)."""
    return weighted_search(
        graph, start, goal, visit, heuristic=zero_heuristic, algorithm=ALGORITHM, hooks=hooks
    )


def weighted_search(
    graph: Graph,
    start: Coordinate | None,
    goal: Coordinate | None,
    visit: VisitFn | None = None,
    *,
    heuristic: Heuristic,
    algorithm: str,
    hooks: SearchHooks | None = None,
) -> list[Coordinate] | None:
    """
    Best-first search shared by Dijkstra and A*.

    Candidates are ordered by distance + heuristic, where the heuristic is
    computed once when a location is first reached. Relaxation compares raw
    distances. With non-negative lengths and a consistent heuristic each
    location is finalized (and passed to ``visit``) at most once; a cheaper
    route to an already finalized location reopens it.
    """
    hooks = hooks or NoopHooks()
    visit = visit or no_visit
    check_endpoints(graph, start, goal, algorithm=algorithm, hooks=hooks)

    t0 = time.perf_counter()
    hooks.search_start(algorithm=algorithm, start=start, goal=goal)

    best: dict[Coordinate, RouteCandidate] = {
        start: RouteCandidate.origin(start, heuristic(start, goal))
    }
    finalized: set[Coordinate] = {start}
    frontier = Frontier()
    _relax(graph, best[start], best, finalized, frontier, goal, heuristic)

    searched = 0
    curr = start
    while curr != goal:
        cand = frontier.pop(best, finalized)
        if cand is None:
            break
        curr = cand.destination
        finalized.add(curr)
        searched += 1
        visit(curr)
        hooks.node_searched(curr, algorithm=algorithm, seq=searched, frontier=frontier.pending)
        if curr != goal:
            _relax(graph, cand, best, finalized, frontier, goal, heuristic)

    found = curr == goal
    path = list(best[goal].path) if found else None
    hooks.search_end(
        algorithm=algorithm,
        found=found,
        searched=searched,
        hops=None if path is None else len(path) - 1,
        distance=best[goal].distance if found else None,
        wall_ms=(time.perf_counter() - t0) * 1000,
    )
    return path


def _relax(
    graph: Graph,
    current: RouteCandidate,
    best: dict[Coordinate, RouteCandidate],
    finalized: set[Coordinate],
    frontier: Frontier,
    goal: Coordinate,
    heuristic: Heuristic,
) -> None:
    node = graph.get_node(current.destination)
    for edge in node.get_edges():
        destination = edge.end
        proposed = current.distance + edge.length
        known = best.get(destination)
        if known is None:
            cand = current.extend(destination, edge.length, heuristic(destination, goal))
        elif proposed < known.distance:
            cand = known.lowered(current, edge.length)
            # only reachable for A* with an inconsistent heuristic
            finalized.discard(destination)
        else:
            continue
        best[destination] = cand
        frontier.push(cand)
