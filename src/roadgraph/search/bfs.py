# search/bfs.py
from __future__ import annotations

import time
from collections import deque
from typing import TYPE_CHECKING

from roadgraph.domain.entities.geography import Coordinate
from roadgraph.search.common import check_endpoints
from roadgraph.search.hooks import NoopHooks, SearchHooks, VisitFn, no_visit

if TYPE_CHECKING:
    from roadgraph.domain.graph import Graph

ALGORITHM = "bfs"


def bfs(
    graph: Graph,
    start: Coordinate | None,
    goal: Coordinate | None,
    visit: VisitFn | None = None,
    *,
    hooks: SearchHooks | None = None,
) -> list[Coordinate] | None:
    """
    Shortest path from ``start`` to ``goal`` by number of road segments.

    Each discovered location stores its own full route, and the first route
    recorded for a location is kept, so the result has the minimum hop count.
    Returns None when ``goal`` is unreachable.
    """
    hooks = hooks or NoopHooks()
    visit = visit or no_visit
    check_endpoints(graph, start, goal, algorithm=ALGORITHM, hooks=hooks)

    t0 = time.perf_counter()
    hooks.search_start(algorithm=ALGORITHM, start=start, goal=goal)

    routes: dict[Coordinate, list[Coordinate]] = {start: [start]}
    to_visit: deque[Coordinate] = deque()
    _enqueue_destinations(graph, start, routes, to_visit)

    searched = 0
    curr = start
    while to_visit and curr != goal:
        curr = to_visit.popleft()
        searched += 1
        visit(curr)
        hooks.node_searched(curr, algorithm=ALGORITHM, seq=searched, frontier=len(to_visit))
        if curr != goal:
            _enqueue_destinations(graph, curr, routes, to_visit)

    path = list(routes[goal]) if curr == goal else None
    hooks.search_end(
        algorithm=ALGORITHM,
        found=path is not None,
        searched=searched,
        hops=None if path is None else len(path) - 1,
        distance=None if path is None else graph.path_length(path),
        wall_ms=(time.perf_counter() - t0) * 1000,
    )
    return path


def _enqueue_destinations(
    graph: Graph,
    current: Coordinate,
    routes: dict[Coordinate, list[Coordinate]],
    to_visit: deque[Coordinate],
) -> None:
    for destination in graph.neighbors(current):
        if destination in routes:
            continue
        routes[destination] = [*routes[current], destination]
        to_visit.append(destination)
