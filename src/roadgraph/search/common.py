# search/common.py
from __future__ import annotations

from typing import TYPE_CHECKING

from roadgraph.domain.errors import InvalidArgumentError
from roadgraph.search.hooks import SearchHooks

if TYPE_CHECKING:
    from roadgraph.domain.graph import Graph


def check_endpoints(graph: Graph, start, goal, *, algorithm: str, hooks: SearchHooks) -> None:
    if start is None or goal is None:
        hooks.error(algorithm=algorithm, reason="null_endpoint", start=start, goal=goal)
        raise InvalidArgumentError("Start and end points must not be null.")
    if not graph.has_vertex(start) or not graph.has_vertex(goal):
        hooks.error(algorithm=algorithm, reason="unknown_endpoint", start=start, goal=goal)
        raise InvalidArgumentError("Route terminus not recognized.")
