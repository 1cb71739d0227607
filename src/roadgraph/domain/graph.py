# domain/graph.py
from __future__ import annotations

from collections.abc import Sequence

from roadgraph.domain.entities.geography import Coordinate, Edge
from roadgraph.domain.errors import InvalidArgumentError
from roadgraph.search.astar import a_star_search
from roadgraph.search.bfs import bfs
from roadgraph.search.dijkstra import dijkstra
from roadgraph.search.hooks import SearchHooks, VisitFn


class Node:
    """An intersection plus its outgoing road segments, keyed by destination."""

    def __init__(self, location: Coordinate):
        self.location = location
        self._edges: dict[Coordinate, Edge] = {}

    def add_edge(self, to: Coordinate, road_name: str, road_type: str, length: float) -> Edge:
        # one edge per destination; a repeat call replaces the earlier edge
        edge = Edge(self.location, to, road_name, road_type, length)
        self._edges[to] = edge
        return edge

    def get_location(self) -> Coordinate:
        return self.location

    def get_destinations(self) -> list[Coordinate]:
        return sorted(self._edges)

    def get_edge(self, destination: Coordinate) -> Edge | None:
        return self._edges.get(destination)

    def get_edges(self) -> list[Edge]:
        return [self._edges[d] for d in sorted(self._edges)]

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"Node({self.location!r}, out={len(self._edges)})"


class Graph:
    """
    Directed road graph: intersections as vertices, road segments as edges.

    Built once (add_vertex/add_edge), then read-only for every search.
    There is no vertex or edge removal.
    """

    def __init__(self):
        self._nodes: dict[Coordinate, Node] = {}
        self._num_edges = 0

    # ------------- construction --------------------

    def add_vertex(self, loc: Coordinate | None) -> bool:
        if loc is None or loc in self._nodes:
            return False
        self._nodes[loc] = Node(loc)
        return True

    def add_edge(
        self,
        from_loc: Coordinate | None,
        to_loc: Coordinate | None,
        road_name: str,
        road_type: str,
        length: float,
    ) -> None:
        if from_loc is None or to_loc is None:
            raise InvalidArgumentError("Null arguments not allowed.")
        if from_loc not in self._nodes or to_loc not in self._nodes:
            raise InvalidArgumentError("Edge terminus not recognized.")
        if not length >= 0:
            raise InvalidArgumentError("Length must be a number >= 0.")
        self._nodes[from_loc].add_edge(to_loc, road_name, road_type, length)
        self._num_edges += 1

    # ------------- accessors -----------------------

    def get_vertices(self) -> frozenset[Coordinate]:
        return frozenset(self._nodes)

    def get_num_vertices(self) -> int:
        return len(self._nodes)

    def get_num_edges(self) -> int:
        return self._num_edges

    def has_vertex(self, loc: Coordinate | None) -> bool:
        return loc is not None and loc in self._nodes

    def get_node(self, loc: Coordinate | None) -> Node:
        if loc is None:
            raise InvalidArgumentError("Null arguments not allowed.")
        try:
            return self._nodes[loc]
        except KeyError:
            raise InvalidArgumentError(f"Vertex {loc!r} not recognized.") from None

    def neighbors(self, loc: Coordinate) -> list[Coordinate]:
        return self.get_node(loc).get_destinations()

    def get_edge(self, from_loc: Coordinate, to_loc: Coordinate) -> Edge | None:
        return self.get_node(from_loc).get_edge(to_loc)

    def path_length(self, path: Sequence[Coordinate]) -> float:
        """Sum of edge lengths along ``path``; every hop must be an edge."""
        total = 0.0
        for u, v in zip(path[:-1], path[1:]):
            edge = self.get_edge(u, v)
            if edge is None:
                raise InvalidArgumentError(f"No edge from {u!r} to {v!r}.")
            total += edge.length
        return total

    # ------------- searches ------------------------

    def bfs(
        self,
        start: Coordinate | None,
        goal: Coordinate | None,
        visit: VisitFn | None = None,
        *,
        hooks: SearchHooks | None = None,
    ) -> list[Coordinate] | None:
        return bfs(self, start, goal, visit, hooks=hooks)

    def dijkstra(
        self,
        start: Coordinate | None,
        goal: Coordinate | None,
        visit: VisitFn | None = None,
        *,
        hooks: SearchHooks | None = None,
    ) -> list[Coordinate] | None:
        return dijkstra(self, start, goal, visit, hooks=hooks)

    def a_star_search(
        self,
        start: Coordinate | None,
        goal: Coordinate | None,
        visit: VisitFn | None = None,
        *,
        hooks: SearchHooks | None = None,
    ) -> list[Coordinate] | None:
        return a_star_search(self, start, goal, visit, hooks=hooks)
