"""
Shared fixtures: small hand-built road graphs and a brute-force reference.
"""

import math

import pytest

from roadgraph.domain.entities.geography import Coordinate
from roadgraph.domain.graph import Graph

A = Coordinate(0.0, 0.0)
B = Coordinate(0.0, 1.0)
C = Coordinate(1.0, 0.0)
D = Coordinate(1.0, 1.0)
E = Coordinate(5.0, 5.0)


def _reference_distances(graph: Graph, start: Coordinate, *, unit: bool = False) -> dict:
    """Bellman-Ford over every edge; ``unit`` counts hops instead of length."""
    dist = {v: math.inf for v in graph.get_vertices()}
    dist[start] = 0.0
    edges = [e for v in graph.get_vertices() for e in graph.get_node(v).get_edges()]
    for _ in range(graph.get_num_vertices()):
        changed = False
        for e in edges:
            w = 1.0 if unit else e.length
            if dist[e.start] + w < dist[e.end]:
                dist[e.end] = dist[e.start] + w
                changed = True
        if not changed:
            break
    return dist


@pytest.fixture
def abcd_graph() -> Graph:
    # A->B (1), B->D (1), A->C (5), C->D (1); E is isolated
    g = Graph()
    for p in (A, B, C, D, E):
        g.add_vertex(p)
    g.add_edge(A, B, "Ash St", "residential", 1.0)
    g.add_edge(B, D, "Birch St", "residential", 1.0)
    g.add_edge(A, C, "Cedar Ave", "primary", 5.0)
    g.add_edge(C, D, "Dogwood Ln", "residential", 1.0)
    return g


@pytest.fixture
def late_improvement_graph() -> Graph:
    # B is queued at 10 from A, then lowered to 2 through C
    g = Graph()
    for p in (A, B, C, D):
        g.add_vertex(p)
    g.add_edge(A, B, "Long Rd", "primary", 10.0)
    g.add_edge(A, C, "Short Rd", "residential", 1.0)
    g.add_edge(C, B, "Link Rd", "residential", 1.0)
    g.add_edge(B, D, "Final Rd", "residential", 1.0)
    return g


@pytest.fixture
def reference_distances():
    return _reference_distances
