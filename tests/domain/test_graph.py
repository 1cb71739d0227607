import math

import pytest

from roadgraph.domain.entities.geography import Coordinate, Edge
from roadgraph.domain.errors import InvalidArgumentError
from roadgraph.domain.graph import Graph, Node

A = Coordinate(0.0, 0.0)
B = Coordinate(0.0, 1.0)
C = Coordinate(1.0, 0.0)
D = Coordinate(1.0, 1.0)
E = Coordinate(5.0, 5.0)


# ---------- Coordinate / Edge


def test_coordinate_equality_hash_and_order():
    p, q = Coordinate(32.1, -117.2), Coordinate(32.1, -117.2)
    assert p == q and hash(p) == hash(q)
    assert len({p, q}) == 1
    assert sorted([D, C, B, A]) == [A, B, C, D]


def test_coordinate_distance_is_symmetric_and_haversine_km():
    assert A.distance(A) == 0.0
    assert abs(A.distance(B) - B.distance(A)) < 1e-12
    # one degree of longitude on the equator ~ 111.19 km
    assert abs(A.distance(B) - 6371.0 * math.radians(1.0)) < 1e-6


def test_edge_rejects_negative_length():
    with pytest.raises(InvalidArgumentError):
        Edge(A, B, "Main St", "primary", -0.1)
    e = Edge(A, B, "Main St", "primary", 0.0)
    assert e.get_length() == 0.0


def test_invalid_argument_is_a_value_error():
    assert issubclass(InvalidArgumentError, ValueError)


# ---------- Node


def test_node_second_edge_to_same_destination_replaces_first():
    n = Node(A)
    n.add_edge(B, "Old Rd", "residential", 3.0)
    n.add_edge(B, "New Rd", "primary", 2.0)
    assert len(n) == 1
    assert n.get_edge(B).road_name == "New Rd"
    assert n.get_edge(B).length == 2.0
    assert n.get_edge(C) is None
    assert n.get_location() == A


def test_node_destinations_are_sorted():
    n = Node(E)
    for p in (D, B, C, A):
        n.add_edge(p, "r", "t", 1.0)
    assert n.get_destinations() == [A, B, C, D]
    assert [e.end for e in n.get_edges()] == [A, B, C, D]


# ---------- Graph construction


def test_add_vertex_ignores_none_and_duplicates():
    g = Graph()
    assert g.add_vertex(A) is True
    assert g.add_vertex(A) is False
    assert g.add_vertex(None) is False
    assert g.get_num_vertices() == 1
    assert g.get_vertices() == frozenset({A})


def test_add_edge_counts_and_attaches(abcd_graph):
    assert abcd_graph.get_num_edges() == 4
    assert abcd_graph.get_num_vertices() == 5
    assert abcd_graph.neighbors(A) == [B, C]
    assert abcd_graph.neighbors(E) == []
    assert abcd_graph.get_edge(A, C).road_type == "primary"


def test_negative_length_fails_and_leaves_counter_unchanged(abcd_graph):
    with pytest.raises(InvalidArgumentError):
        abcd_graph.add_edge(A, D, "Bad Rd", "residential", -1)
    assert abcd_graph.get_num_edges() == 4
    assert abcd_graph.get_edge(A, D) is None


def test_nan_length_fails_and_leaves_counter_unchanged(abcd_graph):
    with pytest.raises(InvalidArgumentError):
        abcd_graph.add_edge(A, D, "Bad Rd", "residential", float("nan"))
    with pytest.raises(InvalidArgumentError):
        Edge(A, D, "Bad Rd", "residential", float("nan"))
    assert abcd_graph.get_num_edges() == 4
    assert abcd_graph.get_edge(A, D) is None


@pytest.mark.parametrize(
    "src,dst",
    [(None, B), (A, None), (A, Coordinate(9.0, 9.0)), (Coordinate(9.0, 9.0), A)],
)
def test_add_edge_rejects_null_or_unknown_endpoints(abcd_graph, src, dst):
    with pytest.raises(InvalidArgumentError):
        abcd_graph.add_edge(src, dst, "r", "t", 1.0)
    assert abcd_graph.get_num_edges() == 4


def test_replacing_an_edge_still_counts_the_insertion(abcd_graph):
    abcd_graph.add_edge(A, B, "Ash St", "residential", 0.5)
    assert abcd_graph.get_num_edges() == 5
    assert abcd_graph.neighbors(A) == [B, C]
    assert abcd_graph.get_edge(A, B).length == 0.5


def test_get_node_unknown_raises(abcd_graph):
    with pytest.raises(InvalidArgumentError):
        abcd_graph.get_node(Coordinate(9.0, 9.0))
    with pytest.raises(InvalidArgumentError):
        abcd_graph.get_node(None)
    assert abcd_graph.has_vertex(None) is False


def test_path_length(abcd_graph):
    assert abcd_graph.path_length([A]) == 0.0
    assert abcd_graph.path_length([A, B, D]) == 2.0
    assert abcd_graph.path_length([A, C, D]) == 6.0
    with pytest.raises(InvalidArgumentError):
        abcd_graph.path_length([A, D])
