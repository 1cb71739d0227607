# tests/search/test_search_properties.py
import math

import numpy as np
import pytest

from roadgraph.domain.sampling import random_graph
from roadgraph.io.recorder import VisitRecorder
from roadgraph.search.astar import a_star_search
from roadgraph.search.bfs import bfs
from roadgraph.search.dijkstra import dijkstra

SEEDS = [1, 7, 42, 2024]


def _graph(seed: int, nodes: int = 25):
    rng = np.random.default_rng(seed)
    return random_graph(
        rng, nodes=nodes, bbox=(32.85, -117.24, 32.88, -117.20), degree=2, detour=(1.05, 1.6)
    )


def _pairs(graph, seed: int, n: int = 12):
    verts = sorted(graph.get_vertices())
    rng = np.random.default_rng(seed + 1)
    idx = rng.integers(0, len(verts), size=(n, 2))
    return [(verts[int(i)], verts[int(j)]) for i, j in idx]


def _assert_valid_route(graph, path, start, goal):
    assert path[0] == start and path[-1] == goal
    for u, v in zip(path[:-1], path[1:]):
        assert graph.get_edge(u, v) is not None


@pytest.mark.parametrize("seed", SEEDS)
def test_weighted_searches_match_reference(seed, reference_distances):
    g = _graph(seed)
    for start, goal in _pairs(g, seed):
        ref = reference_distances(g, start)[goal]
        pd, pa = dijkstra(g, start, goal), a_star_search(g, start, goal)
        if math.isinf(ref):
            assert pd is None and pa is None
            continue
        _assert_valid_route(g, pd, start, goal)
        _assert_valid_route(g, pa, start, goal)
        assert g.path_length(pd) == pytest.approx(ref, abs=1e-9)
        assert g.path_length(pa) == pytest.approx(ref, abs=1e-9)


@pytest.mark.parametrize("seed", SEEDS)
def test_bfs_route_has_minimum_hops(seed, reference_distances):
    g = _graph(seed)
    for start, goal in _pairs(g, seed):
        ref = reference_distances(g, start, unit=True)[goal]
        path = bfs(g, start, goal)
        if math.isinf(ref):
            assert path is None
            continue
        _assert_valid_route(g, path, start, goal)
        assert len(path) - 1 == int(ref)


@pytest.mark.parametrize("seed", SEEDS)
def test_astar_visits_no_more_nodes_than_dijkstra(seed):
    g = _graph(seed, nodes=40)
    for start, goal in _pairs(g, seed):
        rd, ra = VisitRecorder(), VisitRecorder()
        pd = dijkstra(g, start, goal, rd)
        pa = a_star_search(g, start, goal, ra)
        assert (pd is None) == (pa is None)
        if pd is None:
            continue
        assert len(set(ra.locations())) <= len(set(rd.locations()))


@pytest.mark.parametrize("seed", SEEDS)
def test_dijkstra_finalizes_each_location_once_in_distance_order(seed, reference_distances):
    g = _graph(seed)
    for start, goal in _pairs(g, seed, n=5):
        rec = VisitRecorder()
        dijkstra(g, start, goal, rec)
        seen = rec.locations()
        assert len(seen) == len(set(seen))
        ref = reference_distances(g, start)
        dists = [ref[p] for p in seen]
        assert all(a <= b + 1e-12 for a, b in zip(dists[:-1], dists[1:]))


@pytest.mark.parametrize("search", [bfs, dijkstra, a_star_search])
def test_repeated_searches_are_identical(search):
    g = _graph(99)
    for start, goal in _pairs(g, 99, n=6):
        first = search(g, start, goal)
        again = search(g, start, goal)
        assert first == again
