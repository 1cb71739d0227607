# runtime/registries.py
from collections.abc import Callable

import numpy as np

from roadgraph.app.protocols import SearchFn
from roadgraph.config.models import (
    AStarSearchModel,
    BfsSearchModel,
    DijkstraSearchModel,
    GraphUnion,
    GridGraphModel,
    RandomGraphModel,
    SearchUnion,
)
from roadgraph.domain.graph import Graph
from roadgraph.domain.sampling import grid_graph, random_graph
from roadgraph.search.astar import a_star_search
from roadgraph.search.bfs import bfs
from roadgraph.search.dijkstra import dijkstra

SearchFactory = Callable[[SearchUnion], SearchFn]
GraphFactory = Callable[[GraphUnion, dict], Graph]

_search_registry: dict[str, SearchFactory] = {}
_graph_registry: dict[str, GraphFactory] = {}


# ------------------- Search algorithms ---------------------------


def register_search(kind: str):
    def deco(fn: SearchFactory):
        _search_registry[kind] = fn
        return fn

    return deco


def make_search(cfg: SearchUnion) -> SearchFn:
    try:
        factory = _search_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown search kind {cfg.kind!r}") from None
    return factory(cfg)


@register_search("bfs")
def _make_bfs(cfg: BfsSearchModel):
    return bfs


@register_search("dijkstra")
def _make_dijkstra(cfg: DijkstraSearchModel):
    return dijkstra


@register_search("astar")
def _make_astar(cfg: AStarSearchModel):
    return a_star_search


# ------------------- Synthetic graphs ---------------------------


def register_graph(kind: str):
    def deco(fn: GraphFactory):
        _graph_registry[kind] = fn
        return fn

    return deco


def make_graph(cfg: GraphUnion, *, rng: np.random.Generator | None = None) -> Graph:
    try:
        factory = _graph_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown graph kind {cfg.kind!r}") from None
    return factory(cfg, {"rng": rng})


@register_graph("grid")
def _make_grid(cfg: GridGraphModel, deps):
    return grid_graph(
        cfg.rows,
        cfg.cols,
        origin=cfg.origin,
        spacing_deg=cfg.spacing_deg,
        detour=cfg.detour,
        road_type=cfg.road_type,
        bidirectional=cfg.bidirectional,
    )


@register_graph("random")
def _make_random(cfg: RandomGraphModel, deps):
    rng = deps["rng"] if deps.get("rng") is not None else np.random.default_rng(cfg.seed)
    return random_graph(rng, nodes=cfg.nodes, bbox=cfg.bbox, degree=cfg.degree, detour=cfg.detour)
