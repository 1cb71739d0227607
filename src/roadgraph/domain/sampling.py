# domain/sampling.py
import numpy as np

from roadgraph.domain.entities.geography import Coordinate
from roadgraph.domain.graph import Graph


def grid_graph(
    rows: int,
    cols: int,
    *,
    origin: tuple[float, float] = (0.0, 0.0),
    spacing_deg: float = 0.001,
    detour: float = 1.0,
    road_type: str = "residential",
    bidirectional: bool = True,
) -> Graph:
    """Lattice of intersections; edge length = great-circle length * detour."""
    lat0, lon0 = origin
    pts = [
        [Coordinate(lat0 + r * spacing_deg, lon0 + c * spacing_deg) for c in range(cols)]
        for r in range(rows)
    ]
    g = Graph()
    for row in pts:
        for p in row:
            g.add_vertex(p)

    def add(a: Coordinate, b: Coordinate, name: str):
        g.add_edge(a, b, name, road_type, a.distance(b) * detour)
        if bidirectional:
            g.add_edge(b, a, name, road_type, b.distance(a) * detour)

    for r in range(rows):
        for c in range(cols):
            if c + 1 < cols:
                add(pts[r][c], pts[r][c + 1], f"Row {r}")
            if r + 1 < rows:
                add(pts[r][c], pts[r + 1][c], f"Col {c}")
    return g


def random_graph(
    rng: np.random.Generator,
    *,
    nodes: int,
    bbox: tuple[float, float, float, float],
    degree: int = 3,
    detour: tuple[float, float] = (1.0, 1.5),
    road_type: str = "residential",
) -> Graph:
    """
    Intersections sampled uniformly in ``bbox`` (lat0, lon0, lat1, lon1).

    Every vertex gets directed edges to its ``degree`` nearest neighbours;
    each length is the great-circle length times a factor drawn from
    ``detour``, so the straight-line heuristic never overestimates.
    """
    lat0, lon0, lat1, lon1 = bbox
    lats = rng.uniform(lat0, lat1, size=nodes)
    lons = rng.uniform(lon0, lon1, size=nodes)
    pts = [Coordinate(float(a), float(b)) for a, b in zip(lats, lons)]

    g = Graph()
    for p in pts:
        g.add_vertex(p)
    # duplicate draws collapse into one vertex
    pts = sorted(g.get_vertices())

    lo, hi = detour
    for i, p in enumerate(pts):
        dists = np.array([p.distance(q) for q in pts])
        dists[i] = np.inf
        for j in np.argsort(dists, kind="stable")[: min(degree, len(pts) - 1)]:
            q = pts[int(j)]
            length = float(dists[j] * rng.uniform(lo, hi))
            g.add_edge(p, q, f"Road {i}-{int(j)}", road_type, length)
    return g
