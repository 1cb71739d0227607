# main.py
from roadgraph.app.build import build_router
from roadgraph.config.models import GridGraphModel
from roadgraph.io.recorder import VisitRecorder
from roadgraph.runtime.registries import make_graph


def run(rows: int = 20, cols: int = 20):
    graph = make_graph(GridGraphModel(rows=rows, cols=cols, detour=1.2))
    corners = sorted(graph.get_vertices())
    start, goal = corners[0], corners[-1]

    for kind in ("bfs", "dijkstra", "astar"):
        router = build_router({"name": f"demo-{kind}", "search": {"kind": kind}}, graph)
        rec = VisitRecorder()
        path = router.route(start, goal, rec)
        router.hooks.log.info(
            "demo_result",
            extra={
                "extra": {
                    "algorithm": kind,
                    "visited": rec.count,
                    "hops": None if path is None else len(path) - 1,
                    "km": None if path is None else round(router.route_length(path), 4),
                }
            },
        )


if __name__ == "__main__":
    run()
