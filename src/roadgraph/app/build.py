# roadgraph/app/build.py
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from roadgraph.app.protocols import SearchFn
from roadgraph.config.models import RouterModel
from roadgraph.domain.entities.geography import Coordinate
from roadgraph.domain.graph import Graph
from roadgraph.io.search_logging import SearchLogging  # JSON logs
from roadgraph.runtime.registries import make_search
from roadgraph.search.hooks import NoopHooks, SearchHooks, VisitFn


@dataclass
class Router:
    name: str
    graph: Graph
    search: SearchFn
    hooks: SearchHooks

    def route(
        self, start: Coordinate | None, goal: Coordinate | None, visit: VisitFn | None = None
    ) -> list[Coordinate] | None:
        return self.search(self.graph, start, goal, visit, hooks=self.hooks)

    def route_length(self, path: Sequence[Coordinate]) -> float:
        return self.graph.path_length(path)


def build_router(cfg: RouterModel | Mapping, graph: Graph, *, use_logging: bool = True) -> Router:
    # 0) Validate config
    model = cfg if isinstance(cfg, RouterModel) else RouterModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Algorithm
    search = make_search(model.search)

    return Router(model.name, graph, search, hooks)
