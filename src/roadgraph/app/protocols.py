from typing import Protocol, runtime_checkable

from roadgraph.domain.entities.geography import Coordinate
from roadgraph.domain.graph import Graph
from roadgraph.search.hooks import SearchHooks, VisitFn


@runtime_checkable
class SearchFn(Protocol):
    """
    Responsibilities:
      • Find a route between two vertices of a fully built Graph.
      • Report every finalized location to ``visit``, in order.
    Returns the locations from start to goal inclusive, or None if unreachable.
    """

    def __call__(
        self,
        graph: Graph,
        start: Coordinate | None,
        goal: Coordinate | None,
        visit: VisitFn | None = None,
        *,
        hooks: SearchHooks | None = None,
    ) -> list[Coordinate] | None: ...
