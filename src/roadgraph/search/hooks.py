# search/hooks.py
from collections.abc import Callable
from typing import Protocol

from roadgraph.domain.entities.geography import Coordinate

VisitFn = Callable[[Coordinate], None]


def no_visit(_loc: Coordinate) -> None:
    pass


class SearchHooks(Protocol):
    def search_start(self, *, algorithm, start, goal): ...
    def node_searched(self, loc: Coordinate, *, algorithm, seq, frontier): ...
    def search_end(self, *, algorithm, found, searched, hops, distance, wall_ms): ...
    def error(self, *, algorithm, reason: str, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def node_searched(self, *_, **__):
        pass

    def search_end(self, **_):
        pass

    def error(self, *_, **__):
        pass
