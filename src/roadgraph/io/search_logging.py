# io/search_logging.py
import json
import logging
import sys

from roadgraph.domain.entities.geography import Coordinate
from roadgraph.search.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def _default_json_logger(name="roadgraph", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


def _loc(loc) -> list[float] | None:
    return list(loc.as_pair()) if isinstance(loc, Coordinate) else None


class SearchLogging(NoopHooks):
    """
    One place to shape and emit structured logs for route searches.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # -----------------------------------------------------

    def search_start(self, *, algorithm, start, goal):
        self._emit("INFO", "search_start", algorithm=algorithm, start=_loc(start), goal=_loc(goal))

    def node_searched(self, loc, *, algorithm, seq, frontier):
        if self.debug and (seq % self.sample_every) == 0:
            self._emit(
                "DEBUG", "node_searched", algorithm=algorithm, loc=_loc(loc), seq=seq, frontier=frontier
            )

    def search_end(self, *, algorithm, found, searched, hops, distance, wall_ms):
        self._emit(
            "INFO",
            "search_end",
            algorithm=algorithm,
            found=found,
            searched=searched,
            hops=hops,
            distance=distance,
            wall_ms=round(wall_ms, 3),
        )

    def error(self, *, algorithm, reason: str, **kw):
        extra = {k: _loc(v) if isinstance(v, Coordinate) else v for k, v in kw.items()}
        self._emit("ERROR", "search_error", algorithm=algorithm, reason=reason, **extra)
