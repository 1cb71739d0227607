# io/recorder.py
import json
import sys
from dataclasses import asdict, dataclass
from typing import Protocol

from roadgraph.domain.entities.geography import Coordinate


@dataclass(frozen=True)
class VisitRecord:
    seq: int
    lat: float
    lon: float


class Sink(Protocol):
    def write(self, rec: VisitRecord) -> None: ...


class JsonlSink:
    def __init__(self, fp=sys.stdout):
        self.fp = fp

    def write(self, rec: VisitRecord) -> None:
        self.fp.write(json.dumps(asdict(rec)) + "\n")


class MemorySink:
    def __init__(self):
        self.records: list[VisitRecord] = []

    def write(self, rec: VisitRecord) -> None:
        self.records.append(rec)


class VisitRecorder:
    """Visit callback that forwards every searched location to its sinks, in order."""

    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (MemorySink(),)
        self.count = 0

    def __call__(self, loc: Coordinate) -> None:
        self.count += 1
        rec = VisitRecord(self.count, loc.latitude, loc.longitude)
        for s in self.sinks:
            s.write(rec)

    def locations(self) -> list[Coordinate]:
        for s in self.sinks:
            if isinstance(s, MemorySink):
                return [Coordinate(r.lat, r.lon) for r in s.records]
        raise ValueError("VisitRecorder has no MemorySink attached")
