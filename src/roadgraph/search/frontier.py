# search/frontier.py
import heapq

from roadgraph.domain.entities.geography import Coordinate
from roadgraph.search.candidates import RouteCandidate


class Frontier:
    """
    Min-priority queue of route candidates with lazy deletion.

    Entries are never re-keyed: a cheaper route is pushed as a new entry and
    older entries for the same destination become stale. ``pop`` only returns
    the entry that is still the recorded best for its destination and whose
    destination has not been finalized yet.

    ``len()`` is the raw heap size, stale entries included; ``pending`` is the
    number of destinations still waiting to be popped.
    """

    def __init__(self):
        self._q: list[tuple[float, int, RouteCandidate]] = []
        self._seq = 0
        self._live: dict[Coordinate, RouteCandidate] = {}
        self.stale = 0

    def __len__(self) -> int:
        return len(self._q)

    @property
    def pending(self) -> int:
        return len(self._live)

    def push(self, cand: RouteCandidate) -> None:
        # seq keeps equal priorities FIFO and stops heapq comparing candidates
        self._seq += 1
        heapq.heappush(self._q, (cand.priority, self._seq, cand))
        self._live[cand.destination] = cand

    def pop(self, best: dict, finalized: set) -> RouteCandidate | None:
        while self._q:
            _, _, cand = heapq.heappop(self._q)
            if self._live.get(cand.destination) is cand:
                del self._live[cand.destination]
            if cand.destination in finalized or best.get(cand.destination) is not cand:
                self.stale += 1
                continue
            return cand
        return None
