# gridpath/core/dijkstra.py
#!/usr/bin/env python3
"""
Dijkstra (uniform-cost search) on the 4-connected unit-weight grid.

Two ways in:
- DijkstraAlgo: init(grid) - reset() - step() -> StepResult, one finalization per
  step, which is what the viewer animates.
- run_search(grid, start=None, end=None) -> SearchRun: lazy stream of visited cells plus the final
  reachable flag and path, for callers that just want the answer.

Tie-breaking in the PQ: (distance, seq, coord), so equal distances pop FIFO.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, Tuple
import heapq
from math import inf

from gridpath.core.grid import Grid
from gridpath.core.path import build_path
from gridpath.core.types import Cell, Coord, StepResult


@dataclass
class DijkstraAlgo:
    name: str = "Dijkstra"

    grid: Optional[Grid] = None
    open_pq: List[Tuple[float, int, Coord]] = field(default_factory=list)   # (dist, seq, coord)
    open_set: Set[Coord] = field(default_factory=set)
    closed_set: Set[Coord] = field(default_factory=set)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    path: Optional[List[Coord]] = None
    seq: int = 0

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid) -> None:
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        """Clear every cell's search attributes and seed the frontier with the start."""
        if self.grid is None:
            return
        if not self.grid.is_ready():
            raise ValueError("Search needs both a start and an end cell")
        self.grid.clear_search()
        self.open_pq.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.path = None
        self.seq = 0

        s = self.grid.start
        heapq.heappush(self.open_pq, (0, self._bump(), s))
        self.open_set.add(s)

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    # -------------------- stepping --------------------

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            return StepResult(status="done", path=self.path,
                              metrics=self._metrics(path_len=len(self.path)))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.open_pq:
            self.no_path = True
            return StepResult(status="no_path", metrics=self._metrics())

        d_u, _, u = heapq.heappop(self.open_pq)
        cur = self.grid.cell_at(u)
        # stale entry: a shorter one for u was pushed later, or u is already final
        if d_u != cur.distance or u in self.closed_set:
            return StepResult(status="running", current=u, metrics=self._metrics())

        self.popped_count += 1
        self.open_set.discard(u)
        self.closed_set.add(u)

        if u == self.grid.end:
            self.done = True
            self.path = [c.coord for c in build_path(self.grid, u)]
            return StepResult(status="done", current=u, path=self.path,
                              metrics=self._metrics(path_len=len(self.path)))

        opened_now: List[Coord] = []
        for nb in self.grid.neighbors_of(u):
            alt = cur.distance + 1
            if alt < nb.distance:
                nb.distance = alt
                nb.predecessor = u
                heapq.heappush(self.open_pq, (alt, self._bump(), nb.coord))
                if nb.coord not in self.open_set:
                    self.open_set.add(nb.coord)
                    opened_now.append(nb.coord)

        closed = [] if cur.is_start else [u]
        return StepResult(status="running", opened=opened_now, closed=closed, current=u,
                          metrics=self._metrics())

    def _metrics(self, path_len: int = 0) -> dict:
        end_dist = self.grid.cell_at(self.grid.end).distance if self.grid and self.grid.end else inf
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "distance": None if end_dist == inf else int(end_dist),
        }


class SearchRun:
    """
    One search over a grid. `visits` yields each finalized cell (start and end
    excluded) in order and can only be consumed once. Reading `reachable`,
    `path` or `distance` finishes whatever part of the search is left.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.algo = DijkstraAlgo()
        self.algo.init(grid)
        self.status = "running"
        self.cancelled = False
        self._path: List[Cell] = []
        self._visited: List[Cell] = []   # every cell `visits` has produced, in order
        self.visits: Iterator[Cell] = self._visit_stream()

    def _visit_stream(self) -> Iterator[Cell]:
        while True:
            res = self.algo.step()
            for c in res.closed:
                cell = self.grid.cell_at(c)
                self._visited.append(cell)
                yield cell
            if res.status in ("done", "no_path"):
                self.status = res.status
                if res.path:
                    self._path = [self.grid.cell_at(c) for c in res.path]
                return

    def _finish(self) -> None:
        for _ in self.visits:
            pass

    def cancel(self) -> None:
        """Stop between steps. Cells keep whatever distances were settled so far."""
        if self.status == "running":
            self.cancelled = True
            self.status = "cancelled"
        self.visits.close()

    @property
    def reachable(self) -> bool:
        self._finish()
        return self.status == "done"

    @property
    def path(self) -> List[Cell]:
        self._finish()
        return list(self._path)

    @property
    def distance(self) -> float:
        self._finish()
        return self.grid.cell_at(self.grid.end).distance if self.status == "done" else inf

    def as_tuple(self) -> Tuple[bool, Iterator[Cell], List[Cell]]:
        """
        Finish the search and return (reachable, visits, path). The visits
        iterator replays the whole visitation order once, including any part
        already pulled from `self.visits`.
        """
        reachable = self.reachable
        return reachable, iter(list(self._visited)), self.path


def run_search(grid: Grid, start: Optional[Coord] = None, end: Optional[Coord] = None) -> SearchRun:
    """
    Start a search from the grid's own start marker to its end marker.

    `start` / `end` are optional cross-checks: when given they must match
    grid.start / grid.end. Raises ValueError if either marker is unset or a
    cross-check fails.
    """
    if start is not None and start != grid.start:
        raise ValueError(f"start {start} is not the grid's start marker {grid.start}")
    if end is not None and end != grid.end:
        raise ValueError(f"end {end} is not the grid's end marker {grid.end}")
    return SearchRun(grid)
