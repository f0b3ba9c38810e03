#!/usr/bin/env python3
"""
A* on a 4-connected GridMap — one expansion per step() for animation.

API used by the session / runner:
- reset() - step() -> StepResult - run(cancel) -> iterator of StepResult - solve()

Frontier entries carry their whole path (first step after start .. cell), so the
result needs no back-tracking. A parent map walked back from goal would use less
memory on big grids and produce the same paths. Snapshots copy the visited and
frontier sets every step, so a full run is quadratic in the number of cells;
fine for screen-sized grids, use step() metrics alone for large ones.

The queue has no decrease-key: a cell may sit in it several times with different
f values. The first copy popped wins and later copies hit the closed set and are
dropped inside the same step() call, so every call is exactly one expansion.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Set

from pathgrid.core.heap import EMPTY, PriorityQueue
from pathgrid.core.heuristics import Heuristic, manhattan
from pathgrid.core.types import (
    CANCELLED, DONE, IDLE, NO_PATH, RUNNING, TERMINAL,
    Cell, FrontierEntry, GridMap, Path, StepResult,
)

log = logging.getLogger(__name__)


def _f_score(e: FrontierEntry) -> int:
    return e.f


@dataclass
class AStarSearch:
    grid: GridMap
    heuristic: Heuristic = manhattan
    name: str = "A*"

    # Internal state
    status: str = IDLE
    open_pq: PriorityQueue = field(default_factory=lambda: PriorityQueue.min_by(_f_score))
    open_set: Set[Cell] = field(default_factory=set)      # frontier membership for snapshots
    closed_set: Set[Cell] = field(default_factory=set)
    popped_count: int = 0
    stale_count: int = 0
    result: Optional[StepResult] = None

    # -------------------- lifecycle --------------------

    def reset(self) -> None:
        """Drop all search state; the next step() starts from scratch."""
        self.status = IDLE
        self.open_pq = PriorityQueue.min_by(_f_score)
        self.open_set.clear()
        self.closed_set.clear()
        self.popped_count = 0
        self.stale_count = 0
        self.result = None

    def _seed(self) -> List[Cell]:
        s = self.grid.start
        # start is closed up front and never re-entered
        self.closed_set.add(s)
        opened: List[Cell] = []
        for n in self.grid.neighbors(s):
            self._push(n, 1, (n,), opened)
        self.status = RUNNING
        log.debug("%s: seeded %d entries around %s", self.name, len(opened), s)
        return opened

    # -------------------- helpers --------------------

    def _push(self, c: Cell, g: int, path: Path, opened: List[Cell]) -> None:
        self.open_pq.insert(FrontierEntry(f=g + self.heuristic(c, self.grid.goal), g=g, cell=c, path=path))
        if c not in self.open_set:
            self.open_set.add(c)
            opened.append(c)

    def _snapshot(self, status: str, current: Optional[Cell] = None,
                  opened: Optional[List[Cell]] = None, path: Optional[Path] = None) -> StepResult:
        return StepResult(
            status=status,
            visited=frozenset(self.closed_set),
            frontier=frozenset(self.open_set),
            current=current,
            opened=opened or [],
            path=path,
            metrics=self._metrics(path_len=len(path) if path else 0),
        )

    def _finish(self, status: str, current: Optional[Cell] = None, path: Optional[Path] = None) -> StepResult:
        self.status = status
        self.result = self._snapshot(status, current=current, path=path)
        if status == DONE:
            log.info("%s: reached %s in %d steps (popped=%d)", self.name, self.grid.goal, len(path), self.popped_count)
        else:
            log.info("%s: %s after %d expansions", self.name, status, self.popped_count)
        return self.result

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE A* expansion:
          - Pop the lowest-f entry, skipping stale copies of closed cells.
          - If it is the goal, finish with its path.
          - Else close it and push its open neighbors with g + 1.
        """
        if self.status in TERMINAL:
            return self.result

        opened: List[Cell] = []
        if self.status == IDLE:
            opened = self._seed()

        while True:
            entry = self.open_pq.extract_top()
            if entry is EMPTY:
                return self._finish(NO_PATH)
            u = entry.cell
            if u in self.closed_set:
                self.stale_count += 1
                continue
            break

        self.popped_count += 1
        self.open_set.discard(u)
        self.closed_set.add(u)
        if u in opened:
            opened.remove(u)

        if u == self.grid.goal:
            return self._finish(DONE, current=u, path=entry.path)

        for v in self.grid.neighbors(u):
            if v in self.closed_set:
                continue
            self._push(v, entry.g + 1, entry.path + (v,), opened)

        return self._snapshot(RUNNING, current=u, opened=opened)

    def cancel(self) -> StepResult:
        """End the search as cancelled. No-op once a terminal state is reached."""
        if self.status in TERMINAL:
            return self.result
        return self._finish(CANCELLED)

    def run(self, cancel: Optional[Callable[[], bool]] = None) -> Iterator[StepResult]:
        """Fresh search; yields a snapshot per expansion, then the terminal result."""
        self.reset()
        while True:
            if cancel is not None and cancel():
                yield self.cancel()
                return
            res = self.step()
            yield res
            if res.finished:
                return

    def solve(self, cancel: Optional[Callable[[], bool]] = None) -> StepResult:
        res = None
        for res in self.run(cancel):
            pass
        return res

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "stale_skipped": self.stale_count,
        }
