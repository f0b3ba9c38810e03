#!/usr/bin/env python3
"""
SearchSession — what a UI talks to.

- toggle_obstacle(cell) -> bool   (rejected while a run is active)
- run_search(cancel)   -> iterator of StepResult, last one terminal
- trail()              -> last path without the goal cell

The UI owns pacing: it pulls snapshots from run_search() as fast or as slow as
it wants to draw them.
"""

import logging
from typing import Callable, Iterator, Optional, Tuple

from pathgrid.core.astar import AStarSearch
from pathgrid.core.heuristics import Heuristic, manhattan
from pathgrid.core.types import DONE, GridMap, Path, StepResult

log = logging.getLogger(__name__)


class SearchSession:
    def __init__(self, grid: GridMap, heuristic: Heuristic = manhattan, name: str = "A*"):
        self.grid = grid
        self.heuristic = heuristic
        self.name = name
        self.running = False
        self.last_result: Optional[StepResult] = None

    @property
    def state(self) -> str:
        if self.running:
            return "Running"
        if self.last_result is None:
            return "Idle"
        return {"done": "Done", "no_path": "No path", "cancelled": "Cancelled"}[self.last_result.status]

    def toggle_obstacle(self, cell: Tuple[int, int]) -> bool:
        if self.running:
            log.debug("toggle %s rejected: search in progress", tuple(cell))
            return False
        changed = self.grid.toggle_blocked(cell)
        if not changed:
            log.debug("toggle %s ignored: start/goal", tuple(cell))
        return changed

    def run_search(self, cancel: Optional[Callable[[], bool]] = None) -> Iterator[StepResult]:
        if self.running:
            raise RuntimeError("a search is already running on this session")
        self.running = True
        self.last_result = None
        algo = AStarSearch(self.grid, heuristic=self.heuristic, name=self.name)
        try:
            for res in algo.run(cancel):
                if res.finished:
                    self.last_result = res
                yield res
        finally:
            # consumer may drop the generator mid-run
            self.running = False

    def trail(self) -> Path:
        res = self.last_result
        if res is None or res.status != DONE:
            return ()
        return res.path[:-1]
