# pathgrid/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, NamedTuple, Optional, Set, Tuple


class Cell(NamedTuple):
    x: int  # col
    y: int  # row


Path = Tuple[Cell, ...]

# Search status values carried by StepResult.status
IDLE = "idle"
RUNNING = "running"
DONE = "done"
NO_PATH = "no_path"
CANCELLED = "cancelled"

TERMINAL = (DONE, NO_PATH, CANCELLED)


class GridMap:
    """Sparse obstacle map with fixed bounds, start and goal.

    Only the caller mutates it, and only between searches.
    """

    def __init__(self, width: int, height: int, start: Tuple[int, int], goal: Tuple[int, int],
                 blocked: Iterable[Tuple[int, int]] = ()):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.start = Cell(*start)
        self.goal = Cell(*goal)
        if not self.in_bounds(self.start):
            raise ValueError(f"start {self.start} out of bounds")
        if not self.in_bounds(self.goal):
            raise ValueError(f"goal {self.goal} out of bounds")
        if self.start == self.goal:
            raise ValueError("start and goal must be different cells")

        self._blocked: Set[Cell] = set()
        for c in blocked:
            c = Cell(*c)
            if self.in_bounds(c) and c not in (self.start, self.goal):
                self._blocked.add(c)

    def __repr__(self) -> str:
        return (f"GridMap({self.width}x{self.height}, start={tuple(self.start)}, "
                f"goal={tuple(self.goal)}, blocked={len(self._blocked)})")

    @property
    def blocked(self) -> FrozenSet[Cell]:
        return frozenset(self._blocked)

    def in_bounds(self, c: Tuple[int, int]) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blocked(self, c: Tuple[int, int]) -> bool:
        return Cell(*c) in self._blocked

    def toggle_blocked(self, c: Tuple[int, int]) -> bool:
        """Flip the blocked state of c. Returns False when c is start or goal."""
        c = Cell(*c)
        if c == self.start or c == self.goal:
            return False
        if c in self._blocked:
            self._blocked.remove(c)
        else:
            self._blocked.add(c)
        return True

    def clear(self) -> None:
        self._blocked.clear()

    def neighbors(self, c: Tuple[int, int]) -> List[Cell]:
        """In-bounds, unblocked orthogonal neighbors: left, right, up, down."""
        x, y = c
        candidates = [Cell(x - 1, y), Cell(x + 1, y), Cell(x, y - 1), Cell(x, y + 1)]
        return [n for n in candidates if self.in_bounds(n) and n not in self._blocked]


@dataclass(frozen=True)
class FrontierEntry:
    f: int
    g: int
    cell: Cell
    path: Path  # first step after start .. cell


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path" | "cancelled"
    visited: FrozenSet[Cell] = frozenset()
    frontier: FrozenSet[Cell] = frozenset()
    current: Optional[Cell] = None
    opened: List[Cell] = field(default_factory=list)
    path: Optional[Path] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def finished(self) -> bool:
        return self.status in TERMINAL
