from typing import Callable, Dict, Tuple

Heuristic = Callable[[Tuple[int, int], Tuple[int, int]], int]


def manhattan(c: Tuple[int, int], goal: Tuple[int, int]) -> int:
    """Admissible and consistent for a 4-connected grid with unit step cost."""
    (x, y) = c
    (gx, gy) = goal
    return abs(gx - x) + abs(gy - y)


def zero(c: Tuple[int, int], goal: Tuple[int, int]) -> int:
    # A* with h == 0 is uniform-cost search (Dijkstra)
    return 0


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "zero": zero,
}
