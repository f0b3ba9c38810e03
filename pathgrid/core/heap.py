#!/usr/bin/env python3
"""
Array-backed binary heap ordered by an injected comparator.

comparator(a, b) follows the classic cmp contract:
  < 0 if a should come out before b, 0 if tied, > 0 if b comes first.

There is no decrease-key. To change an element's priority, insert a new copy
and have the consumer discard the stale one when it surfaces (A* does this with
its closed set). Ties come out in whatever order the swaps leave them; nothing
here is stable.

Min and max queues are the same class with different comparators:
    PriorityQueue.min_by(lambda e: e.f)
    PriorityQueue.max_by(len)
"""

from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")
Comparator = Callable[[Any, Any], int]


class _Empty:
    """Sentinel returned by peek()/extract_top() on an empty queue."""

    _instance: Optional["_Empty"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = _Empty()


def _natural(v):
    return v


def ascending(key: Callable[[Any], Any] = _natural) -> Comparator:
    """Comparator for a min-queue on key(value)."""
    def cmp(a, b) -> int:
        ka, kb = key(a), key(b)
        return (ka > kb) - (ka < kb)
    return cmp


def descending(key: Callable[[Any], Any] = _natural) -> Comparator:
    """Comparator for a max-queue on key(value)."""
    def cmp(a, b) -> int:
        ka, kb = key(a), key(b)
        return (ka < kb) - (ka > kb)
    return cmp


class PriorityQueue(Generic[T]):

    def __init__(self, comparator: Optional[Comparator] = None):
        self._cmp: Comparator = comparator or ascending()
        self._items: List[T] = []

    @classmethod
    def min_by(cls, key: Callable[[T], Any] = _natural) -> "PriorityQueue[T]":
        return cls(ascending(key))

    @classmethod
    def max_by(cls, key: Callable[[T], Any] = _natural) -> "PriorityQueue[T]":
        return cls(descending(key))

    # -------------------- size --------------------

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        # storage (level) order, not priority order
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._items)})"

    # -------------------- access --------------------

    def peek(self):
        if not self._items:
            return EMPTY
        return self._items[0]

    def insert(self, value: T) -> None:
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def extract_top(self):
        if not self._items:
            return EMPTY
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return top

    def levels(self) -> List[List[T]]:
        """Heap as a list of tree levels, e.g. [[1], [5, 3], [9, 6, 8]]."""
        out: List[List[T]] = []
        start, width = 0, 1
        while start < len(self._items):
            out.append(self._items[start:start + width])
            start += width
            width *= 2
        return out

    # -------------------- heap maintenance --------------------

    def _sift_up(self, i: int) -> None:
        items, cmp = self._items, self._cmp
        while i > 0:
            parent = (i - 1) // 2
            if cmp(items[parent], items[i]) <= 0:
                break
            items[parent], items[i] = items[i], items[parent]
            i = parent

    def _sift_down(self, i: int) -> None:
        items, cmp = self._items, self._cmp
        n = len(items)
        while True:
            left = 2 * i + 1
            if left >= n:
                return
            child = left
            right = left + 1
            if right < n and cmp(items[right], items[left]) < 0:
                child = right
            if cmp(items[i], items[child]) <= 0:
                return
            items[i], items[child] = items[child], items[i]
            i = child
