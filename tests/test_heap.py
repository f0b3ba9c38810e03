import random

from pathgrid.core.heap import EMPTY, PriorityQueue, ascending, descending


def drain(pq):
    out = []
    while True:
        v = pq.extract_top()
        if v is EMPTY:
            return out
        out.append(v)


def test_min_heap_extracts_in_ascending_order():
    rng = random.Random(7)
    values = [rng.randint(-50, 50) for _ in range(200)]
    pq = PriorityQueue()
    for v in values:
        pq.insert(v)
    out = drain(pq)
    assert out == sorted(values)


def test_max_heap_is_same_class_with_other_comparator():
    values = [5, 1, 9, 3, 9, 0, 7]
    pq = PriorityQueue(descending())
    for v in values:
        pq.insert(v)
    assert type(pq) is PriorityQueue
    assert drain(pq) == sorted(values, reverse=True)


def test_key_comparators():
    pq = PriorityQueue.min_by(lambda t: t[0])
    for t in [(3, "c"), (1, "a"), (2, "b")]:
        pq.insert(t)
    assert [t[1] for t in drain(pq)] == ["a", "b", "c"]

    pq = PriorityQueue.max_by(len)
    for s in ["aa", "a", "aaaa", "aaa"]:
        pq.insert(s)
    assert drain(pq) == ["aaaa", "aaa", "aa", "a"]


def test_ties_keep_all_values():
    pq = PriorityQueue.min_by(lambda t: t[0])
    items = [(1, i) for i in range(10)] + [(0, 99)]
    for t in items:
        pq.insert(t)
    out = drain(pq)
    assert out[0] == (0, 99)
    assert sorted(out) == sorted(items)


def test_empty_access_returns_sentinel():
    pq = PriorityQueue()
    assert pq.peek() is EMPTY
    assert pq.extract_top() is EMPTY
    assert pq.size() == 0
    assert pq.is_empty()
    assert not EMPTY


def test_size_tracks_inserts_minus_extracts():
    rng = random.Random(3)
    pq = PriorityQueue()
    inserted = extracted = 0
    for _ in range(500):
        if rng.random() < 0.55:
            pq.insert(rng.random())
            inserted += 1
        elif pq.extract_top() is not EMPTY:
            extracted += 1
        assert pq.size() == len(pq) == inserted - extracted


def test_peek_does_not_mutate():
    pq = PriorityQueue()
    for v in [4, 2, 8]:
        pq.insert(v)
    assert pq.peek() == 2
    assert pq.peek() == 2
    assert pq.size() == 3


def test_heap_property_holds_after_every_insert():
    cmp = ascending()
    pq = PriorityQueue(cmp)
    for v in [9, 4, 7, 1, 8, 2, 6, 3, 5, 0]:
        pq.insert(v)
        items = list(pq)
        for i in range(1, len(items)):
            assert cmp(items[(i - 1) // 2], items[i]) <= 0


def test_levels():
    pq = PriorityQueue()
    for v in [1, 5, 3, 9, 6, 8]:
        pq.insert(v)
    assert pq.levels() == [[1], [5, 3], [9, 6, 8]]
    assert PriorityQueue().levels() == []
