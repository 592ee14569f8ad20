import random
from dataclasses import dataclass

import pytest

from eightpuzzle.search.heap import BinaryHeap

def less(a, b):
    return a < b

def assert_heap_invariant(heap, better):
    items = heap.as_list()
    for i, parent in enumerate(items):
        for c in (2 * i + 1, 2 * i + 2):
            if c < len(items):
                assert not better(items[c], parent), (i, c, items)

def drain(heap):
    out = []
    while True:
        x = heap.dequeue()
        if x is None:
            return out
        out.append(x)

def test_empty_heap():
    h = BinaryHeap(better=less)
    assert h.is_empty
    assert h.count == 0
    assert len(h) == 0
    assert h.dequeue() is None
    assert h.peek() is None

def test_requires_comparison():
    with pytest.raises(TypeError):
        BinaryHeap([3, 1, 2])

def test_construction_heapifies():
    rng = random.Random(7)
    data = [rng.randint(0, 100) for _ in range(50)]
    h = BinaryHeap(data, better=less)
    assert h.count == 50
    assert_heap_invariant(h, less)
    assert drain(h) == sorted(data)

def test_enqueue_dequeue_sorted():
    rng = random.Random(1)
    data = [rng.randint(-20, 20) for _ in range(100)]
    h = BinaryHeap(better=less)
    for x in data:
        h.enqueue(x)
        assert_heap_invariant(h, less)
    assert h.peek() == min(data)
    assert drain(h) == sorted(data)
    assert h.is_empty

def test_invariant_after_mixed_operations():
    rng = random.Random(42)
    h = BinaryHeap(better=less)
    shadow = []
    for _ in range(500):
        if shadow and rng.random() < 0.4:
            x = h.dequeue()
            assert x == min(shadow)
            shadow.remove(x)
        else:
            x = rng.randint(0, 30)
            h.enqueue(x)
            shadow.append(x)
        assert h.count == len(shadow)
        assert_heap_invariant(h, less)

def test_custom_comparison_max_heap():
    h = BinaryHeap([5, 1, 9, 3], better=lambda a, b: a > b)
    assert drain(h) == [9, 5, 3, 1]

@dataclass
class Job:
    name: str
    cost: int

def test_orders_records_by_cost():
    jobs = [Job("a", 4), Job("b", 1), Job("c", 3), Job("d", 1), Job("e", 7)]
    by_cost = lambda a, b: a.cost < b.cost
    h = BinaryHeap(better=by_cost)
    for j in jobs:
        h.enqueue(j)
    costs = [j.cost for j in drain(h)]
    assert costs == [1, 1, 3, 4, 7]
