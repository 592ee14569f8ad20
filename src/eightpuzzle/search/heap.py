from __future__ import annotations
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")

class BinaryHeap(Generic[T]):
    """
    Array-backed binary heap ordered by a caller-supplied comparison.

    better(a, b) must return True when a has strictly higher priority than b.
    For every non-root index i, better(elements[i], elements[parent(i)]) is False.
    Ties are resolved only by sift order; there is no insertion counter.
    """

    def __init__(self, elements: Iterable[T] = (), better: Optional[Callable[[T, T], bool]] = None):
        if better is None:
            raise TypeError("BinaryHeap needs a 'better' comparison")
        self._better = better
        self._items: List[T] = list(elements)
        self._heapify()

    def _heapify(self) -> None:
        for i in reversed(range(len(self._items) // 2)):
            self._sift_down(i)

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def peek(self) -> Optional[T]:
        return self._items[0] if self._items else None

    def as_list(self) -> List[T]:
        """Copy of the backing array in heap order."""
        return list(self._items)

    def enqueue(self, x: T) -> None:
        self._items.append(x)
        self._sift_up(len(self._items) - 1)

    def dequeue(self) -> Optional[T]:
        items = self._items
        if not items:
            return None
        items[0], items[-1] = items[-1], items[0]
        top = items.pop()
        if items:
            self._sift_down(0)
        return top

    def _sift_up(self, i: int) -> None:
        items, better = self._items, self._better
        while i > 0:
            p = (i - 1) // 2
            if not better(items[i], items[p]):
                break
            items[i], items[p] = items[p], items[i]
            i = p

    def _sift_down(self, i: int) -> None:
        items, better = self._items, self._better
        n = len(items)
        while True:
            left = 2 * i + 1
            right = left + 1
            best = i
            if left < n and better(items[left], items[best]):
                best = left
            if right < n and better(items[right], items[best]):
                best = right
            if best == i:
                return
            items[i], items[best] = items[best], items[i]
            i = best
