"""
Plain d-ary minimum heap.

Same sink/swim layout as IndexedDAryMinPQ but without indices, backed by a
growable Python list. Useful when entries never need their priority changed.
"""

from typing import Generic, Iterable, List, Optional, TypeVar

from .indexed import MAX_ARITY, MIN_ARITY

T = TypeVar("T")


class DAryMinHeap(Generic[T]):
    """
    Minimum heap in which every node has up to d children.

    Example:
        >>> h = DAryMinHeap(4, [5, 1, 3])
        >>> h.del_min()
        1
    """

    def __init__(self, d: int = 4, items: Optional[Iterable[T]] = None):
        if not MIN_ARITY <= d <= MAX_ARITY:
            raise ValueError(f"Heap arity must be between {MIN_ARITY} and {MAX_ARITY} inclusive, got {d}")
        self.d = d
        self._heap: List[T] = []
        if items is not None:
            for item in items:
                self.insert(item)

    def insert(self, item: T) -> None:
        if item is None:
            raise ValueError("Heap cannot hold None")
        self._heap.append(item)
        self._swim(len(self._heap) - 1)

    def min(self) -> T:
        if not self._heap:
            raise IndexError("Heap is empty")
        return self._heap[0]

    def del_min(self) -> T:
        if not self._heap:
            raise IndexError("Heap is empty")
        heap = self._heap
        smallest = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._sink(0)
        return smallest

    def _swim(self, k: int) -> None:
        heap = self._heap
        while k > 0:
            parent = (k - 1) // self.d
            if not heap[parent] > heap[k]:
                break
            heap[parent], heap[k] = heap[k], heap[parent]
            k = parent

    def _sink(self, k: int) -> None:
        heap = self._heap
        n = len(heap)
        while True:
            first = self.d * k + 1
            if first >= n:
                break
            j = first
            for c in range(first + 1, min(first + self.d, n)):
                if heap[j] > heap[c]:
                    j = c
            if not heap[k] > heap[j]:
                break
            heap[k], heap[j] = heap[j], heap[k]
            k = j

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
