"""
Indexed minimum priority queue on a d-ary heap.

Each entry is identified by an integer index in [0, capacity), which lets
clients such as Dijkstra's algorithm change the priority of a vertex that is
already queued. Three parallel arrays hold the state:

    keys[i]   priority of index i
    pq[pos]   index stored at heap position pos
    qp[i]     heap position of index i, or -1 when i is absent

so that pq[qp[i]] == i and qp[pq[pos]] == pos. The heap is 0-based: the
children of position p are d*p + 1 .. d*p + d and its parent is (p - 1) // d.

References:
    - Sedgewick, Wayne. "Algorithms", 4th ed. Section 2.4 (IndexMinPQ) and
      exercise 2.4.41 (multiway heaps).
"""

from typing import Any, Generic, Iterator, List, Optional, TypeVar

import numpy as np

from ..diagnostics.core import assert_heap_invariants
from ..diagnostics.debug_mode import certify

K = TypeVar("K")

MIN_ARITY = 2
MAX_ARITY = 4


class IndexedDAryMinPQ(Generic[K]):
    """
    Indexed min-priority queue over any totally ordered key type.

    Ties are broken by heap position: when several children share the
    minimum key, the first one is promoted.

    Attributes:
        d: Heap arity, between 2 and 4 inclusive.
        capacity: Number of valid indices.

    Complexity:
        - insert, decrease_key: O(log_d n)
        - del_min, increase_key, change_key, delete: O(d log_d n)
        - contains, key, min_key, size: O(1)

    Example:
        >>> pq = IndexedDAryMinPQ(4, 10)
        >>> pq.insert(3, 0.5)
        >>> pq.insert(7, 0.2)
        >>> pq.del_min()
        7
    """

    def __init__(self, d: int, capacity: int):
        """
        Create an empty queue.

        Args:
            d: Heap arity (2 for a binary heap up to 4 for a 4-ary heap).
            capacity: Indices 0..capacity-1 may be used.

        Raises:
            ValueError: If d is not in [2, 4] or capacity is not positive.
        """
        if not MIN_ARITY <= d <= MAX_ARITY:
            raise ValueError(f"Heap arity must be between {MIN_ARITY} and {MAX_ARITY} inclusive, got {d}")
        if capacity < 1:
            raise ValueError(f"Capacity must be a positive value, got {capacity}")

        self.d = d
        self.capacity = capacity
        self._keys: List[Optional[K]] = [None] * capacity
        self._pq = np.full(capacity, -1, dtype=np.int64)
        self._qp = np.full(capacity, -1, dtype=np.int64)
        self._n = 0

    def _validate_index(self, i: int) -> None:
        if not 0 <= i < self.capacity:
            raise ValueError(f"Invalid index: {i}")

    def _require_present(self, i: int) -> None:
        self._validate_index(i)
        if self._qp[i] == -1:
            raise KeyError(f"Index {i} is not in the priority queue")

    def _greater(self, a: int, b: int) -> bool:
        # a and b are heap positions
        return self._keys[self._pq[a]] > self._keys[self._pq[b]]

    def _swap(self, a: int, b: int) -> None:
        pq, qp = self._pq, self._qp
        pq[a], pq[b] = pq[b], pq[a]
        qp[pq[a]] = a
        qp[pq[b]] = b

    def _swim(self, k: int) -> None:
        while k > 0:
            parent = (k - 1) // self.d
            if not self._greater(parent, k):
                break
            self._swap(parent, k)
            k = parent

    def _sink(self, k: int) -> None:
        while True:
            first = self.d * k + 1
            if first >= self._n:
                break
            last = min(first + self.d, self._n)
            j = first
            for c in range(first + 1, last):
                if self._greater(j, c):
                    j = c
            if not self._greater(k, j):
                break
            self._swap(k, j)
            k = j

    def _checked(self) -> None:
        certify(assert_heap_invariants, self)

    def insert(self, i: int, key: K) -> None:
        """
        Associate key with index i.

        Raises:
            ValueError: If i is out of range, key is None, or i is already present.
        """
        self._validate_index(i)
        if key is None:
            raise ValueError("Key cannot be None")
        if self._qp[i] != -1:
            raise ValueError(f"Index {i} is already in the priority queue")

        self._qp[i] = self._n
        self._pq[self._n] = i
        self._keys[i] = key
        self._n += 1
        self._swim(self._n - 1)
        self._checked()

    def change_key(self, i: int, key: K) -> None:
        """
        Overwrite the key of index i, moving it up or down as needed.

        Raises:
            ValueError: If i is out of range or key is None.
            KeyError: If i is not present.
        """
        if key is None:
            raise ValueError("Key cannot be None")
        self._require_present(i)

        self._keys[i] = key
        # only one of these moves the entry
        self._swim(int(self._qp[i]))
        self._sink(int(self._qp[i]))
        self._checked()

    def decrease_key(self, i: int, key: K) -> None:
        """
        Lower the key of index i.

        Raises:
            ValueError: If key is None or not strictly smaller than the current key.
            KeyError: If i is not present.
        """
        if key is None:
            raise ValueError("Key cannot be None")
        self._require_present(i)
        if not key < self._keys[i]:
            raise ValueError(f"Key {key!r} does not strictly decrease the key of index {i}")

        self._keys[i] = key
        self._swim(int(self._qp[i]))
        self._checked()

    def increase_key(self, i: int, key: K) -> None:
        """
        Raise the key of index i.

        Raises:
            ValueError: If key is None or not strictly greater than the current key.
            KeyError: If i is not present.
        """
        if key is None:
            raise ValueError("Key cannot be None")
        self._require_present(i)
        if not key > self._keys[i]:
            raise ValueError(f"Key {key!r} does not strictly increase the key of index {i}")

        self._keys[i] = key
        self._sink(int(self._qp[i]))
        self._checked()

    def delete(self, i: int) -> None:
        """
        Remove index i and its key.

        Raises:
            KeyError: If i is not present.
        """
        self._require_present(i)

        pos = int(self._qp[i])
        self._n -= 1
        self._swap(pos, self._n)
        self._keys[i] = None
        self._qp[i] = -1
        self._pq[self._n] = -1
        if pos < self._n:
            self._swim(pos)
            self._sink(pos)
        self._checked()

    def del_min(self) -> int:
        """
        Remove the entry with the smallest key and return its index.

        Raises:
            IndexError: If the queue is empty.
        """
        if self._n == 0:
            raise IndexError("Priority queue is empty")

        smallest = int(self._pq[0])
        self._n -= 1
        self._swap(0, self._n)
        self._keys[smallest] = None
        self._qp[smallest] = -1
        self._pq[self._n] = -1
        self._sink(0)
        self._checked()
        return smallest

    def min_index(self) -> int:
        """Return the index holding the smallest key."""
        if self._n == 0:
            raise IndexError("Priority queue is empty")
        return int(self._pq[0])

    def min_key(self) -> K:
        """Return the smallest key without removing it."""
        if self._n == 0:
            raise IndexError("Priority queue is empty")
        return self._keys[self._pq[0]]

    def key(self, i: int) -> K:
        """
        Return the key associated with index i.

        Raises:
            ValueError: If i is out of range.
            KeyError: If i is not present.
        """
        self._require_present(i)
        return self._keys[i]

    def contains(self, i: int) -> bool:
        """Return True if index i is in the queue."""
        self._validate_index(i)
        return bool(self._qp[i] != -1)

    def __contains__(self, i: Any) -> bool:
        return isinstance(i, (int, np.integer)) and 0 <= i < self.capacity and bool(self._qp[i] != -1)

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def is_empty(self) -> bool:
        return self._n == 0

    def __iter__(self) -> Iterator[int]:
        """Yield indices in ascending key order without modifying this queue."""
        copy: IndexedDAryMinPQ[K] = IndexedDAryMinPQ(self.d, self.capacity)
        for pos in range(self._n):
            i = int(self._pq[pos])
            copy.insert(i, self._keys[i])
        while not copy.is_empty():
            yield copy.del_min()

    def __repr__(self) -> str:
        return f"IndexedDAryMinPQ(d={self.d}, capacity={self.capacity}, size={self._n})"
