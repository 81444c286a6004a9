"""Priority queues backing the shortest-path algorithms."""

from .heap import DAryMinHeap
from .indexed import IndexedDAryMinPQ

__all__ = ["IndexedDAryMinPQ", "DAryMinHeap"]
