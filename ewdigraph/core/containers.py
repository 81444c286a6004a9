"""
Linked-list collections used by the graph algorithms.

Stack (LIFO), Queue (FIFO) and Bag (unordered multiset) share one node type
and one fail-fast iterator: each collection counts its mutations, and an
iterator raises RuntimeError on its next step if the count changed after the
iterator was created.

Complexity:
    - push / pop / enqueue / dequeue / add: O(1)
    - iteration: O(n)
"""

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("item", "next")

    def __init__(self, item: T, next: "Optional[_Node[T]]" = None):
        self.item = item
        self.next = next


class _FailFastIterator(Iterator[T]):
    """Walks a node chain, failing if the owning collection is mutated."""

    def __init__(self, owner: "_LinkedCollection[T]", first: "Optional[_Node[T]]"):
        self._owner = owner
        self._expected = owner._mod_count
        self._current = first

    def __iter__(self) -> "_FailFastIterator[T]":
        return self

    def __next__(self) -> T:
        if self._owner._mod_count != self._expected:
            raise RuntimeError(f"{type(self._owner).__name__} modified during iteration")
        if self._current is None:
            raise StopIteration
        item = self._current.item
        self._current = self._current.next
        return item


class _LinkedCollection(Generic[T]):
    def __init__(self) -> None:
        self._first: Optional[_Node[T]] = None
        self._size = 0
        self._mod_count = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[T]:
        return _FailFastIterator(self, self._first)

    def _check_item(self, item: T) -> None:
        if item is None:
            raise ValueError(f"{type(self).__name__} cannot hold None")

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(repr(item) for item in self)}])"


class Stack(_LinkedCollection[T]):
    """
    LIFO stack. Iteration runs from the top (most recently pushed) down.

    Example:
        >>> s = Stack()
        >>> s.push(1); s.push(2)
        >>> list(s)
        [2, 1]
    """

    def push(self, item: T) -> None:
        """
        Push an item on top of the stack.

        Raises:
            ValueError: If item is None.
        """
        self._check_item(item)
        self._first = _Node(item, self._first)
        self._size += 1
        self._mod_count += 1

    def pop(self) -> T:
        """
        Remove and return the top item.

        Raises:
            IndexError: If the stack is empty.
        """
        if self._first is None:
            raise IndexError("Stack is empty")
        item = self._first.item
        self._first = self._first.next
        self._size -= 1
        self._mod_count += 1
        return item

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self._first is None:
            raise IndexError("Stack is empty")
        return self._first.item

    def copy(self) -> "Stack[T]":
        """Return an independent stack with the same items in the same order."""
        clone: Stack[T] = Stack()
        for item in reversed(list(self)):
            clone.push(item)
        return clone


class Queue(_LinkedCollection[T]):
    """
    FIFO queue. Iteration runs from head (oldest) to tail.

    Example:
        >>> q = Queue()
        >>> q.enqueue(1); q.enqueue(2)
        >>> q.dequeue()
        1
    """

    def __init__(self) -> None:
        super().__init__()
        self._last: Optional[_Node[T]] = None

    def enqueue(self, item: T) -> None:
        """
        Append an item at the tail.

        Raises:
            ValueError: If item is None.
        """
        self._check_item(item)
        node = _Node(item)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._size += 1
        self._mod_count += 1

    def dequeue(self) -> T:
        """
        Remove and return the head item.

        Raises:
            IndexError: If the queue is empty.
        """
        if self._first is None:
            raise IndexError("Queue is empty")
        item = self._first.item
        self._first = self._first.next
        if self._first is None:
            self._last = None
        self._size -= 1
        self._mod_count += 1
        return item

    def peek_first(self) -> T:
        """Return the head item without removing it."""
        if self._first is None:
            raise IndexError("Queue is empty")
        return self._first.item

    def peek_last(self) -> T:
        """Return the tail item without removing it."""
        if self._last is None:
            raise IndexError("Queue is empty")
        return self._last.item

    def copy(self) -> "Queue[T]":
        """Return an independent queue with the same items in the same order."""
        clone: Queue[T] = Queue()
        for item in self:
            clone.enqueue(item)
        return clone


class Bag(_LinkedCollection[T]):
    """
    Unordered multiset. Items cannot be removed; iteration yields the most
    recently added item first.
    """

    def add(self, item: T) -> None:
        self._check_item(item)
        self._first = _Node(item, self._first)
        self._size += 1
        self._mod_count += 1
