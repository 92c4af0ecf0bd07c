"""Fixed-capacity FIFO ring buffer."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """A FIFO of fixed capacity; the oldest item comes out first."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[T] = deque()

    def push(self, item: T) -> bool:
        """Append ``item``; return False and drop it if the buffer is full."""
        if len(self._items) == self.capacity:
            return False
        self._items.append(item)
        return True

    def force_push(self, item: T) -> bool:
        """Append ``item``, discarding the oldest item if the buffer is full."""
        if len(self._items) == self.capacity:
            self.discard()
        self._items.append(item)
        return True

    def pop(self) -> T:
        """Remove and return the oldest item. Raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty ring buffer")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the oldest item without removing it. Raises IndexError when empty."""
        if not self._items:
            raise IndexError("peek into empty ring buffer")
        return self._items[0]

    def discard(self) -> bool:
        """Drop the oldest item; return False if there was none."""
        if not self._items:
            return False
        self._items.popleft()
        return True

    def empty(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))