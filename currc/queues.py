"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from typing import Any


class Queue:
    """A FIFO queue; iteration runs from front to rear."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the rear."""
        self._items.append(data)

    def dequeue(self) -> Any:
        """Remove and return the front item; ``IndexError`` if the queue is empty."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front item without removing it; ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("peek at empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        """Whether the queue holds no items."""
        return not self._items

    def clone(self, copy_func: Callable[[Any], Any] | None = None) -> Queue:
        """A new queue holding ``copy_func`` of each item, in the same order.

        Without ``copy_func`` the new queue shares the items.
        """
        copied = Queue()
        for item in self._items:
            copied.enqueue(item if copy_func is None else copy_func(item))
        return copied

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"