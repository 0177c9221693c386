"""A last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Stack:
    """A LIFO stack; iteration runs from the top down."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top item; ``IndexError`` if the stack is empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it; ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"