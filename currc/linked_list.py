"""A singly linked list whose insertions go to the head."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_node: _Node | None = None) -> None:
        self.data = data
        self.next = next_node


class LinkedList:
    """A singly linked list.

    New items are inserted at the head. Items are compared with ``==``
    when searching and deleting.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._length = 0
        if items is not None:
            for item in reversed(list(items)):
                self.insert(item)

    def insert(self, data: Any) -> None:
        """Put ``data`` at the head of the list."""
        self._head = _Node(data, self._head)
        self._length += 1

    def delete(self, key: Any) -> bool:
        """Remove the first item equal to ``key``; report whether one was found."""
        previous: _Node | None = None
        node = self._head
        while node is not None and node.data != key:
            previous, node = node, node.next
        if node is None:
            return False
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        self._length -= 1
        return True

    def search(self, key: Any) -> Any:
        """Return the first item equal to ``key``, or ``None`` if there is none."""
        return next((item for item in self if item == key), None)

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: _Node | None = None
        node = self._head
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self._head = previous

    def clear(self) -> None:
        """Remove every item."""
        self._head = None
        self._length = 0

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"