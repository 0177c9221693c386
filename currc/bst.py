"""An unbalanced binary search tree of keys; equal keys go to the right."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class BSTNode:
    """A tree node."""

    key: Any
    left: BSTNode | None = None
    right: BSTNode | None = None


class BinarySearchTree:
    """A binary search tree that allows duplicate keys."""

    def __init__(self, keys: Iterable[Any] | None = None) -> None:
        self._root: BSTNode | None = None
        self._length = 0
        for key in keys or ():
            self.insert(key)

    @property
    def root(self) -> BSTNode | None:
        """The root node, or ``None`` for an empty tree."""
        return self._root

    def insert(self, key: Any) -> None:
        """Add ``key``; a key equal to an existing one goes to its right."""
        new_node = BSTNode(key)
        self._length += 1
        if self._root is None:
            self._root = new_node
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def search(self, key: Any) -> BSTNode | None:
        """The first node holding ``key`` on the way down, or ``None``."""
        node = self._root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def delete(self, key: Any) -> bool:
        """Remove one occurrence of ``key``; report whether it was found."""
        parent: BSTNode | None = None
        node = self._root
        while node is not None and node.key != key:
            parent, node = node, (node.left if key < node.key else node.right)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key = key = successor.key
            parent, node = node, node.right
            while node.key != key:
                parent, node = node, (node.left if key < node.key else node.right)
        child = node.right if node.left is None else node.left
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._length -= 1
        return True

    def minimum(self) -> Any:
        """The smallest key; ``ValueError`` if the tree is empty."""
        node = self._root
        if node is None:
            raise ValueError("minimum of empty tree")
        while node.left is not None:
            node = node.left
        return node.key

    def maximum(self) -> Any:
        """The largest key; ``ValueError`` if the tree is empty."""
        node = self._root
        if node is None:
            raise ValueError("maximum of empty tree")
        while node.right is not None:
            node = node.right
        return node.key

    def in_order(self) -> Iterator[Any]:
        """Keys in left, node, right order."""
        pending: list[BSTNode] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.key
            node = node.right

    def pre_order(self) -> Iterator[Any]:
        """Keys in node, left, right order."""
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            yield node.key
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)

    def post_order(self) -> Iterator[Any]:
        """Keys in left, right, node order."""
        pending = [self._root] if self._root is not None else []
        visited: list[Any] = []
        while pending:
            node = pending.pop()
            visited.append(node.key)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        yield from reversed(visited)

    def clear(self) -> None:
        """Remove every key."""
        self._root = None
        self._length = 0

    def __contains__(self, key: object) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"