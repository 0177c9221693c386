"""A separately chained hash map from strings to values, hashed with djb2."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_BUCKETS = 101
_MASK = 0xFFFFFFFF


def hash_function(key: str) -> int:
    """The 32-bit djb2 hash of ``key``'s UTF-8 bytes, read as signed chars."""
    value = 5381
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        value = (value * 33 + signed) & _MASK
    return value


class HashMap:
    """A fixed number of buckets, each a chain with the newest key first."""

    def __init__(self, size: int = DEFAULT_BUCKETS) -> None:
        if size <= 0:
            raise ValueError("the number of buckets must be positive")
        self._buckets: list[list[list[Any]]] = [[] for _ in range(size)]
        self._length = 0

    @property
    def size(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def _bucket(self, key: str) -> list[list[Any]]:
        if not isinstance(key, str):
            raise TypeError(f"keys must be str, not {type(key).__name__}")
        return self._buckets[hash_function(key) % len(self._buckets)]

    def put(self, key: str, value: Any) -> None:
        """Set ``key`` to ``value``, replacing any earlier value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.insert(0, [key, value])
        self._length += 1

    def get(self, key: str) -> Any:
        """The value stored under ``key``; ``KeyError`` if there is none."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        raise KeyError(key)

    def remove(self, key: str) -> bool:
        """Remove ``key``; report whether it was present."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                self._length -= 1
                return True
        return False

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(stored_key == key for stored_key, _ in self._bucket(key))

    def __iter__(self) -> Iterator[str]:
        for bucket in self._buckets:
            for key, _ in bucket:
                yield key

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        pairs = ", ".join(f"{key!r}: {self.get(key)!r}" for key in self)
        return f"{type(self).__name__}({{{pairs}}})"