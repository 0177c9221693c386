"""A first-fit allocator that manages a fixed-size pool of bytes.

Addresses handed out by the pool are integer offsets into its backing
buffer. Every block is preceded by a header of ``HEADER_SIZE`` bytes.
Free neighbouring blocks are coalesced on every release.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

HEADER_SIZE = 24
DEFAULT_POOL_SIZE = 1024 * 1024


@dataclass
class MemoryBlock:
    """A block header: where the block starts, its payload size and state."""

    offset: int
    size: int
    is_free: bool = True

    @property
    def address(self) -> int:
        """Offset of the first payload byte."""
        return self.offset + HEADER_SIZE

    @property
    def end(self) -> int:
        """Offset just past the last payload byte."""
        return self.address + self.size


class MemoryPool:
    """A fixed pool of memory with malloc/calloc/realloc/free semantics."""

    def __init__(self, size: int = DEFAULT_POOL_SIZE) -> None:
        if size <= HEADER_SIZE:
            raise ValueError(f"pool size must exceed the header size ({HEADER_SIZE})")
        self._memory = bytearray(size)
        self._blocks = [MemoryBlock(0, size - HEADER_SIZE)]

    @property
    def size(self) -> int:
        """Total size of the pool in bytes, headers included."""
        return len(self._memory)

    def malloc(self, size: int) -> int | None:
        """Allocate ``size`` bytes and return their address.

        Returns ``None`` for a zero-byte request and raises
        ``MemoryError`` when no free block is large enough.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        if size == 0:
            return None
        for index, block in enumerate(self._blocks):
            if block.is_free and block.size >= size:
                if block.size > size + HEADER_SIZE:
                    self._split(index, size)
                block.is_free = False
                return block.address
        raise MemoryError(f"no free block of {size} bytes")

    def calloc(self, count: int, size: int) -> int | None:
        """Allocate ``count * size`` zeroed bytes."""
        if count < 0 or size < 0:
            raise ValueError("count and size must not be negative")
        total = count * size
        address = self.malloc(total)
        if address is None:
            return None
        self._memory[address:address + total] = bytes(total)
        return address

    def realloc(self, address: int | None, size: int) -> int | None:
        """Resize an allocation, moving it if its block is too small.

        A ``None`` address behaves like :meth:`malloc`; a zero size frees the
        block and returns ``None``. If a move is needed and fails, the
        original block is left untouched and ``MemoryError`` is raised.
        """
        if address is None:
            return self.malloc(size)
        if size < 0:
            raise ValueError("size must not be negative")
        if size == 0:
            self.free(address)
            return None
        block = self._allocated(address)
        if block.size >= size:
            return address
        new_address = self.malloc(size)
        assert new_address is not None
        self._memory[new_address:new_address + block.size] = (
            self._memory[address:address + block.size]
        )
        self.free(address)
        return new_address

    def free(self, address: int | None) -> None:
        """Release the block at ``address``; ``None`` is ignored."""
        if address is None:
            return
        self._allocated(address).is_free = True
        self._merge()

    def blocks(self) -> list[MemoryBlock]:
        """Snapshot of every block in address order."""
        return [replace(block) for block in self._blocks]

    def view(self, address: int) -> memoryview:
        """A writable view over the payload of an allocated block."""
        block = self._allocated(address)
        return memoryview(self._memory)[block.address:block.end]

    def _allocated(self, address: int) -> MemoryBlock:
        block = next((b for b in self._blocks if b.address == address), None)
        if block is None or block.is_free:
            raise ValueError(f"{address} is not the address of an allocated block")
        return block

    def _split(self, index: int, size: int) -> None:
        block = self._blocks[index]
        remainder = MemoryBlock(block.address + size, block.size - size - HEADER_SIZE)
        block.size = size
        self._blocks.insert(index + 1, remainder)

    def _merge(self) -> None:
        merged: list[MemoryBlock] = []
        for block in self._blocks:
            if merged and merged[-1].is_free and block.is_free:
                merged[-1].size += block.size + HEADER_SIZE
            else:
                merged.append(block)
        self._blocks = merged