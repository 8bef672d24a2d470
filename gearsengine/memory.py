"""A simple size-keyed pool of reusable memory blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

from .logger import Logger, LogLevel

DEFAULT_ALIGNMENT = 16


def align(size: int, alignment: int = DEFAULT_ALIGNMENT) -> int:
    """Round ``size`` up to a multiple of ``alignment`` (a power of two)."""
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment must be a positive power of two, got {alignment}")
    return (size + alignment - 1) & ~(alignment - 1)


@dataclass(eq=False)
class MemoryBlock:
    """A chunk of pool memory, identified by the object itself."""

    data: bytearray = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)


class MemoryPool:
    """Hands out blocks from a free list and grows up to a fixed ceiling."""

    def __init__(self, initial_size: int, max_size: int, logger: Logger | None = None) -> None:
        self.max_size = max_size
        self.logger = logger
        self._total = 0
        self._free: dict[int, list[MemoryBlock]] = {}
        self._blocks: list[MemoryBlock] = []
        self._allocate_block(initial_size)

    def allocate(self, size: int, alignment: int = DEFAULT_ALIGNMENT) -> MemoryBlock | None:
        """Return a free block of at least ``size`` bytes, or None when exhausted."""
        size = align(size, alignment)
        fit = min((key for key in self._free if key >= size), default=None)
        if fit is not None:
            block = self._take(fit)
            self._log("Memory Use", size)
            return block
        if self._total + size <= self.max_size:
            self._allocate_block(size)
            return self._take(size)
        return None

    def deallocate(self, block: MemoryBlock, size: int, alignment: int = DEFAULT_ALIGNMENT) -> None:
        """Return ``block`` to the free list under its aligned size."""
        size = align(size, alignment)
        self._free.setdefault(size, []).append(block)
        self._log("Memory Free", size)

    def total_size(self) -> int:
        """Bytes obtained for the pool so far."""
        return self._total

    def _allocate_block(self, size: int) -> None:
        block = MemoryBlock(bytearray(size))
        self._blocks.append(block)
        self._free.setdefault(size, []).append(block)
        self._total += size

    def _take(self, key: int) -> MemoryBlock:
        bucket = self._free[key]
        block = bucket.pop()
        if not bucket:
            del self._free[key]
        return block

    def _log(self, message: str, size: int) -> None:
        if self.logger is not None:
            self.logger.log(LogLevel.INFO, message, size)