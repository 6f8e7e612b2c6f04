"""A linear arena allocator over a fixed zeroed buffer."""

from __future__ import annotations

from .logger import AssertionFailedError, error

_ALIGNMENT = 8


class AllocatorFullError(AssertionFailedError):
    """Raised when an allocation does not fit in the remaining space."""


class BumpAllocator:
    """Hands out 8-byte aligned slices of one preallocated buffer."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("allocator size must not be negative")
        self._memory = bytearray(size)
        self._view = memoryview(self._memory)
        self._used = 0

    @property
    def capacity(self) -> int:
        """Total bytes managed by the allocator."""
        return len(self._memory)

    @property
    def used(self) -> int:
        """Bytes handed out since the last reset."""
        return self._used

    def alloc(self, size: int) -> memoryview:
        """Reserve *size* bytes, rounded up to 8, and return a view of them."""
        if size < 0:
            raise ValueError("allocation size must not be negative")
        aligned = (size + _ALIGNMENT - 1) & ~(_ALIGNMENT - 1)
        if self._used + aligned <= self.capacity:
            start = self._used
            self._used += aligned
            return self._view[start:start + size]
        message = "BumpAllocator is full! Requested: {}, Available: {}".format(
            aligned, self.capacity - self._used
        )
        error("{}", message)
        raise AllocatorFullError(message)

    def reset(self) -> None:
        """Forget every allocation; the memory is reused as is."""
        self._used = 0