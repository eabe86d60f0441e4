"""A fixed-capacity ring buffer queue for one reader and one writer thread."""

from __future__ import annotations

import operator
from typing import Any, Generic, TypeVar

__all__ = ["QueueFull", "LFQueue"]

T = TypeVar("T")


class QueueFull(Exception):
    """Raised when pushing to a queue that has no free slot."""


def _check_size(size: int) -> int:
    size = operator.index(size)
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    return size


class LFQueue(Generic[T]):
    """A non-blocking queue with a fixed maximum size.

    Safe for one reading and one writing thread; neither ever blocks.
    """

    def __init__(self, size: int) -> None:
        self._data: list[Any] = [None] * (_check_size(size) + 1)
        self._read_pos = 0
        self._write_pos = 0

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return self._read_pos == self._write_pos

    def clear(self) -> None:
        """Empty the queue."""
        self._read_pos = 0
        self._write_pos = 0
        self._data = [None] * len(self._data)

    def resize(self, size: int) -> None:
        """Change the capacity of an empty queue. Not thread safe."""
        size = _check_size(size)
        if not self.is_empty():
            raise ValueError("cannot resize a queue that is not empty")
        self._read_pos = 0
        self._write_pos = 0
        self._data = [None] * (size + 1)

    def pop(self) -> T:
        """Remove and return the front element; raise IndexError if empty."""
        read_pos = self._read_pos
        if read_pos == self._write_pos:
            raise IndexError("pop from an empty queue")
        result = self._data[read_pos]
        self._data[read_pos] = None
        self._read_pos = (read_pos + 1) % len(self._data)
        return result

    def front(self) -> T:
        """Return the front element without removing it; raise IndexError if empty."""
        read_pos = self._read_pos
        if read_pos == self._write_pos:
            raise IndexError("front of an empty queue")
        return self._data[read_pos]

    def push(self, element: T) -> None:
        """Append ``element``; raise QueueFull if there is no room."""
        write_pos = self._write_pos
        next_pos = (write_pos + 1) % len(self._data)
        if next_pos == self._read_pos:
            raise QueueFull("queue is full")
        self._data[write_pos] = element
        self._write_pos = next_pos

    @property
    def capacity(self) -> int:
        """The maximum number of elements the queue holds."""
        return len(self._data) - 1

    def __len__(self) -> int:
        return (self._write_pos - self._read_pos) % len(self._data)

    def __repr__(self) -> str:
        return f"LFQueue(capacity={self.capacity}, size={len(self)})"