"""A growable vector whose reads never lock and whose elements never move."""

from __future__ import annotations

import operator
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any, Generic, Optional, TypeVar

from lunchbox.indexiter import IndexIterator

__all__ = ["LFVectorFull", "LFVector"]

T = TypeVar("T")

_MAX_PRINTED = 256


class LFVectorFull(RuntimeError):
    """Raised when an element is added to a vector that has no free slot."""


def _check_size(size: int) -> int:
    size = operator.index(size)
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    return size


class LFVector(Generic[T]):
    """A vector stored in slots of doubling size.

    Slot ``k`` holds ``2**k`` elements, so a vector with ``slots`` slots holds
    at most ``2**slots - 1`` elements. Elements are never relocated when the
    vector grows, which lets readers access it without locking while writers
    that change the size are serialized by an internal lock. Shrinking keeps
    one spare slot allocated.
    """

    def __init__(self, size: int = 0, value: Any = None, slots: int = 32) -> None:
        slots = operator.index(slots)
        if slots <= 0:
            raise ValueError(f"number of slots must be positive, got {slots}")
        size = _check_size(size)
        self._nslots = slots
        self._slots: list[Optional[list[Any]]] = [None] * slots
        self._size = 0
        self._lock = threading.Lock()
        if size > self._capacity:
            raise LFVectorFull(
                f"size {size} exceeds capacity {self._capacity}"
            )
        for _ in range(size):
            self._push_unlocked(value)

    @classmethod
    def from_iterable(cls, items: Iterable[T], slots: int = 32) -> LFVector[T]:
        """Return a new vector holding ``items`` in order."""
        result: LFVector[T] = cls(slots=slots)
        with result._lock:
            for item in items:
                result._push_unlocked(item)
        return result

    @property
    def _capacity(self) -> int:
        return (1 << self._nslots) - 1

    @staticmethod
    def _locate(index: int) -> tuple[int, int]:
        position = index + 1
        slot = position.bit_length() - 1
        return slot, position ^ (1 << slot)

    def _get(self, index: int) -> Any:
        slot, offset = self._locate(index)
        return self._slots[slot][offset]  # type: ignore[index]

    def _set(self, index: int, value: Any) -> None:
        slot, offset = self._locate(index)
        self._slots[slot][offset] = value  # type: ignore[index]

    def _normalize(self, index: int) -> int:
        return range(self._size)[operator.index(index)]

    def _push_unlocked(self, item: Any) -> None:
        position = self._size + 1
        slot = position.bit_length() - 1
        if slot >= self._nslots:
            raise LFVectorFull("LFVector full")
        if self._slots[slot] is None:
            self._slots[slot] = [None] * (1 << slot)
        self._slots[slot][position ^ (1 << slot)] = item  # type: ignore[index]
        self._size += 1

    def _trim(self) -> None:
        next_slot = (self._size + 1).bit_length()
        if next_slot < self._nslots and self._slots[next_slot] is not None:
            self._slots[next_slot] = None

    def _erase_unlocked(self, index: int) -> Any:
        removed = self._get(index)
        self._size -= 1
        for position in range(index, self._size):
            self._set(position, self._get(position + 1))
        self._set(self._size, None)
        self._trim()
        return removed

    def copy(self) -> LFVector[T]:
        """Return a new vector with the same elements and number of slots."""
        result: LFVector[T] = type(self)(slots=self._nslots)
        result.assign(self)
        return result

    def assign(self, other: LFVector[T]) -> None:
        """Replace the content with the elements of ``other``."""
        if other is self:
            return
        with self._lock, other._lock:
            if other._size > self._capacity:
                raise LFVectorFull(
                    f"{other._size} elements exceed capacity {self._capacity}"
                )
            new_slots: list[Optional[list[Any]]] = [None] * self._nslots
            for index, slot in enumerate(other._slots[: self._nslots]):
                if slot is not None:
                    new_slots[index] = list(slot)
            self._slots = new_slots
            self._size = other._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LFVector):
            return NotImplemented
        if other is self:
            return True
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._get(i) for i in range(self._size)[index]]
        return self._get(self._normalize(index))

    def __setitem__(self, index: int, value: Any) -> None:
        self._set(self._normalize(index), value)

    def __iter__(self) -> Iterator[T]:
        for index in range(self._size):
            yield self._get(index)

    def begin(self) -> IndexIterator:
        """Return a position iterator at the first element."""
        return IndexIterator(self, 0)

    def end(self) -> IndexIterator:
        """Return a position iterator one past the last element."""
        return IndexIterator(self, self._size)

    def front(self) -> T:
        """Return the first element; raise IndexError if empty."""
        if not self._size:
            raise IndexError("front of an empty vector")
        return self._get(0)

    def back(self) -> T:
        """Return the last element; raise IndexError if empty."""
        if not self._size:
            raise IndexError("back of an empty vector")
        return self._get(self._size - 1)

    def expand(self, new_size: int, item: Any = None) -> None:
        """Grow to at least ``new_size`` elements by appending ``item``.

        Never shrinks, so concurrent calls are safe.
        """
        new_size = _check_size(new_size)
        with self._lock:
            while self._size < new_size:
                self._push_unlocked(item)

    def append(self, item: T, lock: bool = True) -> None:
        """Append ``item``.

        Pass ``lock=False`` when already holding :meth:`write_lock`.
        """
        if lock:
            with self._lock:
                self._push_unlocked(item)
        else:
            self._push_unlocked(item)

    def pop(self) -> T:
        """Remove and return the last element; raise IndexError if empty."""
        with self._lock:
            if not self._size:
                raise IndexError("pop from an empty vector")
            element = self._get(self._size - 1)
            self._size -= 1
            self._set(self._size, None)
            self._trim()
            return element

    def erase_at(self, index: int) -> T:
        """Remove and return the element at ``index``, shifting later ones."""
        with self._lock:
            return self._erase_unlocked(self._normalize(index))

    def remove(self, element: T) -> int:
        """Remove the last occurrence of ``element`` and return its index.

        Raises ValueError if the element is not stored.
        """
        with self._lock:
            for index in reversed(range(self._size)):
                if self._get(index) == element:
                    self._erase_unlocked(index)
                    return index
        raise ValueError(f"{element!r} is not in the vector")

    def resize(self, size: int, value: Any = None) -> None:
        """Shrink or grow to ``size`` elements, appending ``value`` if growing."""
        size = _check_size(size)
        with self._lock:
            while self._size > size:
                self._size -= 1
                self._set(self._size, None)
            self._trim()
            while self._size < size:
                self._push_unlocked(value)

    def clear(self) -> None:
        """Remove all elements and release all slots."""
        with self._lock:
            while self._size > 0:
                self._size -= 1
                self._set(self._size, None)
            self._slots = [None] * self._nslots

    @contextmanager
    def write_lock(self) -> Iterator[LFVector[T]]:
        """Hold the write lock for a batch of ``append(..., lock=False)`` calls."""
        with self._lock:
            yield self

    @property
    def allocated_slots(self) -> tuple[int, ...]:
        """The indices of the slots that currently hold storage."""
        return tuple(
            index for index, slot in enumerate(self._slots) if slot is not None
        )

    def __str__(self) -> str:
        parts = [f"{type(self).__name__} size {len(self)} [ "]
        for position, element in enumerate(self):
            if position >= _MAX_PRINTED:
                parts.append("... ")
                break
            parts.append(f"{element} ")
        parts.append("]")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_iterable({list(self)!r})"