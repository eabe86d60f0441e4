"""A set of integer-like elements stored as sorted, disjoint closed intervals."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from typing import Any, Optional

__all__ = ["IntervalSet"]


class IntervalSet:
    """Stores elements as closed intervals, fusing overlapping and adjacent ones.

    Elements must support ``+ 1``, ``- 1``, subtraction and ordering, like
    natural numbers. Not thread safe.
    """

    def __init__(self) -> None:
        self._starts: list[Any] = []
        self._ends: list[Any] = []
        self._size = 0

    @staticmethod
    def _check(start: Any, end: Any) -> Any:
        if end is None:
            end = start
        if end < start:
            raise ValueError(f"interval start {start!r} is after its end {end!r}")
        return end

    def insert(self, start: Any, end: Any = None) -> None:
        """Insert the closed interval [start, end], or the single element ``start``."""
        end = self._check(start, end)
        first = bisect_left(self._ends, start - 1)
        last = bisect_right(self._starts, end + 1)
        new_start, new_end = start, end
        if first < last:
            new_start = min(start, self._starts[first])
            new_end = max(end, self._ends[last - 1])
            self._size -= sum(
                e - s + 1
                for s, e in zip(self._starts[first:last], self._ends[first:last])
            )
        self._starts[first:last] = [new_start]
        self._ends[first:last] = [new_end]
        self._size += new_end - new_start + 1

    def update(self, other: IntervalSet) -> None:
        """Insert every interval of another set into this one."""
        for start, end in other.intervals():
            self.insert(start, end)

    def erase(self, start: Any, end: Any = None) -> None:
        """Remove all elements inside [start, end], or the single element ``start``."""
        end = self._check(start, end)
        first = bisect_left(self._ends, start)
        last = bisect_right(self._starts, end)
        if first >= last:
            return
        new_starts: list[Any] = []
        new_ends: list[Any] = []
        for s, e in zip(self._starts[first:last], self._ends[first:last]):
            self._size -= e - s + 1
            if s < start:
                new_starts.append(s)
                new_ends.append(start - 1)
                self._size += start - s
            if e > end:
                new_starts.append(end + 1)
                new_ends.append(e)
                self._size += e - end
        self._starts[first:last] = new_starts
        self._ends[first:last] = new_ends

    def clear(self) -> None:
        """Remove all elements."""
        self._starts.clear()
        self._ends.clear()
        self._size = 0

    def swap(self, other: IntervalSet) -> None:
        """Exchange the contents with another set."""
        self._starts, other._starts = other._starts, self._starts
        self._ends, other._ends = other._ends, self._ends
        self._size, other._size = other._size, self._size

    def _locate(self, element: Any) -> Optional[int]:
        index = bisect_right(self._starts, element) - 1
        if index >= 0 and element <= self._ends[index]:
            return index
        return None

    def exists(self, element: Any) -> bool:
        """Return True if ``element`` is stored."""
        return self._locate(element) is not None

    def find(self, element: Any) -> Optional[Iterator[Any]]:
        """Return an iterator starting at ``element``, or None if it is not stored.

        The iterator continues through all following elements in order.
        """
        index = self._locate(element)
        if index is None:
            return None
        ranges = list(zip(self._starts[index:], self._ends[index:]))
        ranges[0] = (element, ranges[0][1])
        return self._walk(ranges)

    @staticmethod
    def _walk(ranges: list[tuple[Any, Any]]) -> Iterator[Any]:
        for start, end in ranges:
            value = start
            while value <= end:
                yield value
                value = value + 1

    def intervals(self) -> list[tuple[Any, Any]]:
        """Return the stored closed intervals in ascending order."""
        return list(zip(self._starts, self._ends))

    def __contains__(self, element: Any) -> bool:
        return self.exists(element)

    def __iter__(self) -> Iterator[Any]:
        return self._walk(self.intervals())

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __repr__(self) -> str:
        return f"IntervalSet({self.intervals()!r})"