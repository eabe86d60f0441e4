"""A position-based iterator over any indexable container."""

from __future__ import annotations

import operator
from typing import Any, Callable

__all__ = ["IndexIterator"]


class IndexIterator:
    """Refers to an element of a container by its index.

    Unlike a plain Python iterator, it can be moved, compared and used to
    read elements relative to its position. Iterating it yields the elements
    from the current position to the end of the container.
    """

    def __init__(self, container: Any, position: int = 0) -> None:
        self._container = container
        self._position = operator.index(position)

    @property
    def position(self) -> int:
        """The index this iterator refers to."""
        return self._position

    @property
    def container(self) -> Any:
        """The container being iterated."""
        return self._container

    @property
    def value(self) -> Any:
        """The element at the current position."""
        return self._container[self._position]

    def __getitem__(self, offset: int) -> Any:
        return self._container[self._position + operator.index(offset)]

    def __add__(self, n: int) -> IndexIterator:
        return type(self)(self._container, self._position + operator.index(n))

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, IndexIterator):
            return self._position - other._position
        return type(self)(self._container, self._position - operator.index(other))

    def __iter__(self) -> IndexIterator:
        return self

    def __next__(self) -> Any:
        if self._position >= len(self._container):
            raise StopIteration
        element = self._container[self._position]
        self._position += 1
        return element

    def _compare(self, other: object, op: Callable[[int, int], bool]) -> bool:
        if not isinstance(other, IndexIterator):
            return NotImplemented
        return other._container is self._container and op(
            self._position, other._position
        )

    def __eq__(self, other: object) -> bool:
        return self._compare(other, operator.eq)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __lt__(self, other: object) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: object) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: object) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: object) -> bool:
        return self._compare(other, operator.ge)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self._position})"