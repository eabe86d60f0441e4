"""Small helpers for searching and uniquely sorting sequences."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Sequence
from itertools import groupby
from typing import Any, Optional, TypeVar

__all__ = ["find", "find_if", "usort"]

T = TypeVar("T")


def find(container: Sequence[T], element: T) -> Optional[int]:
    """Return the index of the first item equal to ``element``, or None."""
    return next(
        (index for index, item in enumerate(container) if item == element), None
    )


def find_if(container: Sequence[T], predicate: Callable[[T], Any]) -> Optional[int]:
    """Return the index of the first item matching ``predicate``, or None."""
    return next(
        (index for index, item in enumerate(container) if predicate(item)), None
    )


def usort(container: MutableSequence[T]) -> None:
    """Sort ``container`` in place and drop duplicate items."""
    container[:] = [key for key, _ in groupby(sorted(container))]