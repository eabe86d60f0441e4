"""A thread-safe pool that recycles allocated objects."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

__all__ = ["Pool"]

T = TypeVar("T")


class Pool(Generic[T]):
    """Hands out cached objects, creating new ones with ``factory`` if empty."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._cache: list[T] = []

    def alloc(self) -> T:
        """Return the most recently released item, or a new one."""
        with self._lock:
            if self._cache:
                return self._cache.pop()
        return self._factory()

    def release(self, item: T) -> None:
        """Return ``item`` to the pool for reuse."""
        with self._lock:
            self._cache.append(item)

    def flush(self) -> None:
        """Drop all cached items."""
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)