"""Futures whose result is produced by a pluggable implementation."""

from __future__ import annotations

import abc
import operator
from collections.abc import Callable
from typing import Any, Generic, Optional, TypeVar

__all__ = [
    "FutureTimeout",
    "FutureImpl",
    "Future",
    "FutureFunction",
    "FutureBool",
    "make_true_future",
    "make_false_future",
]

T = TypeVar("T")


class FutureTimeout(RuntimeError):
    """Raised when a future is not ready before the timeout expires."""


class FutureImpl(abc.ABC, Generic[T]):
    """Fulfils a future's promise."""

    @abc.abstractmethod
    def wait(self, timeout: Optional[float] = None) -> T:
        """Wait for the result; raise FutureTimeout if ``timeout`` expires.

        May be called multiple times. ``timeout`` is in seconds, None waits
        indefinitely.
        """

    @abc.abstractmethod
    def is_ready(self) -> bool:
        """Return True if the result is available."""


class Future(Generic[T]):
    """An asynchronous result; comparisons block until it is available."""

    def __init__(self, impl: FutureImpl[T]) -> None:
        self._impl = impl

    def wait(self, timeout: Optional[float] = None) -> T:
        """Wait for and return the result."""
        return self._impl.wait(timeout)

    def is_ready(self) -> bool:
        """Return True if the result is available."""
        return self._impl.is_ready()

    def __bool__(self) -> bool:
        return bool(self.wait())

    def _compare(self, other: Any, op: Callable[[Any, Any], bool]) -> bool:
        return op(self.wait(), other)

    def __eq__(self, other: object) -> bool:
        return self._compare(other, operator.eq)

    def __ne__(self, other: object) -> bool:
        return self._compare(other, operator.ne)

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)

    __hash__ = None  # type: ignore[assignment]


class FutureFunction(FutureImpl[T]):
    """Fulfils the future by calling a function once, on first wait.

    Not thread safe.
    """

    def __init__(self, func: Callable[[], T]) -> None:
        self._func: Optional[Callable[[], T]] = func
        self._result: Optional[T] = None

    def wait(self, timeout: Optional[float] = None) -> T:
        if self._func is not None:
            self._result = self._func()
            self._func = None
        return self._result  # type: ignore[return-value]

    def is_ready(self) -> bool:
        return self._func is None


class FutureBool(FutureImpl[bool]):
    """A boolean future with a known value."""

    def __init__(self, value: bool) -> None:
        self._value = bool(value)

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._value

    def is_ready(self) -> bool:
        return True


def make_true_future() -> Future[bool]:
    """Return a future that is already True."""
    return Future(FutureBool(True))


def make_false_future() -> Future[bool]:
    """Return a future that is already False."""
    return Future(FutureBool(False))