"""A fixed-size pool of worker threads executing posted tasks."""

from __future__ import annotations

import logging
import os
import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any, Optional

__all__ = ["ThreadPool"]

_log = logging.getLogger(__name__)


class ThreadPool:
    """Runs callables taking no arguments on a fixed set of worker threads.

    All methods are thread safe. Closing the pool stops the workers once
    their current task finishes; tasks still queued are not executed and
    their futures are cancelled.
    """

    _instance: Optional[ThreadPool] = None
    _instance_lock = threading.Lock()

    @classmethod
    def instance(cls) -> ThreadPool:
        """Return the application-global pool, sized to the number of CPUs."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls(os.cpu_count() or 1)
            return cls._instance

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._tasks: deque[tuple[Callable[[], Any], Optional[Future]]] = deque()
        self._condition = threading.Condition()
        self._stop = False
        self._threads = [
            threading.Thread(target=self._work, name=f"ThreadPool-{i}", daemon=True)
            for i in range(size)
        ]
        for thread in self._threads:
            thread.start()

    @property
    def size(self) -> int:
        """The number of worker threads."""
        return len(self._threads)

    def _enqueue(self, func: Callable[[], Any], future: Optional[Future]) -> None:
        with self._condition:
            if self._stop:
                raise RuntimeError("cannot post to a closed thread pool")
            self._tasks.append((func, future))
            self._condition.notify()

    def post(self, func: Callable[[], Any]) -> Future:
        """Queue ``func`` and return a future holding its result."""
        future: Future = Future()
        self._enqueue(func, future)
        return future

    def post_detached(self, func: Callable[[], Any]) -> None:
        """Queue ``func`` without tracking its result."""
        self._enqueue(func, None)

    def has_pending_jobs(self) -> bool:
        """Return True if tasks are waiting to be executed."""
        with self._condition:
            return bool(self._tasks)

    def close(self) -> None:
        """Stop the workers and wait for them to finish."""
        with self._condition:
            self._stop = True
            pending = list(self._tasks)
            self._tasks.clear()
            self._condition.notify_all()
        for _, future in pending:
            if future is not None:
                future.cancel()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stop or bool(self._tasks))
                if self._stop:
                    return
                func, future = self._tasks.popleft()
            self._run(func, future)

    @staticmethod
    def _run(func: Callable[[], Any], future: Optional[Future]) -> None:
        if future is None:
            try:
                func()
            except Exception:
                _log.exception("detached task failed")
            return
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = func()
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)

    def __repr__(self) -> str:
        return f"ThreadPool(size={self.size})"