import threading
from concurrent.futures import CancelledError

import pytest

from lunchbox.threadpool import ThreadPool


def test_size():
    with ThreadPool(3) as pool:
        assert pool.size == 3


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ThreadPool(-1)


def test_post_returns_result():
    with ThreadPool(2) as pool:
        futures = [pool.post(lambda n=n: n * n) for n in range(10)]
        assert [f.result(timeout=5) for f in futures] == [n * n for n in range(10)]


def test_post_propagates_exception():
    def fail():
        raise KeyError("boom")

    with ThreadPool(1) as pool:
        future = pool.post(fail)
        with pytest.raises(KeyError):
            future.result(timeout=5)
        assert pool.post(lambda: "still alive").result(timeout=5) == "still alive"


def test_post_detached_runs():
    done = threading.Event()
    with ThreadPool(1) as pool:
        pool.post_detached(done.set)
        assert done.wait(5)


def test_detached_failure_keeps_worker():
    def fail():
        raise RuntimeError("detached")

    with ThreadPool(1) as pool:
        pool.post_detached(fail)
        assert pool.post(lambda: 42).result(timeout=5) == 42


def test_pending_jobs_without_workers():
    pool = ThreadPool(0)
    assert not pool.has_pending_jobs()
    future = pool.post(lambda: 1)
    assert pool.has_pending_jobs()
    pool.close()
    assert not pool.has_pending_jobs()
    assert future.cancelled()
    with pytest.raises(CancelledError):
        future.result(timeout=1)


def test_post_after_close_raises():
    pool = ThreadPool(1)
    pool.close()
    with pytest.raises(RuntimeError):
        pool.post(lambda: None)
    with pytest.raises(RuntimeError):
        pool.post_detached(lambda: None)


def test_tasks_run_on_worker_threads():
    with ThreadPool(2) as pool:
        ident = pool.post(threading.get_ident).result(timeout=5)
        assert ident != threading.get_ident()


def test_instance_is_singleton():
    first = ThreadPool.instance()
    assert first is ThreadPool.instance()
    assert first.size >= 1
    assert first.post(lambda: "ok").result(timeout=5) == "ok"