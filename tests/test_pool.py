import threading

from lunchbox.pool import Pool


def test_alloc_from_empty_pool_uses_factory():
    calls = []

    def factory():
        calls.append(1)
        return object()

    pool = Pool(factory)
    first = pool.alloc()
    second = pool.alloc()
    assert first is not second
    assert len(calls) == 2


def test_released_item_is_reused():
    pool = Pool(list)
    item = pool.alloc()
    pool.release(item)
    assert len(pool) == 1
    assert pool.alloc() is item
    assert len(pool) == 0


def test_reuse_is_last_in_first_out():
    pool = Pool(dict)
    a, b = pool.alloc(), pool.alloc()
    pool.release(a)
    pool.release(b)
    assert pool.alloc() is b
    assert pool.alloc() is a


def test_flush_discards_cache():
    pool = Pool(list)
    item = pool.alloc()
    pool.release(item)
    pool.flush()
    assert len(pool) == 0
    assert pool.alloc() is not item


def test_concurrent_alloc_release_keeps_items_unique():
    created = []
    created_lock = threading.Lock()

    def factory():
        obj = object()
        with created_lock:
            created.append(obj)
        return obj

    pool = Pool(factory)
    errors = []

    def worker():
        for _ in range(200):
            held = [pool.alloc() for _ in range(3)]
            if len({id(x) for x in held}) != 3:
                errors.append("duplicate")
            for obj in held:
                pool.release(obj)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert len(pool) == len(created)
    assert len(created) <= 12