import random

import pytest

from lunchbox.intervalset import IntervalSet


def test_empty_set():
    s = IntervalSet()
    assert len(s) == 0
    assert not s
    assert list(s) == []
    assert s.find(3) is None
    assert 3 not in s


def test_single_element_insert_and_erase():
    s = IntervalSet()
    s.insert(5)
    assert 5 in s
    assert len(s) == 1
    assert s.intervals() == [(5, 5)]
    s.erase(5)
    assert 5 not in s
    assert len(s) == 0
    assert s.intervals() == []


def test_adjacent_intervals_fuse():
    s = IntervalSet()
    s.insert(1, 3)
    s.insert(4, 6)
    assert s.intervals() == [(1, 6)]
    assert list(s) == list(range(1, 7))


def test_overlapping_intervals_merge_and_count():
    s = IntervalSet()
    s.insert(10, 20)
    s.insert(15, 30)
    s.insert(0, 2)
    assert s.intervals() == [(0, 2), (10, 30)]
    assert len(s) == len(list(s))


def test_insert_spanning_several_intervals():
    s = IntervalSet()
    for start in (0, 10, 20, 30):
        s.insert(start, start + 2)
    s.insert(5, 25)
    assert s.intervals() == [(0, 2), (5, 25), (30, 32)]
    assert len(s) == len(list(s))


def test_erase_splits_interval():
    s = IntervalSet()
    s.insert(0, 10)
    s.erase(3, 5)
    assert s.intervals() == [(0, 2), (6, 10)]
    assert list(s) == [0, 1, 2, 6, 7, 8, 9, 10]
    assert len(s) == len(list(s))


def test_erase_outside_is_noop():
    s = IntervalSet()
    s.insert(10, 20)
    s.erase(0, 5)
    s.erase(25, 30)
    assert s.intervals() == [(10, 20)]
    assert len(s) == len(range(10, 21))


def test_invalid_interval_raises():
    s = IntervalSet()
    with pytest.raises(ValueError):
        s.insert(5, 1)
    with pytest.raises(ValueError):
        s.erase(5, 1)


def test_find_iterates_from_element():
    s = IntervalSet()
    s.insert(1, 3)
    s.insert(7, 8)
    it = s.find(2)
    assert list(it) == [2, 3, 7, 8]
    assert s.find(5) is None


def test_update_and_swap():
    a = IntervalSet()
    a.insert(0, 4)
    b = IntervalSet()
    b.insert(3, 9)
    b.insert(20)
    a.update(b)
    assert a.intervals() == [(0, 9), (20, 20)]
    c = IntervalSet()
    c.swap(a)
    assert c.intervals() == [(0, 9), (20, 20)]
    assert len(c) == len(list(c))
    assert len(a) == 0
    assert a.intervals() == []


def test_clear():
    s = IntervalSet()
    s.insert(1, 100)
    s.clear()
    assert not s
    assert 50 not in s


def test_random_operations_match_python_set():
    rng = random.Random(1234)
    s = IntervalSet()
    model: set[int] = set()
    for _ in range(500):
        a = rng.randrange(200)
        b = a + rng.randrange(15)
        if rng.random() < 0.6:
            s.insert(a, b)
            model.update(range(a, b + 1))
        else:
            s.erase(a, b)
            model.difference_update(range(a, b + 1))
        assert len(s) == len(model)
    assert list(s) == sorted(model)
    for element in range(220):
        assert (element in s) == (element in model)
    intervals = s.intervals()
    for (_, end), (start, _) in zip(intervals, intervals[1:]):
        assert start > end + 1