from lunchbox.algorithm import find, find_if, usort


def test_find_returns_first_match():
    assert find([3, 1, 3], 3) == 0
    assert find([3, 1, 3], 1) == 1


def test_find_missing_is_none():
    assert find([1, 2, 3], 4) is None


def test_find_empty():
    assert find([], 1) is None


def test_find_if_returns_first_matching_index():
    data = [1, 4, 6, 9]
    index = find_if(data, lambda x: x % 2 == 0)
    assert index == 1
    assert data[index] == 4


def test_find_if_no_match():
    assert find_if([1, 3, 5], lambda x: x > 10) is None


def test_usort_sorts_and_removes_duplicates():
    data = [3, 1, 2, 3, 1]
    usort(data)
    assert data == [1, 2, 3]


def test_usort_is_in_place():
    data = [5, 5, 4]
    alias = data
    usort(data)
    assert alias is data
    assert alias == [4, 5]


def test_usort_invariants():
    original = [9, 2, 7, 2, 9, 0, 7, 7]
    data = list(original)
    usort(data)
    assert data == sorted(data)
    assert len(data) == len(set(data))
    assert set(data) == set(original)


def test_usort_empty_and_strings():
    empty = []
    usort(empty)
    assert empty == []
    words = ["b", "a", "b"]
    usort(words)
    assert words == ["a", "b"]