import pytest

from integral.containers import BoundedList, multi_array


def make_list(items, capacity=4):
    bounded = BoundedList(capacity)
    for item in items:
        bounded.push(item)
    return bounded


def test_push_and_iterate():
    bounded = make_list(["a", "b", "c"])
    assert list(bounded) == ["a", "b", "c"]
    assert len(bounded) == 3
    assert bounded.back() == "c"


def test_push_beyond_capacity_raises():
    bounded = make_list([1, 2], capacity=2)
    with pytest.raises(OverflowError):
        bounded.push(3)


def test_pop_back_and_empty_errors():
    bounded = make_list([1, 2])
    assert bounded.pop_back() == 2
    assert bounded.pop_back() == 1
    assert len(bounded) == 0
    with pytest.raises(IndexError):
        bounded.pop_back()
    with pytest.raises(IndexError):
        bounded.back()


def test_erase_swaps_last_into_place():
    bounded = make_list(["a", "b", "c", "d"])
    bounded.erase(1)
    assert list(bounded) == ["a", "d", "c"]
    bounded.erase(2)
    assert list(bounded) == ["a", "d"]


def test_index_bounds_and_setitem():
    bounded = make_list([5, 6])
    bounded[1] = 9
    assert bounded[1] == 9
    with pytest.raises(IndexError):
        bounded[2]
    with pytest.raises(IndexError):
        bounded[-1]


def test_clear():
    bounded = make_list([1, 2, 3])
    bounded.clear()
    assert list(bounded) == []
    bounded.push(7)
    assert bounded[0] == 7


def test_multi_array_shape_and_independence():
    grid = multi_array(list, 2, 3)
    assert len(grid) == 2
    assert all(len(row) == 3 for row in grid)
    grid[0][0].append("x")
    assert grid[0][1] == []
    assert grid[1][0] == []


def test_multi_array_needs_dimension():
    with pytest.raises(ValueError):
        multi_array(int)