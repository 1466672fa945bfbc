import pytest

from dsp56k_tables.staticarray import StaticArray


def test_constructor_fill():
    arr = StaticArray(5, 7)
    assert len(arr) == 5
    assert list(arr) == [7] * 5


def test_default_fill_is_none():
    arr = StaticArray(3)
    assert list(arr) == [None, None, None]


def test_set_and_get_round_trip():
    arr = StaticArray(4, 0)
    for index, value in enumerate("wxyz"):
        arr[index] = value
    assert [arr[i] for i in range(4)] == list("wxyz")
    assert list(arr) == list("wxyz")


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_out_of_bounds_access_raises(index):
    arr = StaticArray(4, 0)
    with pytest.raises(IndexError):
        arr[index]
    with pytest.raises(IndexError):
        arr[index] = 1
    assert list(arr) == [0, 0, 0, 0]
    assert not arr.is_valid_index(index)


def test_is_valid_index_boundaries():
    arr = StaticArray(3)
    assert arr.is_valid_index(0)
    assert arr.is_valid_index(2)
    assert not arr.is_valid_index(3)
    assert not arr.is_valid_index(-1)


def test_fill_replaces_every_element():
    arr = StaticArray(6, 1)
    arr[2] = 5
    arr.fill(9)
    assert list(arr) == [9] * 6
    assert len(arr) == 6


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        StaticArray(-1)