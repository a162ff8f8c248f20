import pytest

from apecore.arrays import Array, CapacityLockedError


def make(values, capacity=32):
    arr = Array(capacity)
    arr.add_many(values)
    return arr


def test_default_capacity_is_32():
    assert Array().capacity() == 32


def test_add_and_get_round_trip():
    arr = make(["a", "b", "c"])
    assert list(arr) == ["a", "b", "c"]
    assert arr.get(1) == "b"
    assert len(arr) == 3


def test_growth_from_zero_doubles():
    arr = Array(0)
    arr.add(10)
    assert arr.capacity() == 1
    arr.add(20)
    assert arr.capacity() == 2
    arr.add(30)
    assert arr.capacity() == 4
    assert list(arr) == [10, 20, 30]


def test_locked_capacity_raises_when_full():
    arr = make([1, 2], capacity=2)
    arr.lock_capacity()
    with pytest.raises(CapacityLockedError):
        arr.add(3)
    assert list(arr) == [1, 2]


def test_add_array_rolls_back_on_failure():
    dest = make([1], capacity=2)
    dest.lock_capacity()
    source = make([5, 6, 7])
    with pytest.raises(CapacityLockedError):
        dest.add_array(source)
    assert list(dest) == [1]


def test_add_array_appends_all():
    dest = make([1, 2])
    dest.add_array(make([3, 4]))
    assert list(dest) == [1, 2, 3, 4]


def test_push_pop_top():
    arr = Array()
    assert arr.top() is None
    arr.push("x")
    arr.push("y")
    assert arr.top() == "y"
    assert arr.pop() == "y"
    assert arr.pop() == "x"
    assert len(arr) == 0
    with pytest.raises(IndexError):
        arr.pop()


def test_set_out_of_range_raises():
    arr = make([1, 2])
    with pytest.raises(IndexError):
        arr.set(2, 9)
    with pytest.raises(IndexError):
        arr.get(5)


def test_set_many_overwrites_and_appends():
    arr = make([1, 2, 3])
    arr.set_many(2, ["a", "b", "c"])
    assert list(arr) == [1, 2, "a", "b", "c"]


def test_remove_at_shifts_items():
    arr = make(["a", "b", "c", "d"])
    arr.remove_at(1)
    assert list(arr) == ["a", "c", "d"]
    arr.remove_at(2)
    assert list(arr) == ["a", "c"]
    with pytest.raises(IndexError):
        arr.remove_at(2)


def test_remove_first_gives_up_one_slot_of_capacity():
    arr = make(["a", "b"])
    before = arr.capacity()
    arr.remove_at(0)
    assert arr.capacity() == before - 1
    assert list(arr) == ["b"]


def test_remove_item_and_index():
    arr = make(["a", "b", "c"])
    assert arr.index("c") == 2
    arr.remove_item("b")
    assert list(arr) == ["a", "c"]
    with pytest.raises(ValueError):
        arr.remove_item("zzz")
    with pytest.raises(ValueError):
        arr.index("b")


def test_contains():
    arr = make([1, 2])
    assert 2 in arr
    assert 3 not in arr


def test_clear_keeps_capacity():
    arr = make([1, 2, 3])
    cap = arr.capacity()
    arr.clear()
    assert len(arr) == 0
    assert arr.capacity() == cap


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_matches_reversed(values):
    arr = make(values)
    arr.reverse()
    assert list(arr) == list(reversed(values))


def test_copy_is_independent():
    arr = make([1, 2, 3], capacity=4)
    arr.lock_capacity()
    copied = arr.copy()
    assert list(copied) == [1, 2, 3]
    assert copied.capacity() == arr.capacity()
    copied.set(0, 99)
    assert arr.get(0) == 1
    copied.add(4)
    with pytest.raises(CapacityLockedError):
        copied.add(5)


def test_orphan_data_resets_array():
    arr = make(["a", "b"])
    arr.lock_capacity()
    data = arr.orphan_data()
    assert data == ["a", "b"]
    assert len(arr) == 0
    assert arr.capacity() == 0
    arr.add("c")
    assert list(arr) == ["c"]
    assert data == ["a", "b"]


def test_getitem_supports_negative_and_slices():
    arr = make([1, 2, 3])
    assert arr[-1] == 3
    assert arr[0] == 1
    assert arr[1:] == [2, 3]
    with pytest.raises(IndexError):
        arr[3]


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Array(-1)