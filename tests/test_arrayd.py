import pytest

from labkit.arrayd import ArrayD


def test_source_scenario():
    a = ArrayD(4)
    assert len(a) == 4

    a[1] = 10
    assert a[1] == 10

    a.insert(3, 1)
    assert a[3] == 1
    a.remove(3)
    assert a[3] != 1
    assert len(a) == 4

    a.insert(3, 2)
    a.insert(4, 3)
    a.resize(10)
    assert len(a) == 10
    assert a[1] == 10
    assert a[3] == 2
    assert a[4] == 3
    assert all(value == 0.0 for value in list(a)[5:])


@pytest.mark.parametrize("size", [0, -1, -10])
def test_non_positive_size_rejected(size):
    with pytest.raises(ValueError):
        ArrayD(size)


def test_default_is_empty():
    a = ArrayD()
    assert len(a) == 0
    assert list(a) == []


def test_new_array_is_zero_filled():
    assert list(ArrayD(3)) == [0.0, 0.0, 0.0]


@pytest.mark.parametrize("position", [-1, 4, 100])
def test_index_out_of_range(position):
    a = ArrayD(4)
    a[0] = 2.5
    with pytest.raises(IndexError):
        a[position]
    with pytest.raises(IndexError):
        a[position] = 1.0
    assert len(a) == 4
    assert list(a) == [2.5, 0.0, 0.0, 0.0]


def test_resize_negative_rejected():
    a = ArrayD(2)
    with pytest.raises(ValueError):
        a.resize(-1)


def test_shrink_then_grow_zeroes_new_slots():
    a = ArrayD(3)
    a[0] = 5
    a[1] = 6
    a[2] = 7
    a.resize(1)
    a.resize(3)
    assert a[0] == 5
    assert a[1] == 0.0
    assert a[2] == 0.0


def test_resize_to_zero():
    a = ArrayD(3)
    a.resize(0)
    assert len(a) == 0


def test_insert_at_end_and_out_of_range():
    a = ArrayD(2)
    a.insert(2, 9)
    assert len(a) == 3
    assert a[2] == 9
    with pytest.raises(IndexError):
        a.insert(4, 1)
    with pytest.raises(IndexError):
        a.insert(-1, 1)


def test_remove_out_of_range():
    a = ArrayD(2)
    with pytest.raises(IndexError):
        a.remove(2)
    with pytest.raises(IndexError):
        a.remove(-1)


def test_insert_then_remove_round_trip():
    a = ArrayD(5)
    for i in range(5):
        a[i] = i * 1.5
    before = list(a)
    a.insert(2, 42)
    a.remove(2)
    assert list(a) == before


def test_copy_is_independent():
    a = ArrayD(3)
    a[0] = 1
    b = a.copy()
    b[0] = 2
    b.resize(5)
    assert a[0] == 1
    assert len(a) == 3
    assert b[0] == 2
    assert len(b) == 5