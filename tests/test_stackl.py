import pytest

from labkit.stackl import StackL


def test_source_scenario():
    a = StackL()
    assert a.is_empty()

    a.push(10)
    assert a.top() == 10
    a.pop()
    assert a.is_empty()

    for value in (1, 2, 3, 4, 5):
        a.push(value)
    assert a.top() == 5
    a.pop()
    assert a.top() == 4
    assert a.top() == 4
    a.pop()
    assert a.top() == 3
    a.pop()
    assert a.top() == 2
    a.pop()
    assert a.top() == 1
    a.pop()
    assert a.is_empty()

    for value in (1, 2, 3, 4, 5):
        a.push(value)
    assert a.top() == 5

    b = a.copy()
    assert b.top() == 5
    b.clear()
    assert b.is_empty()
    b.push(1)
    b.push(2)
    assert b.top() == 2
    assert a.top() == 5

    c = b.copy()
    assert c.top() == 2
    c.clear()
    assert c.is_empty()
    assert b.top() == 2


def test_top_of_empty_raises():
    with pytest.raises(IndexError):
        StackL().top()


def test_pop_on_empty_is_harmless():
    s = StackL()
    s.pop()
    assert s.is_empty()


@pytest.mark.parametrize("value", [-1, 256])
def test_push_outside_byte_range(value):
    s = StackL()
    with pytest.raises(ValueError):
        s.push(value)
    assert s.is_empty()


def test_byte_limits_accepted():
    s = StackL()
    s.push(0)
    s.push(255)
    assert s.top() == 255
    s.pop()
    assert s.top() == 0


def test_copy_preserves_order():
    a = StackL()
    for value in (7, 8, 9):
        a.push(value)
    b = a.copy()
    popped = []
    while not b.is_empty():
        popped.append(b.top())
        b.pop()
    assert popped == [9, 8, 7]
    assert a.top() == 9