import math

import pytest

from labkit.queuel import QueueL


def test_source_scenario():
    a = QueueL()
    assert a.is_empty()
    a.push(10)
    assert a.top() == 10
    a.push(20)
    assert a.top() == 10
    a.pop()
    a.push(30)
    assert a.top() == 20
    a.clear()
    assert a.is_empty()
    a.push(40)
    a.pop()
    assert a.is_empty()


def test_top_of_empty_raises():
    with pytest.raises(IndexError):
        QueueL().top()


def test_pop_on_empty_is_harmless():
    q = QueueL()
    q.pop()
    assert q.is_empty()


def test_single_precision_storage():
    q = QueueL()
    q.push(16777217)
    assert q.top() == 16777216.0


def test_fractional_value_close_to_input():
    q = QueueL()
    q.push(0.1)
    assert q.top() == pytest.approx(0.1, rel=1e-6)


def test_overflow_becomes_infinity():
    q = QueueL()
    q.push(-1e300)
    assert math.isinf(q.top())
    assert q.top() < 0


def test_fifo_order():
    q = QueueL()
    values = [1.5, -2.25, 0.0, 8.0]
    for value in values:
        q.push(value)
    drained = []
    while not q.is_empty():
        drained.append(q.top())
        q.pop()
    assert drained == values