import pytest

from labkit.complexnum import Complex


@pytest.mark.parametrize(
    "text, expected",
    [
        ("{1, 1}", Complex(1, 1)),
        ("{1,1}", Complex(1, 1)),
        ("{1, 3}", Complex(1, 3)),
        ("{1 , -3}", Complex(1, -3)),
        ("{ 3 , 4}", Complex(3, 4)),
        ("{-1 ,-1}", Complex(-1, -1)),
        ("{0.5,1e1}", Complex(0.5, 10)),
    ],
)
def test_parse_valid(text, expected):
    assert Complex.parse(text) == expected


@pytest.mark.parametrize("text", ["{1.1}", "{1,1", "1.1}", "", "{a,b}", "(1,2)", "{1;2}"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        Complex.parse(text)


def test_default_and_single_argument():
    zero = Complex()
    assert (zero.re, zero.im) == (0.0, 0.0)
    three = Complex(3)
    assert (three.re, three.im) == (3.0, 0.0)


@pytest.mark.parametrize(
    "value, text",
    [(Complex(1, 2), "{1,2}"), (Complex(0.5, 1), "{0.5,1}"), (Complex(-2, 4), "{-2,4}")],
)
def test_str(value, text):
    assert str(value) == text


def test_round_trip():
    value = Complex(-1.25, 3.5)
    assert Complex.parse(str(value)) == value


@pytest.mark.parametrize(
    "lhs, rhs, res",
    [
        (Complex(1, 2), Complex(1, 2), Complex(2, 4)),
        (Complex(1, 2), Complex(3), Complex(4, 2)),
        (Complex(10), Complex(-1, 2), Complex(9, 2)),
        (Complex(1, 2), Complex(3, 4), Complex(4, 6)),
    ],
)
def test_add(lhs, rhs, res):
    assert lhs + rhs == res


@pytest.mark.parametrize(
    "lhs, rhs, res",
    [
        (Complex(1, 2), Complex(1, 2), Complex(0, 0)),
        (Complex(1, 2), Complex(2), Complex(-1, 2)),
        (Complex(0), Complex(1, 2), Complex(-1, -2)),
        (Complex(-2, 4), Complex(-1, -5), Complex(-1, 9)),
    ],
)
def test_sub(lhs, rhs, res):
    assert lhs - rhs == res


@pytest.mark.parametrize(
    "lhs, rhs, res",
    [
        (Complex(99, 100), Complex(0), Complex(0, 0)),
        (Complex(-2), Complex(1, 2), Complex(-2, -4)),
        (Complex(1, 2), Complex(3, 4), Complex(-5, 10)),
        (Complex(-2, 4), Complex(-1, -5), Complex(22, 6)),
    ],
)
def test_mul(lhs, rhs, res):
    assert lhs * rhs == res


@pytest.mark.parametrize(
    "lhs, rhs, res",
    [
        (Complex(1, 2), Complex(2), Complex(0.5, 1)),
        (Complex(1, 2), Complex(3, 4), Complex(0.44, 0.08)),
        (Complex(7, 7), Complex(7, 7), Complex(1, 0)),
    ],
)
def test_div(lhs, rhs, res):
    assert lhs / rhs == res


def test_mixed_with_real_numbers():
    a = Complex(1, 2)
    assert a + 1 == Complex(2, 2)
    assert 1 + a == Complex(2, 2)
    assert a - 1 == Complex(0, 2)
    assert 1 - a == Complex(0, -2)
    assert a * 5 == Complex(5, 10)
    assert -5 * Complex(7, 7) == Complex(-35, -35)
    assert a / 2 == Complex(0.5, 1)
    assert 1 / Complex(0, 1) == Complex(0, -1)


def test_compound_assignment_mutates_in_place():
    a = Complex(1, 2)
    alias = a
    a += Complex(3, 4)
    assert alias == Complex(4, 6)
    a -= 1
    assert alias == Complex(3, 6)
    a *= Complex(0, 1)
    assert alias == Complex(-6, 3)
    a /= 3
    assert alias == Complex(-2, 1)


def test_binary_operators_leave_operands_unchanged():
    a = Complex(1, 2)
    b = Complex(3, 4)
    _ = a + b
    _ = a * b
    assert a == Complex(1, 2)
    assert b == Complex(3, 4)


def test_negation():
    assert -Complex(1, -2) == Complex(-1, 2)


@pytest.mark.parametrize("divisor", [Complex(0), Complex(0, 0), 0, 0.0])
def test_division_by_zero(divisor):
    with pytest.raises(ZeroDivisionError):
        Complex(1, 2) / divisor


def test_in_place_division_by_zero():
    a = Complex(1, 2)
    with pytest.raises(ZeroDivisionError):
        a /= Complex()
    assert a == Complex(1, 2)


@pytest.mark.parametrize(
    "lhs, rhs, equal",
    [
        (Complex(10, 2), Complex(10, 2), True),
        (Complex(99, 100), Complex(-99, 100), False),
        (Complex(1, 2), Complex(3, 4), False),
        (Complex(1, 2), Complex(3, 4) + 1, False),
        (Complex(7, 7), Complex(7, 7), True),
        (Complex(7, 7), Complex(7, 7) + -5, False),
        (Complex(-2, 4), Complex(-1, -5) + 5, False),
    ],
)
def test_equality(lhs, rhs, equal):
    assert (lhs == rhs) is equal
    assert (lhs != rhs) is (not equal)


def test_equality_tolerance():
    assert Complex(0.1 + 0.2, 0) == Complex(0.3, 0)
    assert Complex(1e-10, 0) != Complex(0, 0)


def test_equality_with_other_types():
    assert Complex(3) == 3
    assert Complex(1, 2) != "{1,2}"


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Complex(1, 2))


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Complex(1, 2) + "x"