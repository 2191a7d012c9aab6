"""Exact rational numbers kept in lowest terms and written as ``num/den``."""

from __future__ import annotations

import re
from typing import Union

_PATTERN = re.compile(r"\s*([+-]?\d+)/([+-]?\d+)\s*")

Operand = Union["Rational", int]


def _trunc_mod(lhs: int, rhs: int) -> int:
    """Remainder with the sign of the dividend."""
    remainder = abs(lhs) % abs(rhs)
    return -remainder if lhs < 0 else remainder


class Rational:
    """An immutable fraction with a positive denominator."""

    SEPARATOR = "/"

    __slots__ = ("_num", "_den")

    def __init__(self, num: int = 0, den: int = 1) -> None:
        if den == 0:
            raise ValueError("Zero denominator in Rational")
        divisor = self.gcd(abs(num), abs(den))
        negative = (num < 0) != (den < 0)
        self._num = (-abs(num) if negative else abs(num)) // divisor
        self._den = abs(den) // divisor

    @property
    def num(self) -> int:
        return self._num

    @property
    def den(self) -> int:
        return self._den

    @staticmethod
    def gcd(lhs: int, rhs: int) -> int:
        """Greatest common divisor by Euclid's algorithm."""
        while rhs:
            lhs, rhs = rhs, _trunc_mod(lhs, rhs)
        return lhs

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """Read ``num/den`` with no spaces around the slash and a positive denominator."""
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"not a rational number: {text!r}")
        numerator = int(match.group(1))
        denominator = int(match.group(2))
        if denominator <= 0:
            raise ValueError(f"non-positive denominator: {text!r}")
        return cls(numerator, denominator)

    @staticmethod
    def _coerce(value: object) -> "Rational | None":
        if isinstance(value, Rational):
            return value
        if isinstance(value, int):
            return Rational(value)
        return None

    def __str__(self) -> str:
        return f"{self._num}{self.SEPARATOR}{self._den}"

    def __repr__(self) -> str:
        return f"Rational({self._num}, {self._den})"

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._num * rhs._den == self._den * rhs._num

    def __hash__(self) -> int:
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    def __gt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._num * rhs._den > rhs._num * self._den

    def __ge__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self > rhs or self == rhs

    def __lt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not (self > rhs) and not (self == rhs)

    def __le__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not (self > rhs)

    def __neg__(self) -> "Rational":
        return Rational(-self._num, self._den)

    def __add__(self, other: Operand) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._num * rhs._den + rhs._num * self._den, self._den * rhs._den
        )

    def __radd__(self, other: Operand) -> "Rational":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __iadd__(self, other: Operand) -> "Rational":
        return self.__add__(other)

    def __sub__(self, other: Operand) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._num * rhs._den - rhs._num * self._den, self._den * rhs._den
        )

    def __rsub__(self, other: Operand) -> "Rational":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __isub__(self, other: Operand) -> "Rational":
        return self.__sub__(other)

    def __mul__(self, other: Operand) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._num, self._den * rhs._den)

    def __rmul__(self, other: Operand) -> "Rational":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __imul__(self, other: Operand) -> "Rational":
        return self.__mul__(other)

    def __truediv__(self, other: Operand) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._num == 0:
            raise ZeroDivisionError("Division by zero")
        return Rational(self._num * rhs._den, self._den * rhs._num)

    def __rtruediv__(self, other: Operand) -> "Rational":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __itruediv__(self, other: Operand) -> "Rational":
        return self.__truediv__(other)