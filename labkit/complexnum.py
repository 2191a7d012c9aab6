"""Complex numbers with a brace notation and tolerant equality."""

from __future__ import annotations

import re
import sys
from typing import Union

_EPSILON = sys.float_info.epsilon
_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_PATTERN = re.compile(rf"\s*\{{\s*({_NUMBER})\s*,\s*({_NUMBER})\s*\}}\s*")

Operand = Union["Complex", int, float]


class Complex:
    """A mutable complex number written as ``{re,im}``."""

    LEFT = "{"
    RIGHT = "}"
    SEPARATOR = ","

    __slots__ = ("re", "im")

    def __init__(self, re: float = 0.0, im: float = 0.0) -> None:
        self.re = float(re)
        self.im = float(im)

    @classmethod
    def parse(cls, text: str) -> "Complex":
        """Read a number written as ``{re,im}``; whitespace between parts is allowed."""
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"not a complex number: {text!r}")
        return cls(float(match.group(1)), float(match.group(2)))

    @staticmethod
    def _coerce(value: object) -> "Complex | None":
        if isinstance(value, Complex):
            return value
        if isinstance(value, (int, float)):
            return Complex(value)
        return None

    def __str__(self) -> str:
        return f"{self.LEFT}{self.re:g}{self.SEPARATOR}{self.im:g}{self.RIGHT}"

    def __repr__(self) -> str:
        return f"Complex(re={self.re!r}, im={self.im!r})"

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return (
            abs(rhs.re - self.re) < 2 * _EPSILON
            and abs(rhs.im - self.im) < 2 * _EPSILON
        )

    __hash__ = None  # type: ignore[assignment]

    def __neg__(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def __iadd__(self, other: Operand) -> "Complex":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self.re += rhs.re
        self.im += rhs.im
        return self

    def __isub__(self, other: Operand) -> "Complex":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self.re -= rhs.re
        self.im -= rhs.im
        return self

    def __imul__(self, other: Operand) -> "Complex":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        new_re = self.re * rhs.re - self.im * rhs.im
        new_im = self.re * rhs.im + self.im * rhs.re
        self.re, self.im = new_re, new_im
        return self

    def __itruediv__(self, other: Operand) -> "Complex":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs.re == 0.0 and rhs.im == 0.0:
            raise ZeroDivisionError("Division by zero")
        norm = rhs.re * rhs.re + rhs.im * rhs.im
        new_re = (self.re * rhs.re + self.im * rhs.im) / norm
        new_im = (self.im * rhs.re - self.re * rhs.im) / norm
        self.re, self.im = new_re, new_im
        return self

    def _copy(self) -> "Complex":
        return Complex(self.re, self.im)

    def __add__(self, other: Operand) -> "Complex":
        if self._coerce(other) is None:
            return NotImplemented
        result = self._copy()
        result += other
        return result

    def __radd__(self, other: Operand) -> "Complex":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        result = lhs._copy()
        result += self
        return result

    def __sub__(self, other: Operand) -> "Complex":
        if self._coerce(other) is None:
            return NotImplemented
        result = self._copy()
        result -= other
        return result

    def __rsub__(self, other: Operand) -> "Complex":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        result = lhs._copy()
        result -= self
        return result

    def __mul__(self, other: Operand) -> "Complex":
        if self._coerce(other) is None:
            return NotImplemented
        result = self._copy()
        result *= other
        return result

    def __rmul__(self, other: Operand) -> "Complex":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        result = lhs._copy()
        result *= self
        return result

    def __truediv__(self, other: Operand) -> "Complex":
        if self._coerce(other) is None:
            return NotImplemented
        result = self._copy()
        result /= other
        return result

    def __rtruediv__(self, other: Operand) -> "Complex":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        result = lhs._copy()
        result /= self
        return result