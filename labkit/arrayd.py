"""Resizable array of floating-point numbers with bounds-checked access."""

from __future__ import annotations

import operator
from typing import Iterator


class ArrayD:
    """A growable array of floats; new slots are filled with ``0.0``."""

    __slots__ = ("_data",)

    def __init__(self, size: int | None = None) -> None:
        if size is None:
            self._data: list[float] = []
        else:
            size = operator.index(size)
            if size <= 0:
                raise ValueError("ArrayD: non-positive size")
            self._data = [0.0] * size

    def _checked(self, position: int, upper: int) -> int:
        position = operator.index(position)
        if position < 0 or position >= upper:
            raise IndexError("Index out of range")
        return position

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, position: int) -> float:
        return self._data[self._checked(position, len(self._data))]

    def __setitem__(self, position: int, value: float) -> None:
        self._data[self._checked(position, len(self._data))] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"ArrayD({self._data!r})"

    def copy(self) -> "ArrayD":
        """Return an independent copy."""
        duplicate = ArrayD()
        duplicate._data = list(self._data)
        return duplicate

    def resize(self, size: int) -> None:
        """Change the length; added elements are ``0.0``."""
        size = operator.index(size)
        if size < 0:
            raise ValueError("ArrayD: negative size")
        if size < len(self._data):
            del self._data[size:]
        else:
            self._data.extend([0.0] * (size - len(self._data)))

    def insert(self, position: int, value: float) -> None:
        """Insert ``value`` before ``position``; ``position`` may equal the length."""
        position = self._checked(position, len(self._data) + 1)
        self._data.insert(position, float(value))

    def remove(self, position: int) -> None:
        """Delete the element at ``position``."""
        del self._data[self._checked(position, len(self._data))]