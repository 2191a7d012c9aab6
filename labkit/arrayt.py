"""Generic resizable array that tracks its reserved capacity."""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class ArrayT(Generic[T]):
    """A growable array whose new slots are made by ``factory``."""

    __slots__ = ("_data", "_capacity", "_factory")

    def __init__(self, size: int | None = None, factory: Callable[[], T] = int) -> None:
        self._factory = factory
        if size is None:
            self._data: list[T] = []
        else:
            size = operator.index(size)
            if size <= 0:
                raise ValueError("ArrayT: non-positive size")
            self._data = [factory() for _ in range(size)]
        self._capacity = len(self._data)

    def _checked(self, position: int, upper: int) -> int:
        position = operator.index(position)
        if position < 0 or position >= upper:
            raise IndexError("ArrayT: index out of range")
        return position

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, position: int) -> T:
        return self._data[self._checked(position, len(self._data))]

    def __setitem__(self, position: int, value: T) -> None:
        self._data[self._checked(position, len(self._data))] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"ArrayT({self._data!r}, capacity={self._capacity})"

    def capacity(self) -> int:
        """Number of elements that fit without growing the reserved storage."""
        return self._capacity

    def copy(self) -> "ArrayT[T]":
        """Return an independent copy with the same capacity."""
        duplicate: ArrayT[T] = ArrayT(factory=self._factory)
        duplicate._data = list(self._data)
        duplicate._capacity = self._capacity
        return duplicate

    def resize(self, size: int) -> None:
        """Change the length; added elements come from the factory."""
        size = operator.index(size)
        if size < 0:
            raise ValueError("ArrayT: negative size")
        if size < len(self._data):
            del self._data[size:]
        else:
            self._data.extend(self._factory() for _ in range(size - len(self._data)))
        self._capacity = max(self._capacity, size)

    def insert(self, position: int, value: T) -> None:
        """Insert ``value`` before ``position``; ``position`` may equal the length."""
        position = self._checked(position, len(self._data) + 1)
        self.resize(len(self._data) + 1)
        self._data.pop()
        self._data.insert(position, value)

    def remove(self, position: int) -> None:
        """Delete the element at ``position``; the capacity is kept."""
        del self._data[self._checked(position, len(self._data))]