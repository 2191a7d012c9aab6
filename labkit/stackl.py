"""LIFO stack of bytes."""

from __future__ import annotations


def _byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value out of byte range: {value!r}")
    return int(value)


class StackL:
    """A stack of values in the range 0..255."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[int] = []

    def __repr__(self) -> str:
        return f"StackL({self._items!r})"

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(_byte(value))

    def pop(self) -> None:
        """Drop the top element; does nothing on an empty stack."""
        if self._items:
            self._items.pop()

    def top(self) -> int:
        """Return the top element."""
        if not self._items:
            raise IndexError("StackL: top of an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> "StackL":
        """Return an independent copy."""
        duplicate = StackL()
        duplicate._items = list(self._items)
        return duplicate