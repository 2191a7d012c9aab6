"""FIFO queue of bytes."""

from __future__ import annotations

from collections import deque


def _byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value out of byte range: {value!r}")
    return int(value)


class QueueA:
    """A queue of values in the range 0..255."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def __repr__(self) -> str:
        return f"QueueA({list(self._items)!r})"

    def push(self, value: int) -> None:
        """Append ``value`` at the back."""
        self._items.append(_byte(value))

    def pop(self) -> None:
        """Drop the front element; does nothing on an empty queue."""
        if self._items:
            self._items.popleft()

    def top(self) -> int:
        """Return the front element."""
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> "QueueA":
        """Return an independent copy."""
        duplicate = QueueA()
        duplicate._items = deque(self._items)
        return duplicate