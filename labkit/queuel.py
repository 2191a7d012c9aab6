"""FIFO queue of single-precision floats."""

from __future__ import annotations

import math
import struct
from collections import deque


def _single(value: float) -> float:
    """Round ``value`` to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", float(value)))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class QueueL:
    """A queue of numbers stored with single precision."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: deque[float] = deque()

    def __repr__(self) -> str:
        return f"QueueL({list(self._items)!r})"

    def push(self, value: float) -> None:
        """Append ``value`` at the back."""
        self._items.append(_single(value))

    def pop(self) -> None:
        """Drop the front element; does nothing on an empty queue."""
        if self._items:
            self._items.popleft()

    def top(self) -> float:
        """Return the front element."""
        if not self._items:
            raise IndexError("QueueL is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()