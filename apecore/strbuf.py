"""A growable string builder with printf-style appending."""

from __future__ import annotations

from typing import Any


class StringBuilder:
    """Accumulates text, doubling its capacity when it runs out of room.

    Capacity is counted in characters and always leaves room for one
    terminating slot, so a builder holding ``n`` characters needs at least
    ``n + 1`` of capacity.
    """

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._parts: list[str] = []
        self._length = 0
        self._capacity = capacity

    def _reserve(self, extra: int) -> None:
        required = self._length + extra + 1
        if required > self._capacity:
            self._capacity = required * 2

    def _push(self, text: str) -> None:
        if not text:
            return
        self._reserve(len(text))
        self._parts.append(text)
        self._length += len(text)

    def append(self, text: str) -> None:
        """Append *text* to the buffer."""
        if not isinstance(text, str):
            raise TypeError(f"expected str, not {type(text).__name__}")
        self._push(text)

    def appendf(self, fmt: str, *args: Any) -> None:
        """Append *fmt* formatted with printf-style ``%`` substitution."""
        self._push(fmt % args if args else fmt % ())

    def clear(self) -> None:
        """Empty the buffer, keeping its capacity."""
        self._parts.clear()
        self._length = 0

    def build(self) -> str:
        """Return the accumulated text and reset the builder to empty."""
        result = "".join(self._parts)
        self.clear()
        return result

    def __str__(self) -> str:
        text = "".join(self._parts)
        self._parts = [text] if text else []
        return text

    def __len__(self) -> int:
        return self._length