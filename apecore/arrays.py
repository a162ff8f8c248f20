"""A growable array with explicit capacity management."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

_DEFAULT_CAPACITY = 32


class CapacityLockedError(RuntimeError):
    """Raised when an array with locked capacity would have to grow."""


class Array:
    """Dynamic array that doubles its capacity when full.

    The capacity can be locked, after which adding past it raises
    :class:`CapacityLockedError`. Removing the first element gives up one
    slot of capacity, as the storage start moves forward.
    """

    def __init__(self, capacity: int = _DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[Any] = []
        self._capacity = capacity
        self._locked = False

    def _ensure_room(self) -> None:
        if len(self._items) < self._capacity:
            return
        if self._locked:
            raise CapacityLockedError(
                f"array capacity is locked at {self._capacity}"
            )
        self._capacity = self._capacity * 2 if self._capacity > 0 else 1

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def add(self, value: Any) -> None:
        """Append *value*, growing the capacity if needed."""
        self._ensure_room()
        self._items.append(value)

    def add_many(self, values: Iterable[Any]) -> None:
        """Append every item of *values*; items added before a failure stay."""
        for value in values:
            self.add(value)

    def add_array(self, other: "Array") -> None:
        """Append every item of *other*; on failure nothing is added."""
        before = len(self._items)
        try:
            for value in list(other):
                self.add(value)
        except CapacityLockedError:
            del self._items[before:]
            raise

    def push(self, value: Any) -> None:
        """Push *value* onto the end of the array."""
        self.add(value)

    def pop(self) -> Any:
        """Remove and return the last item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty array")
        value = self._items[-1]
        self.remove_at(len(self._items) - 1)
        return value

    def top(self) -> Any:
        """Return the last item, or None if the array is empty."""
        if not self._items:
            return None
        return self._items[-1]

    def set(self, index: int, value: Any) -> None:
        """Replace the item at *index*."""
        self._check_index(index)
        self._items[index] = value

    def set_many(self, index: int, values: Iterable[Any]) -> None:
        """Overwrite items from *index* on, appending past the end."""
        for offset, value in enumerate(values):
            dest = index + offset
            if dest < len(self._items):
                self.set(dest, value)
            else:
                self.add(value)

    def get(self, index: int) -> Any:
        """Return the item at *index*."""
        self._check_index(index)
        return self._items[index]

    def remove_at(self, index: int) -> None:
        """Remove the item at *index*, shifting later items down."""
        self._check_index(index)
        if index == 0:
            self._capacity -= 1
        del self._items[index]

    def remove_item(self, value: Any) -> None:
        """Remove the first item equal to *value*; raise ValueError if absent."""
        self.remove_at(self.index(value))

    def clear(self) -> None:
        """Remove all items, keeping the capacity."""
        self._items.clear()

    def lock_capacity(self) -> None:
        """Forbid any further growth of the capacity."""
        self._locked = True

    def index(self, value: Any) -> int:
        """Return the position of the first item equal to *value*."""
        for position, item in enumerate(self._items):
            if item == value:
                return position
        raise ValueError(f"{value!r} is not in array")

    def reverse(self) -> None:
        """Reverse the items in place."""
        self._items.reverse()

    def copy(self) -> "Array":
        """Return a shallow copy with the same capacity and lock state."""
        result = Array(0)
        result._items = list(self._items)
        result._capacity = self._capacity
        result._locked = self._locked
        return result

    def orphan_data(self) -> list[Any]:
        """Hand over the items and reset to an empty, zero-capacity array."""
        data = self._items
        self._items = []
        self._capacity = 0
        self._locked = False
        return data

    def capacity(self) -> int:
        """Return the number of items that fit before the array grows."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __contains__(self, value: Any) -> bool:
        return value in self._items

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return self._items[index]
        if index < 0:
            index += len(self._items)
        return self.get(index)