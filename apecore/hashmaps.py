"""Open-addressing hash tables that keep their entries in dense arrays.

Entries are stored in insertion order. Removing an entry moves the last
entry into the removed slot, so positional access (``key_at``/``value_at``)
follows that order rather than plain insertion order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Optional

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_INITIAL_CELLS = 32
_LOAD_FACTOR = 0.7


def djb2_hash(data: bytes | bytearray | str) -> int:
    """Return the 64-bit djb2 hash of *data* (strings are hashed as UTF-8)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    result = 5381
    for byte in data:
        result = (result * 33 + byte) & _MASK64
    return result


def upper_power_of_two(value: int) -> int:
    """Round *value* up to a power of two, with 32-bit unsigned wrap-around."""
    v = (value - 1) & _MASK32
    for shift in (1, 2, 4, 8, 16):
        v |= v >> shift
    return (v + 1) & _MASK32


class _HashTable(ABC):
    """Shared machinery: cell array with linear probing over dense item arrays."""

    def __init__(self, cell_capacity: int) -> None:
        self._reset(cell_capacity)

    def _reset(self, cell_capacity: int) -> None:
        self._cell_capacity = cell_capacity
        self._item_capacity = int(cell_capacity * _LOAD_FACTOR)
        self._cells: list[Optional[int]] = [None] * cell_capacity
        self._keys: list[Any] = []
        self._values: list[Any] = []
        self._hashes: list[int] = []
        self._cell_ixs: list[int] = []

    @abstractmethod
    def _hash(self, key: Any) -> int:
        """Return the hash of *key*."""

    @abstractmethod
    def _equal(self, a: Any, b: Any) -> bool:
        """Return whether two keys are equal."""

    def _find(self, key: Any, key_hash: int) -> tuple[Optional[int], bool]:
        capacity = self._cell_capacity
        if capacity == 0:
            return None, False
        mask = capacity - 1
        start = key_hash & mask
        for offset in range(capacity):
            cell = (start + offset) & mask
            item = self._cells[cell]
            if item is None:
                return cell, False
            if self._hashes[item] == key_hash and self._equal(key, self._keys[item]):
                return cell, True
        return None, False

    def _place(self, cell: int, key: Any, value: Any, key_hash: int) -> None:
        self._cells[cell] = len(self._keys)
        self._keys.append(key)
        self._values.append(value)
        self._cell_ixs.append(cell)
        self._hashes.append(key_hash)

    def _grow(self) -> None:
        old = list(zip(self._keys, self._values, self._hashes))
        new_capacity = self._cell_capacity * 2 if self._cell_capacity else _INITIAL_CELLS
        self._reset(new_capacity)
        for key, value, key_hash in old:
            cell, _ = self._find(key, key_hash)
            self._place(cell, key, value, key_hash)

    def _set(self, key: Any, value: Any) -> None:
        key_hash = self._hash(key)
        cell, found = self._find(key, key_hash)
        if found:
            self._values[self._cells[cell]] = value
            return
        if len(self._keys) >= self._item_capacity:
            self._grow()
            cell, _ = self._find(key, key_hash)
        self._place(cell, key, value, key_hash)

    def _lookup(self, key: Any) -> tuple[Optional[int], bool]:
        return self._find(key, self._hash(key))

    def _get(self, key: Any, default: Any) -> Any:
        cell, found = self._lookup(key)
        if not found:
            return default
        return self._values[self._cells[cell]]

    def _remove(self, key: Any) -> None:
        cell, found = self._lookup(key)
        if not found:
            raise KeyError(key)

        item = self._cells[cell]
        last = len(self._keys) - 1
        if item < last:
            self._keys[item] = self._keys[last]
            self._values[item] = self._values[last]
            self._cell_ixs[item] = self._cell_ixs[last]
            self._hashes[item] = self._hashes[last]
            self._cells[self._cell_ixs[item]] = item
        for column in (self._keys, self._values, self._cell_ixs, self._hashes):
            column.pop()

        mask = self._cell_capacity - 1
        i = cell
        j = i
        for _ in range(self._cell_capacity - 1):
            j = (j + 1) & mask
            occupant = self._cells[j]
            if occupant is None:
                break
            k = self._hashes[occupant] & mask
            if (j > i and (k <= i or k > j)) or (j < i and (k <= i and k > j)):
                self._cell_ixs[occupant] = i
                self._cells[i] = occupant
                i = j
        self._cells[i] = None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._keys):
            raise IndexError(f"index {index} out of range")

    def _key_at(self, index: int) -> Any:
        self._check_index(index)
        return self._keys[index]

    def _value_at(self, index: int) -> Any:
        self._check_index(index)
        return self._values[index]

    def _items(self) -> Iterator[tuple[Any, Any]]:
        return iter(list(zip(self._keys, self._values)))


class StringDict(_HashTable):
    """Hash table keyed by strings, with an optional per-item copy function."""

    def __init__(self, copy_fn: Optional[Callable[[Any], Any]] = None) -> None:
        super().__init__(_INITIAL_CELLS)
        self.copy_fn = copy_fn

    def _hash(self, key: Any) -> int:
        if not isinstance(key, str):
            raise TypeError(f"StringDict keys must be str, not {type(key).__name__}")
        return djb2_hash(key)

    def _equal(self, a: Any, b: Any) -> bool:
        return a == b

    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key*, replacing any previous value."""
        self._set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored for *key*, or *default*."""
        return self._get(key, default)

    def remove(self, key: str) -> None:
        """Remove *key*; raise KeyError if it is absent."""
        self._remove(key)

    def key_at(self, index: int) -> str:
        """Return the key stored at position *index*."""
        return self._key_at(index)

    def value_at(self, index: int) -> Any:
        """Return the value stored at position *index*."""
        return self._value_at(index)

    def copy(self) -> "StringDict":
        """Return a new dict whose values are produced by the copy function."""
        if self.copy_fn is None:
            raise ValueError("StringDict has no copy function")
        result = StringDict(self.copy_fn)
        for key, value in zip(self._keys, self._values):
            item_copy = self.copy_fn(value)
            if value is not None and item_copy is None:
                raise ValueError(f"copying the value for {key!r} failed")
            result.set(key, item_copy)
        return result

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(key, value)`` pairs in storage order."""
        return self._items()

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._keys))

    def __contains__(self, key: object) -> bool:
        return self._lookup(key)[1]


def _default_hash(key: Any) -> int:
    if isinstance(key, (bytes, bytearray, str)):
        return djb2_hash(key)
    return hash(key) & _MASK64


class ValueDict(_HashTable):
    """Hash table keyed by arbitrary values with pluggable hashing and equality."""

    def __init__(
        self,
        min_capacity: int = _INITIAL_CELLS,
        hash_fn: Optional[Callable[[Any], int]] = None,
        equals_fn: Optional[Callable[[Any, Any], bool]] = None,
    ) -> None:
        super().__init__(upper_power_of_two(min_capacity * 2))
        self.hash_fn = hash_fn
        self.equals_fn = equals_fn

    def _hash(self, key: Any) -> int:
        if self.hash_fn is not None:
            return self.hash_fn(key) & _MASK64
        return _default_hash(key)

    def _equal(self, a: Any, b: Any) -> bool:
        if self.equals_fn is not None:
            return bool(self.equals_fn(a, b))
        return a == b

    def set(self, key: Any, value: Any) -> None:
        """Store *value* under *key*, replacing any previous value."""
        self._set(key, value)

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value stored for *key*, or *default*."""
        return self._get(key, default)

    def remove(self, key: Any) -> None:
        """Remove *key*; raise KeyError if it is absent."""
        self._remove(key)

    def key_at(self, index: int) -> Any:
        """Return the key stored at position *index*."""
        return self._key_at(index)

    def value_at(self, index: int) -> Any:
        """Return the value stored at position *index*."""
        return self._value_at(index)

    def set_value_at(self, index: int, value: Any) -> None:
        """Replace the value stored at position *index*."""
        self._check_index(index)
        self._values[index] = value

    def clear(self) -> None:
        """Remove every entry, keeping the current capacity."""
        self._cells = [None] * self._cell_capacity
        self._keys.clear()
        self._values.clear()
        self._hashes.clear()
        self._cell_ixs.clear()

    def capacity(self) -> int:
        """Return how many entries fit before the table grows."""
        return self._item_capacity

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in storage order."""
        return self._items()

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._keys))

    def __contains__(self, key: object) -> bool:
        return self._lookup(key)[1]