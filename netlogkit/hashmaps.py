"""Integer-keyed hash maps: open addressing with linear probing, and chaining."""

from __future__ import annotations

from enum import Enum
from typing import Any


class _Slot(Enum):
    EMPTY = "vacio"
    OCCUPIED = "ocupado"


def _check_capacity(capacity: int) -> int:
    if capacity <= 0:
        raise ValueError("capacity must be a positive integer")
    return capacity


class LinearProbingHashMap:
    """Fixed-capacity hash map resolving collisions by probing the next slot.

    Keys are hashed as ``key % capacity``. Putting an existing key again
    stores a second entry; lookups find the first one along the probe path.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._keys: list[Any] = [None] * capacity
        self._values: list[Any] = [None] * capacity
        self._status = [_Slot.EMPTY] * capacity
        self._size = 0

    def _hash(self, key: int) -> int:
        return key % self.capacity

    def is_empty(self) -> bool:
        """True when nothing has been stored."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def _free_slot(self, start: int) -> int | None:
        index = start
        for _ in range(self.capacity):
            if self._status[index] is not _Slot.OCCUPIED:
                return index
            index = (index + 1) % self.capacity
        return None

    def put(self, key: int, value: Any) -> bool:
        """Store a pair; return False when the table is full."""
        if self._size == self.capacity:
            return False
        index = self._free_slot(self._hash(key))
        if index is None:
            return False
        self._keys[index] = key
        self._values[index] = value
        self._status[index] = _Slot.OCCUPIED
        self._size += 1
        return True

    def get(self, key: int) -> Any:
        """Return the value stored for key; raise KeyError if it is absent."""
        index = self._hash(key)
        for _ in range(self.capacity):
            if self._status[index] is _Slot.OCCUPIED and self._keys[index] == key:
                return self._values[index]
            index = (index + 1) % self.capacity
        raise KeyError(key)


class ChainedHashMap:
    """Hash map keeping every colliding pair in a per-bucket list."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._buckets: list[list[tuple[Any, Any]]] = [[] for _ in range(capacity)]
        self._size = 0

    def _hash(self, key: int) -> int:
        return key % self.capacity

    def is_empty(self) -> bool:
        """True when nothing has been stored."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def put(self, key: int, value: Any) -> bool:
        """Append a pair to its bucket; always succeeds."""
        self._buckets[self._hash(key)].append((key, value))
        self._size += 1
        return True

    def position(self, key: int) -> tuple[int, int]:
        """Return (bucket, place in bucket) of the first entry for key."""
        bucket = self._hash(key)
        for place, (stored, _) in enumerate(self._buckets[bucket]):
            if stored == key:
                return bucket, place
        raise KeyError(key)

    def get(self, key: int) -> Any:
        """Return the value stored for key; raise KeyError if it is absent."""
        bucket, place = self.position(key)
        return self._buckets[bucket][place][1]