"""A string-keyed hash table using open addressing with double hashing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from algokit.hashing import cool_hash

V = TypeVar("V")


@dataclass(eq=False)
class _Slot(Generic[V]):
    key: str
    value: V
    live: bool = True


class HashTable(Generic[V]):
    """Maps string keys to values; deleted entries are left as tombstones."""

    _DEFAULT_SIZE = 8
    _REHASH_LOAD = 0.75

    def __init__(self) -> None:
        self._slots: list[_Slot[V] | None] = [None] * self._DEFAULT_SIZE
        self._size = 0
        self._used = 0

    def _probe(self, key: str) -> Iterator[int]:
        capacity = len(self._slots)
        h = cool_hash(key)
        index = h % (capacity - 1)
        step = h % (capacity + 1)
        for _ in range(capacity):
            yield index
            index = (index + step) % capacity

    def _rebuild(self, capacity: int) -> None:
        old = self._slots
        self._slots = [None] * capacity
        self._size = 0
        self._used = 0
        for slot in old:
            if slot is not None and slot.live:
                self._place(slot.key, slot.value)

    def _place(self, key: str, value: V) -> bool:
        while True:
            first_deleted: int | None = None
            empty: int | None = None
            for index in self._probe(key):
                slot = self._slots[index]
                if slot is None:
                    empty = index
                    break
                if slot.live and slot.key == key:
                    return False
                if not slot.live and first_deleted is None:
                    first_deleted = index
            if first_deleted is not None:
                reused = self._slots[first_deleted]
                assert reused is not None
                reused.key, reused.value, reused.live = key, value, True
                break
            if empty is not None:
                self._slots[empty] = _Slot(key, value)
                self._used += 1
                break
            self._rebuild(len(self._slots) * 2)
        self._size += 1
        return True

    def insert(self, key: str, value: V) -> bool:
        """Add ``key`` with ``value``; False if the key is already present."""
        if self._size + 1 > int(self._REHASH_LOAD * len(self._slots)):
            self._rebuild(len(self._slots) * 2)
        elif self._used > 2 * self._size:
            self._rebuild(len(self._slots))
        return self._place(key, value)

    def _find_slot(self, key: str) -> _Slot[V] | None:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot.live and slot.key == key:
                return slot
        return None

    def remove(self, key: str) -> bool:
        """Remove ``key``; False if it was not present."""
        slot = self._find_slot(key)
        if slot is None:
            return False
        slot.live = False
        self._size -= 1
        return True

    def find(self, value: V) -> bool:
        """Whether some entry holds ``value``."""
        return any(slot is not None and slot.live and slot.value == value for slot in self._slots)

    def get(self, key: str) -> V:
        """The value stored under ``key``; KeyError if there is none."""
        slot = self._find_slot(key)
        if slot is None:
            raise KeyError(key)
        return slot.value

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find_slot(key) is not None