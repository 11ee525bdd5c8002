"""Deduplicating set of prerequisite keys collected while a catalog loads.

Open-addressing hash table: probe ``i`` for a key looks at slot
``(hash + i) % capacity`` until it finds the key or an empty slot. The
table doubles (plus one, to stay odd) and rehashes before the load factor
passes one half, so no capacity ever limits how many keys fit.
"""

from __future__ import annotations

from typing import Iterator, Optional

DEFAULT_CAPACITY = 27
MAX_LOAD_FACTOR = 0.5

_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF


def key_hash(key: str) -> int:
    """64-bit FNV-1a over the UTF-8 bytes, finished with the splitmix64 mixer."""
    h = _FNV_OFFSET
    for byte in key.encode("utf-8"):
        h ^= byte
        h = (h * _FNV_PRIME) & _MASK64
    h ^= h >> 30
    h = (h * 0xBF58476D1CE4E5B9) & _MASK64
    h ^= h >> 27
    h = (h * 0x94D049BB133111EB) & _MASK64
    h ^= h >> 31
    return h


class PrerequisiteSet:
    """Holds each registered key exactly once."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots: list[Optional[str]] = [None] * capacity
        self._len = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _find_slot(self, slots: list[Optional[str]], key: str) -> int:
        cap = len(slots)
        h = key_hash(key)
        for idx in range(cap):
            slot = (h + idx) % cap
            if slots[slot] is None or slots[slot] == key:
                return slot
        # Unreachable while the load factor stays below one
        raise RuntimeError("prerequisite table is full")

    def _grow(self) -> None:
        old = self._slots
        self._slots = [None] * (len(old) * 2 + 1)
        for key in old:
            if key is not None:
                self._slots[self._find_slot(self._slots, key)] = key

    def register(self, key: str) -> bool:
        """Add ``key``; return False if it was already present."""
        if (self._len + 1) / len(self._slots) > MAX_LOAD_FACTOR:
            self._grow()
        slot = self._find_slot(self._slots, key)
        if self._slots[slot] is not None:
            return False
        self._slots[slot] = key
        self._len += 1
        return True

    def drain_for_validation(self) -> Iterator[str]:
        """Yield each distinct key once. Callers must not rely on the order."""
        for key in self._slots:
            if key is not None:
                yield key

    def size(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def __len__(self) -> int:
        return self._len

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._slots[self._find_slot(self._slots, key)] == key

    def __iter__(self) -> Iterator[str]:
        return self.drain_for_validation()
