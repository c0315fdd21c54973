"""A fixed-size open-addressing set of short strings."""

from __future__ import annotations

TABLE_SIZE = 1024
_MASK = TABLE_SIZE - 1
_UINT32 = 0xFFFFFFFF


def name_hash(key: str) -> int:
    """Polynomial hash (base 31, 32-bit wrap) of the key's bytes, reduced to a slot."""
    value = 0
    for byte in key.encode("utf-8"):
        value = (value * 31 + byte) & _UINT32
    return value & _MASK


class NameTable:
    """A set of names held in a fixed table with linear probing."""

    def __init__(self) -> None:
        self._slots: list[str | None] = [None] * TABLE_SIZE
        self._count = 0

    def _probe(self, key: str):
        start = name_hash(key)
        for step in range(TABLE_SIZE):
            yield (start + step) & _MASK

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        for idx in self._probe(key):
            slot = self._slots[idx]
            if slot is None:
                return False
            if slot == key:
                return True
        return False

    def __len__(self) -> int:
        return self._count

    def __iter__(self):
        return (slot for slot in self._slots if slot is not None)

    def add(self, key: str) -> None:
        """Add a key; adding one that is present does nothing."""
        if not key:
            raise ValueError("key must be a non-empty string")
        for idx in self._probe(key):
            slot = self._slots[idx]
            if slot == key:
                return
            if slot is None:
                self._slots[idx] = key
                self._count += 1
                return
        raise OverflowError("name table is full")