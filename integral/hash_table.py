"""A fixed-size hash table indexed by 64-bit keys."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

BYTES_IN_MEGABYTE = 1024 * 1024
_MASK64 = 0xFFFFFFFFFFFFFFFF


class HashTable(Generic[T]):
    """Table sized in megabytes; keys map to slots by multiply-high."""

    def __init__(
        self,
        entry_factory: Callable[[], T],
        entry_size: int,
        mb_size: int | None = None,
    ) -> None:
        if entry_size <= 0:
            raise ValueError("entry_size must be positive")
        self._factory = entry_factory
        self._entry_size = entry_size
        self._table: list[T] = []
        if mb_size is not None:
            self.resize(mb_size)

    def resize(self, mb_size: int) -> None:
        if mb_size <= 0:
            raise ValueError("mb_size must be positive")
        count = mb_size * BYTES_IN_MEGABYTE // self._entry_size
        self._table = [self._factory() for _ in range(count)]

    def clear(self) -> None:
        self._table = [self._factory() for _ in self._table]

    def index(self, key: int) -> int:
        return ((key & _MASK64) * len(self._table)) >> 64

    def __getitem__(self, key: int) -> T:
        if not self._table:
            raise IndexError("hash table has no entries")
        return self._table[self.index(key)]

    def __setitem__(self, key: int, value: T) -> None:
        if not self._table:
            raise IndexError("hash table has no entries")
        self._table[self.index(key)] = value

    def __len__(self) -> int:
        return len(self._table)