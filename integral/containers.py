"""Fixed-capacity list and nested array construction."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class BoundedList(Generic[T]):
    """A list that refuses to grow past a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        if len(self._items) >= self.capacity:
            raise OverflowError("bounded list is full")
        self._items.append(item)

    def pop_back(self) -> T:
        if not self._items:
            raise IndexError("pop from empty bounded list")
        return self._items.pop()

    def back(self) -> T:
        if not self._items:
            raise IndexError("bounded list is empty")
        return self._items[-1]

    def erase(self, index: int) -> None:
        """Remove an item by moving the last item into its slot."""
        self._check_index(index)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last

    def clear(self) -> None:
        self._items.clear()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index)
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedList({self.capacity}, {self._items!r})"


def multi_array(factory: Callable[[], Any], *args: int) -> list:
    """Build nested lists of the given dimensions, each element from factory()."""
    if not args:
        raise ValueError("at least one dimension is required")
    size, *rest = args
    if rest:
        return [multi_array(factory, *rest) for _ in range(size)]
    return [factory() for _ in range(size)]