"""Fixed-size array with bounds-checked access."""

from __future__ import annotations

from typing import Any, Generic, Iterator, List, TypeVar

T = TypeVar("T")


class StaticArray(Generic[T]):
    """An array whose length is fixed at construction."""

    def __init__(self, size: int, fill: Any = None) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._items: List[Any] = [fill] * size

    def __getitem__(self, index: int) -> T:
        self._check(index)
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check(index)
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def fill(self, value: T) -> None:
        """Set every element to ``value``."""
        self._items[:] = [value] * len(self._items)

    def __repr__(self) -> str:
        return f"StaticArray({self._items!r})"

    def _check(self, index: int) -> None:
        if not self.is_valid_index(index):
            raise IndexError("index out of bounds")