"""A simple growable container that keeps elements in insertion order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class MyContainer(Generic[T]):
    """Holds elements in the order they were added; duplicates are allowed."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: list[T] = list(items)

    def add(self, value: T) -> None:
        """Append ``value`` to the container."""
        self._data.append(value)

    def remove(self, value: T) -> None:
        """Remove every occurrence of ``value``.

        Raises ValueError if the value is not present.
        """
        kept = [item for item in self._data if item != value]
        if len(kept) == len(self._data):
            raise ValueError("Item not found in container.")
        self._data = kept

    def size(self) -> int:
        """Return the number of stored elements."""
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __getitem__(self, index: int) -> T:
        return self._data[index]

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._data) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"