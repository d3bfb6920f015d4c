"""Views that walk a container in different orders."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from .container import MyContainer

T = TypeVar("T")


class _IndexOrder(Generic[T]):
    """Walks a container following a list of indices fixed at construction."""

    def __init__(self, container: MyContainer[T]) -> None:
        self._container = container
        self._indices: list[int] = self._build_indices(list(container))

    def _build_indices(self, data: list[T]) -> list[int]:
        return list(range(len(data)))

    def __iter__(self) -> Iterator[T]:
        for index in self._indices:
            yield self._container[index]

    def __len__(self) -> int:
        return len(self._indices)


def _sorted_indices(data: list, *, reverse: bool = False) -> list[int]:
    return sorted(range(len(data)), key=data.__getitem__, reverse=reverse)


class AscendingOrder(_IndexOrder[T]):
    """Elements from smallest to largest."""

    def __init__(self, container: MyContainer[T]) -> None:
        super().__init__(container)

    def _build_indices(self, data: list[T]) -> list[int]:
        return _sorted_indices(data)

    def __iter__(self) -> Iterator[T]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()


class DescendingOrder(_IndexOrder[T]):
    """Elements from largest to smallest."""

    def __init__(self, container: MyContainer[T]) -> None:
        super().__init__(container)

    def _build_indices(self, data: list[T]) -> list[int]:
        return _sorted_indices(data, reverse=True)

    def __iter__(self) -> Iterator[T]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()


class Order(_IndexOrder[T]):
    """Elements in insertion order."""

    def __init__(self, container: MyContainer[T]) -> None:
        super().__init__(container)

    def __iter__(self) -> Iterator[T]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()


class ReverseOrder(_IndexOrder[T]):
    """Elements in reverse insertion order."""

    def __init__(self, container: MyContainer[T]) -> None:
        super().__init__(container)

    def _build_indices(self, data: list[T]) -> list[int]:
        return list(reversed(range(len(data))))

    def __iter__(self) -> Iterator[T]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()


class SideCrossOrder(_IndexOrder[T]):
    """Smallest, largest, second smallest, second largest, and so on."""

    def __init__(self, container: MyContainer[T]) -> None:
        super().__init__(container)

    def _build_indices(self, data: list[T]) -> list[int]:
        ordered = _sorted_indices(data)
        result: list[int] = []
        low, high = 0, len(ordered) - 1
        while low <= high:
            result.append(ordered[low])
            if low != high:
                result.append(ordered[high])
            low += 1
            high -= 1
        return result

    def __iter__(self) -> Iterator[T]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()


class MiddleOutOrder(_IndexOrder[T]):
    """Starts at the middle position (n // 2), then alternates left and right."""

    def __init__(self, container: MyContainer[T]) -> None:
        super().__init__(container)

    def _build_indices(self, data: list[T]) -> list[int]:
        n = len(data)
        if n == 0:
            return []
        mid = n // 2
        result = [mid]
        left, right = mid - 1, mid + 1
        while left >= 0 or right < n:
            if left >= 0:
                result.append(left)
                left -= 1
            if right < n:
                result.append(right)
                right += 1
        return result

    def __iter__(self) -> Iterator[T]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()