"""A growable list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class CSet:
    """An ordered, growable collection of integers."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: list[int] = list(items)

    def append(self, element: int) -> None:
        """Add one element at the end."""
        self._items.append(element)

    def extend(self, other: Iterable[int]) -> None:
        """Add every element of ``other`` at the end, in order."""
        self._items.extend(list(other))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def reverse(self) -> None:
        """Reverse the elements in place."""
        self._items.reverse()

    def __str__(self) -> str:
        return "[" + ", ".join(map(str, self._items)) + "]"

    def __repr__(self) -> str:
        return f"CSet({self._items!r})"