"""A sequence of items with several interchangeable sorting algorithms."""

from __future__ import annotations

import random
import sys
from typing import Callable, Generic, Iterable, Iterator, TextIO, TypeVar

T = TypeVar("T")
Compare = Callable[[T, T], int]


def _merge(left: list[T], right: list[T], compare: Compare) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if compare(left[i], right[j]) > 0:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(items: list[T], compare: Compare) -> list[T]:
    if len(items) < 2:
        return list(items)
    mid = (len(items) + 1) // 2
    return _merge(
        _merge_sorted(items[:mid], compare),
        _merge_sorted(items[mid:], compare),
        compare,
    )


class SortingList(Generic[T]):
    """An ordered collection that can be sorted in place.

    The comparison-based sorts take a function ``compare(a, b)`` and place
    ``a`` before ``b`` when it returns a positive number.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = list(items) if items is not None else []

    def insert(self, item: T) -> None:
        """Append ``item`` to the end of the list."""
        self._items.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SortingList({self._items!r})"

    def std_sort(self) -> None:
        """Sort in ascending order using the items' ``<`` operator."""
        self._items.sort()

    def selection_sort(self, compare: Compare) -> None:
        """Sort in place with selection sort."""
        items = self._items
        for i in range(len(items) - 1):
            best = i
            for j in range(i + 1, len(items)):
                if compare(items[best], items[j]) < 0:
                    best = j
            if best != i:
                items[i], items[best] = items[best], items[i]

    def bubble_sort(self, compare: Compare) -> None:
        """Sort in place with bubble sort."""
        items = self._items
        for _ in range(1, len(items)):
            for j in range(len(items) - 1):
                if compare(items[j], items[j + 1]) < 0:
                    items[j], items[j + 1] = items[j + 1], items[j]

    def merge_sort(self, compare: Compare) -> None:
        """Sort in place with merge sort."""
        self._items = _merge_sorted(self._items, compare)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the items in place with a Fisher-Yates pass."""
        rng = rng if rng is not None else random.Random()
        items = self._items
        for i in range(len(items) - 1, 1, -1):
            j = rng.randrange(i + 1)
            items[i], items[j] = items[j], items[i]

    def print(self, out: TextIO | None = None) -> None:
        """Write every item on its own line."""
        out = out if out is not None else sys.stdout
        out.write("Data items in the list: \n")
        for item in self._items:
            out.write(f"{item}\n")
        out.write("\n")