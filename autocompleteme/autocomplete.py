"""Prefix search over a collection of weighted terms."""

from __future__ import annotations

import sys
from typing import TextIO

from .sorting_list import SortingList
from .term import Term


class Autocomplete:
    """Stores terms and finds those whose query starts with a given prefix.

    Call :meth:`sort` after inserting terms and before searching.
    """

    def __init__(self) -> None:
        self._terms: SortingList[Term] = SortingList()

    def insert(self, term: Term) -> None:
        """Add ``term`` to the collection."""
        self._terms.insert(term)

    def sort(self) -> None:
        """Sort the terms lexicographically by query."""
        self._terms.std_sort()

    def binary_search(self, prefix: str) -> int | None:
        """Return the index of some term whose query starts with ``prefix``.

        Returns None if no term matches. The terms must already be sorted.
        """
        key = Term(prefix, 0)
        width = len(prefix)
        low, high = 0, len(self._terms) - 1
        while low <= high:
            middle = (low + high) // 2
            order = Term.compare_by_prefix(key, self._terms[middle], width)
            if order > 0:
                high = middle - 1
            elif order < 0:
                low = middle + 1
            else:
                return middle
        return None

    def search(self, key: str) -> tuple[int, int] | None:
        """Return the first and last index of terms matching ``key``.

        Returns None if no term matches.
        """
        found = self.binary_search(key)
        if found is None:
            return None
        width = len(key)
        anchor = self._terms[found]

        def matches(index: int) -> bool:
            return Term.compare_by_prefix(self._terms[index], anchor, width) == 0

        first = found
        while first > 0 and matches(first - 1):
            first -= 1
        last = found
        while last < len(self._terms) - 1 and matches(last + 1):
            last += 1
        return first, last

    def all_matches(self, prefix: str) -> SortingList[Term]:
        """Return all terms starting with ``prefix``, heaviest first."""
        matched: SortingList[Term] = SortingList()
        bounds = self.search(prefix)
        if bounds is None:
            return matched
        first, last = bounds
        for index in range(first, last + 1):
            matched.insert(self._terms[index])
        matched.selection_sort(Term.compare_by_weight)
        return matched

    def print(self, out: TextIO | None = None) -> None:
        """Write every term on its own line."""
        out = out if out is not None else sys.stdout
        for term in self._terms:
            out.write(f"{term}\n")