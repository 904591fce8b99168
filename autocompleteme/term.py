"""Weighted search terms and the comparisons used to order them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """A query string together with its weight."""

    query: str = ""
    weight: int = 0

    @staticmethod
    def compare_by_weight(t1: Term, t2: Term) -> int:
        """Compare in descending order of weight.

        Returns 1 if ``t1`` is heavier, 0 if the weights are equal, -1 otherwise.
        """
        if t1.weight > t2.weight:
            return 1
        if t1.weight == t2.weight:
            return 0
        return -1

    @staticmethod
    def compare_by_prefix(t1: Term, t2: Term, r: int) -> int:
        """Compare lexicographically using only the first ``r`` characters.

        Returns 1 if the prefix of ``t1`` sorts first, 0 if the prefixes are
        equal, -1 otherwise. Raises ValueError for a negative ``r``.
        """
        if r < 0:
            raise ValueError("The length of the prefix should be a positive number!")
        first = t1.query[:r]
        second = t2.query[:r]
        if first < second:
            return 1
        if first == second:
            return 0
        return -1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.query < other.query

    def __str__(self) -> str:
        return f"{self.weight}\t{self.query}"