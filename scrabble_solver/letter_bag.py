"""Multiset of letters available to the search.

A bag is never changed once built: ``decremented`` hands back a new bag,
so sibling branches of the search can each hold their own snapshot.
"""

from __future__ import annotations

from typing import Iterator


class LetterBag:
    """Letter -> remaining count. Letters with no copies left are dropped."""

    __slots__ = ("_counts",)

    def __init__(self, counts: dict[str, int] | None = None):
        self._counts: dict[str, int] = {
            letter: n for letter, n in (counts or {}).items() if n > 0
        }

    @classmethod
    def from_string(cls, text: str) -> LetterBag:
        """Count every character of *text*; the wildcard is just another letter."""
        counts: dict[str, int] = {}
        for ch in text:
            counts[ch] = counts.get(ch, 0) + 1
        return cls(counts)

    def decremented(self, letter: str) -> LetterBag:
        """A new bag holding one fewer *letter*. Absent letters are ignored."""
        bag = LetterBag.__new__(LetterBag)
        bag._counts = dict(self._counts)
        n = bag._counts.get(letter)
        if n is not None:
            if n > 1:
                bag._counts[letter] = n - 1
            else:
                del bag._counts[letter]
        return bag

    def keys(self) -> Iterator[str]:
        """Distinct letters still available. Order carries no meaning."""
        return iter(self._counts)

    def count(self, letter: str) -> int:
        return self._counts.get(letter, 0)

    def __contains__(self, letter: object) -> bool:
        return letter in self._counts

    def __len__(self) -> int:
        return sum(self._counts.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterBag):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        letters = "".join(letter * n for letter, n in self._counts.items())
        return f"LetterBag({letters!r})"
