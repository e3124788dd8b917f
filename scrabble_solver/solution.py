"""Scored placements and their ranking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from scrabble_solver.grid import Coord, Direction


@dataclass(frozen=True)
class ScrabbleSolution:
    """A single scored placement on the board.

    ``word`` is the full word read along ``direction`` from ``start``,
    including tiles that were already on the board. Uppercase letters
    are wildcards.
    """

    word: str
    score: int
    direction: Direction
    start: Coord

    @property
    def row(self) -> int:
        return self.start.row

    @property
    def col(self) -> int:
        return self.start.col

    def sort_key(self) -> tuple[int, int, int, str, str]:
        """Best score first; ties broken by position, direction, then word."""
        return (-self.score, self.start.row, self.start.col, self.direction.value, self.word)

    def __str__(self) -> str:
        return f"{self.word}: {self.row},{self.col}({self.direction.value}): {self.score} points"


def rank_solutions(
    solutions: Iterable[ScrabbleSolution], limit: int | None = None,
) -> list[ScrabbleSolution]:
    """Sort by descending score (deterministic tie-break), keeping *limit*."""
    if limit is not None and limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    ranked = sorted(solutions, key=ScrabbleSolution.sort_key)
    if limit is not None:
        return ranked[:limit]
    return ranked
