"""Coordinates, directions and a fixed-shape 2D grid."""

from __future__ import annotations

from enum import Enum
from typing import Generic, Iterable, Iterator, NamedTuple, TypeVar

T = TypeVar("T")


class Direction(Enum):
    RIGHT = "R"
    DOWN = "D"

    def rotate(self) -> Direction:
        """The perpendicular direction."""
        return Direction.DOWN if self is Direction.RIGHT else Direction.RIGHT

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Accept ``r``/``h`` for RIGHT and ``d``/``v`` for DOWN, any case."""
        key = text.strip().upper()
        if key in ("R", "H"):
            return cls.RIGHT
        if key in ("D", "V"):
            return cls.DOWN
        raise ValueError(f"Unknown direction {text!r}")

    @property
    def arrow(self) -> str:
        return "→" if self is Direction.RIGHT else "↓"


class Coord(NamedTuple):
    row: int
    col: int

    def next(self, direction: Direction) -> Coord:
        if direction is Direction.RIGHT:
            return Coord(self.row, self.col + 1)
        return Coord(self.row + 1, self.col)

    def prev(self, direction: Direction) -> Coord:
        if direction is Direction.RIGHT:
            return Coord(self.row, self.col - 1)
        return Coord(self.row - 1, self.col)


class Grid(Generic[T]):
    """Fixed-shape 2D array stored row-major in a flat list.

    The ``*_unchecked`` accessors skip the bounds test; callers must
    check ``in_bounds`` first.
    """

    __slots__ = ("nrows", "ncols", "_cells")

    def __init__(self, nrows: int, ncols: int, default: T):
        self.nrows = nrows
        self.ncols = ncols
        self._cells: list[T] = [default] * (nrows * ncols)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[T]]) -> Grid[T]:
        """Build a grid from nested rows, which must all be the same length."""
        rows = [list(row) for row in rows]
        if not rows:
            raise ValueError("No rows")
        ncols = len(rows[0])
        for row in rows:
            if len(row) != ncols:
                raise ValueError(f"One row has {ncols} columns and another has {len(row)}")
        grid: Grid[T] = cls(len(rows), ncols, None)  # type: ignore[arg-type]
        grid._cells = [value for row in rows for value in row]
        return grid

    def in_bounds(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < self.nrows and 0 <= col < self.ncols

    def _offset(self, coord: Coord) -> int:
        return coord[0] * self.ncols + coord[1]

    def get(self, coord: Coord) -> T | None:
        """Value at *coord*, or None when it lies off the grid."""
        if not self.in_bounds(coord):
            return None
        return self._cells[self._offset(coord)]

    def get_unchecked(self, coord: Coord) -> T:
        return self._cells[self._offset(coord)]

    def set_unchecked(self, coord: Coord, value: T) -> None:
        self._cells[self._offset(coord)] = value

    def coords(self) -> Iterator[Coord]:
        """Every coordinate, row by row."""
        for row in range(self.nrows):
            for col in range(self.ncols):
                yield Coord(row, col)

    def copy(self) -> Grid[T]:
        grid: Grid[T] = Grid(self.nrows, self.ncols, None)  # type: ignore[arg-type]
        grid._cells = self._cells[:]
        return grid

    def __iter__(self) -> Iterator[T]:
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.nrows, self.ncols, self._cells) == (other.nrows, other.ncols, other._cells)
