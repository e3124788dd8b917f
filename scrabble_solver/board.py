"""Game board: bonus squares plus the tiles placed so far."""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Iterable

from scrabble_solver.constants import LETTER_VALUES, STANDARD_MODIFIER_LAYOUT
from scrabble_solver.grid import Coord, Direction, Grid

if TYPE_CHECKING:
    from scrabble_solver.letter_bag import LetterBag
    from scrabble_solver.solution import ScrabbleSolution
    from scrabble_solver.trie import DictionaryTrie


class Modifier(Enum):
    DOUBLE_LETTER = "d"
    TRIPLE_LETTER = "t"
    DOUBLE_WORD = "D"
    TRIPLE_WORD = "T"

    @property
    def letter_multiplier(self) -> int:
        if self is Modifier.DOUBLE_LETTER:
            return 2
        if self is Modifier.TRIPLE_LETTER:
            return 3
        return 1

    @property
    def word_multiplier(self) -> int:
        if self is Modifier.DOUBLE_WORD:
            return 2
        if self is Modifier.TRIPLE_WORD:
            return 3
        return 1

    @classmethod
    def from_char_spec(cls, ch: str) -> Modifier | None:
        if ch in (" ", "."):
            return None
        if ch == "*":
            return cls.DOUBLE_WORD
        try:
            return cls(ch)
        except ValueError:
            raise ValueError(f"Unexpected character for modifier: {ch!r}") from None


# How an empty bonus square is drawn by ScrabbleBoard.__str__
_MODIFIER_SYMBOLS = {
    None: ".",
    Modifier.DOUBLE_LETTER: "2",
    Modifier.TRIPLE_LETTER: "3",
    Modifier.DOUBLE_WORD: "D",
    Modifier.TRIPLE_WORD: "T",
}

_BOARD_SPEC_PART = re.compile(r"^(\d+),(\d+),([a-zA-Z])$")


class ScrabbleBoard:
    """Bonus squares plus placed tiles.

    Tiles are single letters: lowercase for a normal tile, uppercase for
    a wildcard standing in for that letter (worth nothing).
    """

    def __init__(
        self,
        modifiers: Grid[Modifier | None],
        letters: Grid[str | None] | None = None,
        letter_values: dict[str, int] | None = None,
    ):
        if letters is None:
            letters = Grid(modifiers.nrows, modifiers.ncols, None)
        if (letters.nrows, letters.ncols) != (modifiers.nrows, modifiers.ncols):
            raise ValueError(
                f"Letter grid is {letters.nrows}x{letters.ncols} but modifier grid "
                f"is {modifiers.nrows}x{modifiers.ncols}"
            )
        self.modifiers = modifiers
        self.letters = letters
        self.letter_values = letter_values if letter_values is not None else LETTER_VALUES

    @classmethod
    def from_layout(
        cls, layout: Iterable[str], letter_values: dict[str, int] | None = None,
    ) -> ScrabbleBoard:
        """Empty board whose bonus squares are read from *layout* rows."""
        rows = [[Modifier.from_char_spec(ch) for ch in line] for line in layout]
        return cls(Grid.from_rows(rows), letter_values=letter_values)

    @classmethod
    def empty_board(cls) -> ScrabbleBoard:
        """Empty standard 15x15 board."""
        return cls.from_layout(STANDARD_MODIFIER_LAYOUT)

    @property
    def nrows(self) -> int:
        return self.modifiers.nrows

    @property
    def ncols(self) -> int:
        return self.modifiers.ncols

    def in_bounds(self, coord: Coord) -> bool:
        return self.letters.in_bounds(coord)

    def is_center(self, coord: Coord) -> bool:
        return coord[0] == self.nrows // 2 and coord[1] == self.ncols // 2

    def letter_at(self, coord: Coord) -> str | None:
        """Letter at *coord*, or None if empty or off the board."""
        return self.letters.get(coord)

    def modifier_at(self, coord: Coord) -> Modifier | None:
        return self.modifiers.get(coord)

    def set_letter_unchecked(self, coord: Coord, letter: str | None) -> None:
        self.letters.set_unchecked(coord, letter)

    def place_word(self, start: Coord, direction: Direction, word: str) -> None:
        """Write *word* from *start* onwards. Nothing is validated."""
        coord = start
        for letter in word:
            self.set_letter_unchecked(coord, letter)
            coord = coord.next(direction)

    def letter_score(self, letter: str) -> int:
        """Points for one tile; wildcard (uppercase) tiles score nothing."""
        if "A" <= letter <= "Z":
            return 0
        if "a" <= letter <= "z":
            return self.letter_values[letter]
        raise ValueError(f"Letter {letter!r} has no value")

    def word_score(self, letters: Iterable[str]) -> int:
        """Sum of tile values, no bonuses."""
        return sum(self.letter_score(letter) for letter in letters)

    def is_empty(self) -> bool:
        """True if no tiles on the board."""
        return all(cell is None for cell in self.letters)

    def count_tiles(self) -> int:
        return sum(1 for cell in self.letters if cell is not None)

    def copy(self) -> ScrabbleBoard:
        """Copy sharing the (read-only) modifiers but not the tiles."""
        return ScrabbleBoard(self.modifiers, self.letters.copy(), self.letter_values)

    def find_all_solutions(
        self, letters: LetterBag, dictionary: DictionaryTrie,
    ) -> list[ScrabbleSolution]:
        """Every legal placement of *letters*, unsorted."""
        from scrabble_solver.engine import SolutionFinder

        return SolutionFinder(dictionary).find_all_solutions(self, letters)

    def __str__(self) -> str:
        header = "    " + "".join(f"{c:>3}" for c in range(self.ncols))
        sep = "    " + "---" * self.ncols
        lines = [header, sep]
        for r in range(self.nrows):
            parts = [f"{r:>2} |"]
            for c in range(self.ncols):
                coord = Coord(r, c)
                letter = self.letters.get_unchecked(coord)
                if letter is None:
                    parts.append(f"{_MODIFIER_SYMBOLS[self.modifiers.get_unchecked(coord)]:>3}")
                else:
                    parts.append(f"{letter:>3}")
            lines.append("".join(parts))
        return "\n".join(lines)


def parse_board_spec(spec: str, board: ScrabbleBoard | None = None) -> ScrabbleBoard:
    """Place tiles described as ``row,col,letter`` parts separated by ``;``.

    e.g. ``"7,5,d;7,6,o;7,7,g"``. Tiles go onto a fresh standard board
    unless *board* is given, in which case it is updated in place.
    """
    if board is None:
        board = ScrabbleBoard.empty_board()
    spec = spec.strip()
    if not spec:
        return board

    for part in spec.rstrip(";").split(";"):
        part = part.strip()
        match = _BOARD_SPEC_PART.match(part)
        if match is None:
            raise ValueError(f"{part!r} is not in row,col,letter format")
        coord = Coord(int(match.group(1)), int(match.group(2)))
        if not board.in_bounds(coord):
            raise ValueError(f"{part!r} is off the {board.nrows}x{board.ncols} board")
        board.set_letter_unchecked(coord, match.group(3))
    return board
