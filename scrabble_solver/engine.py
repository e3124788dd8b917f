"""Move engine -- exhaustive trie-guided placement search.

Every cell of the board is tried as the first square of a word in both
directions. From there the search walks forward one square at a time:
tiles already on the board must be followed in the trie, empty squares
are filled with each distinct letter still available. A branch dies as
soon as the trie has no child for the next letter or a perpendicular
(crossing) word stops being a dictionary word. Nothing is pruned by
score, so the result is every legal placement.
"""

from __future__ import annotations

import logging
import string
import time
from typing import NamedTuple

from scrabble_solver.board import ScrabbleBoard
from scrabble_solver.constants import BINGO_BONUS, BINGO_TILE_COUNT, WILDCARD_LETTER
from scrabble_solver.grid import Coord, Direction
from scrabble_solver.letter_bag import LetterBag
from scrabble_solver.solution import ScrabbleSolution, rank_solutions
from scrabble_solver.trie import DictionaryTrie, TrieNodeHandle

log = logging.getLogger("scrabble_solver")


class CrossCheck(NamedTuple):
    """Outcome of checking the perpendicular word through a new tile."""

    valid: bool
    anchored: bool
    score: int


NOTHING_AROUND = CrossCheck(valid=True, anchored=False, score=0)
INVALID_WORD = CrossCheck(valid=False, anchored=False, score=0)


class SolutionBuilder:
    """Search state for one node of the search tree.

    Builders are never modified; each step of the search derives a new one.
    """

    __slots__ = (
        "word", "node", "letters", "anchored", "letters_placed",
        "letter_score", "word_multiplier", "addon_score",
    )

    def __init__(
        self,
        word: str,
        node: TrieNodeHandle,
        letters: LetterBag,
        anchored: bool = False,
        letters_placed: int = 0,
        letter_score: int = 0,
        word_multiplier: int = 1,
        addon_score: int = 0,
    ):
        self.word = word
        self.node = node
        self.letters = letters
        self.anchored = anchored            # touches the center or existing tiles
        self.letters_placed = letters_placed
        self.letter_score = letter_score    # main word, letter bonuses applied
        self.word_multiplier = word_multiplier
        self.addon_score = addon_score      # crossing words, fully scored

    @classmethod
    def start(cls, letters: LetterBag, dictionary: DictionaryTrie) -> SolutionBuilder:
        return cls("", dictionary.root(), letters)

    def is_valid_solution(self) -> bool:
        return self.anchored and self.letters_placed > 0 and self.node.is_word()

    def final_score(self) -> int:
        score = self.letter_score * self.word_multiplier + self.addon_score
        if self.letters_placed >= BINGO_TILE_COUNT:
            score += BINGO_BONUS
        return score

    def with_board_letter(
        self, letter: str, node: TrieNodeHandle, letter_score: int,
    ) -> SolutionBuilder:
        """Step over a tile that is already on the board."""
        return SolutionBuilder(
            self.word + letter,
            node,
            self.letters,
            anchored=True,
            letters_placed=self.letters_placed,
            letter_score=self.letter_score + letter_score,
            word_multiplier=self.word_multiplier,
            addon_score=self.addon_score,
        )

    def with_placed_letter(
        self,
        letter: str,
        node: TrieNodeHandle,
        letters: LetterBag,
        letter_score: int,
        word_multiplier: int,
        addon_score: int,
        anchored: bool,
    ) -> SolutionBuilder:
        """Step onto an empty square by placing *letter* from the bag."""
        return SolutionBuilder(
            self.word + letter,
            node,
            letters,
            anchored=self.anchored or anchored,
            letters_placed=self.letters_placed + 1,
            letter_score=self.letter_score + letter_score,
            word_multiplier=self.word_multiplier * word_multiplier,
            addon_score=self.addon_score + addon_score,
        )

    def build(self, direction: Direction, end: Coord) -> ScrabbleSolution:
        """Solution for the word ending just before *end*."""
        n = len(self.word)
        if direction is Direction.RIGHT:
            start = Coord(end.row, end.col - n)
        else:
            start = Coord(end.row - n, end.col)
        return ScrabbleSolution(self.word, self.final_score(), direction, start)


class SolutionFinder:
    """Finds and scores every legal placement of a set of letters."""

    def __init__(self, dictionary: DictionaryTrie):
        self.dict = dictionary

    # public API

    def find_all_solutions(self, board: ScrabbleBoard, letters: LetterBag) -> list[ScrabbleSolution]:
        """Every legal placement, in no particular order."""
        t0 = time.perf_counter()
        solutions: list[ScrabbleSolution] = []
        for coord in board.letters.coords():
            for direction in (Direction.RIGHT, Direction.DOWN):
                solutions.extend(self.find_solutions_at(board, coord, direction, letters))
        log.debug(
            "Found %d solutions for %r on a %dx%d board in %.3fs",
            len(solutions), letters, board.nrows, board.ncols, time.perf_counter() - t0,
        )
        return solutions

    def find_best_solutions(
        self, board: ScrabbleBoard, letters: LetterBag, top_n: int | None = 10,
    ) -> list[ScrabbleSolution]:
        """Top N highest-scoring placements."""
        return rank_solutions(self.find_all_solutions(board, letters), top_n)

    def find_solutions_at(
        self,
        board: ScrabbleBoard,
        coord: Coord,
        direction: Direction,
        letters: LetterBag,
    ) -> list[ScrabbleSolution]:
        """Placements whose word starts at *coord* and runs along *direction*."""
        prev = coord.prev(direction)
        if board.in_bounds(prev) and board.letters.get_unchecked(prev) is not None:
            # Any word through here was already found from its first tile
            return []

        solutions: list[ScrabbleSolution] = []
        self._extend(board, coord, direction, SolutionBuilder.start(letters, self.dict), solutions)
        return solutions

    # search

    def _extend(
        self,
        board: ScrabbleBoard,
        coord: Coord,
        direction: Direction,
        builder: SolutionBuilder,
        solutions: list[ScrabbleSolution],
    ) -> None:
        if not board.in_bounds(coord):
            if builder.is_valid_solution():
                solutions.append(builder.build(direction, coord))
            return

        existing = board.letters.get_unchecked(coord)
        if existing is not None:
            # Square already has a tile -- must follow it in the trie
            child = builder.node.get_child(existing)
            if child is not None:
                self._extend(
                    board, coord.next(direction), direction,
                    builder.with_board_letter(existing, child, board.letter_score(existing)),
                    solutions,
                )
            return

        # The word may stop before this empty square
        if builder.is_valid_solution():
            solutions.append(builder.build(direction, coord))

        modifier = board.modifiers.get_unchecked(coord)
        letter_mult = modifier.letter_multiplier if modifier else 1
        word_mult = modifier.word_multiplier if modifier else 1
        at_center = board.is_center(coord)
        cross_direction = direction.rotate()

        for bag_letter in builder.letters.keys():
            remaining = builder.letters.decremented(bag_letter)
            # Uppercase marks a wildcard standing in for that letter
            candidates = string.ascii_uppercase if bag_letter == WILDCARD_LETTER else bag_letter
            for letter in candidates:
                child = builder.node.get_child(letter)
                if child is None:
                    continue
                cross = self.check_cross_word(board, coord, cross_direction, letter)
                if not cross.valid:
                    continue
                next_builder = builder.with_placed_letter(
                    letter,
                    child,
                    remaining,
                    letter_score=board.letter_score(letter) * letter_mult,
                    word_multiplier=word_mult,
                    addon_score=cross.score,
                    anchored=at_center or cross.anchored,
                )
                self._extend(board, coord.next(direction), direction, next_builder, solutions)

    def check_cross_word(
        self,
        board: ScrabbleBoard,
        coord: Coord,
        direction: Direction,
        letter: str,
    ) -> CrossCheck:
        """Validate and score the word through *coord* along *direction*
        that placing *letter* there would form."""
        before: list[str] = []
        c = coord.prev(direction)
        while board.in_bounds(c):
            existing = board.letters.get_unchecked(c)
            if existing is None:
                break
            before.append(existing)
            c = c.prev(direction)

        after: list[str] = []
        c = coord.next(direction)
        while board.in_bounds(c):
            existing = board.letters.get_unchecked(c)
            if existing is None:
                break
            after.append(existing)
            c = c.next(direction)

        if not before and not after:
            return NOTHING_AROUND

        before.reverse()
        word = "".join(before) + letter + "".join(after)
        if not self.dict.is_word(word):
            return INVALID_WORD

        # Only the new tile's square can carry a bonus
        score = board.word_score(word)
        modifier = board.modifiers.get_unchecked(coord)
        if modifier is not None:
            if modifier.word_multiplier > 1:
                score *= modifier.word_multiplier
            else:
                score += (modifier.letter_multiplier - 1) * board.letter_score(letter)
        return CrossCheck(valid=True, anchored=True, score=score)


def find_all_solutions(
    board: ScrabbleBoard, letters: LetterBag, dictionary: DictionaryTrie,
) -> list[ScrabbleSolution]:
    return SolutionFinder(dictionary).find_all_solutions(board, letters)
