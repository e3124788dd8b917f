"""Scrabble solver -- finds and scores every legal word placement."""

from scrabble_solver.constants import (
    BINGO_BONUS,
    BINGO_TILE_COUNT,
    LETTER_VALUES,
    STANDARD_MODIFIER_LAYOUT,
    WILDCARD_LETTER,
)
from scrabble_solver.grid import Coord, Direction, Grid
from scrabble_solver.letter_bag import LetterBag
from scrabble_solver.trie import DictionaryTrie, TrieNodeHandle
from scrabble_solver.dictionary import load_dictionary
from scrabble_solver.board import Modifier, ScrabbleBoard, parse_board_spec
from scrabble_solver.solution import ScrabbleSolution, rank_solutions
from scrabble_solver.engine import SolutionBuilder, SolutionFinder, find_all_solutions

__all__ = [
    "BINGO_BONUS",
    "BINGO_TILE_COUNT",
    "LETTER_VALUES",
    "STANDARD_MODIFIER_LAYOUT",
    "WILDCARD_LETTER",
    "Coord",
    "DictionaryTrie",
    "Direction",
    "Grid",
    "LetterBag",
    "Modifier",
    "ScrabbleBoard",
    "ScrabbleSolution",
    "SolutionBuilder",
    "SolutionFinder",
    "TrieNodeHandle",
    "find_all_solutions",
    "load_dictionary",
    "parse_board_spec",
    "rank_solutions",
]
