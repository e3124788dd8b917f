"""Command line front end: interactive shell, one-shot solve and benchmark."""

from __future__ import annotations

import argparse
import logging
import string
import time

from scrabble_solver.board import ScrabbleBoard, parse_board_spec
from scrabble_solver.constants import WILDCARD_LETTER
from scrabble_solver.dictionary import load_dictionary
from scrabble_solver.engine import SolutionFinder
from scrabble_solver.grid import Coord, Direction
from scrabble_solver.letter_bag import LetterBag
from scrabble_solver.solution import ScrabbleSolution, rank_solutions
from scrabble_solver.trie import DictionaryTrie

DEFAULT_TOP_N = 10

HELP_TEXT = """\
Commands:
  print                        -- print the board
  undo                         -- undo the last placement
  top LETTERS [N]              -- best N placements for LETTERS (* = wildcard)
  place R|D ROW COL LETTERS    -- place LETTERS on the board (uppercase = wildcard)
  help                         -- show this help
  quit                         -- leave"""

_RACK_CHARS = set(string.ascii_lowercase) | {WILDCARD_LETTER}


def _is_tile_word(word: str) -> bool:
    return bool(word) and all(ch in string.ascii_letters for ch in word)


def parse_letters(text: str) -> LetterBag:
    """Rack letters as typed by the user; ``?`` is accepted for a wildcard."""
    letters = text.strip().lower().replace("?", WILDCARD_LETTER)
    bad = sorted(set(letters) - _RACK_CHARS)
    if not letters or bad:
        raise ValueError(f"Letters must be a-z or {WILDCARD_LETTER!r}, got {text!r}")
    return LetterBag.from_string(letters)


def print_solutions(solutions: list[ScrabbleSolution], elapsed: float | None = None) -> None:
    if elapsed is not None:
        print(f"Found {len(solutions)} moves in {elapsed:.2f}s.")
    if not solutions:
        print("No valid moves found. Check your board and letters.")
        return

    print("=" * 50)
    print(f" {'#':>2}  {'Score':>5}  {'Word':<15} {'Position':<10} Dir")
    print("-" * 50)
    for i, s in enumerate(solutions):
        position = f"({s.row},{s.col})"
        print(f" {i+1:>2}  {s.score:>5}  {s.word:<15} {position:<10} {s.direction.arrow}")
    print("=" * 50)


class Shell:
    """Interactive board editing and solving.

    Keeps a stack of boards so placements can be undone.
    """

    def __init__(self, dictionary: DictionaryTrie, board: ScrabbleBoard | None = None):
        self.engine = SolutionFinder(dictionary)
        self.boards: list[ScrabbleBoard] = [board or ScrabbleBoard.empty_board()]

    @property
    def board(self) -> ScrabbleBoard:
        return self.boards[-1]

    def execute(self, line: str) -> bool:
        """Run one command. Returns False when the shell should exit."""
        parts = line.split()
        if not parts:
            return True
        cmd, args = parts[0].lower(), parts[1:]

        if cmd in ("quit", "exit"):
            return False
        if cmd == "help":
            print(HELP_TEXT)
        elif cmd == "print":
            print(self.board)
        elif cmd == "undo":
            if len(self.boards) > 1:
                self.boards.pop()
                print("  Undone.")
            else:
                print("  Nothing to undo.")
        elif cmd == "place":
            self._place(args)
        elif cmd == "top":
            self._top(args)
        else:
            print(f"Unknown command: {parts[0]}")
        return True

    def _place(self, args: list[str]) -> None:
        try:
            direction = Direction.parse(args[0])
            coord = Coord(int(args[1]), int(args[2]))
            word = args[3]
        except (ValueError, IndexError):
            print("  Invalid place command.  place R|D ROW COL LETTERS")
            return
        end = coord
        for _ in word[1:]:
            end = end.next(direction)
        if not _is_tile_word(word) or not (self.board.in_bounds(coord) and self.board.in_bounds(end)):
            print(f"  '{word}' does not fit on the board at ({coord.row},{coord.col})")
            return
        board = self.board.copy()
        board.place_word(coord, direction, word)
        self.boards.append(board)
        print(f"  Placed '{word}' at ({coord.row},{coord.col}) {direction.arrow}")

    def _top(self, args: list[str]) -> None:
        try:
            letters = parse_letters(args[0])
            n = int(args[1]) if len(args) > 1 else DEFAULT_TOP_N
        except IndexError:
            print("  Invalid top command.  top LETTERS [N]")
            return
        except ValueError as exc:
            print(f"  {exc}")
            return
        if n < 1:
            print("  N must be at least 1.  top LETTERS [N]")
            return

        t0 = time.perf_counter()
        try:
            solutions = self.engine.find_all_solutions(self.board, letters)
        except ValueError as exc:
            print(f"  {exc}")
            return
        print(f"Found {len(solutions)} moves in {time.perf_counter() - t0:.2f}s.")
        print_solutions(rank_solutions(solutions, n))

    def run(self) -> None:
        print(HELP_TEXT)
        while True:
            try:
                line = input("scrabble> ")
            except (EOFError, KeyboardInterrupt):
                print()
                break
            if not self.execute(line):
                break


def run_once(dictionary: DictionaryTrie, board: ScrabbleBoard, letters: LetterBag, top_n: int) -> list[ScrabbleSolution]:
    """Solve a single position and print the ranking."""
    print(board)
    print(f"\nLetters: {letters}")
    t0 = time.perf_counter()
    solutions = SolutionFinder(dictionary).find_all_solutions(board, letters)
    elapsed = time.perf_counter() - t0
    print(f"Found {len(solutions)} moves in {elapsed:.2f}s.\n")
    best = rank_solutions(solutions, top_n)
    print_solutions(best)
    return best


def run_benchmark(dictionary: DictionaryTrie, rounds: int) -> list[float]:
    """Time repeated searches on a fixed mid-game position."""
    board = ScrabbleBoard.empty_board()
    board.place_word(Coord(7, 5), Direction.RIGHT, "lolcatz")
    board.place_word(Coord(6, 6), Direction.DOWN, "goalie")
    letters = LetterBag.from_string("**saebd")

    timings: list[float] = []
    for _ in range(rounds):
        t0 = time.perf_counter()
        solutions = SolutionFinder(dictionary).find_all_solutions(board, letters)
        timings.append(time.perf_counter() - t0)
        print(f"{len(solutions)} solutions found in {timings[-1]:.3f}s")
    if timings:
        print(f"Mean {sum(timings) / len(timings):.3f}s over {len(timings)} rounds")
    return timings


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Scrabble solver -- finds every legal placement for your letters",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--board", type=str, default="",
                        help="Tiles already on the board, e.g. '7,5,d;7,6,o;7,7,g'")
    parser.add_argument("--letters", type=str, default=None,
                        help="Solve once for these letters (* or ? for a wildcard) and exit")
    parser.add_argument("--top", type=int, default=DEFAULT_TOP_N,
                        help="Number of placements to show")
    parser.add_argument("--benchmark", type=int, metavar="ROUNDS", default=None,
                        help="Time ROUNDS searches on a fixed position and exit")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dictionary = load_dictionary(args.dict)

    if args.benchmark is not None:
        run_benchmark(dictionary, args.benchmark)
        return

    board = parse_board_spec(args.board)
    if args.letters is not None:
        run_once(dictionary, board, parse_letters(args.letters), args.top)
    else:
        Shell(dictionary, board).run()
