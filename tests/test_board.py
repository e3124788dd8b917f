import pytest

from scrabble_solver.board import Modifier, ScrabbleBoard, parse_board_spec
from scrabble_solver.grid import Coord, Direction


def test_empty_board_layout():
    board = ScrabbleBoard.empty_board()
    assert (board.nrows, board.ncols) == (15, 15)
    assert board.is_empty()
    assert board.modifier_at(Coord(0, 0)) is Modifier.TRIPLE_WORD
    assert board.modifier_at(Coord(0, 3)) is Modifier.DOUBLE_LETTER
    assert board.modifier_at(Coord(1, 5)) is Modifier.TRIPLE_LETTER
    assert board.modifier_at(Coord(1, 1)) is Modifier.DOUBLE_WORD
    assert board.modifier_at(Coord(7, 7)) is Modifier.DOUBLE_WORD
    assert board.modifier_at(Coord(7, 6)) is None


def test_is_center():
    board = ScrabbleBoard.empty_board()
    assert board.is_center(Coord(7, 7))
    assert not board.is_center(Coord(7, 6))

    small = ScrabbleBoard.from_layout([".....", ".....", "....."])
    assert small.is_center(Coord(1, 2))
    assert not small.is_center(Coord(1, 1))


def test_layout_accepts_spaces_and_star():
    board = ScrabbleBoard.from_layout(["d t", "D*T"])
    assert board.modifier_at(Coord(0, 0)) is Modifier.DOUBLE_LETTER
    assert board.modifier_at(Coord(0, 1)) is None
    assert board.modifier_at(Coord(0, 2)) is Modifier.TRIPLE_LETTER
    assert board.modifier_at(Coord(1, 1)) is Modifier.DOUBLE_WORD
    assert board.modifier_at(Coord(1, 2)) is Modifier.TRIPLE_WORD


def test_layout_rejects_unknown_character():
    with pytest.raises(ValueError):
        ScrabbleBoard.from_layout(["..x.."])


def test_layout_rejects_ragged_rows():
    with pytest.raises(ValueError):
        ScrabbleBoard.from_layout(["...", ".."])


def test_multipliers():
    assert Modifier.DOUBLE_LETTER.letter_multiplier == 2
    assert Modifier.TRIPLE_LETTER.letter_multiplier == 3
    assert Modifier.DOUBLE_LETTER.word_multiplier == 1
    assert Modifier.DOUBLE_WORD.word_multiplier == 2
    assert Modifier.TRIPLE_WORD.word_multiplier == 3
    assert Modifier.TRIPLE_WORD.letter_multiplier == 1


def test_place_word():
    board = ScrabbleBoard.empty_board()
    board.place_word(Coord(7, 5), Direction.RIGHT, "cat")
    board.place_word(Coord(6, 6), Direction.DOWN, "bAt")
    assert board.letter_at(Coord(7, 5)) == "c"
    assert board.letter_at(Coord(7, 6)) == "A"
    assert board.letter_at(Coord(7, 7)) == "t"
    assert board.letter_at(Coord(8, 6)) == "t"
    assert board.count_tiles() == 5
    assert not board.is_empty()


def test_letter_score():
    board = ScrabbleBoard.empty_board()
    assert board.letter_score("z") == 10
    assert board.letter_score("a") == 1
    assert board.letter_score("Z") == 0
    assert board.word_score("za") == 11
    with pytest.raises(ValueError):
        board.letter_score("*")


def test_custom_letter_values():
    board = ScrabbleBoard.from_layout(["..."], letter_values={"a": 7})
    assert board.letter_score("a") == 7


def test_copy_shares_nothing_mutable():
    board = ScrabbleBoard.empty_board()
    other = board.copy()
    other.set_letter_unchecked(Coord(0, 0), "q")
    assert board.letter_at(Coord(0, 0)) is None
    assert other.letter_at(Coord(0, 0)) == "q"


def test_str_shows_tiles_and_bonuses():
    board = ScrabbleBoard.from_layout(["d.T"])
    board.set_letter_unchecked(Coord(0, 1), "q")
    last = str(board).splitlines()[-1]
    assert last.split("|")[1].split() == ["2", "q", "T"]


def test_parse_board_spec():
    board = parse_board_spec("7,5,d;7,6,o;7,7,G;")
    assert board.letter_at(Coord(7, 5)) == "d"
    assert board.letter_at(Coord(7, 6)) == "o"
    assert board.letter_at(Coord(7, 7)) == "G"
    assert board.count_tiles() == 3


def test_parse_empty_board_spec():
    assert parse_board_spec("").is_empty()


@pytest.mark.parametrize("spec", ["7,5", "7,5,do", "a,5,d", "7;5;d", "7,5,1"])
def test_parse_board_spec_rejects_malformed_parts(spec):
    with pytest.raises(ValueError, match="row,col,letter"):
        parse_board_spec(spec)


def test_parse_board_spec_rejects_off_board():
    with pytest.raises(ValueError, match="off the 15x15 board"):
        parse_board_spec("15,0,a")


def test_board_grids_must_match():
    from scrabble_solver.grid import Grid

    with pytest.raises(ValueError):
        ScrabbleBoard(Grid(2, 2, None), Grid(3, 3, None))
