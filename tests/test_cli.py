import pytest

from scrabble_solver.cli import Shell, main, parse_letters, run_benchmark, run_once
from scrabble_solver.board import ScrabbleBoard
from scrabble_solver.grid import Coord
from scrabble_solver.letter_bag import LetterBag
from scrabble_solver.trie import DictionaryTrie


@pytest.fixture
def trie():
    return DictionaryTrie.from_words(["do", "god", "as", "za"])


def test_parse_letters():
    assert parse_letters("Sa?") == LetterBag.from_string("sa*")
    with pytest.raises(ValueError):
        parse_letters("ab1")
    with pytest.raises(ValueError):
        parse_letters("")


def test_place_and_undo(trie, capsys):
    shell = Shell(trie)
    assert shell.execute("place d 6 7 god")
    assert shell.board.letter_at(Coord(8, 7)) == "d"
    assert len(shell.boards) == 2
    assert shell.boards[0].is_empty()

    shell.execute("undo")
    assert shell.board.is_empty()
    shell.execute("undo")
    assert "Nothing to undo" in capsys.readouterr().out
    assert len(shell.boards) == 1


def test_place_rejects_bad_input(trie, capsys):
    shell = Shell(trie)
    shell.execute("place x 1 1 god")
    shell.execute("place r 1")
    shell.execute("place r 14 13 god")
    out = capsys.readouterr().out
    assert out.count("Invalid place command") == 2
    assert "does not fit" in out
    assert len(shell.boards) == 1


def test_top(trie, capsys):
    shell = Shell(trie)
    shell.execute("place d 6 7 god")
    capsys.readouterr()
    shell.execute("top d")
    out = capsys.readouterr().out
    assert "Found 1 moves" in out
    assert "do" in out


def test_top_with_bad_letters(trie, capsys):
    shell = Shell(trie)
    shell.execute("top a1")
    assert "Letters must be" in capsys.readouterr().out
    shell.execute("top")
    assert "Invalid top command" in capsys.readouterr().out


def test_print_help_unknown_quit(trie, capsys):
    shell = Shell(trie)
    assert shell.execute("print")
    assert shell.execute("help")
    assert shell.execute("frobnicate")
    assert shell.execute("   ")
    out = capsys.readouterr().out
    assert " 7 |" in out
    assert "Commands:" in out
    assert "Unknown command: frobnicate" in out
    assert not shell.execute("quit")
    assert not shell.execute("exit")


def test_run_reads_until_eof(trie, monkeypatch, capsys):
    lines = iter(["place r 7 6 z", "print"])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    shell = Shell(trie)
    shell.run()
    assert shell.board.letter_at(Coord(7, 6)) == "z"


def test_run_once(trie, capsys):
    best = run_once(trie, ScrabbleBoard.empty_board(), LetterBag.from_string("az"), top_n=1)
    assert len(best) == 1
    assert best[0].score == 22
    assert "za" in capsys.readouterr().out


def test_run_benchmark(trie, capsys):
    timings = run_benchmark(trie, 2)
    assert len(timings) == 2
    assert "solutions found" in capsys.readouterr().out


def test_main_one_shot(tmp_path, capsys):
    path = tmp_path / "dictionary.txt"
    path.write_text("do\ngod\n", encoding="utf-8")
    main(["--dict", str(path), "--board", "6,7,g;7,7,o;8,7,d", "--letters", "d", "--top", "5"])
    out = capsys.readouterr().out
    assert "Found 1 moves" in out
    assert "do" in out


def test_main_rejects_bad_board_spec(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("do\n", encoding="utf-8")
    with pytest.raises(ValueError):
        main(["--dict", str(path), "--board", "7,7", "--letters", "d"])


def test_place_rejects_non_ascii_letters(trie, capsys):
    shell = Shell(trie)
    assert shell.execute("place r 7 7 é")
    assert "does not fit" in capsys.readouterr().out
    assert shell.board.is_empty()
    assert shell.execute("top sa")
    assert "Found 4 moves" in capsys.readouterr().out


def test_top_survives_unscorable_board_tile(trie, capsys):
    board = ScrabbleBoard.empty_board()
    board.set_letter_unchecked(Coord(7, 7), "é")
    shell = Shell(trie, board)
    assert shell.execute("top sa")
    assert "Non alphabetical character" in capsys.readouterr().out
    assert shell.execute("print")


def test_top_reports_total_before_limit(trie, capsys):
    shell = Shell(trie)
    shell.execute("top sa 2")
    out = capsys.readouterr().out
    assert "Found 4 moves" in out
    assert " 2 " in out
    assert " 3 " not in out


def test_top_rejects_non_positive_count(trie, capsys):
    shell = Shell(trie)
    shell.execute("top sa -1")
    shell.execute("top sa 0")
    out = capsys.readouterr().out
    assert out.count("N must be at least 1") == 2
    assert "Found" not in out
