import pytest

from puzzles import SCENARIO_A
from src.sudoku.model import Board
from src.sudoku.parser import PuzzleFormatError, board_to_string, parse_puzzle, render_board


def test_parse_places_givens():
    board = parse_puzzle(SCENARIO_A)
    assert board[0].possibles == ("5",)
    assert board[1].possibles == ("3",)
    assert len(board[2].possibles) == 9
    assert board_to_string(board) == SCENARIO_A


def test_parse_treats_zero_as_unknown():
    board = parse_puzzle(SCENARIO_A.replace(".", "0"))
    assert board_to_string(board) == SCENARIO_A


def test_parse_leaves_unknown_cells_untouched():
    board = Board()
    board[2].remove_possibles(["1", "2"])
    parse_puzzle(SCENARIO_A, board)
    assert board[2].possibles == tuple("3456789")


@pytest.mark.parametrize("text", ["", "123", SCENARIO_A + "1"])
def test_parse_rejects_wrong_length(text):
    with pytest.raises(PuzzleFormatError, match="81"):
        parse_puzzle(text)


def test_parse_does_not_trim_padding():
    with pytest.raises(PuzzleFormatError, match="81"):
        parse_puzzle("  " + SCENARIO_A + "\n")


def test_parse_rejects_unknown_symbols():
    with pytest.raises(PuzzleFormatError, match="x"):
        parse_puzzle("x" + SCENARIO_A[1:])


def test_render_board_layout():
    board = parse_puzzle(SCENARIO_A)
    board[2].set_possibles(("1", "2", "4"))
    lines = render_board(board).splitlines()

    assert len(lines) == 11
    assert lines[3] == lines[7]
    assert set(lines[3]) == {"=", "|"}
    assert lines[0].startswith("    5     " + "    3     " + "124       |")
    assert all(line.count("|") == 2 for line in lines)
