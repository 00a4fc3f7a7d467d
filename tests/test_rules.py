import pytest

from simple_tictactoe.game_basics import EMPTY_BOARD, Cell, parse_board
from simple_tictactoe.rules import GameStatus, classify, completed_lines, has_won, is_terminal


def test_empty_board_in_progress():
    assert classify(EMPTY_BOARD) is GameStatus.IN_PROGRESS


@pytest.mark.parametrize("raw,expected", [
    ("XXXOO____", GameStatus.X_WINS),     # top row X, O elsewhere
    ("OOOXX_X__", GameStatus.O_WINS),
    ("XXOOOXXOX", GameStatus.DRAW),       # full, no line
    ("XOX_X_X_X", GameStatus.IMPOSSIBLE), # 5 X vs 1 O
    ("XXX___OOO", GameStatus.IMPOSSIBLE), # both sides complete a row
    ("XO_XO_XO_", GameStatus.IMPOSSIBLE), # both sides complete a column
    ("XXOO_____", GameStatus.IN_PROGRESS),
    ("XXXOO__O_", GameStatus.X_WINS),
])
def test_known_positions(raw, expected):
    assert classify(parse_board(raw)) is expected


def test_count_skew_beats_a_win():
    # X has a complete row but also four marks to none
    b = parse_board("XXXX_____")
    assert has_won(b, Cell.X)
    assert classify(b) is GameStatus.IMPOSSIBLE


def test_two_lines_for_same_player_is_still_a_win():
    b = parse_board("XXXXOOXOO")
    assert len(completed_lines(b, Cell.X)) == 2
    assert classify(b) is GameStatus.X_WINS


def test_counts_off_by_one_either_way_are_allowed():
    assert classify(parse_board("X________")) is GameStatus.IN_PROGRESS
    assert classify(parse_board("O________")) is GameStatus.IN_PROGRESS


def test_completed_lines_for_empty_mark_is_empty():
    assert completed_lines(EMPTY_BOARD, Cell.EMPTY) == []


def test_labels():
    assert [s.label for s in GameStatus] == [
        "Game not finished", "Draw", "X wins", "O wins", "Impossible",
    ]


def test_only_in_progress_is_non_terminal():
    assert not is_terminal(GameStatus.IN_PROGRESS)
    for s in GameStatus:
        if s is not GameStatus.IN_PROGRESS:
            assert is_terminal(s)
