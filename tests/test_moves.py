import pytest

from simple_tictactoe.exceptions import MoveInputError
from simple_tictactoe.game_basics import EMPTY_BOARD, parse_board
from simple_tictactoe.moves import (
    NOT_NUMBERS,
    OCCUPIED,
    OUT_OF_RANGE,
    WRONG_COUNT,
    collect_move,
    parse_move,
)
from simple_tictactoe.state import Move


def test_coordinates_are_one_based():
    assert parse_move("1 1", EMPTY_BOARD) == Move(0, 0)
    assert parse_move("2 3", EMPTY_BOARD) == Move(1, 2)
    assert parse_move("  3   1 ", EMPTY_BOARD) == Move(2, 0)


@pytest.mark.parametrize("text,message", [
    ("", NOT_NUMBERS),
    ("one two", NOT_NUMBERS),
    ("1 x", NOT_NUMBERS),
    ("1", WRONG_COUNT),
    ("1 2 3", WRONG_COUNT),
    ("0 1", OUT_OF_RANGE),
    ("1 4", OUT_OF_RANGE),
    ("-1 2", OUT_OF_RANGE),
])
def test_rejections(text, message):
    with pytest.raises(MoveInputError) as ei:
        parse_move(text, EMPTY_BOARD)
    assert ei.value.message == message


def test_non_numeric_reported_before_count():
    with pytest.raises(MoveInputError) as ei:
        parse_move("1 2 x", EMPTY_BOARD)
    assert ei.value.message == NOT_NUMBERS


def test_occupied_cell():
    board = parse_board("X________")
    with pytest.raises(MoveInputError) as ei:
        parse_move("1 1", board)
    assert ei.value.message == OCCUPIED


def test_collect_move_reprompts_until_valid():
    board = parse_board("X________")
    lines = iter(["abc", "1 1", "5 5", "1 2"])
    out = []
    move = collect_move(board, lambda: next(lines), out.append)
    assert move == Move(0, 1)
    assert out == [NOT_NUMBERS, OCCUPIED, OUT_OF_RANGE]


def test_collect_move_propagates_end_of_input():
    def closed() -> str:
        raise EOFError

    with pytest.raises(EOFError):
        collect_move(EMPTY_BOARD, closed, lambda s: None)
