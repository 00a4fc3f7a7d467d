"""
Input collection: turn a line of text into a Move on an empty cell.

Coordinates are typed 1-based ("row col") and returned zero-based. Rejected
lines are reported back to the player and re-read; they never reach the
game state.
"""
import logging
from typing import Callable, List

from .exceptions import MoveInputError
from .game_basics import BOARD_SIZE, Board, Cell, cell_index
from .state import Move

NOT_NUMBERS = "You should enter numbers!"
WRONG_COUNT = "You should enter two numbers separated by a space!"
OUT_OF_RANGE = f"Coordinates should be from 1 to {BOARD_SIZE}!"
OCCUPIED = "This cell is occupied! Choose another one!"


def _to_ints(tokens: List[str]) -> List[int]:
    values = []
    for tok in tokens:
        try:
            values.append(int(tok))
        except ValueError:
            raise MoveInputError(NOT_NUMBERS) from None
    return values


def parse_move(text: str, board: Board) -> Move:
    tokens = text.split()
    if not tokens:
        raise MoveInputError(NOT_NUMBERS)
    values = _to_ints(tokens)
    if len(values) != 2:
        raise MoveInputError(WRONG_COUNT)
    row, col = values
    if not (1 <= row <= BOARD_SIZE and 1 <= col <= BOARD_SIZE):
        raise MoveInputError(OUT_OF_RANGE)
    if board[cell_index(row - 1, col - 1)] != Cell.EMPTY:
        raise MoveInputError(OCCUPIED)
    return Move(row - 1, col - 1)


def collect_move(board: Board, read_line: Callable[[], str], write: Callable[[str], None]) -> Move:
    """Read lines until one names an empty cell. EOFError from read_line propagates."""
    while True:
        line = read_line()
        try:
            return parse_move(line, board)
        except MoveInputError as e:
            logging.debug("rejected input %r: %s", line, e.message)
            write(e.message)
