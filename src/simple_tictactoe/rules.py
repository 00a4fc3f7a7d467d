"""
Rules evaluation: classify a board as in progress, won, drawn or impossible.

Classification is a pure function of the board. It is re-run after every move
and can equally be applied to boards that never came from legal play, which is
how impossible positions are told apart from ordinary outcomes.

Precedence (first match wins):
1. Impossible: mark counts differ by more than one, or both X and O complete a line.
2. X wins / O wins: exactly one side completes at least one line.
3. Game not finished: some cell is still empty.
4. Draw: full board with no completed line.
"""
import logging
from enum import Enum
from typing import List, Tuple

from .game_basics import WIN_PATTERNS, Board, Cell, get_piece_counts


class GameStatus(Enum):
    IN_PROGRESS = "Game not finished"
    DRAW = "Draw"
    X_WINS = "X wins"
    O_WINS = "O wins"
    IMPOSSIBLE = "Impossible"

    @property
    def label(self) -> str:
        return self.value


def completed_lines(board: Board, mark: Cell) -> List[Tuple[int, int, int]]:
    if mark is Cell.EMPTY:
        return []
    return [pat for pat in WIN_PATTERNS if all(board[i] == mark for i in pat)]


def has_won(board: Board, mark: Cell) -> bool:
    return len(completed_lines(board, mark)) > 0


def classify(board: Board) -> GameStatus:
    x_count, o_count = get_piece_counts(board)
    x_won = has_won(board, Cell.X)
    o_won = has_won(board, Cell.O)
    if abs(x_count - o_count) > 1 or (x_won and o_won):
        status = GameStatus.IMPOSSIBLE
    elif x_won:
        status = GameStatus.X_WINS
    elif o_won:
        status = GameStatus.O_WINS
    elif Cell.EMPTY in board:
        status = GameStatus.IN_PROGRESS
    else:
        status = GameStatus.DRAW
    logging.debug("classify x=%d o=%d x_won=%s o_won=%s -> %s",
                  x_count, o_count, x_won, o_won, status.name)
    return status


def is_terminal(status: GameStatus) -> bool:
    return status is not GameStatus.IN_PROGRESS
