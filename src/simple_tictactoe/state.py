"""
Game state: the board, the mark to play next and the cached classification.

States are immutable values. `apply_move` returns a new state and leaves its
input untouched, so the driver owns the one live state and threads it through
each turn.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .exceptions import BoardFormatError, PreconditionViolation
from .game_basics import (
    EMPTY_BOARD,
    Board,
    Cell,
    as_board,
    cell_index,
    get_piece_counts,
    in_bounds,
    other_mark,
)
from .rules import GameStatus, classify


@dataclass(frozen=True)
class Move:
    row: int
    col: int


@dataclass(frozen=True)
class GameState:
    board: Board = EMPTY_BOARD
    active: Cell = Cell.X
    status: GameStatus = field(init=False, compare=False)

    def __post_init__(self) -> None:
        board = as_board(self.board)
        try:
            active = Cell(self.active)
        except ValueError as e:
            raise BoardFormatError(f"Unknown active mark: {self.active!r}") from e
        if active is Cell.EMPTY:
            raise BoardFormatError("Active mark must be X or O")
        object.__setattr__(self, "board", board)
        object.__setattr__(self, "active", active)
        object.__setattr__(self, "status", classify(board))


def new_game(first: Cell = Cell.X) -> GameState:
    return GameState(board=EMPTY_BOARD, active=first)


def from_board(board, active: Optional[Cell] = None) -> GameState:
    """Build a state from an externally supplied board.

    When `active` is omitted it is inferred from the counts: X moves when the
    counts are level, otherwise the side with fewer marks.
    """
    b = as_board(board)
    if active is None:
        x, o = get_piece_counts(b)
        active = Cell.O if x > o else Cell.X
    return GameState(board=b, active=active)


def apply_move(state: GameState, row: int, col: int) -> GameState:
    if not in_bounds(row, col):
        raise PreconditionViolation(row, col, "coordinates out of range")
    idx = cell_index(row, col)
    if state.board[idx] != Cell.EMPTY:
        raise PreconditionViolation(row, col, f"cell already holds {state.board[idx].name}")
    cells = list(state.board)
    cells[idx] = state.active
    nxt = GameState(board=tuple(cells), active=other_mark(state.active))
    logging.debug("%s played (%d, %d) -> %s", state.active.name, row, col, nxt.status.name)
    return nxt


def current_status(state: GameState) -> GameStatus:
    return state.status
