"""
Game driver: alternate input, move, render and classification until the
status is terminal, then report the outcome.
"""
import logging
from typing import Callable, Optional

from .moves import collect_move
from .render import render_board
from .rules import is_terminal
from .state import GameState, apply_move, new_game


def _show(state: GameState, write: Callable[[str], None]) -> None:
    for line in render_board(state.board):
        write(line)


def play(
    read_line: Callable[[], str],
    write: Callable[[str], None],
    state: Optional[GameState] = None,
) -> GameState:
    state = new_game() if state is None else state
    _show(state, write)
    while not is_terminal(state.status):
        move = collect_move(state.board, read_line, write)
        state = apply_move(state, move.row, move.col)
        _show(state, write)
    logging.debug("game over: %s", state.status.name)
    write(state.status.label)
    return state
