"""simple_tictactoe package.

Board model, rules evaluation, input collection, rendering and the console
game loop.

Convenience imports are exposed for common workflows.
"""

from .exceptions import BoardFormatError, MoveInputError, PreconditionViolation
from .game import play
from .game_basics import Cell, parse_board, serialize_board
from .rules import GameStatus, classify, is_terminal
from .state import GameState, Move, apply_move, current_status, from_board, new_game

__all__ = [
    "Cell",
    "GameStatus",
    "GameState",
    "Move",
    "classify",
    "is_terminal",
    "new_game",
    "from_board",
    "apply_move",
    "current_status",
    "parse_board",
    "serialize_board",
    "play",
    "BoardFormatError",
    "MoveInputError",
    "PreconditionViolation",
]
