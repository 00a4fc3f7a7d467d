"""Console rendering of a board."""
from typing import List

from .game_basics import BOARD_SIZE, Board

BORDER = "-" * 9


def render_board(board: Board) -> List[str]:
    lines = [BORDER]
    for r in range(BOARD_SIZE):
        row = board[r * BOARD_SIZE:(r + 1) * BOARD_SIZE]
        lines.append("| " + " ".join(cell.symbol for cell in row) + " |")
    lines.append(BORDER)
    return lines
