"""
Game basics: cell values, board representation, serialization and counts.
Notes:
- A board is a tuple of 9 cells in row-major order: EMPTY, X or O.
- (row, col) with both in [0, 2] maps to index row * 3 + col.
- Board text uses X, O and '_' (a space is also read as empty).
"""
from enum import IntEnum
from typing import List, Tuple

from .exceptions import BoardFormatError

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Cell(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return " " if self is Cell.EMPTY else self.name


Board = Tuple[Cell, ...]

EMPTY_BOARD: Board = (Cell.EMPTY,) * CELL_COUNT

WIN_PATTERNS = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
]

_CHAR_TO_CELL = {"X": Cell.X, "O": Cell.O, "_": Cell.EMPTY, " ": Cell.EMPTY}


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def cell_index(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


def other_mark(mark: Cell) -> Cell:
    if mark is Cell.EMPTY:
        raise ValueError("EMPTY is not a player mark")
    return Cell.O if mark is Cell.X else Cell.X


def as_board(cells) -> Board:
    """Validate an arbitrary sequence of cell values and return it as a Board."""
    try:
        board = tuple(Cell(c) for c in cells)
    except (TypeError, ValueError) as e:
        raise BoardFormatError(f"Board cells must be 0, 1 or 2: {e}") from e
    if len(board) != CELL_COUNT:
        raise BoardFormatError(f"Board must have {CELL_COUNT} cells, got {len(board)}")
    return board


def parse_board(text: str) -> Board:
    raw = text.upper()
    if len(raw) != CELL_COUNT or any(c not in _CHAR_TO_CELL for c in raw):
        raise BoardFormatError(
            f"Invalid board string {text!r}. Must be {CELL_COUNT} chars of X/O/_."
        )
    return tuple(_CHAR_TO_CELL[c] for c in raw)


def serialize_board(board: Board) -> str:
    return ''.join('_' if cell is Cell.EMPTY else cell.name for cell in board)


def get_piece_counts(board: Board) -> Tuple[int, int]:
    return board.count(Cell.X), board.count(Cell.O)


def empty_cells(board: Board) -> List[Tuple[int, int]]:
    return [divmod(i, BOARD_SIZE) for i, v in enumerate(board) if v == Cell.EMPTY]
