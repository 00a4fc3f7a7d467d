"""Exceptions raised by the game engine and its input collector."""


class BoardFormatError(ValueError):
    """Raised when board text or board values cannot form a 3x3 board."""


class PreconditionViolation(ValueError):
    """Raised when apply_move is called with a move the caller should never send."""

    def __init__(self, row: int, col: int, reason: str) -> None:
        self.row = row
        self.col = col
        self.reason = reason
        super().__init__(f"cannot play ({row}, {col}): {reason}")


class MoveInputError(ValueError):
    """A rejected line of user input; `message` is shown to the player as-is."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
