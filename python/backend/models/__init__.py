from backend.models.board import (
    BLANK,
    SIZE,
    Board,
    Direction,
    MalformedBoardError,
    is_solved,
    solved_board,
)

__all__ = [
    "BLANK",
    "SIZE",
    "Board",
    "Direction",
    "MalformedBoardError",
    "is_solved",
    "solved_board",
]
