"""Display strings for tiles, shared by the CLI frontends."""

from __future__ import annotations

from backend.models.board import BLANK, SIZE, Board

EMPTY_SPACE = "*"


def tile_to_str(tile: int) -> str:
    """Pad a tile to two characters: 1 → ``" 1"``, 11 → ``"11"``."""
    label = EMPTY_SPACE if tile == BLANK else str(tile)
    return f"{label:>2}"


def board_to_strs(board: Board) -> list[str]:
    return [tile_to_str(t) for t in board.tiles]


def board_rows(board: Board) -> list[list[str]]:
    cells = board_to_strs(board)
    return [cells[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]
