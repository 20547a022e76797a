"""Move engine: legality and application of slides."""

from __future__ import annotations

from collections.abc import Mapping

from backend.engine.gamerules.adjacency import Move, moves_from
from backend.models.board import Board, Direction


def available_moves(board: Board) -> Mapping[Direction, Move]:
    """Return the moves available from the blank space of *board*."""
    return moves_from(board.blank_pos)


def move_tiles(board: Board, move: Move) -> Board:
    """Exchange the tiles at the two positions of *move*."""
    return board.swap(move.from_pos, move.to_pos)


def apply_move(board: Board, direction: Direction | str) -> Board | None:
    """Return the board after sliding in *direction*, or ``None`` if illegal.

    Blocked and unrecognised directions are treated the same way: there
    is no entry for them among the available moves.
    """
    try:
        direction = Direction(direction)
    except ValueError:
        return None
    move = available_moves(board).get(direction)
    if move is None:
        return None
    return move_tiles(board, move)
