"""Lookup table of the moves available from every board position.

The table is a tuple of 16 read-only mappings, one per position::

    ({RIGHT: Move(0, 1), DOWN: Move(0, 4)},
     ...
     {UP: Move(15, 11), LEFT: Move(15, 14)})
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import NamedTuple

from backend.models.board import CELLS, SIZE, Direction


class Move(NamedTuple):
    """The two positions whose tiles are exchanged by a slide."""

    from_pos: int
    to_pos: int


def _candidates(idx: int) -> dict[Direction, Move]:
    return {
        Direction.UP: Move(idx, idx - SIZE),
        Direction.DOWN: Move(idx, idx + SIZE),
        Direction.LEFT: Move(idx, idx - 1),
        Direction.RIGHT: Move(idx, idx + 1),
    }


def _allowed(direction: Direction, move: Move) -> bool:
    if not 0 <= move.to_pos < CELLS:
        return False
    # Horizontal moves must not wrap across a row edge.
    if direction is Direction.LEFT:
        return move.from_pos % SIZE != 0
    if direction is Direction.RIGHT:
        return move.to_pos % SIZE != 0
    return True


def _build() -> tuple[Mapping[Direction, Move], ...]:
    return tuple(
        MappingProxyType(
            {d: m for d, m in _candidates(idx).items() if _allowed(d, m)}
        )
        for idx in range(CELLS)
    )


ADJACENT_SPACES: tuple[Mapping[Direction, Move], ...] = _build()


def moves_from(position: int) -> Mapping[Direction, Move]:
    """Return the legal moves from *position*, keyed by direction."""
    if not 0 <= position < CELLS:
        raise IndexError(f"Position {position} is off the board.")
    return ADJACENT_SPACES[position]
