"""Board model for the fifteen puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable

SIZE = 4
CELLS = SIZE * SIZE
BLANK = 0


class MalformedBoardError(ValueError):
    """Raised when a tile sequence breaks the board invariant."""


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Board:
    """Immutable 4×4 puzzle board.

    Tiles are stored as a flat row-major tuple of ints. ``BLANK`` (0)
    represents the empty space.
    """

    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", tuple(self.tiles))
        if len(self.tiles) != CELLS:
            raise MalformedBoardError(
                f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(self.tiles)}."
            )
        if (
            any(type(t) is not int for t in self.tiles)
            or set(self.tiles) != _ALL_TILES
        ):
            raise MalformedBoardError(
                f"Tiles must be 1-{CELLS - 1} plus one blank, got {self.tiles}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15])
        """
        return cls(tiles=tuple(flat))

    # -- queries --------------------------------------------------------------

    @property
    def blank_pos(self) -> int:
        return self.tiles.index(BLANK)

    def get_tile(self, pos: int) -> int:
        return self.tiles[pos]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return self.tiles == _SOLVED_TILES

    def is_tile_correct(self, pos: int) -> bool:
        """Check if the tile at *pos* is in its goal position."""
        return self.tiles[pos] == _SOLVED_TILES[pos]

    def rows(self) -> list[tuple[int, ...]]:
        return [self.tiles[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    # -- transformations ------------------------------------------------------

    def swap(self, first: int, second: int) -> Board:
        """Return a new board with the tiles at two positions exchanged."""
        tiles = list(self.tiles)
        tiles[first], tiles[second] = tiles[second], tiles[first]
        return Board(tiles=tuple(tiles))


_SOLVED_TILES: tuple[int, ...] = tuple(range(1, CELLS)) + (BLANK,)
_ALL_TILES = frozenset(range(CELLS))


def solved_board() -> Board:
    """Return the goal-state board (1-15 in reading order, blank bottom-right)."""
    return Board(tiles=_SOLVED_TILES)


def is_solved(board: Board) -> bool:
    return board.is_solved()
