"""Generates shuffled fifteen puzzle boards."""

from __future__ import annotations

import random

from backend.models.board import Board, solved_board


class GameGenerator:
    """Creates new puzzles by shuffling the solved tiles.

    The shuffle is a uniform permutation of all sixteen cells, so about
    half of the generated boards cannot be solved by sliding moves.
    """

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return solved_board()

    @staticmethod
    def generate(rng: random.Random | None = None) -> Board:
        """Return a uniformly shuffled board.

        Pass *rng* to make the shuffle reproducible.
        """
        tiles = list(solved_board().tiles)
        (rng or random).shuffle(tiles)
        return Board.from_flat(tiles)


def new_board(rng: random.Random | None = None) -> Board:
    return GameGenerator.generate(rng)
