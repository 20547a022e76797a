"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib ``print`` for rendering and tty/termios for input.
Every replayed step of the game is printed, one board after another.
"""

from __future__ import annotations

import logging
import random
import sys
from typing import TextIO

from backend.engine.gameplay import GameSession, new_game
from backend.models.board import Board, Direction
from frontend.cli.input_handler import get_key
from frontend.cli.tiles import board_rows

logger = logging.getLogger(__name__)

HELP = "Arrows/WASD: move  |  R: new game  |  H: help  |  Q: quit"
_DIRECTION_MAP = {d.value: d for d in Direction}


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, solved: bool) -> str:
    """Return the plain text representation of the board."""
    lines = [f"Is board solved?: {solved}"]
    for row in board_rows(board):
        lines.append("".join(f"[ {cell} ]" for cell in row))
    return "\n".join(lines)


class PrintPresenter:
    """Prints boards and notices to a text stream."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out or sys.stdout

    def show_board(self, board: Board, solved: bool) -> None:
        print(render_board(board, solved), file=self.out)

    def show_notice(self, message: str) -> None:
        print(message, file=self.out)


# -- game loop ----------------------------------------------------------------


def _new_game(presenter: PrintPresenter, rng: random.Random) -> GameSession:
    return new_game(presenter, rng, instructions=HELP)


def _play(rng: random.Random) -> None:
    presenter = PrintPresenter()
    game = _new_game(presenter, rng)

    while True:
        key = get_key()

        if key in _DIRECTION_MAP:
            game.request_move(_DIRECTION_MAP[key])
        elif key == "restart":
            logger.info("Restarting after %d moves", len(game.history))
            game = _new_game(presenter, rng)
        elif key == "help":
            presenter.show_notice(HELP)
        elif key == "quit":
            presenter.show_notice("Goodbye!")
            return


# -- public entry point -------------------------------------------------------


def run(seed: int | None = None) -> None:
    """Launch the vanilla CLI."""
    _play(random.Random(seed))
