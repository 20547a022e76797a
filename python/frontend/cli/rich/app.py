"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import logging
import random

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import NO_TILE_NOTICE, GameSession, new_game
from backend.models.board import BLANK, SIZE, Board, Direction
from frontend.cli.input_handler import get_key
from frontend.cli.tiles import board_rows

logger = logging.getLogger(__name__)

_DIRECTION_MAP = {d.value: d for d in Direction}


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=3, justify="center")

    for r, row in enumerate(board_rows(board)):
        cells: list[str] = []
        for c, label in enumerate(row):
            pos = r * SIZE + c
            if board.get_tile(pos) == BLANK:
                cells.append(f"[dim]{label}[/dim]")
            elif board.is_tile_correct(pos):
                cells.append(f"[bold green]{label}[/bold green]")
            else:
                cells.append(f"[bold white]{label}[/bold white]")
        table.add_row(*cells)

    return table


def controls() -> Text:
    text = Text()
    text.append("  ↑↓←→", style="bold cyan")
    text.append(" / ", style="dim")
    text.append("WASD", style="bold cyan")
    text.append("  move   ", style="dim")
    text.append("R", style="bold cyan")
    text.append("  new game   ", style="dim")
    text.append("Q", style="bold cyan")
    text.append("  quit", style="dim")
    return text


class RichPresenter:
    """Draws each board as a panel on a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_board(self, board: Board, solved: bool) -> None:
        if solved:
            title = "[bold green]★ Solved! ★[/bold green]"
            border = "bold green"
        else:
            title = "[bold cyan]Fifteen Puzzle[/bold cyan]"
            border = "bright_blue"
        panel = Panel(
            Align.center(render_board(board)),
            title=title,
            border_style=border,
            padding=(0, 2),
            expand=False,
        )
        self.console.print(Align.center(panel))

    def show_notice(self, message: str) -> None:
        style = "yellow" if message == NO_TILE_NOTICE else "dim"
        self.console.print(Align.center(Text(message, style=style)))


# -- game loop ----------------------------------------------------------------


def _new_game(presenter: RichPresenter, rng: random.Random) -> GameSession:
    presenter.console.clear()
    session = new_game(presenter, rng, instructions="")
    presenter.console.print(Align.center(controls()))
    return session


def _play(rng: random.Random) -> None:
    presenter = RichPresenter()
    game = _new_game(presenter, rng)

    while True:
        key = get_key()

        if key in _DIRECTION_MAP:
            # The whole history is replayed on every move.
            presenter.console.clear()
            game.request_move(_DIRECTION_MAP[key])
            presenter.console.print(Align.center(controls()))
        elif key == "restart":
            logger.info("Restarting after %d moves", len(game.history))
            game = _new_game(presenter, rng)
        elif key == "help":
            presenter.console.print(Align.center(controls()))
        elif key == "quit":
            presenter.console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
            return


# -- public entry point -------------------------------------------------------


def run(seed: int | None = None) -> None:
    """Launch the Rich CLI."""
    _play(random.Random(seed))
