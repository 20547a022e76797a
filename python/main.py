#!/usr/bin/env python3
"""Fifteen Puzzle.

Usage::

    python main.py                 # vanilla terminal
    python main.py -f rich         # Rich terminal
    python main.py --seed 7 -v     # reproducible shuffle, debug logging
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the board shuffle. Omit for a random board.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every requested move and replay step.",
    ),
) -> None:
    """Fifteen Puzzle."""
    _configure_logging(verbose)
    logging.getLogger(__name__).debug("Launching %s frontend", frontend.value)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(seed=seed)


if __name__ == "__main__":
    app()
