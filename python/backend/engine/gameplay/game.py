"""Core gameplay logic. Records moves and replays them from the start."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable

from backend.engine.gamegenerator import new_board
from backend.engine.gameplay.presenter import NullPresenter, Presenter
from backend.engine.gamerules import apply_move
from backend.engine.gamestate import MoveHistory
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)

NO_TILE_NOTICE = "There is no tile there."
INSTRUCTIONS = (
    "To make a move call request_move() with direction "
    "'left', 'right', 'up' or 'down'."
)


@dataclass(frozen=True)
class ReplayStep:
    """One step of a replay: the direction tried and the board after it."""

    direction: Direction | str
    board: Board
    legal: bool


def replay(
    board: Board, moves: Iterable[Direction | str]
) -> list[ReplayStep]:
    """Fold *moves* over *board*, keeping the board on illegal steps."""
    steps: list[ReplayStep] = []
    for direction in moves:
        moved = apply_move(board, direction)
        if moved is None:
            steps.append(ReplayStep(direction, board, legal=False))
        else:
            board = moved
            steps.append(ReplayStep(direction, board, legal=True))
    return steps


class GameSession:
    """Orchestrates a single game.

    Only the initial board and the history of requested directions are
    kept; the current board is rebuilt by replaying the whole history
    on every request.
    """

    def __init__(
        self,
        presenter: Presenter | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.initial_board = new_board(rng)
        self.presenter: Presenter = presenter or NullPresenter()
        self._history = MoveHistory()
        logger.debug("New session on board %s", self.initial_board.tiles)

    @classmethod
    def from_board(
        cls, board: Board, presenter: Presenter | None = None
    ) -> "GameSession":
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.initial_board = board
        obj.presenter = presenter or NullPresenter()
        obj._history = MoveHistory()
        logger.debug("New session on board %s", board.tiles)
        return obj

    # -- movement -------------------------------------------------------------

    def request_move(self, direction: Direction | str) -> None:
        """Record *direction* and present the replay of the whole history.

        The direction is recorded even when it turns out to be illegal.
        Every replayed step is shown: legal steps as a board, illegal
        ones as a notice.
        """
        moves = self._history.append(direction)
        logger.debug("Move %d requested: %s", len(moves), direction)

        for step in replay(self.initial_board, moves):
            if step.legal:
                self.presenter.show_board(step.board, step.board.is_solved())
            else:
                logger.debug("No tile for %r, board unchanged", step.direction)
                self.presenter.show_notice(NO_TILE_NOTICE)

    # -- queries --------------------------------------------------------------

    @property
    def history(self) -> tuple[Direction | str, ...]:
        return self._history.snapshot()

    def replay(self) -> list[ReplayStep]:
        return replay(self.initial_board, self._history.snapshot())

    def current_board(self) -> Board:
        steps = self.replay()
        return steps[-1].board if steps else self.initial_board

    @property
    def is_won(self) -> bool:
        return self.current_board().is_solved()


def new_game(
    presenter: Presenter | None = None,
    rng: random.Random | None = None,
    instructions: str = INSTRUCTIONS,
) -> GameSession:
    """Create a new fifteen puzzle game and show its starting board."""
    session = GameSession(presenter, rng)
    session.presenter.show_board(
        session.initial_board, session.initial_board.is_solved()
    )
    if instructions:
        session.presenter.show_notice(instructions)
    return session
