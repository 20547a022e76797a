"""Presentation boundary between the game session and a frontend."""

from __future__ import annotations

from typing import Protocol

from backend.models.board import Board


class Presenter(Protocol):
    """Anything that can show a board and short text notices."""

    def show_board(self, board: Board, solved: bool) -> None: ...

    def show_notice(self, message: str) -> None: ...


class NullPresenter:
    """Discards all output."""

    def show_board(self, board: Board, solved: bool) -> None:
        pass

    def show_notice(self, message: str) -> None:
        pass
