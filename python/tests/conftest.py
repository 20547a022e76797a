"""Shared fixtures — a presenter that records what the session shows."""

from __future__ import annotations

import pytest

from backend.models.board import Board


class RecordingPresenter:
    """Keeps everything the session presents, in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def show_board(self, board: Board, solved: bool) -> None:
        self.events.append(("board", (board, solved)))

    def show_notice(self, message: str) -> None:
        self.events.append(("notice", message))

    @property
    def boards(self) -> list[Board]:
        return [payload[0] for kind, payload in self.events if kind == "board"]

    @property
    def notices(self) -> list[str]:
        return [payload for kind, payload in self.events if kind == "notice"]


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()
