"""Tracks the move history of a game in progress."""

from __future__ import annotations

import threading

from backend.models.board import Direction


class MoveHistory:
    """Append-only log of every direction the player requested.

    Illegal and unrecognised directions are recorded too; replay treats
    them as no-ops.
    """

    def __init__(self) -> None:
        self._moves: list[Direction | str] = []
        self._lock = threading.Lock()

    # -- moves ----------------------------------------------------------------

    def append(self, direction: Direction | str) -> tuple[Direction | str, ...]:
        """Record *direction* and return a snapshot that includes it."""
        with self._lock:
            self._moves.append(direction)
            return tuple(self._moves)

    def snapshot(self) -> tuple[Direction | str, ...]:
        with self._lock:
            return tuple(self._moves)

    def __len__(self) -> int:
        with self._lock:
            return len(self._moves)
