from backend.engine.gameplay.game import (
    NO_TILE_NOTICE,
    GameSession,
    ReplayStep,
    new_game,
    replay,
)
from backend.engine.gameplay.presenter import NullPresenter, Presenter

__all__ = [
    "NO_TILE_NOTICE",
    "GameSession",
    "NullPresenter",
    "Presenter",
    "ReplayStep",
    "new_game",
    "replay",
]
