from backend.engine.gamerules.adjacency import ADJACENT_SPACES, Move, moves_from
from backend.engine.gamerules.rules import apply_move, available_moves, move_tiles

__all__ = [
    "ADJACENT_SPACES",
    "Move",
    "apply_move",
    "available_moves",
    "move_tiles",
    "moves_from",
]
