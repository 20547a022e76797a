from backend.engine.gamestate.state import MoveHistory

__all__ = ["MoveHistory"]
