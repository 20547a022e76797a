from backend.engine.gamegenerator.generator import GameGenerator, new_board

__all__ = ["GameGenerator", "new_board"]
