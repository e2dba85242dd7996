"""A grid-based snake game: data model, board, movement rules, rendering and game loop."""

__version__ = "0.1.0"
__all__ = ["board", "game", "model", "movement", "render"]