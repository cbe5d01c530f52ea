"""Grid-based snake game with walls, levels and an undoable score history."""

__version__ = "0.1.0"
__all__ = ["graph", "snake", "food", "scores", "engine", "app"]