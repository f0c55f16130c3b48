"""The 2048 sliding-tile puzzle on a board of configurable size, played in a pygame window."""

__version__ = "1.0.0"

__all__ = ["app", "gamechange", "gamelogic", "structures", "tiles"]