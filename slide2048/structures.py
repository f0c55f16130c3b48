"""Plain data types shared by the game logic and the tile animation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A row/column pair, used both for grid coordinates and for directions.

    As a direction, ``c == 1`` is right, ``c == -1`` is left, ``r == 1`` is up
    and ``r == -1`` is down.
    """

    r: int = 0
    c: int = 0

    def __neg__(self) -> Position:
        return Position(-self.r, -self.c)

    @property
    def is_zero(self) -> bool:
        return self.r == 0 and self.c == 0


@dataclass
class BoardElement:
    """One cell of the board: its number and whether it merged this turn."""

    element: int = 0
    is_merged: bool = False


@dataclass
class Tile:
    """A drawable tile or background square on the screen."""

    x: float = 0.0
    y: float = 0.0
    h: float = 0.0
    w: float = 0.0
    pos: int = 0
    max_pos: int = 0
    value: int = 0
    is_occupied: bool = False