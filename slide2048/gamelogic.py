"""Board state and the sliding and merging rules of the game."""

from __future__ import annotations

import random

from .structures import BoardElement, Position

_UNIT_DIRECTIONS = frozenset(
    {Position(0, 1), Position(0, -1), Position(1, 0), Position(-1, 0)}
)

_NEW_TILE_VALUES = (2, 4)


def random_two_four(rng: random.Random) -> int:
    """Return 4 or 2 with equal chance."""
    draw = rng.randrange(len(_NEW_TILE_VALUES))
    value = _NEW_TILE_VALUES[1] if draw else _NEW_TILE_VALUES[0]
    return value


class Board:
    """A rows x cols grid of numbers stored row by row."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"board dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells = [BoardElement() for _ in range(rows * cols)]

    @property
    def values(self) -> list[int]:
        """The numbers on the board, row by row."""
        return [cell.element for cell in self.cells]

    def clear(self) -> None:
        """Set every cell to zero and clear its merged flag."""
        for cell in self.cells:
            cell.element = 0
            cell.is_merged = False

    def render(self) -> str:
        """Return the board as text, one row per paragraph."""
        return "".join(
            "".join(f"{cell.element} " for cell in self.cells[r * self.cols:(r + 1) * self.cols])
            + "\n\n"
            for r in range(self.rows)
        )

    def is_occupied(self, position: Position) -> bool:
        return self.cells[position.r * self.cols + position.c].element != 0

    def random_free_position(self, rng: random.Random) -> int | None:
        """Return a random index of an empty cell, or None if the board is full."""
        free = [index for index, cell in enumerate(self.cells) if cell.element == 0]
        if not free:
            return None
        return free[rng.randrange(len(free))]

    def place_random(self, rng: random.Random) -> int:
        """Put a 2 or a 4 on a random empty cell and return its index."""
        index = self.random_free_position(rng)
        if index is None:
            raise ValueError("board is full")
        self.cells[index].element = random_two_four(rng)
        return index

    def _check_direction(self, direction: Position) -> None:
        if direction not in _UNIT_DIRECTIONS:
            raise ValueError(f"not a unit direction: {direction}")

    def _next(self, index: int, direction: Position) -> int:
        """Step one cell away from where tiles pile up for this direction."""
        return index - (direction.c - self.cols * direction.r)

    def end_index(self, direction: Position, row_col: int) -> int:
        """Index of the cell at the far end of a line, where scanning stops."""
        if direction.c == -1:
            return self.cols * row_col + self.cols - 1
        if direction.c == 1:
            return row_col * self.cols
        if direction.r == 1:
            return (self.rows - 1) * self.cols + row_col
        if direction.r == -1:
            return row_col
        return 0

    def find_zero(self, direction: Position, row_col: int) -> int:
        """Find the first empty cell of a line, starting where tiles pile up.

        If the line has no empty cell, the far end is returned.
        """
        self._check_direction(direction)
        if direction.c == 1:
            index = self.cols * row_col + self.cols - 1
        elif direction.c == -1:
            index = self.cols * row_col
        elif direction.r == 1:
            index = row_col
        else:
            index = (self.rows - 1) * self.cols + row_col
        end = self.end_index(direction, row_col)
        while self.cells[index].element != 0 and index != end:
            index = self._next(index, direction)
        return index

    def find_nonzero(self, direction: Position, index_zero: int, row_col: int) -> int:
        """Find the first filled cell beyond index_zero, or the far end."""
        end = self.end_index(direction, row_col)
        if index_zero == end:
            return index_zero
        index = self._next(index_zero, direction)
        if index < 0:
            return index_zero
        while index != end and self.cells[index].element == 0:
            index = self._next(index, direction)
        return index

    def move(self, direction: Position, row_col: int) -> Position | None:
        """Slide one tile of a line into its first gap.

        Returns Position(r=source index, c=target index), or None when
        nothing moved.
        """
        if direction.is_zero:
            return None
        end = self.find_zero(direction, row_col)
        first = self.find_nonzero(direction, end, row_col)
        if first == end:
            return None
        if self.cells[first].element == 0 and self.cells[end].element == 0:
            return None
        self.cells[end].element = self.cells[first].element
        self.cells[first].element = 0
        return Position(first, end)

    def merge_line(self, direction: Position, row_col: int) -> None:
        """Merge equal neighbours along a whole line in one pass."""
        self._check_direction(direction)
        i = self.end_index(-direction, row_col)
        previous = i
        end = self.end_index(direction, row_col)
        while i != end:
            previous = self._next(previous, direction)
            if self.cells[i].element == self.cells[previous].element:
                self.cells[i].element = 2 * self.cells[previous].element
                self.cells[previous].element = 0
                self.shift_previous(direction, previous, row_col)
            i = self._next(i, direction)

    def shift_previous(self, direction: Position, index: int, row_col: int) -> None:
        """Pull every cell behind index one step forward, up to the far end."""
        self._check_direction(direction)
        end = self.end_index(direction, row_col)
        while True:
            previous = self._next(index, direction)
            if previous < end and (direction.r == -1 or direction.c == 1):
                return
            if previous > end and (direction.r == 1 or direction.c == -1):
                return
            self.cells[index].element = self.cells[previous].element
            self.cells[previous].element = 0
            if previous == end:
                return
            index = previous

    def merge_candidate(self, direction: Position, row: int, col: int) -> Position | None:
        """Check whether a cell can take in its neighbour.

        Returns Position(r=neighbour index, c=cell index) when both hold the
        same non-zero number and neither merged this turn, else None.
        """
        self._check_direction(direction)
        if direction.c == -1:
            i = col + self.cols * row
        elif direction.c == 1:
            i = self.cols - 1 - col + self.cols * row
        elif direction.r == 1:
            i = row * self.cols + col
        else:
            i = (self.rows - 1 - row) * self.cols + col
        previous = self._next(i, direction)
        size = len(self.cells)
        if not (0 <= i < size and 0 <= previous < size):
            raise IndexError(f"cell ({row}, {col}) has no neighbour in that direction")
        current, neighbour = self.cells[i], self.cells[previous]
        if (
            current.element == neighbour.element
            and current.element != 0
            and not current.is_merged
            and not neighbour.is_merged
        ):
            return Position(previous, i)
        return None

    def merge(self, i: int, previous_index: int) -> None:
        """Double cell i from its neighbour and empty the neighbour."""
        self.cells[i].element = 2 * self.cells[previous_index].element
        self.cells[previous_index].element = 0
        self.cells[i].is_merged = True

    def clear_merged(self) -> None:
        for cell in self.cells:
            cell.is_merged = False