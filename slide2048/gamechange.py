"""Steps of a turn that keep the board and the on-screen tiles in step."""

from __future__ import annotations

import random

from .gamelogic import Board, random_two_four
from .structures import Position
from .tiles import TileGrid


def _line_counts(grid: TileGrid, direction: Position) -> tuple[int, int]:
    dims = grid.dimensions
    if direction.c != 0:
        return dims.r, dims.c
    if direction.r != 0:
        return dims.c, dims.r
    return 0, 0


def move_tiles(grid: TileGrid, board: Board, direction: Position) -> None:
    """Slide every line of the board and send the matching tiles on their way."""
    lines, repeats = _line_counts(grid, direction)
    for line in range(lines):
        for _ in range(repeats):
            grid.set_move(board.move(direction, line))


def simulate_move_all(grid: TileGrid, direction: Position, elapsed_ms: float) -> None:
    """Advance the slide of every tile by elapsed_ms."""
    for index in range(len(grid.tiles)):
        grid.simulate_move(direction, index, elapsed_ms)


def merge_all(board: Board, grid: TileGrid, direction: Position) -> None:
    """Merge equal neighbours on the board and tiles, then slide into the gaps."""
    dims = grid.dimensions
    if direction.c != 0:
        outer, inner = dims.r, dims.c - 1
    elif direction.r != 0:
        outer, inner = dims.r - 1, dims.c
    else:
        outer, inner = 0, 0
    for row in range(outer):
        for col in range(inner):
            result = board.merge_candidate(direction, row, col)
            if result is None:
                continue
            grid.reset_positions()
            grid._numbered_tile_at(result.c).value = 2 * board.cells[result.r].element
            grid.reset_positions()
            grid._numbered_tile_at(result.r).value = 0
            board.merge(result.c, result.r)
            grid.reset_positions()
    move_tiles(grid, board, direction)


def generate_new_number(board: Board, grid: TileGrid, rng: random.Random) -> int | None:
    """Put a 2 or a 4 on a random empty cell.

    Returns the chosen cell index, or None when the board is full.
    """
    index = board.random_free_position(rng)
    if index is None:
        return None
    number = random_two_four(rng)
    grid.reset_positions()
    for tile in grid.tiles:
        if tile.pos == index and tile.value == 0:
            tile.value = number
            board.cells[index].element = number
    return index