import random

import pytest

from slide2048.gamechange import (
    generate_new_number,
    merge_all,
    move_tiles,
    simulate_move_all,
)
from slide2048.gamelogic import Board
from slide2048.structures import Position
from slide2048.tiles import TileGrid

LEFT = Position(0, -1)
RIGHT = Position(0, 1)
STILL = Position(0, 0)


def _setup(values, rows=3, cols=3):
    board = Board(rows, cols)
    grid = TileGrid(Position(rows, cols), 90, 10)
    for index, value in enumerate(values):
        board.cells[index].element = value
        grid.tiles[index].value = value
    return board, grid


def _play(board, grid, direction, elapsed_ms=16.0, frames=200):
    board.clear_merged()
    move_tiles(grid, board, direction)
    for _ in range(frames):
        simulate_move_all(grid, direction, elapsed_ms)
        if grid.ready_to_merge(direction):
            merge_all(board, grid, direction)
        if grid.all_stopped(direction):
            return True
    return False


def _assert_consistent(board, grid):
    for index, value in enumerate(board.values):
        if value:
            assert grid.tile_at(index).value == value
    assert sum(t.value for t in grid.tiles) == sum(board.values)


def test_slide_into_gap():
    board, grid = _setup([0, 2, 0, 0, 0, 0, 0, 0, 0])
    assert _play(board, grid, LEFT)
    assert board.values[:3] == [2, 0, 0]
    _assert_consistent(board, grid)


def test_merge_pair():
    board, grid = _setup([2, 2, 0, 0, 0, 0, 0, 0, 0])
    assert _play(board, grid, LEFT)
    assert board.values[:3] == [4, 0, 0]
    _assert_consistent(board, grid)


def test_merge_then_slide():
    board, grid = _setup([2, 2, 2, 0, 0, 0, 0, 0, 0])
    assert _play(board, grid, LEFT)
    assert board.values[:3] == [4, 2, 0]
    _assert_consistent(board, grid)


def test_right_move_keeps_board_and_tiles_consistent():
    board, grid = _setup([2, 0, 0, 0, 4, 0, 8, 0, 0])
    assert _play(board, grid, RIGHT)
    assert board.values[2] == 2
    assert board.values[5] == 4
    assert board.values[8] == 8
    assert sum(board.values) == 14
    _assert_consistent(board, grid)


def test_move_tiles_still_direction_does_nothing():
    board, grid = _setup([0, 2, 0, 0, 0, 0, 0, 0, 0])
    before = board.values
    move_tiles(grid, board, STILL)
    assert board.values == before
    assert all(t.pos == t.max_pos for t in grid.tiles)


def test_simulate_move_all_moves_pending_tiles():
    board, grid = _setup([0, 0, 4, 0, 0, 0, 0, 0, 0])
    move_tiles(grid, board, LEFT)
    start_x = grid.tiles[2].x
    simulate_move_all(grid, LEFT, 10.0)
    assert grid.tiles[2].x < start_x
    assert grid.tiles[0].x == grid.squares[0].x


def test_merge_all_still_direction_changes_nothing():
    board, grid = _setup([2, 2, 0, 0, 0, 0, 0, 0, 0])
    merge_all(board, grid, STILL)
    assert board.values[:2] == [2, 2]
    assert grid.tiles[0].value == 2


def test_merge_all_does_not_merge_twice():
    board, grid = _setup([4, 4, 0, 0, 0, 0, 0, 0, 0])
    merge_all(board, grid, LEFT)
    after_first = board.values
    merge_all(board, grid, LEFT)
    assert board.values == after_first
    assert board.cells[0].is_merged is True


def test_generate_new_number_places_two_or_four():
    board, grid = _setup([0] * 9)
    index = generate_new_number(board, grid, random.Random(7))
    assert 0 <= index < 9
    assert board.values[index] in (2, 4)
    assert sum(1 for v in board.values if v) == 1
    assert grid.tile_at(index).value == board.values[index]


def test_generate_new_number_fills_only_free_cells():
    board, grid = _setup([2, 4, 2, 4, 2, 4, 2, 4, 0])
    index = generate_new_number(board, grid, random.Random(3))
    assert index == 8
    assert board.values[8] in (2, 4)
    _assert_consistent(board, grid)


def test_generate_new_number_full_board_returns_none():
    board, grid = _setup([2, 4, 2, 4, 2, 4, 2, 4, 2])
    before = board.values
    assert generate_new_number(board, grid, random.Random(1)) is None
    assert board.values == before


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_turns_with_new_numbers_stay_consistent(seed):
    rng = random.Random(seed)
    board, grid = _setup([0] * 9)
    generate_new_number(board, grid, rng)
    for direction in (LEFT, RIGHT, LEFT):
        _play(board, grid, direction)
        _assert_consistent(board, grid)
        if generate_new_number(board, grid, rng) is None:
            break
        _assert_consistent(board, grid)
    assert all(v == 0 or v % 2 == 0 for v in board.values)