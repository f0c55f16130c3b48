"""The playable game window and its command-line entry point."""

from __future__ import annotations

import math
import random
import re
import sys
from collections.abc import Sequence

from .gamechange import generate_new_number, merge_all, move_tiles, simulate_move_all
from .gamelogic import Board
from .structures import Position
from .tiles import TileGrid

SIZE_TILE = 90
GAP_TILE = 10
MAX_CELLS = 100
MIN_SIDE = 3
SPRITE_SHEET = "resources/drawTile.png"
SPRITE_SIZE = 99

BACKGROUND_COLOR = (170, 165, 157, 255)
SQUARE_COLOR = (216, 214, 209, 255)

_FORMAT_HINT = "type dimensions in format 'number'x'number'"
_DIMENSIONS = re.compile(r"\s*([+-]?\d+)x\s*([+-]?\d+)")


def parse_dimensions(text: str) -> tuple[int, int]:
    """Parse a board size such as ``4x5`` into (rows, cols).

    Raises ValueError when the text is malformed or the board is too big
    or too small.
    """
    match = _DIMENSIONS.match(text)
    if match is None:
        raise ValueError(f"error, {_FORMAT_HINT}")
    rows, cols = int(match.group(1)), int(match.group(2))
    if rows * cols > MAX_CELLS:
        raise ValueError("board too big")
    if rows < MIN_SIDE or cols < MIN_SIDE:
        raise ValueError("board too small")
    return rows, cols


def window_size(rows: int, cols: int) -> tuple[int, int]:
    """Return the (width, height) in pixels of a window holding the board."""
    width = cols * SIZE_TILE + (cols + 1) * GAP_TILE
    height = rows * SIZE_TILE + (rows + 1) * GAP_TILE
    return width, height


def sprite_rect(value: int) -> tuple[int, int, int, int] | None:
    """Return the (x, y, w, h) area of the sprite sheet showing a tile number.

    Empty tiles (value 0 or less) have no sprite and give None.
    """
    if value <= 0:
        return None
    row_offset, sheet_row = 1, 0
    if 16 <= value <= 128:
        row_offset, sheet_row = 4, 1
    elif value > 128:
        row_offset, sheet_row = 8, 2
    x = int(57 + 105 * (math.log2(value) - row_offset))
    y = 49 + 132 * sheet_row
    # The first row of the sheet is laid out with a different margin.
    if value in (2, 4, 8):
        x -= 9
    return x, y, SPRITE_SIZE, SPRITE_SIZE


_KEY_DIRECTIONS = {
    "K_RIGHT": Position(0, 1),
    "K_UP": Position(1, 0),
    "K_DOWN": Position(-1, 0),
    "K_LEFT": Position(0, -1),
}


def _run(rows: int, cols: int) -> int:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size(rows, cols))
        pygame.display.set_caption("2048")
        try:
            sheet = pygame.image.load(SPRITE_SHEET).convert_alpha()
        except (pygame.error, FileNotFoundError) as exc:
            print(f"Failed to load image: {exc}", file=sys.stderr)
            return 1

        key_directions = {getattr(pygame, name): d for name, d in _KEY_DIRECTIONS.items()}
        sheet_bounds = sheet.get_rect()
        sprites: dict[tuple[int, int, int], pygame.Surface | None] = {}

        def sprite_for(value: int, w: int, h: int) -> pygame.Surface | None:
            key = (value, w, h)
            if key not in sprites:
                area = sprite_rect(value)
                surface = None
                if area is not None:
                    clipped = pygame.Rect(area).clip(sheet_bounds)
                    if clipped.width > 0 and clipped.height > 0:
                        surface = pygame.transform.smoothscale(
                            sheet.subsurface(clipped), (w, h)
                        )
                sprites[key] = surface
            return sprites[key]

        dimensions = Position(rows, cols)
        grid = TileGrid(dimensions, SIZE_TILE, GAP_TILE)
        board = Board(rows, cols)
        rng = random.Random()
        direction = Position()
        generate = True
        clock = pygame.time.Clock()
        quit_game = False

        while not quit_game:
            elapsed_ms = float(clock.tick(60))

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quit_game = True
                    print("GAME OVER", end="")
                    break
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_q:
                        quit_game = True
                    elif event.key in key_directions:
                        board.clear_merged()
                        generate = True
                        direction = key_directions[event.key]
                        move_tiles(grid, board, direction)

            simulate_move_all(grid, direction, elapsed_ms)

            if grid.ready_to_merge(direction):
                merge_all(board, grid, direction)

            if grid.all_stopped(direction) and generate:
                direction = Position()
                if generate_new_number(board, grid, rng) is None:
                    print("GAME OVER", end="")
                    quit_game = True
                generate = False

            screen.fill(BACKGROUND_COLOR)
            for square in grid.squares:
                pygame.draw.rect(
                    screen,
                    SQUARE_COLOR,
                    pygame.Rect(int(square.x), int(square.y), int(square.w), int(square.h)),
                )
            for tile in grid.tiles:
                image = sprite_for(tile.value, int(tile.w), int(tile.h))
                if image is not None:
                    screen.blit(image, (int(tile.x), int(tile.y)))
            pygame.display.flip()
        return 0
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on a board of the size given as the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"no arguments, {_FORMAT_HINT}", file=sys.stderr)
        return 0
    try:
        rows, cols = parse_dimensions(args[0])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 0
    return _run(rows, cols)


if __name__ == "__main__":
    sys.exit(main())