# slide2048

The 2048 puzzle in a window. Slide the tiles with the arrow keys; two
equal tiles that meet merge into one with twice the value, and a new 2 or
4 appears on a random free square after every move. The game ends when no
free square is left for a new tile.

The board does not have to be 4×4. Give its size on the command line as
`ROWSxCOLS`; each side must be at least 3, and the board may hold at most
100 squares.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window and draws the tiles.

## Playing

```
slide2048 4x4
```

The same entry point can be started with `python -m slide2048.app 4x4`.

The tile pictures are cut from a sprite sheet read from
`resources/drawTile.png`, relative to the current directory, so run the
command from a directory that holds it. If it cannot be loaded, a
`Failed to load image` message is printed and the command exits with
status 1.

| Key         | Action          |
|-------------|-----------------|
| Arrow keys  | Slide the tiles |
| `q`         | Quit            |

Closing the window prints `GAME OVER` and ends the game. When the board
fills up and no new tile can be placed, `GAME OVER` is printed and the
window closes.

If the size argument is missing, malformed (for example `4by4`), too
small or too big, a message saying so is printed to standard error and
the command exits without opening a window.

## What it does not do

- The sprite sheet is not part of the package; you supply
  `resources/drawTile.png` yourself.
- There is no score, no undo, no saved game and no "you win" screen:
  play simply continues until the board is full or you quit.

## Using the pieces

The game logic can be driven without a window:

- `slide2048.structures` holds the plain data types `Position`,
  `BoardElement` and `Tile`. As a direction, `Position(0, 1)` is right,
  `Position(0, -1)` left, `Position(1, 0)` up and `Position(-1, 0)` down.
- `slide2048.gamelogic.Board` holds the numbers on the board, row by row
  (`Board.values`), and knows how to slide and merge them along a row or
  column (`move`, `merge_candidate`, `merge`, `merge_line`). `render()`
  returns the board as text, and `place_random(rng)` puts a 2 or a 4 on a
  free cell, raising `ValueError` when the board is full.
  `random_two_four(rng)` returns 2 or 4 with equal chance.
- `slide2048.tiles.TileGrid` holds the background squares and the
  on-screen tiles that slide between them, with `simulate_move`,
  `ready_to_merge` and `all_stopped` to drive the animation.
- `slide2048.gamechange` ties the two together with `move_tiles`,
  `simulate_move_all`, `merge_all` and `generate_new_number`; the last
  returns the index of the new tile, or `None` when the board is full.
- `slide2048.app.parse_dimensions` reads a `ROWSxCOLS` argument,
  `window_size` gives the window size in pixels for a board, and
  `sprite_rect` gives the area of the sprite sheet that shows a number.

```python
import random

from slide2048.gamelogic import Board
from slide2048.structures import Position

board = Board(3, 3)
rng = random.Random(1)
board.place_random(rng)
board.place_random(rng)
for row in range(board.rows):
    while board.move(Position(0, -1), row) is not None:
        pass
print(board.render())
```

## Running the tests

```
pip install .[test]
pytest
```