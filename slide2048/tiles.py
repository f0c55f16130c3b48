"""On-screen tiles and background squares, and their sliding animation."""

from __future__ import annotations

from .structures import Position, Tile

# Tiles slide at this many pixels per second.
_SPEED = 1000.0


class TileGrid:
    """The background squares of the board and the tiles drawn over them.

    ``squares`` are the fixed cells; ``tiles`` are the moving pieces. A tile's
    ``pos`` is the square it currently sits on and ``max_pos`` the square it
    is sliding towards.
    """

    def __init__(self, dimensions: Position, size_tile: float, gap_tile: float) -> None:
        if dimensions.r < 1 or dimensions.c < 1:
            raise ValueError(
                f"grid dimensions must be positive, got {dimensions.r}x{dimensions.c}"
            )
        self.dimensions = dimensions
        rows, cols = dimensions.r, dimensions.c
        step = size_tile + gap_tile
        self.squares = [
            Tile(
                x=float(c * step + gap_tile),
                y=float(r * step + gap_tile),
                h=float(size_tile),
                w=float(size_tile),
                pos=r * cols + c,
                max_pos=r * cols + c,
                is_occupied=True,
            )
            for r in range(rows)
            for c in range(cols)
        ]
        self.tiles = [
            Tile(
                x=square.x,
                y=square.y,
                h=square.h,
                w=square.w,
                pos=index,
                max_pos=index,
                value=0,
                is_occupied=False,
            )
            for index, square in enumerate(self.squares)
        ]

    def tile_at(self, find_pos: int) -> Tile | None:
        """Return the numbered tile sitting on square find_pos, if any."""
        return next(
            (tile for tile in self.tiles if tile.pos == find_pos and tile.value != 0),
            None,
        )

    def _numbered_tile_at(self, find_pos: int) -> Tile:
        tile = self.tile_at(find_pos)
        if tile is None:
            raise LookupError(f"no numbered tile on square {find_pos}")
        return tile

    def set_move(self, index_to_change: Position | None) -> None:
        """Send the tile on square ``r`` towards square ``c``.

        ``None`` or a zero position means nothing moved and is ignored.
        """
        if index_to_change is None or index_to_change.is_zero:
            return
        self._numbered_tile_at(index_to_change.r).max_pos = index_to_change.c
        self.squares[index_to_change.r].is_occupied = False

    def simulate_move(self, direction: Position, index: int, elapsed_ms: float) -> None:
        """Advance one tile's slide by elapsed_ms, settling it when it arrives."""
        tile = self.tiles[index]
        target = self.squares[tile.max_pos]
        if tile.pos != tile.max_pos and tile.value != 0:
            arrived = (
                (direction.c == 1 and target.x - tile.x < 1)
                or (direction.r == 1 and tile.y - target.y < 1)
                or (direction.c == -1 and tile.x - target.x < 1)
                or (direction.r == -1 and target.y - tile.y < 1)
            )
            if arrived:
                target.is_occupied = True
                tile.pos = tile.max_pos
        if tile.pos != tile.max_pos:
            tile.x += _SPEED * direction.c * elapsed_ms / 1000
            tile.y -= _SPEED * direction.r * elapsed_ms / 1000

    def _relocate(self, tile: Tile) -> None:
        free = next((square for square in self.squares if not square.is_occupied), None)
        if free is None:
            return
        tile.pos = free.pos
        tile.max_pos = free.pos
        tile.x = free.x
        tile.y = free.y
        free.is_occupied = True

    def reset_positions(self) -> None:
        """Move empty tiles that share a square with another tile onto a free square."""
        for offset, first in enumerate(self.tiles):
            for second in self.tiles[offset + 1:]:
                if first.pos != second.pos:
                    continue
                if first.value == 0:
                    self._relocate(first)
                elif second.value == 0:
                    self._relocate(second)

    def ready_to_merge(self, direction: Position) -> bool:
        """Report whether tiles have settled enough to merge, tidying positions if so.

        Only all but the last tile are checked for having stopped.
        """
        if any(tile.pos != tile.max_pos for tile in self.tiles[:-1]):
            return False
        if len(self.tiles) >= 2 and not direction.is_zero:
            self.reset_positions()
            return True
        return False

    def all_stopped(self, direction: Position) -> bool:
        """True when a move is under way and every tile has reached its square."""
        if any(tile.pos != tile.max_pos for tile in self.tiles):
            return False
        return not direction.is_zero