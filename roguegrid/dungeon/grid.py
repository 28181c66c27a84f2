"""Fixed-size 2D tile grid.

Storage is row-major (``cells[y][x]``) with the origin at the top-left, but
every public accessor takes ``(x, y)`` so callers never juggle index order.
"""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from .tiles import FLOOR, WALL, Tile

Coord = Tuple[int, int]

# Up, down, left, right. Flood fills and the pathfinder share this order.
CARDINALS: Tuple[Coord, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


class Grid:
    __slots__ = ("width", "height", "cells")

    def __init__(self, width: int, height: int, fill: Tile = WALL):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells: List[List[Tile]] = [[fill for _ in range(width)] for _ in range(height)]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Grid":
        """Build a grid from strings of tile values (``W``, ``-``, ``P``, ``E``)."""
        if not rows:
            raise ValueError("at least one row is required")
        grid = cls(len(rows[0]), len(rows))
        for y, row in enumerate(rows):
            if len(row) != grid.width:
                raise ValueError(f"row {y} has length {len(row)}, expected {grid.width}")
            for x, ch in enumerate(row):
                grid.cells[y][x] = Tile(ch)
        return grid

    def __getitem__(self, pos: Coord) -> Tile:
        x, y = pos
        return self.cells[y][x]

    def __setitem__(self, pos: Coord, tile: Tile) -> None:
        x, y = pos
        self.cells[y][x] = tile

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def fill(self, tile: Tile) -> None:
        for row in self.cells:
            for x in range(self.width):
                row[x] = tile

    def coords(self) -> Iterator[Coord]:
        """Yield every coordinate in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def floor_cells(self) -> List[Coord]:
        return [(x, y) for (x, y) in self.coords() if self.cells[y][x] is FLOOR]

    def count(self, tile: Tile) -> int:
        return sum(row.count(tile) for row in self.cells)

    def neighbors(self, x: int, y: int) -> Iterator[Coord]:
        """In-bounds 4-neighbours in up, down, left, right order."""
        for dx, dy in CARDINALS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield nx, ny

    def rows(self) -> List[str]:
        return ["".join(t.value for t in row) for row in self.cells]

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"


__all__ = ["Grid", "Coord", "CARDINALS"]
