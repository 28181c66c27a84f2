"""Global corridor carving.

Corridors run the full width (rows) or full height (columns) of the map. Row
and column picks are retried a bounded number of times to avoid reuse, but a
duplicate is accepted once the retries run out.
"""

from __future__ import annotations

import random
from typing import List, Tuple

from .config import DungeonConfig
from .grid import Grid
from .tiles import FLOOR


def _pick_unique(rng, low: int, high: int, used: List[int], attempts: int) -> Tuple[int, bool]:
    """Return (value, duplicate) drawn from [low, high]."""
    value = rng.randint(low, high)
    tries = 1
    while value in used and tries < attempts:
        value = rng.randint(low, high)
        tries += 1
    return value, value in used


def carve_horizontal(grid: Grid, y: int) -> None:
    for x in range(grid.width):
        grid[x, y] = FLOOR


def carve_vertical(grid: Grid, x: int) -> None:
    for y in range(grid.height):
        grid[x, y] = FLOOR


def carve_corridors(grid: Grid, config: DungeonConfig, rng=None):
    """Carve horizontal then vertical corridors.

    Returns (rows, columns, duplicates). Maps without an interior row/column
    (height or width under 3) get no corridors on that axis.
    """
    if rng is None:
        rng = random
    rows: List[int] = []
    cols: List[int] = []
    duplicates = 0

    count = rng.randint(config.min_corridors, config.max_corridors)
    if grid.height >= 3:
        for _ in range(count):
            y, dup = _pick_unique(rng, 1, grid.height - 2, rows, config.corridor_attempts)
            duplicates += dup
            rows.append(y)
            carve_horizontal(grid, y)

    count = rng.randint(config.min_corridors, config.max_corridors)
    if grid.width >= 3:
        for _ in range(count):
            x, dup = _pick_unique(rng, 1, grid.width - 2, cols, config.corridor_attempts)
            duplicates += dup
            cols.append(x)
            carve_vertical(grid, x)

    return rows, cols, duplicates


__all__ = ["carve_corridors", "carve_horizontal", "carve_vertical"]
