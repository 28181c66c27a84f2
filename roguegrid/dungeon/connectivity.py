"""Connectivity analysis and repair.

Flood fills over 4-neighbour FLOOR adjacency, isolation detection, and the
single-pass L-corridor stitching that joins every stray area to the largest.
"""
from __future__ import annotations

import random
from collections import deque
from typing import List, Optional, Set, Tuple

from ..logging_utils import log
from .grid import Grid
from .tiles import FLOOR

Coord2D = Tuple[int, int]


def _first_floor(grid: Grid) -> Optional[Coord2D]:
    for x, y in grid.coords():
        if grid[x, y] is FLOOR:
            return (x, y)
    return None


def flood_fill(grid: Grid, start: Coord2D, visited: Optional[Set[Coord2D]] = None) -> List[Coord2D]:
    """Return FLOOR cells reachable from ``start`` in BFS discovery order.

    ``visited`` is updated in place when supplied so repeated fills can
    partition the grid.
    """
    if visited is None:
        visited = set()
    q = deque([start])
    visited.add(start)
    cells = [start]
    while q:
        cx, cy = q.popleft()
        for nx, ny in grid.neighbors(cx, cy):
            if (nx, ny) not in visited and grid[nx, ny] is FLOOR:
                visited.add((nx, ny))
                cells.append((nx, ny))
                q.append((nx, ny))
    return cells


def is_connected(grid: Grid) -> bool:
    start = _first_floor(grid)
    if start is None:
        return False
    return len(flood_fill(grid, start)) == grid.count(FLOOR)


def find_isolated_areas(grid: Grid) -> List[List[Coord2D]]:
    visited: Set[Coord2D] = set()
    areas = []
    for x, y in grid.coords():
        if (x, y) not in visited and grid[x, y] is FLOOR:
            areas.append(flood_fill(grid, (x, y), visited))
    return areas


def carve_straight_corridor(grid: Grid, x1: int, y1: int, x2: int, y2: int) -> None:
    """Horizontal run along ``y1`` then vertical run along ``x2``, both inclusive."""
    for x in range(min(x1, x2), max(x1, x2) + 1):
        grid[x, y1] = FLOOR
    for y in range(min(y1, y2), max(y1, y2) + 1):
        grid[x2, y] = FLOOR


def ensure_connectivity(grid: Grid, rng=None) -> int:
    """Join every isolated area to the largest one. Returns connectors carved.

    One pass only; the result is not re-verified.
    """
    if rng is None:
        rng = random
    areas = find_isolated_areas(grid)
    if len(areas) <= 1:
        return 0
    areas.sort(key=len, reverse=True)
    main_area = areas[0]
    for area in areas[1:]:
        ax, ay = area[rng.randrange(len(area))]
        mx, my = main_area[rng.randrange(len(main_area))]
        carve_straight_corridor(grid, ax, ay, mx, my)
        log.debug(event="connector_carved", src=f"{ax},{ay}", dst=f"{mx},{my}", area_size=len(area))
    return len(areas) - 1


__all__ = [
    "flood_fill",
    "is_connected",
    "find_isolated_areas",
    "carve_straight_corridor",
    "ensure_connectivity",
]
