"""Breadth-first pathfinding on the tile grid.

Walls and enemy markers block movement; the player's marker does not, since
the player's own cell is the usual target. Neighbours are scanned up, down,
left, right both while searching and while rebuilding the path, which fixes
tie-breaking between equally short routes.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from roguegrid.dungeon import CARDINALS, ENEMY, WALL, Coord, Grid

BLOCKING = frozenset({WALL, ENEMY})


def distance_map(grid: Grid, start: Coord, target: Optional[Coord] = None) -> List[List[int]]:
    """BFS depth per cell (``dist[y][x]``), -1 where unvisited.

    Stops early once ``target`` is dequeued.
    """
    dist = [[-1] * grid.width for _ in range(grid.height)]
    sx, sy = start
    dist[sy][sx] = 0
    queue: Deque[Coord] = deque([start])
    while queue:
        cx, cy = queue.popleft()
        if (cx, cy) == target:
            break
        for nx, ny in grid.neighbors(cx, cy):
            if dist[ny][nx] == -1 and grid[nx, ny] not in BLOCKING:
                dist[ny][nx] = dist[cy][cx] + 1
                queue.append((nx, ny))
    return dist


def build_path(dist: List[List[int]], grid: Grid, start: Coord, target: Coord) -> Optional[List[Coord]]:
    """Walk back from ``target`` along strictly decreasing depths."""
    cx, cy = target
    path = [target]
    while (cx, cy) != start:
        for dx, dy in CARDINALS:
            nx, ny = cx + dx, cy + dy
            if grid.in_bounds(nx, ny) and dist[ny][nx] >= 0 and dist[ny][nx] == dist[cy][cx] - 1:
                cx, cy = nx, ny
                path.append((cx, cy))
                break
        else:
            return None
    path.reverse()
    return path


def find_path(grid: Grid, start: Coord, target: Coord) -> Optional[List[Coord]]:
    """Shortest 4-directional path from ``start`` to ``target`` inclusive, or None."""
    tx, ty = target
    if not grid.in_bounds(tx, ty) or grid[target] is WALL:
        return None
    dist = distance_map(grid, start, target)
    if dist[ty][tx] == -1:
        return None
    return build_path(dist, grid, start, target)


__all__ = ["find_path", "distance_map", "build_path"]
