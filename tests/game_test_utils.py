"""Helpers for building small hand-drawn maps and sessions in tests."""

import random
from collections import deque

from roguegrid.dungeon import ENEMY, FLOOR, PLAYER, Grid
from roguegrid.game import GameSession
from roguegrid.models import Enemy, Item, ItemKind, Player

WALKABLE = {FLOOR, PLAYER, ENEMY}


def open_rows(width, height):
    return ["-" * width for _ in range(height)]


def build_session(rows, player, enemies=(), items=(), seed=0, health=None):
    """Session over ``rows`` (``-`` floor, ``W`` wall) with markers applied.

    ``enemies`` accepts (x, y) tuples or ``Enemy`` records; ``items`` accepts
    (x, y, kind) tuples or ``Item`` records.
    """
    grid = Grid.from_rows(rows)
    hero = Player(x=player[0], y=player[1])
    if health is not None:
        hero.health = health
    grid[hero.pos] = PLAYER
    foes = []
    for spec in enemies:
        enemy = spec if isinstance(spec, Enemy) else Enemy(*spec)
        grid[enemy.pos] = ENEMY
        foes.append(enemy)
    loot = [spec if isinstance(spec, Item) else Item(spec[0], spec[1], ItemKind(spec[2])) for spec in items]
    return GameSession(grid, hero, foes, loot, rng=random.Random(seed), seed=seed)


def bfs_reachable(grid, start):
    """Return set of (x,y) cells reachable from start over WALKABLE tiles."""
    q = deque([start])
    vis = {start}
    while q:
        x, y = q.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if grid.in_bounds(nx, ny) and (nx, ny) not in vis and grid[nx, ny] in WALKABLE:
                vis.add((nx, ny))
                q.append((nx, ny))
    return vis


def walkable_cells(grid):
    return {(x, y) for (x, y) in grid.coords() if grid[x, y] in WALKABLE}


def markers_match_records(session):
    """True when every PLAYER/ENEMY tile agrees with the entity records."""
    grid = session.grid
    enemy_tiles = {(x, y) for (x, y) in grid.coords() if grid[x, y] is ENEMY}
    player_tiles = {(x, y) for (x, y) in grid.coords() if grid[x, y] is PLAYER}
    return enemy_tiles == {e.pos for e in session.enemies} and player_tiles == {session.player.pos}
