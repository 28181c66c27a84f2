"""Tile vocabulary for the dungeon grid.

Items are tracked on the session, never as a tile value, so a cell's tile only
ever describes walkability and occupancy.
"""

from enum import Enum


class Tile(str, Enum):
    WALL = "W"
    FLOOR = "-"
    PLAYER = "P"
    ENEMY = "E"


# Module-level aliases keep call sites short (``grid[x, y] is WALL``)
WALL = Tile.WALL
FLOOR = Tile.FLOOR
PLAYER = Tile.PLAYER
ENEMY = Tile.ENEMY

__all__ = ["Tile", "WALL", "FLOOR", "PLAYER", "ENEMY"]
