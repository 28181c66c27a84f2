"""Public dungeon package interface."""

from .config import DungeonConfig
from .connectivity import (
    carve_straight_corridor,
    ensure_connectivity,
    find_isolated_areas,
    flood_fill,
    is_connected,
)
from .grid import CARDINALS, Coord, Grid
from .pipeline import GenerationResult, generate
from .rooms import Room, place_rooms
from .tiles import ENEMY, FLOOR, PLAYER, WALL, Tile

__all__ = [
    "DungeonConfig",
    "Grid",
    "Coord",
    "CARDINALS",
    "Tile",
    "WALL",
    "FLOOR",
    "PLAYER",
    "ENEMY",
    "Room",
    "place_rooms",
    "generate",
    "GenerationResult",
    "flood_fill",
    "is_connected",
    "find_isolated_areas",
    "carve_straight_corridor",
    "ensure_connectivity",
]
