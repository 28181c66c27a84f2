import random
from dataclasses import dataclass
from typing import List, Tuple

from ..logging_utils import log
from .config import DungeonConfig
from .grid import Grid
from .tiles import FLOOR


@dataclass
class Room:
    x: int
    y: int
    w: int
    h: int

    def cells(self):
        for iy in range(self.y, self.y + self.h):
            for ix in range(self.x, self.x + self.w):
                yield ix, iy

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.w // 2, self.y + self.h // 2)

    def overlaps(self, other: "Room", pad: int = 1) -> bool:
        """True when this footprint grown by ``pad`` cells touches ``other``'s footprint."""
        return (
            self.x - pad < other.x + other.w
            and self.x + self.w + pad > other.x
            and self.y - pad < other.y + other.h
            and self.y + self.h + pad > other.y
        )


def place_rooms(grid: Grid, config: DungeonConfig, rng=None):
    """Place non-overlapping rooms onto the grid.

    Returns (rooms, target_attempted, placed_count). Each room gets up to
    ``config.room_attempts`` tries; a room that never fits is skipped.
    """
    if rng is None:
        rng = random
    target = rng.randint(config.min_rooms, config.max_rooms)
    rooms: List[Room] = []
    for index in range(target):
        placed = False
        attempts = 0
        while not placed and attempts < config.room_attempts:
            attempts += 1
            w = rng.randint(config.min_size, config.max_size)
            h = rng.randint(config.min_size, config.max_size)
            max_x = grid.width - w - 1
            max_y = grid.height - h - 1
            if max_x < 1 or max_y < 1:
                continue
            x = rng.randint(1, max_x)
            y = rng.randint(1, max_y)
            if x + w >= grid.width or y + h >= grid.height:
                continue
            if _margin_has_floor(grid, x, y, w, h):
                continue
            new_room = Room(x, y, w, h)
            for ix, iy in new_room.cells():
                grid[ix, iy] = FLOOR
            rooms.append(new_room)
            placed = True
            log.debug(event="room_placed", x=x, y=y, w=w, h=h, attempts=attempts)
        if not placed:
            log.debug(event="room_placement_failed", room=index, attempts=attempts)
    return rooms, target, len(rooms)


def _margin_has_floor(grid: Grid, x: int, y: int, w: int, h: int) -> bool:
    # footprint plus a 1-cell ring must be solid
    for oy in range(y - 1, y + h + 1):
        for ox in range(x - 1, x + w + 1):
            if grid.in_bounds(ox, oy) and grid[ox, oy] is FLOOR:
                return True
    return False
