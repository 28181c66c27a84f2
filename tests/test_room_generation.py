import itertools
import random

from roguegrid.dungeon import FLOOR, WALL, DungeonConfig, Grid, Room, place_rooms


def test_room_overlap_with_margin():
    a = Room(1, 1, 3, 3)
    assert a.overlaps(Room(2, 2, 3, 3))
    # touching edge counts once the 1-cell margin is applied
    assert a.overlaps(Room(4, 1, 3, 3))
    assert not a.overlaps(Room(4, 1, 3, 3), pad=0)
    assert not a.overlaps(Room(5, 1, 3, 3))


def test_room_center_and_cells():
    r = Room(2, 3, 4, 3)
    assert r.center == (4, 4)
    cells = list(r.cells())
    assert len(cells) == 12
    assert cells[0] == (2, 3) and cells[-1] == (5, 5)


def test_rooms_stay_inside_and_keep_margin_across_seeds():
    cfg = DungeonConfig()
    for seed in range(25):
        grid = Grid(cfg.width, cfg.height)
        rooms, target, placed = place_rooms(grid, cfg, random.Random(seed))
        assert cfg.min_rooms <= target <= cfg.max_rooms
        assert placed == len(rooms) <= target
        for r in rooms:
            assert cfg.min_size <= r.w <= cfg.max_size
            assert cfg.min_size <= r.h <= cfg.max_size
            assert r.x >= 1 and r.y >= 1
            assert r.x + r.w < grid.width and r.y + r.h < grid.height
            assert all(grid[x, y] is FLOOR for x, y in r.cells())
        for a, b in itertools.combinations(rooms, 2):
            assert not a.overlaps(b), f"seed {seed}: {a} touches {b}"


def test_floor_only_inside_rooms():
    cfg = DungeonConfig()
    grid = Grid(cfg.width, cfg.height)
    rooms, _, _ = place_rooms(grid, cfg, random.Random(99))
    room_cells = {c for r in rooms for c in r.cells()}
    assert set(grid.floor_cells()) == room_cells


def test_tiny_grid_fits_at_most_one_room():
    cfg = DungeonConfig(width=5, height=5)
    grid = Grid(5, 5)
    rooms, target, placed = place_rooms(grid, cfg, random.Random(3))
    assert placed <= 1
    assert target >= cfg.min_rooms


def test_grid_too_small_for_any_room_is_not_an_error():
    cfg = DungeonConfig(width=3, height=3, room_attempts=5)
    grid = Grid(3, 3)
    rooms, target, placed = place_rooms(grid, cfg, random.Random(1))
    assert rooms == [] and placed == 0
    assert grid.count(WALL) == 9
