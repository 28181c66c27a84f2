import random

from roguegrid.dungeon import FLOOR, DungeonConfig, Grid
from roguegrid.dungeon.corridors import carve_corridors, carve_horizontal, carve_vertical


def test_carve_horizontal_spans_full_width():
    g = Grid(5, 4)
    carve_horizontal(g, 2)
    assert g.rows() == ["WWWWW", "WWWWW", "-----", "WWWWW"]


def test_carve_vertical_spans_full_height():
    g = Grid(3, 3)
    carve_vertical(g, 0)
    assert g.rows() == ["-WW", "-WW", "-WW"]


def test_corridor_counts_and_positions():
    cfg = DungeonConfig()
    for seed in range(10):
        g = Grid(cfg.width, cfg.height)
        rows, cols, dups = carve_corridors(g, cfg, random.Random(seed))
        assert cfg.min_corridors <= len(rows) <= cfg.max_corridors
        assert cfg.min_corridors <= len(cols) <= cfg.max_corridors
        assert all(1 <= y <= cfg.height - 2 for y in rows)
        assert all(1 <= x <= cfg.width - 2 for x in cols)
        for y in rows:
            assert all(g[x, y] is FLOOR for x in range(g.width))
        for x in cols:
            assert all(g[x, y] is FLOOR for y in range(g.height))
        assert dups >= 0


def test_single_interior_line_forces_duplicates():
    cfg = DungeonConfig(width=3, height=3)
    g = Grid(3, 3)
    rows, cols, dups = carve_corridors(g, cfg, random.Random(5))
    assert set(rows) == {1} and set(cols) == {1}
    assert dups == (len(rows) - 1) + (len(cols) - 1)


def test_flat_map_skips_horizontal_axis():
    cfg = DungeonConfig(width=10, height=2)
    g = Grid(10, 2)
    rows, cols, _ = carve_corridors(g, cfg, random.Random(0))
    assert rows == []
    assert len(cols) >= cfg.min_corridors
