import random

from roguegrid.dungeon import (
    FLOOR,
    Grid,
    carve_straight_corridor,
    ensure_connectivity,
    find_isolated_areas,
    flood_fill,
    generate,
    is_connected,
)

TWO_ROOMS = [
    "WWWWWW",
    "W--W-W",
    "W--W-W",
    "WWWWWW",
]


def test_flood_fill_discovery_order():
    g = Grid.from_rows(["---", "W-W"])
    assert flood_fill(g, (1, 0)) == [(1, 0), (1, 1), (0, 0), (2, 0)]


def test_is_connected():
    assert not is_connected(Grid(4, 4))
    assert is_connected(Grid.from_rows(["W-W", "---"]))
    assert not is_connected(Grid.from_rows(TWO_ROOMS))


def test_find_isolated_areas_sizes():
    areas = find_isolated_areas(Grid.from_rows(TWO_ROOMS))
    assert [len(a) for a in areas] == [4, 2]
    assert areas[0][0] == (1, 1)
    assert set(areas[1]) == {(4, 1), (4, 2)}


def test_straight_corridor_horizontal_then_vertical():
    g = Grid(6, 5)
    carve_straight_corridor(g, 1, 1, 4, 3)
    assert set(g.floor_cells()) == {(1, 1), (2, 1), (3, 1), (4, 1), (4, 2), (4, 3)}


def test_straight_corridor_reversed_endpoints():
    g = Grid(6, 5)
    carve_straight_corridor(g, 4, 1, 1, 3)
    assert set(g.floor_cells()) == {(1, 1), (2, 1), (3, 1), (4, 1), (1, 2), (1, 3)}


def test_ensure_connectivity_joins_areas():
    g = Grid.from_rows(TWO_ROOMS)
    before = g.count(FLOOR)
    carved = ensure_connectivity(g, random.Random(0))
    assert carved == 1
    assert is_connected(g)
    assert g.count(FLOOR) > before


def test_ensure_connectivity_noop_when_connected():
    g = Grid.from_rows(["---"])
    assert ensure_connectivity(g, random.Random(0)) == 0
    assert g.rows() == ["---"]


def test_many_scattered_cells_get_stitched():
    g = Grid.from_rows(
        [
            "-W-W-",
            "WWWWW",
            "-W-W-",
        ]
    )
    assert ensure_connectivity(g, random.Random(4)) == 5
    assert is_connected(g)


def test_generated_maps_are_connected():
    for seed in range(40):
        result = generate(rng=random.Random(seed))
        assert is_connected(result.grid), f"seed {seed} disconnected"
        assert result.metrics["connected"] is True
