import pytest

from roguegrid.dungeon import FLOOR, PLAYER, WALL, Grid, Tile


def test_new_grid_is_solid_wall():
    g = Grid(3, 2)
    assert g.rows() == ["WWW", "WWW"]
    assert g.count(WALL) == 6
    assert g.floor_cells() == []


def test_indexing_is_x_then_y():
    g = Grid.from_rows(["W-W", "---"])
    assert g[1, 0] is FLOOR
    assert g[0, 0] is WALL
    g[2, 1] = PLAYER
    assert g.cells[1][2] is PLAYER
    assert g.rows() == ["W-W", "--P"]


def test_from_rows_rejects_ragged_and_unknown():
    with pytest.raises(ValueError):
        Grid.from_rows(["---", "--"])
    with pytest.raises(ValueError):
        Grid.from_rows(["-X-"])
    with pytest.raises(ValueError):
        Grid.from_rows([])


@pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-1, 3)])
def test_non_positive_dimensions_rejected(w, h):
    with pytest.raises(ValueError):
        Grid(w, h)


def test_neighbors_order_and_bounds():
    g = Grid(3, 3)
    assert list(g.neighbors(1, 1)) == [(1, 0), (1, 2), (0, 1), (2, 1)]
    assert list(g.neighbors(0, 0)) == [(0, 1), (1, 0)]


def test_floor_cells_row_major():
    g = Grid.from_rows(["-W-", "W--"])
    assert g.floor_cells() == [(0, 0), (2, 0), (1, 1), (2, 1)]


def test_tile_values():
    assert [t.value for t in Tile] == ["W", "-", "P", "E"]
