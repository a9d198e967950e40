import pytest

from mazechase.grid import (
    DIRECTIONS, Direction, Tile, TileGrid, manhattan, passable_for_adversary,
    passable_for_player, step,
)


def test_opposites_pair_up():
    for d in DIRECTIONS:
        assert d.opposite.opposite is d
        assert d.opposite is not d
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.LEFT.opposite is Direction.RIGHT


def test_step_moves_one_tile():
    assert step((5, 5), Direction.UP) == (4, 5)
    assert step((5, 5), Direction.DOWN) == (6, 5)
    assert step((5, 5), Direction.LEFT) == (5, 4)
    assert step((5, 5), Direction.RIGHT) == (5, 6)


def test_step_rejects_unknown_direction():
    with pytest.raises(ValueError, match="Unknown direction"):
        step((1, 1), "NORTH")


def test_manhattan():
    assert manhattan((0, 0), (3, 4)) == 7
    assert manhattan((3, 4), (0, 0)) == 7
    assert manhattan((2, 2), (2, 2)) == 0


@pytest.mark.parametrize("symbol", [" ", ".", "@", "[", "]", "B", "P", "I", "C", "X"])
def test_player_passes(symbol):
    assert passable_for_player(symbol)


@pytest.mark.parametrize("symbol", ["#", "*", "|", "-", "~"])
def test_player_blocked(symbol):
    assert not passable_for_player(symbol)


@pytest.mark.parametrize("symbol", [" ", ".", "@", "~", "v", "^", "<", ">", "o"])
def test_adversary_passes(symbol):
    assert passable_for_adversary(symbol)


@pytest.mark.parametrize("symbol", ["#", "*", "|", "-", "[", "]"])
def test_adversary_blocked(symbol):
    assert not passable_for_adversary(symbol)


def test_grid_bounds_and_lookup():
    grid = TileGrid(["#.#", "@ ["])
    assert (grid.rows, grid.cols) == (2, 3)
    assert grid.tile_at((0, 1)) == "."
    assert grid.tile_at((-1, 0)) is None
    assert grid.tile_at((2, 0)) is None
    assert not grid.player_can_enter((0, 3))
    assert not grid.adversary_can_enter((1, 2))
    assert grid.player_can_enter((1, 2))


def test_grid_must_be_rectangular():
    with pytest.raises(ValueError):
        TileGrid(["###", "#"])


def test_clear_only_removes_pellets():
    grid = TileGrid(["#.@ "])
    assert grid.clear((0, 1)) == Tile.PELLET.value
    assert grid.clear((0, 2)) == Tile.POWER_PELLET.value
    assert grid.clear((0, 1)) is None
    assert grid.clear((0, 0)) is None
    assert grid.cells == [list("#   ")]


def test_overlay_is_a_copy():
    grid = TileGrid(["#. "])
    tiles = grid.overlay()
    tiles[0][1] = "B"
    assert grid.tile_at((0, 1)) == "."
    assert grid.player_can_enter((0, 1))
