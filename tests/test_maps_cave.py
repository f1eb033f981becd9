import pytest

from expopisel.maps_cave import CAVE_MAP_NAMES, cave_map
from expopisel.maps_plains import (
    EMPTY_TILE,
    MAP_ROWS,
    MAP_SIZE,
    MAP_WIDTH,
    SOLID_TILE,
    plains_map,
)

GRID = MAP_WIDTH * MAP_ROWS


def _row(tiles, row):
    return tiles[row * MAP_WIDTH:(row + 1) * MAP_WIDTH]


def test_names_listed_and_resolve():
    assert set(CAVE_MAP_NAMES) == {"cueva", "cueva2", "cueva3"}
    sizes = {name: len(cave_map(name)) for name in CAVE_MAP_NAMES}
    assert sizes == {"cueva": MAP_SIZE, "cueva2": MAP_SIZE, "cueva3": MAP_SIZE}


@pytest.mark.parametrize("name", ["cueva", "cueva2", "cueva3"])
def test_map_has_stored_length(name):
    assert len(cave_map(name)) == MAP_SIZE


@pytest.mark.parametrize("name", ["cueva", "cueva2", "cueva3"])
def test_grid_holds_only_empty_and_solid(name):
    assert set(cave_map(name)[:GRID]) == {EMPTY_TILE, SOLID_TILE}


@pytest.mark.parametrize("name", ["cueva", "cueva2", "cueva3"])
def test_cells_past_grid_are_zero(name):
    assert all(tile == 0 for tile in cave_map(name)[GRID:])


@pytest.mark.parametrize("name", ["cueva", "cueva2", "cueva3"])
def test_result_is_cached(name):
    first = cave_map(name)
    second = cave_map(name)
    assert second is first
    assert len(second) == MAP_SIZE
    assert second[GRID - 1] == SOLID_TILE


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        cave_map("1_1")


def test_maps_are_distinct():
    maps = {cave_map(name) for name in CAVE_MAP_NAMES}
    assert len(maps) == len(CAVE_MAP_NAMES)


def test_cave_maps_differ_from_plains():
    assert cave_map("cueva") != plains_map("1_1")


def test_first_cave_top_row_open():
    assert set(_row(cave_map("cueva"), 0)) == {EMPTY_TILE}


def test_first_cave_bottom_row_has_two_pits():
    bottom = _row(cave_map("cueva"), MAP_ROWS - 1)
    open_columns = [col for col, tile in enumerate(bottom) if tile == EMPTY_TILE]
    assert open_columns == [9, 10, 19, 20]


def test_second_cave_top_rows_solid():
    tiles = cave_map("cueva2")
    for row in range(3):
        assert set(_row(tiles, row)) == {SOLID_TILE}


def test_second_cave_right_column_opens_mid_screen():
    tiles = cave_map("cueva2")
    right = [tiles[row * MAP_WIDTH + MAP_WIDTH - 1] for row in range(MAP_ROWS)]
    assert right[7] == SOLID_TILE
    assert right[8] == EMPTY_TILE


def test_third_cave_bottom_rows_solid():
    tiles = cave_map("cueva3")
    for row in range(MAP_ROWS - 4, MAP_ROWS):
        assert set(_row(tiles, row)) == {SOLID_TILE}


def test_third_cave_left_column_matches_layout():
    tiles = cave_map("cueva3")
    left = [tiles[row * MAP_WIDTH] for row in range(MAP_ROWS)]
    assert left[5] == SOLID_TILE
    assert left[6] == EMPTY_TILE
    assert left[15] == EMPTY_TILE
    assert left[16] == SOLID_TILE