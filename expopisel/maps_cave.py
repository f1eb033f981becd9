"""Collision maps for the cave screens.

Each map is a 40 x 28 grid of tile codes stored row by row, in the same
layout as the plains maps: the stored sequence is 1182 entries long and
cells past the last row read as 0.
"""

from __future__ import annotations

from functools import cache

from expopisel.maps_plains import EMPTY_TILE, MAP_SIZE, SOLID_TILE

_LEGEND = {
    ".": EMPTY_TILE,
    "#": SOLID_TILE,
}

_FULL = "##########" "##########" "##########" "##########"
_OPEN = ".........." ".........." ".........." ".........."

# Rows are written in blocks of ten columns.
_CAVE_ROWS: dict[str, tuple[str, ...]] = {
    "cueva": (
        *([_OPEN] * 15),
        "###......." ".........." ".........." "..........",
        "###......." ".........." ".........." "...#######",
        *(["###......." ".........." ".......###" "##########"] * 3),
        *(["#########." ".########." ".#########" "##########"] * 8),
    ),
    "cueva2": (
        *([_FULL] * 3),
        "#####....." ".........." ".#########" "##########",
        "#####....." ".........." "......####" "##########",
        *([".........." ".........." "......####" "##########"] * 3),
        *([_OPEN] * 16),
        ".........." "......####" "##########" "###..#####",
        *(["########.#" "##########" "##########" "###..#####"] * 3),
    ),
    "cueva3": (
        *([_FULL] * 6),
        *([".........#" "##########" "##########" "#........."] * 2),
        *([".........." ".........." "##########" "#........."] * 2),
        *([_OPEN] * 6),
        *(["##########" ".........." ".........." ".........."] * 3),
        *(["##########" "##########" ".........." ".........."] * 3),
        *(["##########" "##########" "##########" ".........."] * 2),
        *([_FULL] * 4),
    ),
}


def _decode(rows: tuple[str, ...]) -> tuple[int, ...]:
    tiles = [_LEGEND[cell] for row in rows for cell in row]
    tiles.extend([0] * (MAP_SIZE - len(tiles)))
    return tuple(tiles)


@cache
def cave_map(name: str) -> tuple[int, ...]:
    """Return the collision map called ``name`` ("cueva", "cueva2" or "cueva3")."""
    try:
        rows = _CAVE_ROWS[name]
    except KeyError:
        raise KeyError(f"unknown cave map: {name!r}") from None
    return _decode(rows)


CAVE_MAP_NAMES = tuple(_CAVE_ROWS)