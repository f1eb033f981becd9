"""Collision maps for the plains screens.

Each map is a 40 x 28 grid of tile codes stored row by row. The stored
sequence is 1182 entries long; cells past the last row read as 0.
"""

from __future__ import annotations

from functools import cache

MAP_WIDTH = 40
MAP_ROWS = 28
MAP_SIZE = 1182

EMPTY_TILE = 13
SOLID_TILE = 14
ENTRY_TILE = 15
EXIT_TILE = 16

_LEGEND = {
    ".": EMPTY_TILE,
    "#": SOLID_TILE,
    "a": ENTRY_TILE,
    "b": EXIT_TILE,
}

_FULL = "##########" "##########" "##########" "##########"
_OPEN = "#........." ".........." ".........." ".........#"

# Rows are written in blocks of ten columns.
_PLAINS_ROWS: dict[str, tuple[str, ...]] = {
    "1_1": (
        _FULL,
        *([_OPEN] * 5),
        "#........." ".........." ".........." ".......aa#",
        "#........." ".........." ".........." ".......aa#",
        "#........." ".........." ".........." ".#########",
        _OPEN,
        _OPEN,
        "#........." "......###." ".........." ".........#",
        _OPEN,
        "#........." ".........." "........##" "##########",
        "##########" "###......." ".........." ".........#",
        _OPEN,
        _OPEN,
        "#........." ".........." "..####...." ".........#",
        _OPEN,
        _OPEN,
        _OPEN,
        "#........." "....#####." ".........." ".........#",
        _OPEN,
        _OPEN,
        "#......###" "#........." "...####..." ".........#",
        _OPEN,
        _OPEN,
        _FULL,
    ),
    "1_2": (
        _FULL,
        *([_OPEN] * 14),
        "#........." ".........." ".........." ".......aa#",
        "#........." ".........." ".........." ".......aa#",
        "#........." ".........." ".........." "....######",
        _OPEN,
        "#........." ".........#" "#####..###" "###......#",
        _OPEN,
        "#........." "....####.." ".........." ".........#",
        _OPEN,
        "#........." ".........." "#####....." ".........#",
        _OPEN,
        "#bb......." ".....####." ".........." ".........#",
        "#bb......." ".........." ".........." ".........#",
        _FULL,
    ),
    "1_3": (
        _FULL,
        *([_OPEN] * 11),
        "#aa......." ".........." ".........." ".........#",
        "#aa......." ".........." ".........." ".........#",
        "####..####" "#........." ".........." ".........#",
        "#........." "...######." ".........." ".........#",
        _OPEN,
        "#........." ".........." "#####....." ".........#",
        _OPEN,
        "#........." ".........." "......####" ".........#",
        _OPEN,
        "#........." ".........." "..###....." ".........#",
        _OPEN,
        _OPEN,
        "#........." ".......###" "#.....####" ".........#",
        "#........." ".........." ".........." ".......bb#",
        "#........." ".........." ".........." ".......bb#",
        _FULL,
    ),
    "1_4": (
        _FULL,
        *([_OPEN] * 4),
        "#........." ".........." "...#......" ".........#",
        "#........." ".........." "...##....." ".........#",
        "#........." ".........." "...###...." ".........#",
        "#........." ".........." "...####..." ".........#",
        "#........." ".........." "...#####.." ".........#",
        "#........." ".........." "...######." ".........#",
        "#........." ".........." "...#######" ".........#",
        "#........." ".........." "...#######" "##...bb..#",
        "#........." ".........." ".........." ".....bb..#",
        "#........." ".........." ".........." "....###..#",
        _OPEN,
        _OPEN,
        "#........." ".........." ".........." ".###.....#",
        _OPEN,
        "#........." ".........." ".....#####" "#........#",
        "#........." ".........." "....######" "#........#",
        "#........." ".........." "...#######" "#........#",
        "#........." ".........." "..###....." ".........#",
        "#........." ".........." ".###......" ".........#",
        "#........." ".........." "###......." ".........#",
        "#aa......." ".........#" "##........" ".........#",
        "#aa......." ".........." ".........." ".........#",
        "##########" "###...####" "##########" "##########",
    ),
}


def _decode(rows: tuple[str, ...]) -> tuple[int, ...]:
    tiles = [_LEGEND[cell] for row in rows for cell in row]
    tiles.extend([0] * (MAP_SIZE - len(tiles)))
    return tuple(tiles)


@cache
def plains_map(name: str) -> tuple[int, ...]:
    """Return the collision map called ``name`` ("1_1" to "1_4")."""
    try:
        rows = _PLAINS_ROWS[name]
    except KeyError:
        raise KeyError(f"unknown plains map: {name!r}") from None
    return _decode(rows)


PLAINS_MAP_NAMES = tuple(_PLAINS_ROWS)