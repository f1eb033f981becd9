"""Levels, their screens and the lookup of screen data."""

from __future__ import annotations

from dataclasses import dataclass, field

from expopisel.maps_cave import cave_map
from expopisel.maps_plains import MAP_WIDTH, plains_map

SCREENS_PER_LEVEL = 4
MAX_LEVELS = 4
COLLISION_TILE = 14


@dataclass(frozen=True)
class Screen:
    """One screen of a level: its collision map, images and start position."""

    collision_map: tuple[int, ...] = ()
    background: str | None = None
    foreground: str | None = None
    initial_position: tuple[int, int] = (0, 0)

    def tile_at(self, column: int, row: int) -> int:
        """Return the tile code at ``column``, ``row``.

        Cells are addressed row by row in a grid ``MAP_WIDTH`` wide; any cell
        outside the stored map reads as 0.
        """
        index = row * MAP_WIDTH + column
        if 0 <= index < len(self.collision_map):
            return self.collision_map[index]
        return 0


@dataclass(frozen=True)
class Level:
    """A level made of ``SCREENS_PER_LEVEL`` screens."""

    screens: tuple[Screen, ...] = field(
        default_factory=lambda: tuple(Screen() for _ in range(SCREENS_PER_LEVEL))
    )


_LEVELS: tuple[Level, ...] = (
    Level(
        screens=(
            Screen(
                collision_map=cave_map("cueva"),
                foreground="cueva1",
                initial_position=(8, 13),
            ),
            Screen(
                collision_map=cave_map("cueva2"),
                foreground="cueva2",
                initial_position=(8, 180),
            ),
            Screen(
                collision_map=cave_map("cueva3"),
                foreground="cueva3",
                initial_position=(288, 180),
            ),
            Screen(
                collision_map=plains_map("1_4"),
                foreground="lvl1_4",
                initial_position=(288, 96),
            ),
        )
    ),
    *(Level() for _ in range(MAX_LEVELS - 1)),
)


def get_level(level_index: int) -> Level:
    """Return the level at ``level_index``; raise IndexError if there is none."""
    if not 0 <= level_index < MAX_LEVELS:
        raise IndexError(f"level index out of range: {level_index}")
    return _LEVELS[level_index]


def get_screen(level_index: int, screen_index: int) -> Screen:
    """Return one screen of a level; raise IndexError if it does not exist."""
    level = get_level(level_index)
    if not 0 <= screen_index < SCREENS_PER_LEVEL:
        raise IndexError(f"screen index out of range: {screen_index}")
    return level.screens[screen_index]