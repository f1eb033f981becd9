"""Entity motion and collision checks against screen maps."""

from __future__ import annotations

from dataclasses import dataclass, field

from expopisel.level import COLLISION_TILE, get_screen

JUMP_FORCE = 8
GRAVITY = 1
MAX_VELOCITY = 8

_TILE_SIZE = 8
_SCREEN_RIGHT = 320


def _tile(coordinate: int) -> int:
    """Pixel to tile coordinate, truncating toward zero."""
    return int(coordinate / _TILE_SIZE)


@dataclass
class Vector2D:
    x: int = 0
    y: int = 0


@dataclass
class Entity:
    """Something that moves on a screen with a position and a velocity."""

    position: Vector2D = field(default_factory=Vector2D)
    velocity: Vector2D = field(default_factory=Vector2D)

    def set_position(self, position: Vector2D) -> None:
        self.position = Vector2D(position.x, position.y)

    def set_velocity(self, velocity: Vector2D) -> None:
        self.velocity = Vector2D(velocity.x, velocity.y)

    def update(self, deltatime: int) -> None:
        """Advance the position by the velocity times ``deltatime``."""
        self.position.x += self.velocity.x * deltatime
        self.position.y += self.velocity.y * deltatime

    def is_on_floor(self, level_index: int, screen_index: int) -> bool:
        """Whether a collision tile lies just under the entity's feet."""
        screen = get_screen(level_index, screen_index)
        x = _tile(self.position.x)
        y = _tile(self.position.y)
        x2 = x + 2 if self.velocity.x >= 0 else x
        row = y + 4
        return (
            screen.tile_at(x + 1, row) == COLLISION_TILE
            or screen.tile_at(x2, row) == COLLISION_TILE
        )

    def is_ceiling(self, level_index: int, screen_index: int) -> bool:
        """Whether the entity is blocked in the direction it is moving."""
        if (self.position.x < 0 and self.velocity.x < 0) or (
            self.position.x > _SCREEN_RIGHT and self.velocity.x >= 0
        ):
            return True
        screen = get_screen(level_index, screen_index)
        x = _tile(self.position.x)
        y = _tile(self.position.y)
        if self.velocity.x >= 0:
            x += 3
        return any(
            screen.tile_at(x, y + offset) == COLLISION_TILE for offset in (1, 2, 3)
        )