"""A walking enemy that patrols back and forth."""

from __future__ import annotations

from enum import IntEnum

from expopisel.physics import GRAVITY, MAX_VELOCITY, Entity, Vector2D


class EnemyDirection(IntEnum):
    """Walking direction; the value is also the sprite's horizontal flip."""

    RIGHT = 0
    LEFT = 1


class Enemy:
    """An enemy that falls under gravity and walks in its current direction."""

    def __init__(self, x: int = 0, y: int = 0) -> None:
        self.entity = Entity(position=Vector2D(x, y), velocity=Vector2D(0, 0))
        self.sprite: object | None = None
        self.direction = EnemyDirection.LEFT
        self.status = 1

    def __repr__(self) -> str:
        return (
            f"Enemy(entity={self.entity!r}, direction={self.direction!r}, "
            f"status={self.status!r})"
        )

    def set_position(self, x: int, y: int) -> None:
        self.entity.set_position(Vector2D(x, y))

    def set_velocity(self, vx: int, vy: int) -> None:
        self.entity.set_velocity(Vector2D(vx, vy))

    def turn_around(self) -> None:
        """Reverse the walking direction."""
        self.direction = (
            EnemyDirection.RIGHT
            if self.direction == EnemyDirection.LEFT
            else EnemyDirection.LEFT
        )

    def update(self, level_index: int, screen_index: int) -> None:
        """Apply gravity and walking for one frame, then move."""
        velocity = self.entity.velocity
        if velocity.y < MAX_VELOCITY:
            velocity.y += GRAVITY
        if self.entity.is_on_floor(level_index, screen_index):
            velocity.y = 0
        if self.direction == EnemyDirection.LEFT and not self.entity.is_ceiling(
            level_index, screen_index
        ):
            velocity.x = -1
        elif self.direction == EnemyDirection.RIGHT and not self.entity.is_ceiling(
            level_index, screen_index
        ):
            velocity.x = 1
        self.entity.update(1)