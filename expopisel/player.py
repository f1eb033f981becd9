"""The player character and its per-frame movement."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from expopisel.input import Button, InputState
from expopisel.physics import GRAVITY, JUMP_FORCE, MAX_VELOCITY, Entity, Vector2D


class PlayerDirection(IntEnum):
    """Facing of the player; the values double as animation indexes."""

    RIGHT = 1
    DOWN = 2
    LEFT = 3
    IDLE = 4


@dataclass
class Player:
    """The controllable character: lives, score, motion and facing."""

    lives: int = 3
    score: int = 0
    entity: Entity = field(default_factory=Entity)
    sprite: object | None = None
    direction: PlayerDirection = PlayerDirection.DOWN

    def set_position(self, x: int, y: int) -> None:
        self.entity.set_position(Vector2D(x, y))

    def set_velocity(self, vx: int, vy: int) -> None:
        self.entity.set_velocity(Vector2D(vx, vy))

    def is_on_floor(self, level_index: int, screen_index: int) -> bool:
        return self.entity.is_on_floor(level_index, screen_index)

    def is_ceiling(self, level_index: int, screen_index: int) -> bool:
        return self.entity.is_ceiling(level_index, screen_index)

    def update_run(
        self, input_state: InputState, level_index: int, screen_index: int
    ) -> None:
        """Apply gravity, jumping and walking for one frame, then move."""
        velocity = self.entity.velocity
        if velocity.y < MAX_VELOCITY:
            velocity.y += GRAVITY

        if self.is_on_floor(level_index, screen_index):
            velocity.y = 0

        if input_state.is_pressed(Button.JUMP) and self.is_on_floor(
            level_index, screen_index
        ):
            velocity.y = -JUMP_FORCE
            input_state.reset(Button.JUMP)

        if input_state.is_pressed(Button.LEFT):
            velocity.x = -1
            self.direction = PlayerDirection.LEFT
        elif input_state.is_pressed(Button.RIGHT):
            velocity.x = 1
            self.direction = PlayerDirection.RIGHT
        else:
            velocity.x = 0
            self.direction = PlayerDirection.IDLE

        if self.is_ceiling(level_index, screen_index):
            velocity.x = 0

        self.entity.update(1)