import pytest

from expopisel.input import Button, InputState
from expopisel.physics import GRAVITY, JUMP_FORCE, MAX_VELOCITY
from expopisel.player import Player, PlayerDirection


def _pressed(*buttons):
    state = InputState()
    for button in buttons:
        state.press(button)
    return state


def test_new_player_defaults():
    player = Player()
    assert player.lives == 3
    assert player.score == 0
    assert player.direction == PlayerDirection.DOWN
    assert (player.entity.position.x, player.entity.position.y) == (0, 0)
    assert (player.entity.velocity.x, player.entity.velocity.y) == (0, 0)


@pytest.mark.parametrize(
    "buttons, expected",
    [
        ((Button.RIGHT,), 1),
        ((Button.LEFT,), 3),
        ((), 4),
    ],
)
def test_direction_values_after_update(buttons, expected):
    player = Player()
    assert player.direction == 2
    player.set_position(80, 0)
    player.update_run(_pressed(*buttons), 0, 0)
    assert player.direction == expected


def test_set_position_and_velocity():
    player = Player()
    player.set_position(40, 50)
    player.set_velocity(-2, 3)
    assert (player.entity.position.x, player.entity.position.y) == (40, 50)
    assert (player.entity.velocity.x, player.entity.velocity.y) == (-2, 3)


def test_falls_in_open_air():
    player = Player()
    player.set_position(80, 0)
    player.update_run(InputState(), 0, 0)
    assert player.entity.velocity.y == GRAVITY
    assert player.entity.position.y == GRAVITY
    assert player.direction == PlayerDirection.IDLE
    assert player.entity.velocity.x == 0


def test_fall_speed_is_capped():
    player = Player()
    player.set_position(80, 0)
    player.set_velocity(0, MAX_VELOCITY)
    player.update_run(InputState(), 0, 0)
    assert player.entity.velocity.y == MAX_VELOCITY
    assert player.entity.position.y == MAX_VELOCITY


def test_stands_on_floor():
    player = Player()
    player.set_position(224, 104)
    assert player.is_on_floor(0, 0)
    player.update_run(InputState(), 0, 0)
    assert player.entity.velocity.y == 0
    assert player.entity.position.y == 104


def test_jump_from_floor_consumes_button():
    player = Player()
    player.set_position(224, 104)
    state = _pressed(Button.JUMP)
    player.update_run(state, 0, 0)
    assert player.entity.velocity.y == -JUMP_FORCE
    assert player.entity.position.y == 104 - JUMP_FORCE
    assert not state.is_pressed(Button.JUMP)


def test_jump_in_air_is_ignored_and_kept():
    player = Player()
    player.set_position(80, 0)
    state = _pressed(Button.JUMP)
    player.update_run(state, 0, 0)
    assert player.entity.velocity.y == GRAVITY
    assert state.is_pressed(Button.JUMP)


def test_walk_left():
    player = Player()
    player.set_position(80, 0)
    player.update_run(_pressed(Button.LEFT), 0, 0)
    assert player.direction == PlayerDirection.LEFT
    assert player.entity.velocity.x == -1
    assert player.entity.position.x == 79


def test_walk_right():
    player = Player()
    player.set_position(80, 0)
    player.update_run(_pressed(Button.RIGHT), 0, 0)
    assert player.direction == PlayerDirection.RIGHT
    assert player.entity.velocity.x == 1
    assert player.entity.position.x == 81


def test_left_wins_over_right():
    player = Player()
    player.set_position(80, 0)
    player.update_run(_pressed(Button.LEFT, Button.RIGHT), 0, 0)
    assert player.direction == PlayerDirection.LEFT


def test_blocked_at_left_edge():
    player = Player()
    player.set_position(-8, 0)
    player.update_run(_pressed(Button.LEFT), 0, 0)
    assert player.entity.velocity.x == 0
    assert player.entity.position.x == -8
    assert player.direction == PlayerDirection.LEFT


def test_blocked_at_right_edge():
    player = Player()
    player.set_position(330, 0)
    player.update_run(_pressed(Button.RIGHT), 0, 0)
    assert player.entity.velocity.x == 0
    assert player.entity.position.x == 330


def test_blocked_by_wall():
    player = Player()
    player.set_position(192, 112)
    player.update_run(_pressed(Button.RIGHT), 0, 0)
    assert player.is_ceiling(0, 0)
    assert player.entity.velocity.x == 0
    assert player.entity.position.x == 192
    assert player.direction == PlayerDirection.RIGHT


def test_unknown_level_raises():
    player = Player()
    with pytest.raises(IndexError):
        player.update_run(InputState(), 9, 0)