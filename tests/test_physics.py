import pytest

from expopisel.physics import Entity, Vector2D


def make_entity(x, y, vx=0, vy=0):
    return Entity(Vector2D(x, y), Vector2D(vx, vy))


def test_set_position_and_velocity_copy_values():
    entity = Entity()
    pos = Vector2D(10, 20)
    entity.set_position(pos)
    entity.set_velocity(Vector2D(-1, 3))
    pos.x = 99
    assert entity.position == Vector2D(10, 20)
    assert entity.velocity == Vector2D(-1, 3)


@pytest.mark.parametrize("dt", [0, 1, 3])
def test_update_moves_by_velocity_times_delta(dt):
    entity = make_entity(10, 20, -2, 5)
    entity.update(dt)
    assert entity.position == Vector2D(10 + -2 * dt, 20 + 5 * dt)
    assert entity.velocity == Vector2D(-2, 5)


def test_on_floor_over_solid_tiles():
    # Screen 0 of level 0 has solid tiles at columns 0-2 of row 15.
    assert make_entity(0, 88).is_on_floor(0, 0) is True


def test_not_on_floor_in_open_space():
    assert make_entity(0, 0).is_on_floor(0, 0) is False


def test_ceiling_blocked_moving_left_into_wall():
    assert make_entity(0, 96, vx=-1).is_ceiling(0, 0) is True


def test_ceiling_clear_moving_right():
    assert make_entity(0, 96, vx=0).is_ceiling(0, 0) is False


def test_ceiling_left_edge_of_screen():
    assert make_entity(-1, 0, vx=-1).is_ceiling(0, 0) is True


def test_ceiling_right_edge_of_screen():
    assert make_entity(321, 0, vx=0).is_ceiling(0, 0) is True


def test_floor_check_bad_screen():
    with pytest.raises(IndexError):
        make_entity(0, 0).is_on_floor(0, 4)