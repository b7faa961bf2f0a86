import pytest

from mmobattle.model import Direction, Model
from mmobattle.vec3 import Vec3


def test_initial_position_and_origin():
    m = Model(3, 4, 5)
    assert m.position == Vec3(3, 4, 5)
    assert m.origin == Vec3()


def test_position_is_a_copy():
    m = Model(1, 2, 3)
    p = m.position
    p.x = 99
    assert m.x == 1


def test_setters_change_position():
    m = Model()
    m.x, m.y, m.z = 7, -2, 11
    assert m.position == Vec3(7, -2, 11)
    assert m.screen_space_pos() == (7, -2)


@pytest.mark.parametrize(
    "direction, axis, delta",
    [
        (Direction.FORWARDS, "z", -1),
        (Direction.BACKWARDS, "z", 1),
        (Direction.LEFT, "x", -1),
        (Direction.RIGHT, "x", 1),
    ],
)
def test_move_steps_one_unit(direction, axis, delta):
    m = Model(10, 10, 10)
    m.move(direction)
    assert getattr(m, axis) == 10 + delta


def test_opposite_moves_cancel():
    m = Model(2, 3, 4)
    m.move(Direction.FORWARDS)
    m.move(Direction.LEFT)
    m.move(Direction.BACKWARDS)
    m.move(Direction.RIGHT)
    assert m.position == Vec3(2, 3, 4)


def test_stop_without_direction_clears_movement():
    m = Model()
    m.movement = Vec3(1, 1, 1)
    m.stop()
    assert m.movement == Vec3()


def test_stop_horizontal_clears_x_only():
    m = Model()
    m.movement = Vec3(2, 3, 4)
    m.stop(Direction.LEFT)
    assert m.movement == Vec3(0, 3, 4)


def test_stop_depth_clears_y_only():
    m = Model()
    m.movement = Vec3(2, 3, 4)
    m.stop(Direction.BACKWARDS)
    assert m.movement == Vec3(2, 0, 4)


def test_update_draws_through_api():
    drawn = []

    class Api:
        def draw_model(self, model):
            drawn.append(model)

    m = Model(api=Api())
    m.update(0, None)
    m.update(1, None)
    assert drawn == [m, m]