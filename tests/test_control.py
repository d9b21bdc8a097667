import numpy as np
import pytest

from fluidsim.constants import HEIGHT, WIDTH, SPHConstants
from fluidsim.control import INFLUENCE_RADIUS, PUSH_SPEED, MouseButton, WaterControl
from fluidsim.water import Water

CONFIG = SPHConstants(50.0, 2000.0, 1000.0, 625000.0)


@pytest.fixture
def control():
    # One particle resting at the world origin.
    return WaterControl(Water(1, 25, CONFIG))


def _particle(control):
    return control.water.particles[0]


def _cursor_right_of_origin(control, offset):
    control.set_mouse_position(WIDTH // 2 + offset, HEIGHT // 2)


def test_initial_state(control):
    assert control.is_left_mouse_pressed is False
    assert control.is_right_mouse_pressed is False
    assert control.mouse_pos == (0.0, 0.0)


def test_set_mouse_position(control):
    control.set_mouse_position(10, 20)
    assert control.mouse_pos == (10.0, 20.0)


def test_buttons_toggle_flags(control):
    control.set_button(MouseButton.LEFT, True)
    control.set_button(MouseButton.RIGHT, True)
    assert control.is_left_mouse_pressed and control.is_right_mouse_pressed
    control.set_button(MouseButton.LEFT, False)
    assert not control.is_left_mouse_pressed
    assert control.is_right_mouse_pressed


def test_other_buttons_are_ignored(control):
    control.set_button(2, True)
    assert not control.is_left_mouse_pressed
    assert not control.is_right_mouse_pressed


def test_attract_pulls_towards_cursor(control):
    _cursor_right_of_origin(control, 50)
    control.attract_particles()
    velocity = _particle(control).velocity
    assert velocity[0] == pytest.approx(PUSH_SPEED)
    assert velocity[1] == pytest.approx(0.0)


def test_push_away_moves_from_cursor(control):
    _cursor_right_of_origin(control, 50)
    control.push_away_particles()
    velocity = _particle(control).velocity
    assert velocity[0] == pytest.approx(-PUSH_SPEED)
    assert np.linalg.norm(velocity) == pytest.approx(PUSH_SPEED)


def test_cursor_y_axis_points_up(control):
    control.set_mouse_position(WIDTH // 2, HEIGHT // 2 - 30)
    control.attract_particles()
    assert _particle(control).velocity[1] == pytest.approx(PUSH_SPEED)


def test_particles_beyond_radius_untouched(control):
    _cursor_right_of_origin(control, INFLUENCE_RADIUS + 1)
    control.attract_particles()
    control.push_away_particles()
    assert np.allclose(_particle(control).velocity, 0.0)


def test_particles_on_radius_edge_are_affected(control):
    _cursor_right_of_origin(control, INFLUENCE_RADIUS)
    control.attract_particles()
    assert np.linalg.norm(_particle(control).velocity) == pytest.approx(PUSH_SPEED)


def test_update_without_buttons_does_nothing(control):
    _cursor_right_of_origin(control, 50)
    control.update()
    assert np.allclose(_particle(control).velocity, 0.0)


def test_update_with_left_attracts(control):
    _cursor_right_of_origin(control, 50)
    control.set_button(MouseButton.LEFT, True)
    control.update()
    assert _particle(control).velocity[0] == pytest.approx(PUSH_SPEED)


def test_update_with_both_buttons_cancels(control):
    _cursor_right_of_origin(control, 50)
    control.set_button(MouseButton.LEFT, True)
    control.set_button(MouseButton.RIGHT, True)
    control.update()
    assert np.allclose(_particle(control).velocity, 0.0)