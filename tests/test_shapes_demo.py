import math

import numpy as np
import pygame
import pytest

from starshooter.arcball import Action, MouseButton
from starshooter.render import Renderer
from starshooter.shapes_demo import ShapesScene
from starshooter.transform import ortho, translate


@pytest.fixture
def scene():
    return ShapesScene(Renderer(pygame.Surface((80, 80))))


def test_initial_layout(scene):
    assert np.allclose(scene.quad.pos, (2.0, 2.0, 0.0))
    assert np.allclose(scene.triangle.pos, (-2.0, 2.0, 0.0))
    assert len(scene.pentas) == 2
    assert np.allclose(scene.pentas[0].pos, (-2.0, -2.0, 0.0))
    assert np.allclose(scene.pentas[1].pos, (2.0, -2.0, 0.0))


def test_projection_set(scene):
    assert np.allclose(scene.renderer.projection, ortho(-4.0, 4.0, -4.0, 4.0, -2.0, 2.0))


def test_update_without_rotating_keeps_angles(scene):
    scene.update(0.5)
    assert scene.angle == 0.0
    assert np.allclose(scene.triangle.rotation_angles, 0.0)


def test_left_click_toggles_rotation(scene):
    scene.on_mouse_button(MouseButton.LEFT, Action.PRESS, 0, 0)
    assert scene.rotating is True
    scene.on_mouse_button(MouseButton.LEFT, Action.PRESS, 0, 0)
    assert scene.rotating is False


def test_rotation_opposite_directions(scene):
    scene.on_mouse_button(MouseButton.LEFT, Action.PRESS, 0, 0)
    scene.update(0.25)
    tri_z = scene.triangle.rotation_angles[2]
    quad_z = scene.quad.rotation_angles[2]
    assert tri_z > 0.0
    assert math.isclose(tri_z, -quad_z)
    assert math.isclose(tri_z, math.radians(scene.angle))


def test_angle_wraps_below_full_turn(scene):
    scene.on_mouse_button(MouseButton.LEFT, Action.PRESS, 0, 0)
    for _ in range(10):
        scene.update(0.7)
        assert 0.0 <= scene.angle <= 360.0


def test_right_click_resets_positions(scene):
    scene.triangle.set_scale((3.0, 3.0, 1.0))
    scene.on_mouse_button(MouseButton.RIGHT, Action.PRESS, 0, 0)
    assert np.allclose(scene.triangle.pos, (-1.0, -2.0, 0.0))
    assert np.allclose(scene.triangle.scale, (1.0, 1.0, 1.0))
    assert np.allclose(scene.quad.pos, (1.0, -2.0, 0.0))
    assert np.allclose(scene.pentas[0].pos, (-1.0, -4.0, 0.0))
    assert np.allclose(scene.pentas[1].pos, (1.0, -4.0, 0.0))


def test_space_toggles_moving_on_press_only(scene):
    scene.on_key("space", Action.PRESS)
    assert scene.moving is True
    scene.on_key("space", Action.RELEASE)
    assert scene.moving is True
    scene.on_key("space", Action.PRESS)
    assert scene.moving is False


def test_cursor_move_ignored_when_not_moving(scene):
    scene.on_cursor_move(800, 400, 800, 800)
    scene.quad.update_matrix()
    assert np.allclose(scene.quad.model_matrix, translate(scene.quad.pos))


def test_cursor_move_slides_all_shapes(scene):
    scene.on_key("space", Action.PRESS)
    scene.on_cursor_move(800, 400, 800, 800)
    for shape in scene.shapes:
        shape.update_matrix()
        expected = translate((scene.view_scale, 0.0, 0.0)) @ translate(shape.pos)
        assert np.allclose(shape.model_matrix, expected)


def test_cursor_at_centre_leaves_shapes_in_place(scene):
    scene.on_key("space", Action.PRESS)
    scene.on_cursor_move(400, 100, 800, 800)
    scene.triangle.update_matrix()
    assert np.allclose(scene.triangle.model_matrix, translate(scene.triangle.pos))


def test_scale_keys(scene):
    scene.on_key("s", Action.PRESS)
    assert np.allclose(scene.triangle.scale, (0.25, 0.25, 1.0))
    scene.on_key("L", Action.REPEAT, shift=True)
    assert np.allclose(scene.triangle.scale, (1.2, 1.2, 1.0))


def test_render_draws_every_triangle(scene):
    expected = sum(len(shape.indices) // 3 for shape in scene.shapes)
    assert scene.render() == expected