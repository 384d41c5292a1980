import numpy as np
import pygame
import pytest

from starshooter.render import Renderer
from starshooter.transform import translate


def _row(x, y, z, color):
    return [x, y, z, *color, 0.0, 0.0, 1.0, 0.0, 0.0]


@pytest.fixture
def renderer():
    return Renderer(pygame.Surface((100, 100)))


def test_origin_projects_to_surface_centre(renderer):
    assert renderer.to_screen((0.0, 0.0, 0.0)) == pytest.approx((50.0, 50.0))


def test_top_right_corner_projects_to_top_right_pixel(renderer):
    assert renderer.to_screen((1.0, 1.0, 0.0)) == pytest.approx((100.0, 0.0))


def test_model_matrix_moves_projected_point(renderer):
    moved = renderer.to_screen((0.0, 0.0, 0.0), translate((1.0, -1.0, 0.0)))
    assert moved == renderer.to_screen((1.0, -1.0, 0.0))


def test_clear_fills_surface(renderer):
    renderer.clear((1.0, 0.0, 0.0))
    assert renderer.surface.get_at((0, 0)) == pygame.Color(255, 0, 0, 255)
    assert renderer.surface.get_at((99, 99)) == pygame.Color(255, 0, 0, 255)


def test_draw_mesh_paints_triangle(renderer):
    renderer.clear((0.0, 0.0, 0.0))
    color = (0.0, 0.0, 1.0)
    verts = [_row(-1, -1, 0, color), _row(1, -1, 0, color), _row(0, 1, 0, color)]
    drawn = renderer.draw_mesh(verts, [0, 1, 2], np.eye(4))
    assert drawn == 1
    assert renderer.surface.get_at((50, 50)) == pygame.Color(0, 0, 255, 255)


def test_draw_mesh_skips_triangle_beyond_far_plane(renderer):
    renderer.clear((0.0, 0.0, 0.0))
    color = (1.0, 1.0, 1.0)
    verts = [_row(-1, -1, 0, color), _row(1, -1, 0, color), _row(0, 1, 0, color)]
    drawn = renderer.draw_mesh(verts, [0, 1, 2], translate((0.0, 0.0, -5.0)))
    assert drawn == 0
    assert renderer.surface.get_at((50, 50)) == pygame.Color(0, 0, 0, 255)


def test_draw_mesh_rejects_partial_triangle(renderer):
    color = (1.0, 1.0, 1.0)
    verts = [_row(-1, -1, 0, color), _row(1, -1, 0, color)]
    with pytest.raises(ValueError):
        renderer.draw_mesh(verts, [0, 1], np.eye(4))


def test_set_projection_rejects_bad_shape(renderer):
    with pytest.raises(ValueError):
        renderer.set_projection(np.eye(3))


def test_set_view_changes_projection_of_points(renderer):
    renderer.set_view(translate((0.5, 0.0, 0.0)))
    assert renderer.to_screen((0.0, 0.0, 0.0)) == renderer.to_screen((0.5, 0.0, 0.0), np.eye(4)) or \
        renderer.to_screen((-0.5, 0.0, 0.0)) == pytest.approx((50.0, 50.0))