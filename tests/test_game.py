import random

import numpy as np
import pytest

from starshooter.arcball import Action, MouseButton
from starshooter.game import Game, circle_points
from starshooter.transform import ortho


class FakeRenderer:
    def __init__(self):
        self.projection = None
        self.cleared = []
        self.meshes = []

    def set_projection(self, matrix):
        self.projection = np.asarray(matrix)

    def clear(self, color):
        self.cleared.append(tuple(color))

    def draw_mesh(self, vertices, indices, model):
        self.meshes.append((np.asarray(vertices), tuple(indices), np.asarray(model)))
        return len(indices) // 3


@pytest.fixture
def game():
    return Game(FakeRenderer(), random.Random(5))


def test_circle_points_on_circle():
    pts = circle_points(12, 1.1, (0.0, 0.0, 1.0))
    assert pts.shape == (12, 3)
    assert np.allclose(np.hypot(pts[:, 0], pts[:, 1]), 1.1)
    assert np.allclose(pts[:, 2], 1.0)
    assert np.allclose(pts[0], (1.1, 0.0, 1.0))


def test_circle_points_rejects_zero_count():
    with pytest.raises(ValueError):
        circle_points(0, 1.0, (0.0, 0.0, 0.0))


def test_scene_setup(game):
    assert len(game.stars) == 50
    assert len(game.shields) == 12
    assert np.allclose(game.renderer.projection, ortho(-4.0, 4.0, -4.0, 4.0, -2.0, 2.0))
    for star in game.stars:
        assert 0.1 <= star.speed <= 1.1
        x, y, _ = star.pos
        assert -10 <= x <= 9 and x == int(x)
        assert -10 <= y <= 9 and y == int(y)


def test_stars_still_until_game_starts(game):
    before = [s.pos.copy() for s in game.stars]
    game.update(0.5)
    assert all(np.allclose(b, s.pos) for b, s in zip(before, game.stars))


def test_space_starts_game_and_stars_fall(game):
    game.on_key("space", Action.PRESS)
    assert game.moving and game.game_start
    before = [s.pos[1] for s in game.stars]
    game.update(0.1)
    after = [s.pos[1] for s in game.stars]
    assert all(a < b or a == pytest.approx(10.0) for a, b in zip(after, before))


def test_space_release_does_not_toggle(game):
    game.on_key("space", Action.RELEASE)
    assert not game.moving and not game.game_start


def test_cursor_move_steers_player_and_shields(game):
    game.on_key("space", Action.PRESS)
    game.on_cursor_move(600, 400, 800, 800)
    dx = game.view_scale * (600 - 400) / 400
    assert game.player.offset[0] == pytest.approx(dx)
    shield = game.shields[0]
    shield.update_matrix()
    assert shield.model_matrix[0, 3] != pytest.approx(shield.pos[0]) or dx == 0


def test_cursor_move_fires_with_cooldown(game):
    game.on_key("space", Action.PRESS)
    game.on_cursor_move(400, 400, 800, 800)
    assert len(game.player.missiles) == 1
    game.on_cursor_move(410, 400, 800, 800)
    assert len(game.player.missiles) == 1


def test_no_firing_before_start(game):
    game.on_cursor_move(400, 400, 800, 800)
    assert game.player.missiles == []


def test_mouse_buttons(game):
    game.on_mouse_button(MouseButton.LEFT, Action.PRESS, 0, 0)
    assert game.rotating
    game.on_mouse_button(MouseButton.LEFT, Action.PRESS, 0, 0)
    assert not game.rotating
    game.on_mouse_button(MouseButton.RIGHT, Action.PRESS, 0, 0)
    assert game.player.positions["bottom"][1] == pytest.approx(-2.9)


def test_render_draws_everything(game):
    total = game.render()
    renderer = game.renderer
    assert renderer.cleared == [(0.08, 0.08, 0.18)]
    assert len(renderer.meshes) == 50 + 12 + 7
    assert total == sum(len(idx) // 3 for _, idx, _ in renderer.meshes)


def test_rotation_angle_wraps(game):
    game.rotating = True
    for _ in range(5):
        game.update(1.0)
        assert 0.0 <= game.angle <= 360.0