"""The shooting game: a starfield, the player's ship and its shield ring."""

from __future__ import annotations

import argparse
import random
from typing import Any, Iterable, Optional, Sequence

import numpy as np

from .arcball import Action, Arcball, MouseButton
from .player import Player
from .render import run
from .shape import Quad
from .star import Star
from .transform import ortho, rotate, translate

TITLE = "Mouse and Keyboard Events"
CLEAR_COLOR = (0.08, 0.08, 0.18)
STAR_COUNT = 50
STAR_COLOR = (0.5, 0.5, 0.0)
STAR_SCALE = (0.2, 0.2, 0.2)
STAR_BASE_SPEED = 0.1
SHIELD_COUNT = 12
SHIELD_RADIUS = 1.1
SHIELD_CENTER = (0.0, 0.0, 1.0)
SHIELD_COLOR = (0.2, 0.5, 0.1)
SHIELD_SCALE = (0.1, 0.1, 0.0)
SHIELD_LIFT = (0.0, -2.0, 1.0)
DEGREES_PER_SECOND = 180.0
HALF_PI_ISH = 3.1415916


def circle_points(count: int = SHIELD_COUNT, radius: float = SHIELD_RADIUS,
                  center: Iterable[float] = SHIELD_CENTER) -> np.ndarray:
    """Return ``count`` evenly spaced points on a circle in the z = center.z plane."""
    if count <= 0:
        raise ValueError("count must be positive")
    c = np.asarray(list(center), dtype=float)
    if c.shape != (3,):
        raise ValueError("center must have three components")
    angles = np.radians(np.arange(count) * (360.0 / count))
    points = np.empty((count, 3))
    points[:, 0] = c[0] + radius * np.cos(angles)
    points[:, 1] = c[1] + radius * np.sin(angles)
    points[:, 2] = c[2]
    return points


class Game:
    """Space starts the game and mouse steering; moving the mouse then fires."""

    def __init__(self, renderer: Any, rng: Optional[random.Random] = None) -> None:
        self.renderer = renderer
        self.rng = rng if rng is not None else random.Random()
        self.arcball = Arcball()
        self.rotating = False
        self.moving = False
        self.game_start = False
        self.view_scale = 4.0
        self.angle = 0.0

        self.stars: list[Star] = []
        for _ in range(STAR_COUNT):
            star = Star(self.rng)
            star.set_renderer(renderer)
            star.set_color(STAR_COLOR)
            star.set_scale(STAR_SCALE)
            star.randomize()
            star.speed = STAR_BASE_SPEED + self.rng.random()
            self.stars.append(star)

        self.player = Player(renderer)

        lift = translate(SHIELD_LIFT)
        self.shields: list[Quad] = []
        for point in circle_points(SHIELD_COUNT, SHIELD_RADIUS, SHIELD_CENTER):
            quad = Quad()
            quad.set_renderer(renderer)
            quad.set_color(SHIELD_COLOR)
            quad.set_scale(SHIELD_SCALE)
            quad.set_pos(point)
            quad.set_transform_matrix(lift)
            self.shields.append(quad)

        renderer.set_projection(ortho(-4.0, 4.0, -4.0, 4.0, -2.0, 2.0))

    def update(self, dt: float) -> None:
        if self.rotating:
            self.angle += DEGREES_PER_SECOND * dt
            if self.angle > 360.0:
                self.angle -= 360.0
        if self.game_start:
            for star in self.stars:
                star.update(dt)
            self.player.update(dt)

    def render(self) -> int:
        """Clear the frame and draw everything; return the triangles drawn."""
        self.renderer.clear(CLEAR_COLOR)
        total = sum(star.draw() for star in self.stars)
        total += sum(shield.draw() for shield in self.shields)
        return total + self.player.draw()

    def on_mouse_button(self, button: int, action: int, xpos: float, ypos: float) -> None:
        self.arcball.on_mouse_button(button, action, xpos, ypos)
        if button == MouseButton.LEFT and action == Action.PRESS:
            self.rotating = not self.rotating
        if button == MouseButton.RIGHT and action == Action.PRESS:
            self.player.reset()

    def on_cursor_move(self, xpos: float, ypos: float, width: int, height: int) -> None:
        self.arcball.on_cursor_move(xpos, ypos, width, height)
        if self.moving:
            half_w = width / 2.0
            dx = self.view_scale * (xpos - half_w) / half_w
            mx_move = translate((dx, 0.0, 0.0))
            self.player.set_transform_matrix(mx_move)
            mx_rot = rotate(HALF_PI_ISH * dx / 2.0, (0.0, 0.0, 1.0))
            transform = mx_move @ translate(SHIELD_LIFT) @ mx_rot
            for shield in self.shields:
                shield.set_transform_matrix(transform)
        if self.game_start:
            self.player.shoot()

    def on_key(self, key: str, action: int, shift: bool = False) -> None:
        if key == "space" and action == Action.PRESS:
            self.moving = not self.moving
            self.game_start = not self.game_start


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play the star shooter.")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the starfield layout")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    run(lambda renderer: Game(renderer, rng), TITLE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())