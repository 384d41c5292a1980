"""Parent-child transforms: a red quad, green children and blue grandchildren."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import numpy as np

from .arcball import Action, Arcball
from .render import Renderer, run
from .shape import Quad, Shape
from .transform import ortho, rotate, translate

TITLE = "Parent-Child Relationship"
CLEAR_COLOR = (0.0, 0.0, 0.0)
QUAD_NUM = 4
QUAD_SCALE = (0.3, 0.3, 0.0)
RED = (1.0, 0.0, 0.0)
GREEN = (0.0, 1.0, 0.0)
BLUE = (0.0, 0.0, 1.0)
OFFSETS = ((1.5, 0.0, 0.0), (-1.5, 0.0, 0.0), (0.0, 1.5, 0.0), (0.0, -1.5, 0.0))
PI_ISH = 3.1415916


class HierarchyScene:
    """Space toggles mouse control: x turns the green ring, y turns each blue quad."""

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer
        self.arcball = Arcball()
        self.rotating = False
        self.moving = False
        self.view_scale = 4.0
        self.angle = 0.0

        self.green_offsets = [np.array(o) for o in OFFSETS]
        self.blue_offsets = [np.array(o) for o in OFFSETS]
        self.green_transforms = [translate(o) for o in self.green_offsets]

        self.red = self._make_quad(RED, (0.0, 0.0, 0.0))
        self.greens = [self._make_quad(GREEN, o) for o in self.green_offsets]
        self.blues: list[Quad] = []
        for offset, parent in zip(self.blue_offsets, self.green_transforms):
            quad = self._make_quad(BLUE, offset)
            quad.set_transform_matrix(parent)
            self.blues.append(quad)

        renderer.set_projection(ortho(-4.0, 4.0, -4.0, 4.0, -2.0, 2.0))

    def _make_quad(self, color, pos) -> Quad:
        quad = Quad()
        quad.set_renderer(self.renderer)
        quad.set_color(color)
        quad.set_scale(QUAD_SCALE)
        quad.set_pos(pos)
        return quad

    @property
    def shapes(self) -> list[Shape]:
        """Every quad, in drawing order."""
        return [self.red, *self.greens, *self.blues]

    def update(self, dt: float) -> None:
        """Nothing moves on its own in this scene."""

    def render(self) -> int:
        """Clear the frame and draw all quads; return the triangles drawn."""
        self.renderer.clear(CLEAR_COLOR)
        return sum(shape.draw() for shape in self.shapes)

    def on_mouse_button(self, button: int, action: int, xpos: float, ypos: float) -> None:
        self.arcball.on_mouse_button(button, action, xpos, ypos)

    def on_cursor_move(self, xpos: float, ypos: float, width: int, height: int) -> None:
        self.arcball.on_cursor_move(xpos, ypos, width, height)
        if not self.moving:
            return
        half_w = width / 2.0
        half_h = height / 2.0
        dx = self.view_scale * (xpos - half_w) / half_w
        dy = -self.view_scale * (ypos - half_h) / half_h
        mx_g_rot = rotate(PI_ISH * dx / 4.0, (0.0, 0.0, 1.0))
        mx_b_rot = rotate(PI_ISH * dy / 2.0, (0.0, 0.0, 1.0))
        for green in self.greens:
            green.set_transform_matrix(mx_g_rot)
        for blue, parent in zip(self.blues, self.green_transforms):
            blue.set_transform_matrix(mx_g_rot @ parent @ mx_b_rot)

    def on_key(self, key: str, action: int, shift: bool = False) -> None:
        if key == "space" and action == Action.PRESS:
            self.moving = not self.moving


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show parent-child transforms.")
    parser.parse_args(argv)
    run(HierarchyScene, TITLE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())