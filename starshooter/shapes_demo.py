"""A triangle, a quad and two pentagons that spin and slide with the mouse."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .arcball import Action, Arcball, MouseButton
from .penta import Penta
from .render import Renderer, run
from .shape import Quad, Shape, Triangle
from .transform import ortho, translate

TITLE = "Draw "
CLEAR_COLOR = (0.0, 0.0, 0.0)
DEGREES_PER_SECOND = 180.0

QUAD_POS = (2.0, 2.0, 0.0)
TRIANGLE_POS = (-2.0, 2.0, 0.0)
PENTA_POSITIONS = ((-2.0, -2.0, 0.0), (2.0, -2.0, 0.0))

TRIANGLE_RESET_POS = (-1.0, -2.0, 0.0)
QUAD_RESET_POS = (1.0, -2.0, 0.0)
PENTA_RESET_POSITIONS = ((-1.0, -4.0, 0.0), (1.0, -4.0, 0.0))


def _letter(key: str) -> Optional[str]:
    if len(key) == 1 and "a" <= key.lower() <= "z":
        return key.lower()
    return None


class ShapesScene:
    """Left click toggles spinning; space toggles sliding everything with the mouse."""

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer
        self.arcball = Arcball()
        self.rotating = False
        self.moving = False
        self.view_scale = 4.0
        self.angle = 0.0

        self.quad = Quad()
        self.quad.set_renderer(renderer)
        self.quad.set_pos(QUAD_POS)

        self.triangle = Triangle()
        self.triangle.set_renderer(renderer)
        self.triangle.set_pos(TRIANGLE_POS)

        self.pentas: list[Penta] = []
        for pos in PENTA_POSITIONS:
            penta = Penta()
            penta.set_renderer(renderer)
            penta.set_pos(pos)
            self.pentas.append(penta)

        renderer.set_projection(ortho(-4.0, 4.0, -4.0, 4.0, -2.0, 2.0))

    @property
    def shapes(self) -> list[Shape]:
        """Every shape in the scene, in drawing order."""
        return [self.triangle, self.quad, *self.pentas]

    def update(self, dt: float) -> None:
        """Spin the triangle anticlockwise and the quad clockwise while rotating."""
        if not self.rotating:
            return
        self.angle += DEGREES_PER_SECOND * dt
        if self.angle > 360.0:
            self.angle -= 360.0
        self.triangle.set_rot_z(self.angle)
        self.quad.set_rot_z(-self.angle)

    def render(self) -> int:
        """Clear the frame and draw every shape; return the triangles drawn."""
        self.renderer.clear(CLEAR_COLOR)
        return sum(shape.draw() for shape in self.shapes)

    def on_mouse_button(self, button: int, action: int, xpos: float, ypos: float) -> None:
        self.arcball.on_mouse_button(button, action, xpos, ypos)
        if action != Action.PRESS:
            return
        if button == MouseButton.LEFT:
            self.rotating = not self.rotating
        elif button == MouseButton.RIGHT:
            self.triangle.reset()
            self.triangle.set_pos(TRIANGLE_RESET_POS)
            self.quad.reset()
            self.quad.set_pos(QUAD_RESET_POS)
            for penta, pos in zip(self.pentas, PENTA_RESET_POSITIONS):
                penta.reset()
                penta.set_pos(pos)

    def on_cursor_move(self, xpos: float, ypos: float, width: int, height: int) -> None:
        self.arcball.on_cursor_move(xpos, ypos, width, height)
        if not self.moving:
            return
        half_w = width / 2.0
        dx = self.view_scale * (xpos - half_w) / half_w
        mx_move = translate((dx, 0.0, 0.0))
        for shape in self.shapes:
            shape.set_transform_matrix(mx_move)

    def on_key(self, key: str, action: int, shift: bool = False) -> None:
        if key == "space":
            if action == Action.PRESS:
                self.moving = not self.moving
            return
        if action not in (Action.PRESS, Action.REPEAT):
            return
        letter = _letter(key)
        if letter == "s":
            self.triangle.set_scale((0.25, 0.25, 1.0))
        elif letter == "l":
            self.triangle.set_scale((1.2, 1.2, 1.0))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Spin and slide a few shapes.")
    parser.parse_args(argv)
    run(ShapesScene, TITLE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())