"""A pentagon that follows the mouse and spins on demand."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .arcball import Action, Arcball, MouseButton
from .penta import Penta
from .render import Renderer, run
from .transform import ortho

TITLE = "Mouse and Keyboard Events"
CLEAR_COLOR = (0.0, 0.0, 0.0)
DEGREES_PER_SECOND = 180.0


def _letter(key: str) -> Optional[str]:
    if len(key) == 1 and "a" <= key.lower() <= "z":
        return key.lower()
    return None


class PentaScene:
    """Space toggles mouse-following; left click then toggles spinning."""

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer
        self.arcball = Arcball()
        self.moving = False
        self.rotating = False
        self.view_scale = 2.0
        self.angle = 0.0
        self.penta = Penta()
        self.penta.set_renderer(renderer)
        self.penta.set_scale((0.45, 0.45, 1.0))
        renderer.set_projection(ortho(-2.0, 2.0, -2.0, 2.0, -2.0, 2.0))

    def update(self, dt: float) -> None:
        if not self.rotating:
            return
        self.angle += DEGREES_PER_SECOND * dt
        if self.angle > 360.0:
            self.angle -= 360.0
        self.penta.set_rot_z(self.angle)

    def render(self) -> int:
        """Clear the frame and draw the pentagon; return the triangles drawn."""
        self.renderer.clear(CLEAR_COLOR)
        return self.penta.draw()

    def on_mouse_button(self, button: int, action: int, xpos: float, ypos: float) -> None:
        self.arcball.on_mouse_button(button, action, xpos, ypos)
        if self.moving and button == MouseButton.LEFT and action == Action.PRESS:
            self.rotating = not self.rotating
        if button == MouseButton.RIGHT and action == Action.PRESS:
            self.penta.reset()

    def on_cursor_move(self, xpos: float, ypos: float, width: int, height: int) -> None:
        self.arcball.on_cursor_move(xpos, ypos, width, height)
        if self.moving:
            half_w = width // 2
            half_h = height // 2
            px = self.view_scale * (xpos - half_w) / half_w
            py = -self.view_scale * (ypos - half_h) / half_h
            self.penta.set_pos((px, py, 0.0))

    def on_key(self, key: str, action: int, shift: bool = False) -> None:
        if key == "space":
            if action == Action.PRESS:
                self.moving = not self.moving
            return
        if action not in (Action.PRESS, Action.REPEAT):
            return
        letter = _letter(key)
        if letter == "s":
            self.penta.set_scale((0.2, 0.2, 1.0))
        elif letter == "l":
            self.penta.set_scale((1.2, 1.2, 1.0))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Move and spin a pentagon with the mouse.")
    parser.parse_args(argv)
    run(PentaScene, TITLE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())