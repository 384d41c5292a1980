"""A quad spinning at half a turn per second, with keys for scale and rotation."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .arcball import Action, Arcball
from .render import Renderer, run
from .shape import Quad
from .transform import ortho

TITLE = "Draw two triangles"
CLEAR_COLOR = (0.0, 0.0, 0.0)
DEGREES_PER_SECOND = 180.0


def _letter(key: str) -> Optional[str]:
    if len(key) == 1 and "a" <= key.lower() <= "z":
        return key.lower()
    return None


class SpinningQuadScene:
    """One quad that turns about z continuously."""

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer
        self.arcball = Arcball()
        self.angle = 0.0
        self.quad = Quad()
        self.quad.set_renderer(renderer)
        self.quad.set_pos((0.5, 0.5, 0.0))
        renderer.set_projection(ortho(-2.0, 2.0, -2.0, 2.0, -2.0, 2.0))

    def update(self, dt: float) -> None:
        self.angle += DEGREES_PER_SECOND * dt
        if self.angle > 360.0:
            self.angle -= 360.0
        self.quad.set_rot_z(self.angle)

    def render(self) -> int:
        """Clear the frame and draw the quad; return the triangles drawn."""
        self.renderer.clear(CLEAR_COLOR)
        return self.quad.draw()

    def on_mouse_button(self, button: int, action: int, xpos: float, ypos: float) -> None:
        self.arcball.on_mouse_button(button, action, xpos, ypos)

    def on_cursor_move(self, xpos: float, ypos: float, width: int, height: int) -> None:
        self.arcball.on_cursor_move(xpos, ypos, width, height)

    def on_key(self, key: str, action: int, shift: bool = False) -> None:
        if action not in (Action.PRESS, Action.REPEAT):
            return
        letter = _letter(key)
        if letter == "r":
            self.arcball.reset()
        elif letter == "s":
            self.quad.set_scale((0.25, 0.25, 1.0))
        elif letter == "l":
            self.quad.set_scale((1.2, 1.2, 1.0))
        elif letter == "x":
            self.quad.set_rot_x(45.0)
        elif letter == "y":
            self.quad.set_rot_y(45.0)
        elif letter == "z":
            self.quad.set_rot_z(45.0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show a spinning quad.")
    parser.parse_args(argv)
    run(SpinningQuadScene, TITLE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())