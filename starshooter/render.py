"""Software renderer for flat-shaded meshes and the main window loop."""

from __future__ import annotations

import os
import time
from typing import Any, Callable, Iterable, Sequence

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .arcball import Action, MouseButton  # noqa: E402
from .transform import COLOR_OFFSET, SCREEN_HEIGHT, SCREEN_WIDTH  # noqa: E402

_PYGAME_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}


def _matrix(value: Any) -> np.ndarray:
    m = np.asarray(value, dtype=float)
    if m.shape != (4, 4):
        raise ValueError("matrix must be 4x4")
    return m.copy()


def _to_rgb(color: Iterable[float]) -> tuple[int, int, int]:
    c = np.clip(np.asarray(list(color), dtype=float)[:3], 0.0, 1.0)
    r, g, b = (int(round(v * 255)) for v in c)
    return r, g, b


class Renderer:
    """Projects meshes through view and projection matrices onto a surface."""

    def __init__(self, surface: pygame.Surface, view: Any = None, projection: Any = None) -> None:
        self.surface = surface
        self.view = np.eye(4) if view is None else _matrix(view)
        self.projection = np.eye(4) if projection is None else _matrix(projection)

    def set_view(self, matrix: Any) -> None:
        self.view = _matrix(matrix)

    def set_projection(self, matrix: Any) -> None:
        self.projection = _matrix(matrix)

    def clear(self, color: Iterable[float]) -> None:
        """Fill the whole surface with an RGB colour given in 0..1."""
        self.surface.fill(_to_rgb(color))

    def _project(self, points: np.ndarray, model: Any) -> np.ndarray:
        mvp = self.projection @ self.view @ _matrix(model)
        homo = np.hstack([points, np.ones((len(points), 1))])
        clip = homo @ mvp.T
        ndc = clip[:, :3] / clip[:, 3:4]
        width, height = self.surface.get_size()
        out = np.empty_like(ndc)
        out[:, 0] = (ndc[:, 0] + 1.0) * 0.5 * width
        out[:, 1] = (1.0 - ndc[:, 1]) * 0.5 * height
        out[:, 2] = ndc[:, 2]
        return out

    def to_screen(self, point: Sequence[float], model: Any = None) -> tuple[float, float]:
        """Return the pixel position of a model-space point."""
        p = np.asarray(point, dtype=float).reshape(1, 3)
        projected = self._project(p, np.eye(4) if model is None else model)
        return float(projected[0, 0]), float(projected[0, 1])

    def draw_mesh(self, vertices: Any, indices: Sequence[int], model: Any) -> int:
        """Draw indexed triangles, each in the mean of its vertex colours.

        Returns the number of triangles drawn; triangles lying wholly beyond
        the near or far plane are skipped.
        """
        verts = np.asarray(vertices, dtype=float)
        if verts.ndim != 2 or verts.shape[1] < COLOR_OFFSET + 3:
            raise ValueError("vertices need position and colour columns")
        idx = list(indices)
        if len(idx) % 3:
            raise ValueError("index count must be a multiple of three")
        projected = self._project(verts[:, :3], model)
        drawn = 0
        for tri in zip(idx[0::3], idx[1::3], idx[2::3]):
            pts = projected[list(tri)]
            if np.all(pts[:, 2] < -1.0) or np.all(pts[:, 2] > 1.0):
                continue
            color = verts[list(tri), COLOR_OFFSET:COLOR_OFFSET + 3].mean(axis=0)
            pygame.draw.polygon(self.surface, _to_rgb(color), [(x, y) for x, y in pts[:, :2]])
            drawn += 1
        return drawn


def run(scene: Callable[[Renderer], Any], title: str = "",
        size: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT)) -> None:
    """Open a window, build the scene from its renderer and run it until closed.

    The scene object must provide ``update(dt)``, ``render()``,
    ``on_mouse_button(button, action, x, y)``,
    ``on_cursor_move(x, y, width, height)`` and ``on_key(key, action, shift)``,
    where ``key`` is the key's name such as ``"space"`` or ``"a"``.
    Escape closes the window.
    """
    pygame.init()
    try:
        surface = pygame.display.set_mode(size)
        pygame.display.set_caption(title)
        world = scene(Renderer(surface))
        last = time.perf_counter()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    if event.key == pygame.K_ESCAPE:
                        if event.type == pygame.KEYDOWN:
                            running = False
                        continue
                    action = Action.PRESS if event.type == pygame.KEYDOWN else Action.RELEASE
                    shift = bool(event.mod & pygame.KMOD_SHIFT)
                    world.on_key(pygame.key.name(event.key), action, shift)
                elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                    button = _PYGAME_BUTTONS.get(event.button)
                    if button is None:
                        continue
                    action = Action.PRESS if event.type == pygame.MOUSEBUTTONDOWN else Action.RELEASE
                    x, y = event.pos
                    world.on_mouse_button(button, action, x, y)
                elif event.type == pygame.MOUSEMOTION:
                    x, y = event.pos
                    width, height = surface.get_size()
                    world.on_cursor_move(x, y, width, height)
            now = time.perf_counter()
            world.update(now - last)
            last = now
            world.render()
            pygame.display.flip()
    finally:
        pygame.quit()