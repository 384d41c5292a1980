"""Mouse-driven arcball rotation."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Sequence

import numpy as np


class MouseButton(IntEnum):
    """Mouse buttons, numbered as the windowing layer reports them."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Action(IntEnum):
    """Press state of a key or button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


_IDENTITY_QUAT = (1.0, 0.0, 0.0, 0.0)


def map_to_arcball(screen_pos: Sequence[float], width: int, height: int) -> np.ndarray:
    """Map a window position onto the unit sphere (or its rim)."""
    sx, sy = screen_pos
    x = (2.0 * sx - width) / width
    y = (height - 2.0 * sy) / height
    z = 0.0
    length_sq = x * x + y * y
    if length_sq <= 1.0:
        z = math.sqrt(1.0 - length_sq)
    else:
        length = math.sqrt(length_sq)
        x /= length
        y /= length
    v = np.array([x, y, z])
    return v / np.linalg.norm(v)


def quat_multiply(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    """Hamilton product of two quaternions given as (w, x, y, z)."""
    aw, ax, ay, az = a
    bw, bx, by, bz = b
    return np.array([
        aw * bw - ax * bx - ay * by - az * bz,
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
    ])


class Arcball:
    """Accumulates a rotation from left-button mouse drags."""

    def __init__(self) -> None:
        self._dragging = False
        self._last_pos = (0.0, 0.0)
        self.rotation = np.array(_IDENTITY_QUAT)
        self.speed = 1.0

    @property
    def dragging(self) -> bool:
        return self._dragging

    def on_mouse_button(self, button: int, action: int, xpos: float, ypos: float) -> None:
        """Start or stop a drag on left-button press or release."""
        if button != MouseButton.LEFT:
            return
        if action == Action.PRESS:
            self._dragging = True
            self._last_pos = (float(xpos), float(ypos))
        elif action == Action.RELEASE:
            self._dragging = False

    def on_cursor_move(self, xpos: float, ypos: float, width: int, height: int) -> None:
        """Rotate by the arc between the last and current cursor positions."""
        if not self._dragging:
            return
        current = (float(xpos), float(ypos))
        va = map_to_arcball(self._last_pos, width, height)
        vb = map_to_arcball(current, width, height)
        dot = float(np.clip(np.dot(va, vb), -1.0, 1.0))
        angle = math.acos(dot) * self.speed
        axis = np.cross(va, vb)
        norm = float(np.linalg.norm(axis))
        if norm > 0.0001:
            axis = axis / norm
            half = angle * 0.5
            s = math.sin(half)
            step = (math.cos(half), s * axis[0], s * axis[1], s * axis[2])
            self.rotation = quat_multiply(step, self.rotation)
        self._last_pos = current

    def reset(self) -> None:
        """Drop the accumulated rotation."""
        self.rotation = np.array(_IDENTITY_QUAT)