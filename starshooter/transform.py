"""4x4 transformation matrices acting on column vectors."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

VTX_OFFSET = 0
COLOR_OFFSET = 3
NORMAL_OFFSET = 6
TEXCOORD_OFFSET = 9
VTX_ATTR_COUNT = 11

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 800


def _vec3(value: Iterable[float], name: str) -> np.ndarray:
    arr = np.asarray(value, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have exactly three components")
    return arr


def identity() -> np.ndarray:
    """Return the 4x4 identity matrix."""
    return np.eye(4)


def translate(offset: Iterable[float]) -> np.ndarray:
    """Return a matrix that moves points by ``offset``."""
    m = np.eye(4)
    m[:3, 3] = _vec3(offset, "offset")
    return m


def scale(factors: Iterable[float]) -> np.ndarray:
    """Return a matrix that scales points along x, y and z."""
    return np.diag([*_vec3(factors, "factors"), 1.0])


def rotate(angle: float, axis: Iterable[float]) -> np.ndarray:
    """Return a matrix rotating by ``angle`` radians about ``axis``."""
    a = _vec3(axis, "axis")
    length = float(np.linalg.norm(a))
    if length == 0.0:
        raise ValueError("rotation axis must not be the zero vector")
    x, y, z = a / length
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    m = np.eye(4)
    m[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return m


def ortho(left: float, right: float, bottom: float, top: float,
          near: float, far: float) -> np.ndarray:
    """Return an orthographic projection onto normalised device coordinates."""
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic volume must have non-zero extent")
    m = np.eye(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m