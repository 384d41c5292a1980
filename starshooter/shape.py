"""Flat, coloured 2D shapes with a position, rotation, scale and parent transform."""

from __future__ import annotations

import math
from typing import Any, Iterable, Optional

import numpy as np

from .transform import COLOR_OFFSET, rotate, scale, translate


def _vec3(value: Iterable[float]) -> np.ndarray:
    arr = np.asarray(value, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError("expected three components")
    return arr


class Shape:
    """A mesh placed by translate * rotation * scale, optionally under a parent transform.

    Subclasses define ``VERTICES`` (rows of position, colour, normal and
    texture coordinates) and ``INDICES`` (triangle corners).
    """

    VERTICES: tuple[tuple[float, ...], ...] = ()
    INDICES: tuple[int, ...] = ()

    def __init__(self) -> None:
        self._points = np.array(self.VERTICES, dtype=float)
        self._renderer: Optional[Any] = None
        self._init_state()

    def _init_state(self) -> None:
        self._scale = np.ones(3)
        self._color = np.ones(3)
        self._pos = np.zeros(3)
        self._rot = np.zeros(3)
        self._rot_axis = 0
        self._dirty_rotation = self._dirty_scale = self._dirty_pos = False
        self._transform_pending = self._on_transform = False
        self._mx_scale = np.eye(4)
        self._mx_pos = np.eye(4)
        self._mx_rot_x = np.eye(4)
        self._mx_rot_y = np.eye(4)
        self._mx_rot_z = np.eye(4)
        self._mx_rotation = np.eye(4)
        self._mx_trs = np.eye(4)
        self._mx_transform = np.eye(4)
        self._mx_final = np.eye(4)

    @property
    def renderer(self) -> Optional[Any]:
        return self._renderer

    @property
    def vertices(self) -> np.ndarray:
        return self._points.copy()

    @property
    def indices(self) -> tuple[int, ...]:
        return tuple(self.INDICES)

    @property
    def color(self) -> np.ndarray:
        return self._color.copy()

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @property
    def pos(self) -> np.ndarray:
        return self._pos.copy()

    @property
    def rotation_angles(self) -> np.ndarray:
        """Rotation about x, y and z in radians."""
        return self._rot.copy()

    @property
    def model_matrix(self) -> np.ndarray:
        return self._mx_final.copy()

    def set_renderer(self, renderer: Any) -> None:
        self._renderer = renderer

    def draw(self) -> int:
        """Refresh the model matrix and draw through the renderer."""
        if self._renderer is None:
            raise RuntimeError("shape has no renderer")
        self.update_matrix()
        return self._renderer.draw_mesh(self._points, self.INDICES, self._mx_final)

    def reset(self) -> None:
        """Return position, rotation, scale and transform to their defaults."""
        self._init_state()

    def set_color(self, color: Iterable[float]) -> None:
        self._color = _vec3(color)
        self._points[:, COLOR_OFFSET:COLOR_OFFSET + 3] = self._color

    def set_scale(self, factors: Iterable[float]) -> None:
        self._scale = _vec3(factors)
        self._dirty_scale = True
        self._mx_scale = scale(self._scale)

    def set_pos(self, pos: Iterable[float]) -> None:
        self._pos = _vec3(pos)
        self._dirty_pos = True
        self._mx_pos = translate(self._pos)

    def set_rot_x(self, angle: float) -> None:
        """Rotate about x by ``angle`` degrees, replacing any other rotation."""
        self._rot[0] = math.radians(angle)
        self._rot_axis |= 1
        self._mx_rot_x = rotate(self._rot[0], (1.0, 0.0, 0.0))
        self._mx_rotation = self._mx_rot_x
        self._dirty_rotation = True

    def set_rot_y(self, angle: float) -> None:
        """Rotate about y by ``angle`` degrees, after any x rotation."""
        self._rot[1] = math.radians(angle)
        self._rot_axis |= 2
        self._mx_rot_y = rotate(self._rot[1], (0.0, 1.0, 0.0))
        if self._rot_axis & 1:
            self._mx_rotation = self._mx_rot_y @ self._mx_rot_x
        else:
            self._mx_rotation = self._mx_rot_y
        self._dirty_rotation = True

    def set_rot_z(self, angle: float) -> None:
        """Rotate about z by ``angle`` degrees, after any x and y rotations."""
        self._rot[2] = math.radians(angle)
        self._mx_rot_z = rotate(self._rot[2], (0.0, 0.0, 1.0))
        if self._rot_axis == 1:
            self._mx_rotation = self._mx_rot_z @ self._mx_rot_x
        elif self._rot_axis == 2:
            self._mx_rotation = self._mx_rot_z @ self._mx_rot_y
        elif self._rot_axis == 3:
            self._mx_rotation = self._mx_rot_z @ self._mx_rot_y @ self._mx_rot_x
        else:
            self._mx_rotation = self._mx_rot_z
        self._dirty_rotation = True

    def set_transform_matrix(self, matrix: Any) -> None:
        """Place the shape under a parent transform."""
        m = np.asarray(matrix, dtype=float)
        if m.shape != (4, 4):
            raise ValueError("matrix must be 4x4")
        self._mx_transform = m.copy()
        self._on_transform = self._transform_pending = True

    def update_matrix(self) -> None:
        """Rebuild the model matrix from whatever changed since the last call."""
        if self._dirty_scale or self._dirty_pos or self._dirty_rotation:
            self._mx_trs = self._mx_pos @ self._mx_rotation @ self._mx_scale
            if self._on_transform:
                self._mx_final = self._mx_transform @ self._mx_trs
            else:
                self._mx_final = self._mx_trs
            self._dirty_scale = self._dirty_pos = self._dirty_rotation = False
        if self._transform_pending:
            self._mx_final = self._mx_transform @ self._mx_trs
            self._transform_pending = False


class Quad(Shape):
    """Unit square centred on the origin."""

    VERTICES = (
        (-0.5, -0.5, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0),
        (0.5, -0.5, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0),
        (0.5, 0.5, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0),
        (-0.5, 0.5, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 1.0),
    )
    INDICES = (0, 1, 2, 2, 3, 0)


class Triangle(Shape):
    """Equilateral triangle of unit side centred on the origin."""

    VERTICES = (
        (0.0, 0.57735, 0.0, 1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.5, 1.0),
        (-0.5, -0.288675, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0),
        (0.5, -0.288675, 0.0, 1.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 0.0),
    )
    INDICES = (0, 1, 2)