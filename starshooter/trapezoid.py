"""Trapezoid shape, wider at the bottom than at the top."""

from __future__ import annotations

from .shape import Shape


class Trapezoid(Shape):
    """Trapezoid with a 1.6-wide base and a 1.0-wide top edge."""

    VERTICES = (
        (-0.8, -0.7, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0),
        (0.8, -0.7, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0),
        (0.5, 0.5, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0),
        (-0.5, 0.5, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 1.0),
    )
    INDICES = (0, 1, 2, 2, 3, 0)