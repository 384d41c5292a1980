"""Regular pentagon shape."""

from __future__ import annotations

from .shape import Shape


class Penta(Shape):
    """Regular pentagon of unit side centred on the origin."""

    VERTICES = (
        (0.0, 0.85065, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.5, 1.0),
        (0.808, 0.262, 0.0, 1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.975, 0.654),
        (0.5, -0.68819, 0.0, 1.0, 0.0, 1.0, 0.0, 0.0, 1.0, 0.794, 0.096),
        (-0.5, -0.68819, 0.0, 1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.206, 0.096),
        (-0.808, 0.262, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.025, 0.654),
    )
    INDICES = (0, 1, 2, 0, 2, 3, 0, 3, 4)