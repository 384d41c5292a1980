"""Missile that flies straight up the screen."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from .shape import Shape, _vec3

DEFAULT_SPEED = 0.1
UPPER_BOUND = 8.0


class Missile(Shape):
    """An arrow-headed projectile moving along +y at a fixed speed."""

    VERTICES = (
        (-0.5, -0.5, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0),
        (0.5, -0.5, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0),
        (0.5, 0.5, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0),
        (0.0, 0.75, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0),
        (-0.5, 0.5, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 1.0),
    )
    INDICES = (0, 1, 2, 2, 4, 0, 2, 3, 4)

    def __init__(self, pos: Optional[Iterable[float]] = None,
                 speed: float = DEFAULT_SPEED) -> None:
        super().__init__()
        self.speed = float(speed)
        if pos is not None:
            # The model matrix follows on the first update.
            self._pos = _vec3(pos)

    def update(self, dt: float) -> None:
        """Advance upwards by ``speed * dt``."""
        self.set_pos(self._pos + np.array([0.0, self.speed * dt, 0.0]))

    def reset(self) -> None:
        """Restore the default placement and speed."""
        super().reset()
        self.speed = DEFAULT_SPEED

    def is_out_of_bounds(self) -> bool:
        """True once the missile has passed the top of the play field."""
        return bool(self._pos[1] > UPPER_BOUND)