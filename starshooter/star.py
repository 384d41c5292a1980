"""Background star that drifts down the screen and wraps back to the top."""

from __future__ import annotations

import random
from typing import Optional

import numpy as np

from .shape import Shape

DEFAULT_SPEED = 0.3
LOWER_BOUND = -10.0
UPPER_BOUND = 10.0
X_SPAN = 20


def random_column(rng: random.Random) -> float:
    """Return a whole-number x position in [-10, 9]."""
    return float(rng.randrange(X_SPAN) - X_SPAN // 2)


class Star(Shape):
    """A four-pointed star that scrolls downwards to give a sense of speed."""

    VERTICES = (
        (-0.5, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0),
        (-0.1, -0.1, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0),
        (0.0, -0.5, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0),
        (0.1, -0.1, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0),
        (0.5, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0),
        (0.1, 0.1, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0),
        (0.0, 0.5, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 1.0),
        (-0.1, 0.1, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 1.0),
    )
    INDICES = (0, 1, 7, 1, 2, 3, 3, 4, 5, 5, 6, 7, 7, 3, 5, 7, 1, 3)

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__()
        self.rng = rng if rng is not None else random.Random()
        self.speed = DEFAULT_SPEED
        self.flash_time = 0.0

    def update(self, dt: float) -> None:
        """Move down by ``speed * dt``; past the bottom, reappear at the top."""
        pos = self._pos.copy()
        pos[1] -= self.speed * dt
        if pos[1] < LOWER_BOUND:
            pos[1] = UPPER_BOUND
            pos[0] = random_column(self.rng)
        self.set_pos(pos)

    def randomize(self) -> None:
        """Place the star at a random whole-number spot of the field."""
        self.set_pos((random_column(self.rng), random_column(self.rng), 0.0))

    @property
    def position(self) -> np.ndarray:
        return self.pos