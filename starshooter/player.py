"""The player's ship, built from simple shapes, and its orbiting shield."""

from __future__ import annotations

import math
from typing import Any, Iterable, Iterator, Optional

import numpy as np

from .missile import Missile
from .shape import Quad, Shape, Triangle, _vec3
from .transform import rotate, scale, translate
from .trapezoid import Trapezoid

PARTS = ("top", "body", "wings", "window", "bottom")

FIRE_RATE = 0.2
FIRE_ROT_Z = 180.0
FIRE_GROWTH = 0.05
FIRE_MAX_SCALE_Y = 0.30
FIRE_BASE_SCALE_Y = 0.25
FIRE_BASE_Y = -2.6

MISSILE_SPEED = 3.0
MISSILE_LAUNCH_OFFSET = (0.0, 0.5, 0.0)
MISSILE_COLOR = (0.5, 0.3, 0.3)
MISSILE_SCALE = (0.1, 0.1, 0.1)

SCALE_PIVOT = (0.0, -1.8, 0.0)


def _vectors(values: dict[str, Iterable[float]]) -> dict[str, np.ndarray]:
    return {name: np.array(v, dtype=float) for name, v in values.items()}


class Player:
    """A ship made of a nose, body, wings, window, tail and two flickering flames.

    Positions, scales and colours of the parts are kept in the ``positions``,
    ``scales`` and ``colors`` dictionaries keyed by part name (``"fire"`` for
    the flames' scale and colour); the two flame positions are in
    ``fire_positions``.
    """

    def __init__(self, renderer: Any) -> None:
        self.renderer = renderer
        self.missiles: list[Missile] = []
        self.fire_rate = FIRE_RATE
        self.fire_cooldown = 0.0
        self._pos = np.zeros(3)
        self._scale = np.ones(3)

        self.scales = _vectors({
            "top": (0.5, 0.5, 1.0),
            "body": (0.5, 0.7, 1.0),
            "wings": (1.0, 0.25, 1.0),
            "window": (0.15, 0.175, 1.0),
            "bottom": (0.9, 0.25, 1.0),
            "fire": (0.25, 0.25, 1.0),
        })
        self.colors = _vectors({
            "top": (0.25, 0.28, 1.0),
            "body": (0.25, 0.25, 0.25),
            "wings": (0.25, 0.25, 0.25),
            "window": (0.25, 0.28, 1.0),
            "bottom": (0.25, 0.25, 0.25),
            "fire": (0.8, 0.25, 0.0),
        })
        self.positions = _vectors({
            "top": (0.0, -1.3, 0.0),
            "body": (0.0, -1.8, 0.0),
            "wings": (0.0, -1.8, 0.0),
            "window": (0.0, -1.8, 0.0),
            "bottom": (0.0, -2.4, 0.0),
        })
        self.fire_positions = [np.array((-0.16, FIRE_BASE_Y, 0.0)),
                               np.array((0.16, FIRE_BASE_Y, 0.0))]

        self.parts: dict[str, Shape] = {
            "top": Triangle(),
            "body": Trapezoid(),
            "wings": Trapezoid(),
            "window": Trapezoid(),
            "bottom": Triangle(),
        }
        self.fire: tuple[Triangle, Triangle] = (Triangle(), Triangle())

        for name, part in self.parts.items():
            part.set_renderer(renderer)
            part.set_pos(self.positions[name])
            part.set_color(self.colors[name])
            part.set_scale(self.scales[name])
        for flame, fpos in zip(self.fire, self.fire_positions):
            flame.set_renderer(renderer)
            flame.set_color(self.colors["fire"])
            flame.set_scale(self.scales["fire"])
            flame.set_pos(fpos)
            flame.set_rot_z(FIRE_ROT_Z)

    def _shapes(self) -> Iterator[Shape]:
        yield from self.parts.values()
        yield from self.fire

    @property
    def position(self) -> np.ndarray:
        """Centre of the ship's body, including any parent translation."""
        return self._pos + self.positions["body"]

    @property
    def offset(self) -> np.ndarray:
        """Translation taken from the last parent transform."""
        return self._pos.copy()

    @property
    def scale(self) -> np.ndarray:
        """Axis scale factors taken from the last parent transform."""
        return self._scale.copy()

    def update(self, dt: float) -> None:
        """Advance missiles, drop those gone off screen and animate the flames."""
        self.fire_cooldown -= dt
        for missile in self.missiles:
            missile.update(dt)
        self.missiles[:] = [m for m in self.missiles if not m.is_out_of_bounds()]

        step = FIRE_GROWTH * dt
        fire_scale = self.scales["fire"].copy()
        fire_scale[1] += step
        self.fire_positions = [p - np.array((0.0, step, 0.0)) for p in self.fire_positions]
        if fire_scale[1] > FIRE_MAX_SCALE_Y:
            fire_scale[1] = FIRE_BASE_SCALE_Y
            self.fire_positions = [np.array((p[0], FIRE_BASE_Y, p[2]))
                                   for p in self.fire_positions]
        self.scales["fire"] = fire_scale
        self.sync_parts()

    def draw(self) -> int:
        """Draw every part and every missile; return the triangles drawn."""
        total = sum(shape.draw() for shape in self._shapes())
        return total + sum(missile.draw() for missile in self.missiles)

    def shoot(self) -> Optional[Missile]:
        """Launch a missile from the nose unless the gun is still cooling down."""
        if self.fire_cooldown > 0.0:
            return None
        origin = self.positions["top"] + self._pos + np.array(MISSILE_LAUNCH_OFFSET)
        missile = Missile(origin, MISSILE_SPEED)
        missile.set_renderer(self.renderer)
        missile.set_color(MISSILE_COLOR)
        missile.set_scale(MISSILE_SCALE)
        self.missiles.append(missile)
        self.fire_cooldown = self.fire_rate
        return missile

    def print_missiles(self) -> None:
        """Print the position of every missile in flight."""
        for missile in self.missiles:
            x, y, z = missile.pos
            print(f"Missile position: ({x:g}, {y:g}, {z:g})")

    def set_color(self, top: Iterable[float], body: Iterable[float],
                  wings: Iterable[float], window: Iterable[float],
                  bottom: Iterable[float], fire: Iterable[float]) -> None:
        """Recolour each part of the ship."""
        given = {"top": top, "body": body, "wings": wings,
                 "window": window, "bottom": bottom, "fire": fire}
        self.colors = {name: _vec3(c).copy() for name, c in given.items()}
        for name, part in self.parts.items():
            part.set_color(self.colors[name])
        for flame in self.fire:
            flame.set_color(self.colors["fire"])

    def sync_parts(self) -> None:
        """Push the stored positions and scales onto the parts."""
        for name, part in self.parts.items():
            part.set_pos(self.positions[name])
            part.set_scale(self.scales[name])
        for flame, fpos in zip(self.fire, self.fire_positions):
            flame.set_pos(fpos)
            flame.set_scale(self.scales["fire"])

    def set_scale(self, factors: Iterable[float]) -> None:
        """Scale the whole ship through a parent transform about the body pivot."""
        s = _vec3(factors)
        pivot = np.array(SCALE_PIVOT)
        model = translate(pivot * s) @ scale(s) @ translate(-pivot)
        self.set_transform_matrix(model)

    def move_by(self, offset: Iterable[float]) -> None:
        """Shift every part by ``offset``."""
        off = _vec3(offset)
        self.positions = {name: p + off for name, p in self.positions.items()}
        self.fire_positions = [p + off for p in self.fire_positions]
        for name, part in self.parts.items():
            part.set_pos(self.positions[name])
        for flame, fpos in zip(self.fire, self.fire_positions):
            flame.set_pos(fpos)

    def set_transform_matrix(self, matrix: Any) -> None:
        """Place the whole ship under a parent transform."""
        m = np.asarray(matrix, dtype=float)
        if m.shape != (4, 4):
            raise ValueError("matrix must be 4x4")
        for shape in self._shapes():
            shape.set_transform_matrix(m)
        self._pos = m[:3, 3].copy()
        self._scale = np.linalg.norm(m[:3, :3], axis=0)

    def reset(self) -> None:
        """Restore the large layout; applied to the parts on the next update."""
        self.scales = _vectors({
            "top": (1.0, 1.0, 1.0),
            "body": (1.0, 1.4, 1.0),
            "wings": (2.0, 0.5, 1.0),
            "window": (2.0, 0.5, 1.0),
            "bottom": (1.8, 0.5, 1.0),
            "fire": (0.5, 0.5, 1.0),
        })
        self.colors = _vectors({
            "top": (0.25, 0.28, 1.0),
            "body": (0.25, 0.25, 0.25),
            "wings": (0.25, 0.25, 0.25),
            "window": (0.25, 0.25, 0.25),
            "bottom": (0.25, 0.25, 0.25),
            "fire": (0.8, 0.25, 0.0),
        })
        self.positions = _vectors({
            "top": (0.0, -0.85, 0.0),
            "body": (0.0, -1.8, 0.0),
            "wings": (0.0, -1.8, 0.0),
            "window": (0.0, -1.8, 0.0),
            "bottom": (0.0, -2.9, 0.0),
        })
        self.fire_positions = [np.array((-0.35, -3.2, 0.0)),
                               np.array((0.35, -3.2, 0.0))]


class PlayerShield(Player):
    """A ship carrying a shield quad that swings with a horizontal offset."""

    SHIELD_COLOR = (0.2, 0.5, 0.1)
    SHIELD_SCALE = (0.1, 0.1, 0.0)
    SHIELD_LIFT = (0.0, -2.0, 1.0)

    def __init__(self, renderer: Any, target: Optional[Player] = None,
                 dx: float = 0.0, radius: float = 0.0) -> None:
        super().__init__(renderer)
        self.target = target
        self.dx = float(dx)
        self.radius = float(radius)
        self.shield = Quad()
        self.shield.set_renderer(renderer)
        self.shield.set_pos(self.position)
        self.shield.set_color(self.SHIELD_COLOR)
        self.shield.set_scale(self.SHIELD_SCALE)

    def update(self) -> Optional[np.ndarray]:  # type: ignore[override]
        """Swing the shield by ``dx``; return its parent transform, if any."""
        if self.target is None:
            return None
        x_angle = 3.1415916 * self.dx / 2.0
        mx_move = translate((self.dx, 0.0, 0.0))
        mx_rot = rotate(x_angle, (0.0, 0.0, 1.0))
        mx_lift = translate(self.SHIELD_LIFT)
        transform = mx_move @ mx_lift @ mx_rot
        self.shield.set_transform_matrix(transform)
        return transform

    def draw(self) -> int:
        """Draw the ship and its shield; return the triangles drawn."""
        return super().draw() + self.shield.draw()


__all__ = ["Player", "PlayerShield", "PARTS"]

# keep math imported for angle helpers used by callers
_ = math