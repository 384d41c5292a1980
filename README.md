# starshooter

A small vertical space shooter, plus four short demos of model transforms,
all drawn in a pygame window through an orthographic 2D projection.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The game

```
starshooter [--seed N]
```

`--seed` fixes the random layout and speeds of the starfield.

- **Space** starts (or pauses) the game and toggles mouse steering.
- While steering is on, the mouse's horizontal position moves the fighter
  left and right, and the ring of twelve shield blocks below it turns with it.
- While the game runs, moving the mouse fires a missile from the fighter's
  nose, at most one every 0.2 seconds. Missiles fly straight up and are
  dropped once they leave the top of the field.
- The fighter's two engine flames flicker while the game runs.
- **Right mouse button** switches the fighter to a larger layout, applied on
  the next frame of a running game.
- **Escape** quits.

Fifty stars scroll down the background at random speeds and wrap back to the
top at a random column while the game runs.

## What the game does not do

There are no enemies, no collisions, no score and no lives: the game is the
fighter, its shield ring, its missiles and the scrolling starfield.

## Demos

| Command                  | What it shows                                                     |
|--------------------------|-------------------------------------------------------------------|
| `starshooter-spin`       | A quad spinning at 180°/s; `s`/`l` scale it down/up, `x`/`y`/`z` set a 45° rotation, `r` resets the arcball |
| `starshooter-penta`      | A pentagon: Space makes it follow the mouse, left click (while following) toggles spinning, right click resets it, `s`/`l` scale it |
| `starshooter-shapes`     | A triangle, a quad and two pentagons: left click toggles spinning (triangle anticlockwise, quad clockwise), Space slides them sideways with the mouse, right click moves them to new spots, `s`/`l` scale the triangle |
| `starshooter-hierarchy`  | Parent–child quads: with Space on, the mouse's x turns the green quads about the red one and its y turns each blue quad about its green parent |

Every window closes with Escape.

## Using the pieces

The building blocks can be used on their own:

- `starshooter.transform` — `identity`, `translate`, `scale`, `rotate`,
  `ortho`, returning 4×4 numpy matrices for column vectors.
- `starshooter.arcball` — `Arcball` (quaternion rotation from left-button
  drags), `map_to_arcball`, `quat_multiply`, and the `MouseButton` and
  `Action` enums used by every scene.
- `starshooter.shape` — `Shape`, `Quad`, `Triangle`, with position, scale,
  x/y/z rotation in degrees and a parent transform (`set_transform_matrix`);
  `starshooter.penta.Penta` and `starshooter.trapezoid.Trapezoid` add two more
  outlines.
- `starshooter.render` — `Renderer` projects meshes onto a pygame surface;
  `run(scene, title, size)` opens a window and drives any scene object with
  `update`, `render`, `on_mouse_button`, `on_cursor_move` and `on_key`.
- `starshooter.missile.Missile`, `starshooter.star.Star`,
  `starshooter.player.Player` (with `shoot`, `update`, `set_scale`, `move_by`,
  `reset`) and `starshooter.player.PlayerShield` — the game objects.
- `starshooter.game` — `Game` and `circle_points`.