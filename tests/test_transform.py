import math

import numpy as np
import pytest

from starshooter.transform import identity, ortho, rotate, scale, translate


def _apply(matrix, point):
    return (matrix @ np.array([*point, 1.0]))[:3]


def test_identity_leaves_points_alone():
    point = (3.0, -2.0, 0.5)
    assert np.allclose(_apply(identity(), point), point)


def test_translate_moves_point_by_offset():
    offset = (1.5, -2.0, 0.25)
    moved = _apply(translate(offset), (0.0, 0.0, 0.0))
    assert np.allclose(moved, offset)


def test_translate_then_inverse_is_identity():
    offset = np.array([0.3, 0.7, -1.1])
    assert np.allclose(translate(offset) @ translate(-offset), identity())


def test_scale_diagonal_matches_factors():
    factors = (2.0, 0.5, 3.0)
    m = scale(factors)
    assert np.allclose(np.diag(m)[:3], factors)
    assert m[3, 3] == 1.0


def test_rotate_z_quarter_turn():
    m = rotate(math.pi / 2, (0.0, 0.0, 1.0))
    assert np.allclose(_apply(m, (1.0, 0.0, 0.0)), (0.0, 1.0, 0.0))


def test_rotation_is_orthonormal():
    m = rotate(0.83, (1.0, 2.0, -0.5))[:3, :3]
    assert np.allclose(m @ m.T, np.eye(3))
    assert math.isclose(np.linalg.det(m), 1.0)


def test_rotation_inverse_angle_cancels():
    axis = (0.2, -0.4, 1.0)
    assert np.allclose(rotate(1.2, axis) @ rotate(-1.2, axis), identity())


def test_rotation_axis_is_normalised():
    assert np.allclose(rotate(0.5, (0.0, 0.0, 5.0)), rotate(0.5, (0.0, 0.0, 1.0)))


def test_rotate_zero_axis_raises():
    with pytest.raises(ValueError):
        rotate(1.0, (0.0, 0.0, 0.0))


def test_translate_wrong_size_raises():
    with pytest.raises(ValueError):
        translate((1.0, 2.0))


def test_ortho_maps_corner_to_unit_cube():
    m = ortho(-2.0, 2.0, -2.0, 2.0, -2.0, 2.0)
    assert np.allclose(_apply(m, (2.0, 2.0, 2.0)), (1.0, 1.0, -1.0))


def test_ortho_maps_centre_to_origin():
    m = ortho(-4.0, 4.0, -4.0, 4.0, -2.0, 2.0)
    assert np.allclose(_apply(m, (0.0, 0.0, 0.0)), (0.0, 0.0, 0.0))


def test_ortho_degenerate_raises():
    with pytest.raises(ValueError):
        ortho(1.0, 1.0, -1.0, 1.0, -1.0, 1.0)