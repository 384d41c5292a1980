import numpy as np
import pytest

from starshooter.trapezoid import Trapezoid


class _RecordingRenderer:
    def __init__(self):
        self.calls = []

    def draw_mesh(self, vertices, indices, model):
        self.calls.append((np.array(vertices), tuple(indices), np.array(model)))
        return len(tuple(indices)) // 3


def test_mesh_layout():
    trap = Trapezoid()
    assert trap.vertices.shape == (4, 11)
    assert trap.indices == (0, 1, 2, 2, 3, 0)


def test_base_wider_than_top():
    verts = Trapezoid().vertices
    base = verts[1, 0] - verts[0, 0]
    top = verts[2, 0] - verts[3, 0]
    assert base > top
    assert verts[0, 1] == pytest.approx(-0.7)
    assert verts[2, 1] == pytest.approx(0.5)


def test_set_color_fills_every_vertex():
    trap = Trapezoid()
    trap.set_color((0.25, 0.25, 0.25))
    assert np.allclose(trap.vertices[:, 3:6], 0.25)
    assert np.allclose(trap.color, [0.25, 0.25, 0.25])


def test_position_reaches_model_matrix():
    trap = Trapezoid()
    trap.set_pos((0.0, -1.8, 0.0))
    trap.update_matrix()
    assert np.allclose(trap.model_matrix[:3, 3], trap.pos)


def test_draw_passes_mesh_to_renderer():
    trap = Trapezoid()
    renderer = _RecordingRenderer()
    trap.set_renderer(renderer)
    trap.set_pos((1.0, 2.0, 0.0))
    drawn = trap.draw()
    assert drawn == 2
    verts, idx, model = renderer.calls[0]
    assert idx == trap.indices
    assert np.allclose(verts, trap.vertices)
    assert np.allclose(model, trap.model_matrix)


def test_draw_without_renderer_raises():
    with pytest.raises(RuntimeError):
        Trapezoid().draw()


def test_bad_scale_rejected():
    with pytest.raises(ValueError):
        Trapezoid().set_scale((1.0, 2.0))