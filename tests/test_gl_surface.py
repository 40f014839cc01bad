import numpy as np
import pytest

from view.gl_surface import GLSurface, build_quad_vertices, hex_to_rgb


def test_hex_to_rgb():
    assert hex_to_rgb('#FFFFFF') == (1.0, 1.0, 1.0)
    assert hex_to_rgb('#000000') == (0.0, 0.0, 0.0)
    assert hex_to_rgb('#FF0000') == (1.0, 0.0, 0.0)


def test_build_quad_vertices_single_rect():
    data = build_quad_vertices([(10, 20, 5, 40, (1.0, 0.5, 0.0))])

    assert data.dtype == np.float32
    assert data.shape == (6, 5)
    assert data[:, 0].min() == 10 and data[:, 0].max() == 15
    assert data[:, 1].min() == 20 and data[:, 1].max() == 60
    np.testing.assert_allclose(data[:, 2:5], [[1.0, 0.5, 0.0]] * 6)


def test_build_quad_vertices_keeps_draw_order():
    data = build_quad_vertices(
        [(0, 0, 400, 300, (0.0, 0.0, 0.0)), (5, 5, 10, 10, (1.0, 1.0, 1.0))]
    )
    assert data.shape == (12, 5)
    assert (data[:6, 2:5] == 0.0).all()
    assert (data[6:, 2:5] == 1.0).all()


def test_build_quad_vertices_empty():
    assert build_quad_vertices([]).shape == (0, 5)


def test_surface_queues_until_cleared():
    surface = GLSurface(400, 300)
    surface.fill_rect(0, 0, 400, 300, '#000000')
    surface.fill_rect(1, 2, 10, 40, '#FFFFFF')
    assert surface.queued == 2
    surface.clear()
    assert surface.queued == 0
    assert (surface.width, surface.height) == (400, 300)


def test_fractional_positions_are_kept():
    data = build_quad_vertices([(0.5, 89.65, 10, 40, (1.0, 1.0, 1.0))])
    assert data[0, 1] == pytest.approx(89.65, rel=1e-6)
