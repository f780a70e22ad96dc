import numpy as np
import pytest

from renderkit.grid import GridParameters, grid_color


def test_default_parameters():
    p = GridParameters()
    assert p.size == 100.0
    assert p.cell_size == 0.025
    assert p.color_thin == (0.5, 0.5, 0.5, 1.0)
    assert p.color_thick == (0.0, 0.0, 0.0, 1.0)
    assert p.min_pixels_between_cells == 2.0


def test_origin_is_on_thick_line():
    p = GridParameters()
    c = grid_color((0.0, 0.0), (0.0, 0.0), (1e-4, 1e-4), p)
    assert np.allclose(c, p.color_thick)


def test_between_lines_is_transparent_thin():
    p = GridParameters()
    c = grid_color((p.cell_size / 2, p.cell_size / 2), (0.0, 0.0), (1e-4, 1e-4), p)
    assert np.allclose(c[:3], p.color_thin[:3])
    assert c[3] == pytest.approx(0.0)


def test_beyond_grid_size_fades_out():
    p = GridParameters()
    c = grid_color((0.0, 0.0), (p.size * 2, 0.0), (1e-4, 1e-4), p)
    assert c[3] == pytest.approx(0.0)


@pytest.mark.parametrize("uv", [(0.013, 0.7), (3.21, -4.5), (-12.0, 0.001), (50.0, 50.0)])
@pytest.mark.parametrize("d", [1e-4, 3e-3, 0.05])
def test_alpha_stays_in_unit_range(uv, d):
    c = grid_color(uv, (1.0, -2.0), (d, d * 1.5))
    assert 0.0 <= c[3] <= 1.0
    assert np.all((c[:3] >= 0.0) & (c[:3] <= 0.5))


def test_nonpositive_derivative_raises():
    with pytest.raises(ValueError):
        grid_color((0.0, 0.0), (0.0, 0.0), (0.0, 1e-3))