"""
Smoke tests for matplotlib plotting.
"""

import pytest
import numpy as np

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from paramgeom.geometry.polynomial import PolynomialCurve, PolynomialSurface
from paramgeom.visualization.plot import plot_curve, plot_surface


@pytest.fixture(autouse=True)
def close_figures():
    import matplotlib.pyplot as plt
    yield
    plt.close('all')


class TestPlotCurve:
    """Tests for curve plots."""

    @pytest.mark.parametrize("coeffs", [
        [1.0, 2.0, 3.0],
        [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]],
        [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]],
    ])
    def test_plot_dimensions(self, coeffs):
        """Test 1D, 2D and 3D curves produce a figure."""
        fig = plot_curve(PolynomialCurve(coeffs), n_points=20, t_range=(-1.0, 1.0))
        assert fig is not None
        assert len(fig.axes) == 1

    def test_unsupported_dimension(self):
        """Test curves in more than 3D are rejected."""
        with pytest.raises(ValueError):
            plot_curve(PolynomialCurve(np.eye(4)), t_range=(0.0, 1.0))


class TestPlotSurface:
    """Tests for surface plots."""

    def test_save(self, tmp_path, capsys):
        """Test saving a surface plot with normals."""
        U = PolynomialCurve([[0.0, 1.0, 1.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
        V = PolynomialCurve([[1.0, 0.0, 1.0], [0.0, 1.0, 0.0]])
        path = tmp_path / "surface.png"

        plot_surface(PolynomialSurface(U, V), n_u=6, n_v=6,
                     u_range=(-1.0, 1.0), v_range=(-1.0, 1.0),
                     show_normals=True, save_path=str(path))

        assert path.exists()
        assert "Saved figure" in capsys.readouterr().out

    def test_degenerate_surface_plots(self):
        """Test degenerate normals are skipped instead of failing."""
        # S = (u², v, v²) has S_u = 0 along u = 0
        U = PolynomialCurve([[0.0, 1.0, 1.0], [0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
        V = PolynomialCurve([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
        fig = plot_surface(PolynomialSurface(U, V), n_u=5, n_v=4,
                           u_range=(-1.0, 1.0), v_range=(0.0, 1.0), show_normals=True)
        assert fig is not None

    def test_requires_3d(self):
        """Test 2D surfaces are rejected."""
        U = PolynomialCurve([[0.0, 1.0], [1.0, 0.0]])
        V = PolynomialCurve([[1.0, 0.0], [0.0, 1.0]])
        with pytest.raises(ValueError, match="needs a surface in 3D"):
            plot_surface(PolynomialSurface(U, V), u_range=(0.0, 1.0), v_range=(0.0, 1.0))
