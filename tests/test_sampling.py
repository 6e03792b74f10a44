"""
Unit tests for grid sampling and conformance checks.
"""

import pytest
import numpy as np
from numpy.testing import assert_array_almost_equal, assert_array_equal

from paramgeom.geometry.base import ParametricCurve
from paramgeom.geometry.polynomial import PolynomialCurve, PolynomialSurface
from paramgeom.postprocess.sampling import sample_curve, sample_surface
from paramgeom.postprocess.verification import (
    curve_derivative_errors, check_curve_derivatives, surface_derivative_errors
)


class WrongDerivative(ParametricCurve):
    """t² with a deliberately wrong derivative (missing factor 2)."""

    def subs(self, t):
        return np.array([t * t])

    def der(self, t):
        return np.array([t])

    def der2(self, t):
        return np.array([2.0])

    def parameter_range(self):
        return (-10.0, 10.0)


class TestSampleCurve:
    """Tests for curve sampling."""

    def test_default_range(self):
        """Test samples span the declared domain."""
        curve = PolynomialCurve([[0.0, 1.0], [1.0, 0.0]])
        samples = sample_curve(curve, n_points=5)

        assert samples.n_points == 5
        assert_array_almost_equal(samples.params, [-100.0, -50.0, 0.0, 50.0, 100.0])
        assert_array_almost_equal(samples.points[:, 0], samples.params)
        assert_array_almost_equal(samples.points[:, 1], np.ones(5))

    def test_derivative_arrays(self):
        """Test derivative samples match the curve operations."""
        curve = PolynomialCurve([1.0, 2.0, 3.0])
        samples = sample_curve(curve, n_points=4, t_range=(0.0, 3.0))

        assert samples.points.shape == (4, 1)
        for k, t in enumerate(samples.params):
            assert_array_equal(samples.points[k], curve.subs(t))
            assert_array_equal(samples.first[k], curve.der(t))
            assert_array_equal(samples.second[k], curve.der2(t))

    def test_too_few_points(self):
        """Test that fewer than two samples are rejected."""
        with pytest.raises(ValueError):
            sample_curve(PolynomialCurve([1.0]), n_points=1)


class TestSampleSurface:
    """Tests for surface sampling."""

    def make_surface(self):
        U = PolynomialCurve([[0.0, 1.0, 1.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
        V = PolynomialCurve([[1.0, 0.0, 1.0], [0.0, 1.0, 0.0]])
        return PolynomialSurface(U, V)

    def test_grid_shape_and_points(self):
        """Test point grid layout is (n_u, n_v, d)."""
        surface = self.make_surface()
        samples = sample_surface(surface, n_u=4, n_v=3, u_range=(0.0, 1.0), v_range=(-1.0, 1.0))

        assert samples.shape == (4, 3)
        assert samples.points.shape == (4, 3, 3)
        assert samples.normals.shape == (4, 3, 3)
        for i, u in enumerate(samples.u):
            for j, v in enumerate(samples.v):
                assert_array_equal(samples.points[i, j], surface.subs(u, v))

    def test_normals_unit(self):
        """Test a regular surface has no degenerate samples."""
        samples = sample_surface(self.make_surface(), n_u=5, n_v=5)

        assert not samples.degenerate_mask().any()
        assert_array_almost_equal(np.linalg.norm(samples.normals, axis=-1), np.ones((5, 5)))

    def test_partial_range_override(self):
        """Test one range overrides while the other uses the declared domain."""
        samples = sample_surface(self.make_surface(), n_u=3, n_v=3, u_range=(0.0, 2.0))

        assert_array_almost_equal(samples.u, [0.0, 1.0, 2.0])
        assert_array_almost_equal(samples.v, [-100.0, 0.0, 100.0])

    def test_degenerate_mask(self):
        """Test degenerate normals are kept and flagged."""
        # Identical coordinates in U and V make S_u and S_v parallel everywhere
        U = PolynomialCurve([[1.0, 1.0, 1.0], [3.0, 3.0, 3.0], [2.0, 2.0, 2.0]])
        V = PolynomialCurve([[2.0, 2.0, 2.0], [-6.0, -6.0, -6.0], [4.0, 4.0, 4.0]])
        with np.errstate(invalid='ignore'):
            samples = sample_surface(PolynomialSurface(U, V), n_u=3, n_v=3,
                                     u_range=(0.0, 1.0), v_range=(0.0, 1.0))

        assert samples.degenerate_mask().all()
        assert np.isnan(samples.normals).any()

    def test_too_few_points(self):
        """Test grids need at least two samples per direction."""
        with pytest.raises(ValueError):
            sample_surface(self.make_surface(), n_u=1, n_v=5)

    def test_planar_surface(self):
        """Test a 2D surface samples points and has no normals."""
        # S(u, v) = (u, v)
        U = PolynomialCurve([[0.0, 1.0], [1.0, 0.0]])
        V = PolynomialCurve([[1.0, 0.0], [0.0, 1.0]])
        samples = sample_surface(PolynomialSurface(U, V), n_u=3, n_v=3,
                                 u_range=(0.0, 1.0), v_range=(0.0, 1.0))

        assert samples.points.shape == (3, 3, 2)
        assert_array_almost_equal(samples.points[2, 1], [1.0, 0.5])
        assert samples.normals is None
        assert samples.degenerate_mask().shape == (3, 3)
        assert samples.degenerate_mask().all()


class TestVerification:
    """Tests for the finite-difference checks themselves."""

    def test_detects_wrong_derivative(self):
        """Test a wrong der is reported."""
        errors = curve_derivative_errors(WrongDerivative(), [1.0, 2.0, 3.0])

        assert errors['der'] > 0.1
        assert not check_curve_derivatives(WrongDerivative(), seed=0)

    def test_polynomial_errors_small(self):
        """Test exact derivatives give errors near rounding level."""
        curve = PolynomialCurve([[1.0, -2.0], [0.5, 0.0], [0.0, 3.0]])
        errors = curve_derivative_errors(curve, np.linspace(-5.0, 5.0, 11))

        assert errors['der'] < 1e-6
        assert errors['der2'] < 1e-6

    def test_surface_error_keys(self):
        """Test all partial derivatives are reported."""
        U = PolynomialCurve([[1.0, 0.0, 1.0], [1.0, 1.0, 0.0]])
        V = PolynomialCurve([[0.0, 1.0, 1.0], [1.0, 0.0, 1.0]])
        errors = surface_derivative_errors(PolynomialSurface(U, V), [(0.5, 0.5)])

        assert set(errors) == {'uder', 'vder', 'uuder', 'uvder', 'vvder'}
        assert max(errors.values()) < 1e-6
