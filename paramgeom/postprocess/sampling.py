"""
Sampling of parametric curves and surfaces on regular grids.

This module evaluates any primitive that implements the curve or surface
contract on a uniform parameter grid, producing the points, derivatives
and normals that tessellators and renderers consume.

Key functions:
- sample_curve: Points and derivatives along a curve
- sample_surface: Points and normals over a (u, v) grid

Only the contract operations are used, so the same code works for every
primitive. Degenerate normals are kept in the output as NaN/non-unit
vectors; SurfaceSamples.degenerate_mask locates them.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional, Tuple

from ..geometry.base import ParametricCurve, ParametricSurface


@dataclass
class CurveSamples:
    """
    Curve evaluated at a sequence of parameter values.

    Attributes:
        params: Parameter values, shape (n,)
        points: Curve points, shape (n, d)
        first: First derivatives, shape (n, d)
        second: Second derivatives, shape (n, d)
    """
    params: np.ndarray
    points: np.ndarray
    first: np.ndarray
    second: np.ndarray

    @property
    def n_points(self) -> int:
        return len(self.params)


@dataclass
class SurfaceSamples:
    """
    Surface evaluated on a tensor grid of (u, v) values.

    Attributes:
        u: Parameter values in u, shape (n_u,)
        v: Parameter values in v, shape (n_v,)
        points: Surface points, shape (n_u, n_v, d)
        normals: Unit normals, shape (n_u, n_v, 3); NaN where degenerate.
                 None for surfaces outside 3D, which have no normal
    """
    u: np.ndarray
    v: np.ndarray
    points: np.ndarray
    normals: Optional[np.ndarray]

    @property
    def shape(self) -> Tuple[int, int]:
        return (len(self.u), len(self.v))

    def degenerate_mask(self, tol: float = 1e-8) -> np.ndarray:
        """
        Grid points where the normal is not a finite unit vector.

        Every grid point is flagged when the surface has no normals
        (points outside 3D).

        Parameters:
            tol: Allowed deviation of |n| from 1

        Returns:
            Boolean array of shape (n_u, n_v)
        """
        if self.normals is None:
            return np.ones(self.shape, dtype=bool)
        finite = np.all(np.isfinite(self.normals), axis=-1)
        lengths = np.linalg.norm(np.where(finite[..., np.newaxis], self.normals, 0.0), axis=-1)
        return ~finite | (np.abs(lengths - 1.0) > tol)


def _linspace(param_range: Tuple[float, float], n: int, name: str) -> np.ndarray:
    if n < 2:
        raise ValueError(f"{name} must be at least 2, got {n}")
    lo, hi = param_range
    return np.linspace(lo, hi, n)


def sample_curve(curve: ParametricCurve,
                 n_points: int = 50,
                 t_range: Optional[Tuple[float, float]] = None) -> CurveSamples:
    """
    Sample a curve on a uniform parameter grid.

    Parameters:
        curve: Any ParametricCurve
        n_points: Number of samples (>= 2)
        t_range: (t_min, t_max), defaults to curve.parameter_range()

    Returns:
        CurveSamples with points, first and second derivatives
    """
    if t_range is None:
        t_range = curve.parameter_range()
    params = _linspace(t_range, n_points, "n_points")

    points = np.array([curve.subs(t) for t in params])
    first = np.array([curve.der(t) for t in params])
    second = np.array([curve.der2(t) for t in params])

    return CurveSamples(params, points, first, second)


def sample_surface(surface: ParametricSurface,
                   n_u: int = 20,
                   n_v: int = 20,
                   u_range: Optional[Tuple[float, float]] = None,
                   v_range: Optional[Tuple[float, float]] = None) -> SurfaceSamples:
    """
    Sample a surface and its normals on a uniform (u, v) grid.

    Parameters:
        surface: Any ParametricSurface
        n_u, n_v: Number of samples per direction (>= 2)
        u_range, v_range: Parameter intervals; when omitted they are taken
                          from surface.parameter_range()

    Returns:
        SurfaceSamples with points of shape (n_u, n_v, d); normals are
        only computed for surfaces in 3D
    """
    if u_range is None or v_range is None:
        declared_u, declared_v = surface.parameter_range()
        u_range = declared_u if u_range is None else u_range
        v_range = declared_v if v_range is None else v_range

    u_vals = _linspace(u_range, n_u, "n_u")
    v_vals = _linspace(v_range, n_v, "n_v")

    points = np.array([[surface.subs(u, v) for v in v_vals] for u in u_vals])
    normals = None
    if points.shape[-1] == 3:
        normals = np.array([[surface.normal(u, v) for v in v_vals] for u in u_vals])

    return SurfaceSamples(u_vals, v_vals, points, normals)
