"""
paramgeom - Parametric geometry evaluation

A uniform evaluation contract for parametric curves and surfaces:
position plus analytic first and second derivatives at a parameter
value, and the unit normal for surfaces. Tessellation, curvature
estimation and rendering code is written against this contract only.

Key modules:
- geometry: Contract interfaces, Euclidean algebra, polynomial primitives
- postprocess: Grid sampling and derivative conformance checks
- visualization: matplotlib plots of curves and surfaces

Quick start:
    from paramgeom.geometry import PolynomialCurve, PolynomialSurface

    # 1 + 2t + 3t²
    curve = PolynomialCurve([1.0, 2.0, 3.0])
    curve.subs(2.0)   # [17.]
    curve.der(2.0)    # [14.]
    curve.der2(2.0)   # [6.]

    # (2u² + 3u + 1)(4v² - 6v + 2) in every coordinate
    U = PolynomialCurve([[1, 1, 1], [3, 3, 3], [2, 2, 2]])
    V = PolynomialCurve([[2, 2, 2], [-6, -6, -6], [4, 4, 4]])
    surface = PolynomialSurface(U, V)
    surface.subs(0.0, 0.0)   # [2. 2. 2.]
    surface.uder(0.0, 0.0)   # [6. 6. 6.]
"""

__version__ = "0.1.0"

# Core imports for convenience
from .geometry.base import ParametricCurve, ParametricSurface
from .geometry.euclidean import EuclideanSpace, E3
from .geometry.polynomial import PolynomialCurve, PolynomialSurface, DEFAULT_PARAMETER_RANGE
from .postprocess.sampling import sample_curve, sample_surface
from .postprocess.verification import check_curve_derivatives, check_surface_derivatives
