"""
Post-processing built on the evaluation contract.

Provides:
- Grid sampling of curves and surfaces (points, derivatives, normals)
- Finite-difference conformance checks for analytic derivatives
"""

from .sampling import CurveSamples, SurfaceSamples, sample_curve, sample_surface
from .verification import (
    curve_derivative_errors,
    check_curve_derivatives,
    surface_derivative_errors,
    check_surface_derivatives,
)
