"""
Geometry module: evaluation contract and reference primitives.
"""

from .base import ParametricCurve, ParametricSurface
from .euclidean import (
    EuclideanSpace,
    E3,
    mul_element_wise,
    norm,
    normalize,
    cross,
    is_unit,
)
from .polynomial import PolynomialCurve, PolynomialSurface, DEFAULT_PARAMETER_RANGE
