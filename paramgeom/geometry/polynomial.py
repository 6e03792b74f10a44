"""
Polynomial curves and tensor-product polynomial surfaces.

A polynomial curve is defined by an ordered sequence of vector
coefficients c_0, ..., c_n, where the index is the exponent:

    C(t) = sum_i c_i * t^i

Derivatives are computed in closed form from the coefficients:

    C'(t)  = sum_{i>=1} i * c_i * t^(i-1)
    C''(t) = sum_{i>=2} i * (i-1) * c_i * t^(i-2)

Each sum is accumulated in increasing index order with a running power
of t (1, t, t², ...) rather than by nested Horner evaluation. Both give
the same exact result; they differ only in floating-point rounding at
high degree or large |t|.

A polynomial surface pairs two such curves U and V and multiplies their
evaluated coordinates component-wise:

    S(u, v) = U(u) ⊙ V(v)

Every factor depends on one parameter only, so each partial derivative
differentiates exactly one factor (and the mixed partial both):

    S_u  = U'(u)  ⊙ V(v)       S_v  = U(u) ⊙ V'(v)
    S_uu = U''(u) ⊙ V(v)       S_vv = U(u) ⊙ V''(v)
    S_uv = U'(u)  ⊙ V'(v)

This is a deliberately simple construction (not a tensor-product spline
basis) and serves as the reference implementation of the evaluation
contract.
"""

import numpy as np
from typing import Optional, Sequence, Tuple, Union

from .base import ParametricCurve, ParametricSurface
from .euclidean import EuclideanSpace, cross, mul_element_wise, normalize


# Declared domain of polynomial curves. Polynomials are defined for every
# real t; this interval only bounds where consumers sample them.
DEFAULT_PARAMETER_RANGE = (-100.0, 100.0)

# Dimension of the zero curve when no coefficients and no dim are given
DEFAULT_DIM = 3


class PolynomialCurve(ParametricCurve):
    """
    Polynomial curve C(t) = sum_i c_i * t^i in d-dimensional space.

    The curve is immutable. Coefficients are stored as a read-only
    (n_coefficients, d) array; an empty sequence is the zero curve
    C(t) = origin.

    Attributes:
        coefficients: Copy of the coefficient array
        degree: Polynomial degree (-1 for the zero curve)
        dim: Dimension of the space the curve lives in
        space: EuclideanSpace of that dimension
    """

    def __init__(self,
                 coefficients: Union[Sequence, np.ndarray] = (),
                 dim: Optional[int] = None,
                 parameter_range: Tuple[float, float] = DEFAULT_PARAMETER_RANGE):
        """
        Initialize a polynomial curve.

        Parameters:
            coefficients: Array of shape (n, d), one vector per exponent.
                          A 1D array of scalars is read as a curve in 1D space.
            dim: Space dimension, required only to give the zero curve a
                 dimension other than 3
            parameter_range: Declared domain (t_min, t_max)
        """
        coeffs = np.array(coefficients, dtype=np.float64)

        if coeffs.ndim == 2:
            if coeffs.shape[1] == 0:
                raise ValueError(
                    f"Coefficient vectors must have at least one component, got shape {coeffs.shape}"
                )
        elif coeffs.size == 0:
            n_dim = DEFAULT_DIM if dim is None else int(dim)
            coeffs = np.zeros((0, n_dim))
        elif coeffs.ndim == 1:
            coeffs = coeffs.reshape(-1, 1)
        elif coeffs.ndim != 2:
            raise ValueError(
                f"Coefficients must be a sequence of vectors, got array of shape {coeffs.shape}"
            )

        if dim is not None and coeffs.shape[1] != dim:
            raise ValueError(
                f"Coefficient vectors have {coeffs.shape[1]} components "
                f"but dim={dim} was requested"
            )

        t_min, t_max = (float(x) for x in parameter_range)
        if t_min > t_max:
            raise ValueError(f"Invalid parameter range ({t_min}, {t_max})")

        coeffs.flags.writeable = False
        self._coefficients = coeffs
        self._space = EuclideanSpace(coeffs.shape[1])
        self._range = (t_min, t_max)

    @property
    def coefficients(self) -> np.ndarray:
        return self._coefficients.copy()

    @property
    def n_coefficients(self) -> int:
        return self._coefficients.shape[0]

    @property
    def degree(self) -> int:
        return self.n_coefficients - 1

    @property
    def dim(self) -> int:
        return self._space.dim

    @property
    def space(self) -> EuclideanSpace:
        return self._space

    def parameter_range(self) -> Tuple[float, float]:
        return self._range

    def subs(self, t: float) -> np.ndarray:
        """
        Evaluate curve at parameter value.

        Parameters:
            t: Parameter value

        Returns:
            Point coordinates as (d,) array
        """
        t = float(t)
        point = self._space.origin()
        s = 1.0
        for c in self._coefficients:
            point = point + c * s
            s *= t
        return point

    def der(self, t: float) -> np.ndarray:
        """First derivative at t; zero for degree < 1."""
        t = float(t)
        vec = self._space.zero()
        s = 1.0
        for i in range(1, self.n_coefficients):
            vec = vec + self._coefficients[i] * (s * i)
            s *= t
        return vec

    def der2(self, t: float) -> np.ndarray:
        """Second derivative at t; zero for degree < 2."""
        t = float(t)
        vec = self._space.zero()
        s = 1.0
        for i in range(2, self.n_coefficients):
            vec = vec + self._coefficients[i] * (s * i * (i - 1))
            s *= t
        return vec

    def derivative(self) -> "PolynomialCurve":
        """
        Derivative curve C'(t) as a new PolynomialCurve.

        The result has one coefficient less (none for degree < 1) and
        keeps the dimension and declared parameter range.
        """
        exponents = np.arange(1, self.n_coefficients, dtype=np.float64)
        coeffs = self._coefficients[1:] * exponents[:, np.newaxis]
        return PolynomialCurve(coeffs, dim=self.dim, parameter_range=self._range)

    def __eq__(self, other):
        if not isinstance(other, PolynomialCurve):
            return NotImplemented
        return (self._range == other._range
                and self._coefficients.shape == other._coefficients.shape
                and np.array_equal(self._coefficients, other._coefficients))

    __hash__ = None

    def __repr__(self):
        return (f"PolynomialCurve({self._coefficients.tolist()}, "
                f"dim={self.dim}, parameter_range={self._range})")


class PolynomialSurface(ParametricSurface):
    """
    Surface S(u, v) = U(u) ⊙ V(v) built from two polynomial curves.

    The two curves must live in the same space. All partial derivatives
    follow from the product rule; the normal is defined in 3D only.
    """

    def __init__(self, u_curve: PolynomialCurve, v_curve: PolynomialCurve):
        """
        Initialize a polynomial surface.

        Parameters:
            u_curve: Curve U supplying the u-dependence
            v_curve: Curve V supplying the v-dependence
        """
        if u_curve.dim != v_curve.dim:
            raise ValueError(
                f"Curves must share a dimension, got {u_curve.dim} and {v_curve.dim}"
            )
        self._u_curve = u_curve
        self._v_curve = v_curve

    @property
    def u_curve(self) -> PolynomialCurve:
        return self._u_curve

    @property
    def v_curve(self) -> PolynomialCurve:
        return self._v_curve

    @property
    def dim(self) -> int:
        return self._u_curve.dim

    @property
    def degrees(self) -> Tuple[int, int]:
        return (self._u_curve.degree, self._v_curve.degree)

    def parameter_range(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        return (self._u_curve.parameter_range(), self._v_curve.parameter_range())

    def subs(self, u: float, v: float) -> np.ndarray:
        return mul_element_wise(self._u_curve.subs(u), self._v_curve.subs(v))

    def uder(self, u: float, v: float) -> np.ndarray:
        return mul_element_wise(self._u_curve.der(u), self._v_curve.subs(v))

    def vder(self, u: float, v: float) -> np.ndarray:
        return mul_element_wise(self._u_curve.subs(u), self._v_curve.der(v))

    def uuder(self, u: float, v: float) -> np.ndarray:
        return mul_element_wise(self._u_curve.der2(u), self._v_curve.subs(v))

    def uvder(self, u: float, v: float) -> np.ndarray:
        return mul_element_wise(self._u_curve.der(u), self._v_curve.der(v))

    def vvder(self, u: float, v: float) -> np.ndarray:
        return mul_element_wise(self._u_curve.subs(u), self._v_curve.der2(v))

    def normal(self, u: float, v: float) -> np.ndarray:
        """
        Unit normal (S_u x S_v) / |S_u x S_v|.

        Where S_u and S_v are zero or parallel the cross product vanishes
        and the result is NaN. Only defined for surfaces in 3D.
        """
        return normalize(cross(self.uder(u, v), self.vder(u, v)))

    def __eq__(self, other):
        if not isinstance(other, PolynomialSurface):
            return NotImplemented
        return self._u_curve == other._u_curve and self._v_curve == other._v_curve

    __hash__ = None

    def __repr__(self):
        return f"PolynomialSurface({self._u_curve!r}, {self._v_curve!r})"
