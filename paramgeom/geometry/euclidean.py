"""
Euclidean space algebra for parametric geometry.

Points and vectors are both represented as numpy arrays of shape (d,)
in a fixed Cartesian frame. A point is identified with its displacement
from the origin, so the affine operations reduce to array arithmetic:

    P - Q  -> vector
    P + v  -> point

This module provides:
- EuclideanSpace: the affine-space capability for a given dimension
- Vector-space helpers: element-wise product, norm, normalization, cross product

Normalization is a plain division by the Euclidean norm. A zero vector
normalizes to NaN, which is how degenerate surface normals show up.
"""

import numpy as np


class EuclideanSpace:
    """
    Affine Euclidean space of a fixed dimension.

    Bundles the point operations (origin, subtraction, translation) with
    the associated vector space (zero element). Instances are immutable
    and compare equal when their dimensions match.

    Attributes:
        dim: Number of coordinates of points and vectors
    """

    __slots__ = ("_dim",)

    def __init__(self, dim: int):
        dim = int(dim)
        if dim < 1:
            raise ValueError(f"Space dimension must be positive, got {dim}")
        self._dim = dim

    @property
    def dim(self) -> int:
        return self._dim

    def origin(self) -> np.ndarray:
        """Origin point."""
        return np.zeros(self._dim)

    def zero(self) -> np.ndarray:
        """Zero vector."""
        return np.zeros(self._dim)

    def subtract(self, p: np.ndarray, q: np.ndarray) -> np.ndarray:
        """Displacement vector from q to p."""
        return np.asarray(p, dtype=np.float64) - np.asarray(q, dtype=np.float64)

    def translate(self, p: np.ndarray, v: np.ndarray) -> np.ndarray:
        """Point p moved by vector v."""
        return np.asarray(p, dtype=np.float64) + np.asarray(v, dtype=np.float64)

    def to_vec(self, p: np.ndarray) -> np.ndarray:
        """Position vector of point p."""
        return self.subtract(p, self.origin())

    def from_vec(self, v: np.ndarray) -> np.ndarray:
        """Point at the tip of position vector v."""
        return self.translate(self.origin(), v)

    def contains(self, x: np.ndarray) -> bool:
        """Check that x has the shape of a point or vector of this space."""
        return np.shape(x) == (self._dim,)

    def __eq__(self, other):
        if not isinstance(other, EuclideanSpace):
            return NotImplemented
        return self._dim == other._dim

    def __hash__(self):
        return hash((EuclideanSpace, self._dim))

    def __repr__(self):
        return f"EuclideanSpace({self._dim})"


E3 = EuclideanSpace(3)


def mul_element_wise(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Hadamard (component-wise) product of two vectors."""
    return np.multiply(a, b)


def norm(v: np.ndarray) -> float:
    """Euclidean length of a vector."""
    return float(np.linalg.norm(v))


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Scale a vector to unit length.

    No special case for the zero vector: the result is NaN in every
    component (numpy reports the 0/0 as a RuntimeWarning).
    """
    v = np.asarray(v, dtype=np.float64)
    return v / np.linalg.norm(v)


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Cross product of two 3D vectors."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != (3,) or b.shape != (3,):
        raise ValueError(
            f"Cross product is defined for 3D vectors only, got shapes "
            f"{a.shape} and {b.shape}"
        )
    return np.cross(a, b)


def is_unit(v: np.ndarray, tol: float = 1e-10) -> bool:
    """True if v is finite and has unit length within tol."""
    v = np.asarray(v, dtype=np.float64)
    if not np.all(np.isfinite(v)):
        return False
    return bool(abs(np.linalg.norm(v) - 1.0) <= tol)
