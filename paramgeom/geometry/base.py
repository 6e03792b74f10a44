"""
Parametric geometry evaluation contract.

Every geometric primitive (polynomial, rational, spline, analytic surface)
reports its position and derivatives up to second order through one of the
two interfaces defined here. Tessellation, curvature estimation and
rendering code work purely through these interfaces and never through
primitive-specific code.

Conventions:
- Parameters are plain Python floats.
- Points and vectors are (d,) numpy arrays (see geometry.euclidean).
- Derivatives are analytic, never finite-difference estimates.
- Evaluation is a pure read: no state is kept between calls, so any
  number of evaluations may run concurrently on the same primitive.

Degeneracies are returned as ordinary values, not raised. A surface whose
first partials vanish or are parallel at (u, v) has no defined normal and
`normal(u, v)` returns a NaN/Inf vector there. Use
`geometry.euclidean.is_unit` to detect it.
"""

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np


class ParametricCurve(ABC):
    """
    Interface for curves C(t) mapping a real parameter to a point.

    Implementations must provide subs, der, der2 and parameter_range.
    """

    @abstractmethod
    def subs(self, t: float) -> np.ndarray:
        """Point on the curve at parameter t."""
        pass

    @abstractmethod
    def der(self, t: float) -> np.ndarray:
        """First derivative dC/dt at t."""
        pass

    @abstractmethod
    def der2(self, t: float) -> np.ndarray:
        """Second derivative d²C/dt² at t."""
        pass

    @abstractmethod
    def parameter_range(self) -> Tuple[float, float]:
        """
        Declared parameter domain (t_min, t_max).

        Advisory only: it tells consumers where the curve is meant to be
        sampled. Whether evaluating outside it is meaningful depends on
        the primitive.
        """
        pass

    def eval_derivatives(self, t: float, n_ders: int = 2) -> Tuple[np.ndarray, ...]:
        """
        Evaluate the curve and its derivatives at t.

        Parameters:
            t: Parameter value
            n_ders: Highest derivative order (0, 1 or 2)

        Returns:
            Tuple (C, dC/dt, d²C/dt²) truncated to n_ders + 1 entries
        """
        if not 0 <= n_ders <= 2:
            raise ValueError(f"n_ders must be 0, 1 or 2, got {n_ders}")
        result = [self.subs(t)]
        if n_ders >= 1:
            result.append(self.der(t))
        if n_ders >= 2:
            result.append(self.der2(t))
        return tuple(result)

    def __call__(self, t: float) -> np.ndarray:
        return self.subs(t)


class ParametricSurface(ABC):
    """
    Interface for surfaces S(u, v) mapping two real parameters to a point.

    Implementations provide the position, both first partials, the three
    second partials and the unit normal.
    """

    @abstractmethod
    def subs(self, u: float, v: float) -> np.ndarray:
        """Point on the surface at (u, v)."""
        pass

    @abstractmethod
    def uder(self, u: float, v: float) -> np.ndarray:
        """First partial dS/du."""
        pass

    @abstractmethod
    def vder(self, u: float, v: float) -> np.ndarray:
        """First partial dS/dv."""
        pass

    @abstractmethod
    def uuder(self, u: float, v: float) -> np.ndarray:
        """Second partial d²S/du²."""
        pass

    @abstractmethod
    def uvder(self, u: float, v: float) -> np.ndarray:
        """Mixed partial d²S/dudv."""
        pass

    @abstractmethod
    def vvder(self, u: float, v: float) -> np.ndarray:
        """Second partial d²S/dv²."""
        pass

    @abstractmethod
    def normal(self, u: float, v: float) -> np.ndarray:
        """
        Unit surface normal at (u, v).

        Not defined where the first partials vanish or are parallel; the
        returned vector is then non-unit and may contain NaN.
        """
        pass

    def parameter_range(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """Declared domain ((u_min, u_max), (v_min, v_max)), if the surface has one."""
        raise NotImplementedError(
            f"{type(self).__name__} does not declare a parameter range"
        )

    def eval_derivatives(self, uv: Tuple[float, float]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Evaluate surface point and first partials.

        Parameters:
            uv: Parameter values (u, v)

        Returns:
            Tuple (S, dS/du, dS/dv)
        """
        u, v = uv
        return (self.subs(u, v), self.uder(u, v), self.vder(u, v))

    def eval_second_derivatives(self, uv: Tuple[float, float]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Evaluate second partials.

        Returns:
            Tuple (d²S/du², d²S/dudv, d²S/dv²)
        """
        u, v = uv
        return (self.uuder(u, v), self.uvder(u, v), self.vvder(u, v))

    def __call__(self, u: float, v: float) -> np.ndarray:
        return self.subs(u, v)
