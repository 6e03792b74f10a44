"""
Conformance checks for the evaluation contract.

Analytic derivatives reported by a primitive are compared against central
finite differences of the lower-order operation:

    der(t)   ~ (subs(t + h) - subs(t - h)) / 2h
    der2(t)  ~ (der(t + h)  - der(t - h))  / 2h

and likewise for the surface partials. The step is scaled with the
parameter magnitude, h * max(1, |t|), so that sampling far from zero
stays above rounding noise.

The error for one sample is |fd - analytic| / max(1, |analytic|).
"""

import numpy as np
from typing import Dict, Iterable, Optional, Tuple

from ..geometry.base import ParametricCurve, ParametricSurface


def _step(x: float, h: float) -> float:
    return h * max(1.0, abs(x))


def _rel_error(fd: np.ndarray, analytic: np.ndarray) -> float:
    return float(np.linalg.norm(fd - analytic) / max(1.0, np.linalg.norm(analytic)))


def curve_derivative_errors(curve: ParametricCurve,
                            params: Iterable[float],
                            h: float = 1e-5) -> Dict[str, float]:
    """
    Maximum relative error of der and der2 over the given parameters.

    Parameters:
        curve: Curve to check
        params: Parameter values to sample
        h: Relative finite-difference step

    Returns:
        {'der': max_error, 'der2': max_error}
    """
    errors = {'der': 0.0, 'der2': 0.0}

    for t in params:
        dt = _step(t, h)
        fd1 = (curve.subs(t + dt) - curve.subs(t - dt)) / (2.0 * dt)
        fd2 = (curve.der(t + dt) - curve.der(t - dt)) / (2.0 * dt)
        errors['der'] = max(errors['der'], _rel_error(fd1, curve.der(t)))
        errors['der2'] = max(errors['der2'], _rel_error(fd2, curve.der2(t)))

    return errors


def check_curve_derivatives(curve: ParametricCurve,
                            n_samples: int = 20,
                            rtol: float = 1e-4,
                            t_range: Optional[Tuple[float, float]] = None,
                            h: float = 1e-5,
                            seed: Optional[int] = None) -> bool:
    """
    Check der and der2 against finite differences at random parameters.

    Parameters:
        curve: Curve to check
        n_samples: Number of random parameters
        rtol: Allowed relative error
        t_range: Sampling interval, defaults to curve.parameter_range()
        h: Relative finite-difference step
        seed: Seed for the parameter generator

    Returns:
        True if every error is within rtol
    """
    if t_range is None:
        t_range = curve.parameter_range()
    rng = np.random.default_rng(seed)
    params = rng.uniform(t_range[0], t_range[1], n_samples)

    errors = curve_derivative_errors(curve, params, h)
    return all(err <= rtol for err in errors.values())


def surface_derivative_errors(surface: ParametricSurface,
                              params: Iterable[Tuple[float, float]],
                              h: float = 1e-5) -> Dict[str, float]:
    """
    Maximum relative error of all partial derivatives over (u, v) samples.

    Returns:
        Dict keyed by 'uder', 'vder', 'uuder', 'uvder', 'vvder'
    """
    errors = {name: 0.0 for name in ('uder', 'vder', 'uuder', 'uvder', 'vvder')}

    for u, v in params:
        du = _step(u, h)
        dv = _step(v, h)

        fd = {
            'uder': (surface.subs(u + du, v) - surface.subs(u - du, v)) / (2.0 * du),
            'vder': (surface.subs(u, v + dv) - surface.subs(u, v - dv)) / (2.0 * dv),
            'uuder': (surface.uder(u + du, v) - surface.uder(u - du, v)) / (2.0 * du),
            'uvder': (surface.uder(u, v + dv) - surface.uder(u, v - dv)) / (2.0 * dv),
            'vvder': (surface.vder(u, v + dv) - surface.vder(u, v - dv)) / (2.0 * dv),
        }
        analytic = {
            'uder': surface.uder(u, v),
            'vder': surface.vder(u, v),
            'uuder': surface.uuder(u, v),
            'uvder': surface.uvder(u, v),
            'vvder': surface.vvder(u, v),
        }

        for name in errors:
            errors[name] = max(errors[name], _rel_error(fd[name], analytic[name]))

    return errors


def check_surface_derivatives(surface: ParametricSurface,
                              n_samples: int = 20,
                              rtol: float = 1e-4,
                              u_range: Optional[Tuple[float, float]] = None,
                              v_range: Optional[Tuple[float, float]] = None,
                              h: float = 1e-5,
                              seed: Optional[int] = None) -> bool:
    """
    Check all partial derivatives against finite differences.

    Ranges default to surface.parameter_range().
    """
    if u_range is None or v_range is None:
        declared_u, declared_v = surface.parameter_range()
        u_range = declared_u if u_range is None else u_range
        v_range = declared_v if v_range is None else v_range

    rng = np.random.default_rng(seed)
    us = rng.uniform(u_range[0], u_range[1], n_samples)
    vs = rng.uniform(v_range[0], v_range[1], n_samples)

    errors = surface_derivative_errors(surface, zip(us, vs), h)
    return all(err <= rtol for err in errors.values())
