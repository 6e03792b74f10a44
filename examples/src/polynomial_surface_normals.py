#!/usr/bin/env python3
"""
Example: Sampling a polynomial surface and its normals.

This example walks through the evaluation contract:
1. Build two polynomial curves and their product surface
2. Check the analytic derivatives against finite differences
3. Sample points and unit normals on a (u, v) grid
4. Report degenerate normals and optionally plot the surface

Surface:
    U(u) = (u, 1, 2u² + 3u + 1)
    V(v) = (1, v, 4v² - 6v + 2)
    S(u, v) = U(u) ⊙ V(v) = (u, v, (2u² + 3u + 1)(4v² - 6v + 2))

Usage:
    ./examples/src/polynomial_surface_normals.py --plot
"""

import numpy as np
import sys
from pathlib import Path

# Add project root to path (two levels up from examples/src/)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from paramgeom.geometry.polynomial import PolynomialCurve, PolynomialSurface
from paramgeom.postprocess.sampling import sample_surface
from paramgeom.postprocess.verification import check_curve_derivatives, check_surface_derivatives


def run(n_samples: int = 21,
        extent: float = 2.0,
        plot: bool = False,
        verbose: bool = True):
    """
    Run the surface sampling example.

    Parameters:
        n_samples: Number of grid points per direction
        extent: Sample on [-extent, extent]²
        plot: Save a plot of the surface with normals
        verbose: Print progress information

    Returns:
        Dictionary with the surface, samples and number of degenerate normals
    """
    if verbose:
        print("=" * 60)
        print("Polynomial Surface Sampling Example")
        print("=" * 60)
        print(f"Grid: {n_samples} x {n_samples} on [{-extent}, {extent}]^2")
        print()

    # ==========================================================================
    # 1. Create geometry
    # ==========================================================================
    U = PolynomialCurve([[0.0, 1.0, 1.0],
                         [1.0, 0.0, 3.0],
                         [0.0, 0.0, 2.0]])
    V = PolynomialCurve([[1.0, 0.0, 2.0],
                         [0.0, 1.0, -6.0],
                         [0.0, 0.0, 4.0]])
    surface = PolynomialSurface(U, V)

    if verbose:
        print(f"  Degrees: {surface.degrees}")
        print(f"  S(0, 0)   = {surface.subs(0.0, 0.0)}")
        print(f"  S_u(0, 0) = {surface.uder(0.0, 0.0)}")
        print(f"  S_v(0, 0) = {surface.vder(0.0, 0.0)}")
        print()

    # ==========================================================================
    # 2. Verify derivatives
    # ==========================================================================
    span = (-extent, extent)
    curves_ok = all(check_curve_derivatives(c, t_range=span, seed=0) for c in (U, V))
    surface_ok = check_surface_derivatives(surface, u_range=span, v_range=span, seed=0)

    if verbose:
        print(f"  Curve derivatives consistent:   {curves_ok}")
        print(f"  Surface derivatives consistent: {surface_ok}")
        print()

    # ==========================================================================
    # 3. Sample points and normals
    # ==========================================================================
    with np.errstate(invalid='ignore', divide='ignore'):
        samples = sample_surface(surface, n_samples, n_samples, u_range=span, v_range=span)

    degenerate = samples.degenerate_mask()
    n_degenerate = int(np.count_nonzero(degenerate))

    if verbose:
        print(f"  Sampled points: {samples.points.shape}")
        print(f"  Degenerate normals: {n_degenerate}")
        for i, j in zip(*np.nonzero(degenerate)):
            print(f"    (u, v) = ({samples.u[i]:.3f}, {samples.v[j]:.3f})")
        print()

    # ==========================================================================
    # 4. Plot
    # ==========================================================================
    if plot:
        from paramgeom.visualization.plot import plot_surface
        plot_surface(surface, n_samples, n_samples, u_range=span, v_range=span,
                     show_normals=True, normal_length=0.3,
                     save_path="polynomial_surface.png")

    return {
        'surface': surface,
        'samples': samples,
        'n_degenerate': n_degenerate,
        'derivatives_ok': curves_ok and surface_ok,
    }


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Polynomial surface sampling example")
    parser.add_argument("--samples", "-n", type=int, default=21,
                        help="Grid points per direction (default: 21)")
    parser.add_argument("--extent", "-e", type=float, default=2.0,
                        help="Half-width of the sampled square (default: 2.0)")
    parser.add_argument("--plot", action="store_true",
                        help="Save a plot of the surface with normals")

    args = parser.parse_args()

    run(n_samples=args.samples, extent=args.extent, plot=args.plot)
