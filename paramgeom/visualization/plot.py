"""
Quick-look plots of parametric curves and surfaces.

The sampling is done through postprocess.sampling, so any primitive that
implements the evaluation contract can be plotted. matplotlib is imported
inside the plotting functions only.

Example:
    from paramgeom.geometry import PolynomialCurve, PolynomialSurface
    from paramgeom.visualization.plot import plot_surface

    U = PolynomialCurve([[1, 1, 1], [3, 0, 3], [2, 0, 2]])
    V = PolynomialCurve([[0, 2, 2], [1, -6, -6], [0, 4, 4]])
    plot_surface(PolynomialSurface(U, V), u_range=(-1, 1), v_range=(-1, 1),
                 show_normals=True, save_path="surface.png")
"""

from typing import Optional, Tuple
import numpy as np

from ..geometry.base import ParametricCurve, ParametricSurface
from ..postprocess.sampling import sample_curve, sample_surface

__all__ = [
    'plot_curve',
    'plot_surface',
]


def _finish(fig, save_path: Optional[str], show: bool):
    import matplotlib.pyplot as plt

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved figure: {save_path}")

    if show:
        plt.show()

    return fig


def plot_curve(curve: ParametricCurve,
               n_points: int = 200,
               t_range: Optional[Tuple[float, float]] = None,
               ax=None,
               save_path: Optional[str] = None,
               show: bool = False):
    """
    Plot a curve.

    1D curves are drawn as graphs x(t), 2D curves in the plane and
    3D curves on 3D axes.

    Parameters:
        curve: Any ParametricCurve
        n_points: Number of samples
        t_range: Parameter interval, defaults to curve.parameter_range()
        ax: Existing axes to draw into (must be 3D for 3D curves)
        save_path: If provided, save figure to this path
        show: Whether to call plt.show()

    Returns:
        matplotlib Figure object
    """
    import matplotlib.pyplot as plt

    samples = sample_curve(curve, n_points, t_range)
    dim = samples.points.shape[1]

    if ax is None:
        fig = plt.figure(figsize=(6, 5))
        ax = fig.add_subplot(111, projection='3d' if dim == 3 else None)
    else:
        fig = ax.figure

    if dim == 1:
        ax.plot(samples.params, samples.points[:, 0])
        ax.set_xlabel('t')
        ax.set_ylabel('x')
    elif dim == 2:
        ax.plot(samples.points[:, 0], samples.points[:, 1])
        ax.set_xlabel('x')
        ax.set_ylabel('y')
        ax.set_aspect('equal', adjustable='datalim')
    elif dim == 3:
        ax.plot(samples.points[:, 0], samples.points[:, 1], samples.points[:, 2])
        ax.set_xlabel('x')
        ax.set_ylabel('y')
        ax.set_zlabel('z')
    else:
        raise ValueError(f"Cannot plot a curve in {dim}D space")

    ax.set_title(f"{type(curve).__name__}", fontsize=9)

    return _finish(fig, save_path, show)


def plot_surface(surface: ParametricSurface,
                 n_u: int = 30,
                 n_v: int = 30,
                 u_range: Optional[Tuple[float, float]] = None,
                 v_range: Optional[Tuple[float, float]] = None,
                 show_normals: bool = False,
                 normal_length: float = 0.1,
                 save_path: Optional[str] = None,
                 show: bool = False):
    """
    Plot a 3D surface, optionally with its unit normals.

    Grid points with a degenerate normal are left out of the normal field.

    Parameters:
        surface: Any ParametricSurface in 3D
        n_u, n_v: Number of samples per direction
        u_range, v_range: Parameter intervals, default to surface.parameter_range()
        show_normals: Draw normals as arrows
        normal_length: Arrow length for normals
        save_path: If provided, save figure to this path
        show: Whether to call plt.show()

    Returns:
        matplotlib Figure object
    """
    import matplotlib.pyplot as plt

    with np.errstate(invalid='ignore', divide='ignore'):
        samples = sample_surface(surface, n_u, n_v, u_range, v_range)

    if samples.points.shape[-1] != 3:
        raise ValueError(
            f"plot_surface needs a surface in 3D, got {samples.points.shape[-1]}D points"
        )

    X = samples.points[..., 0]
    Y = samples.points[..., 1]
    Z = samples.points[..., 2]

    fig = plt.figure(figsize=(7, 6))
    ax = fig.add_subplot(111, projection='3d')
    ax.plot_surface(X, Y, Z, cmap='viridis', alpha=0.8)

    if show_normals:
        valid = ~samples.degenerate_mask()
        N = samples.normals
        ax.quiver(X[valid], Y[valid], Z[valid],
                  N[..., 0][valid], N[..., 1][valid], N[..., 2][valid],
                  length=normal_length, color='k', linewidth=0.5)

    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_zlabel('z')
    ax.set_title(f"{type(surface).__name__}", fontsize=9)

    plt.tight_layout()

    return _finish(fig, save_path, show)
