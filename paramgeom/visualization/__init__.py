"""
Visualization module.

Provides matplotlib quick-look plots for any primitive implementing the
evaluation contract:
- plot_curve: 1D/2D/3D curves
- plot_surface: 3D surfaces with optional normal field
"""

from .plot import plot_curve, plot_surface

__all__ = [
    'plot_curve',
    'plot_surface',
]
