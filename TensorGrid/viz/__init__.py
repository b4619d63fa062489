"""
Visualization module – renderers for a computed layout.

PLOTTER_REGISTRY maps a backend key to its plotter class.
"""

from TensorGrid.viz.base         import BasePlotter, cell_colors
from TensorGrid.viz.plotly_scene import PlotlyPlotter, build_figure
from TensorGrid.viz.static       import MatplotlibPlotter, render_layout, save_layout_png

PLOTTER_REGISTRY = {
    'plotly':     PlotlyPlotter,
    'matplotlib': MatplotlibPlotter,
}

__all__ = [
    'BasePlotter', 'PlotlyPlotter', 'MatplotlibPlotter',
    'PLOTTER_REGISTRY',
    'cell_colors', 'build_figure', 'render_layout', 'save_layout_png',
]
