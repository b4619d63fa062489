#!/usr/bin/env python3
"""
Static matplotlib rendering of a layout, used for PNG / SVG export.

Plot types
----------
cubes   – one shaded box per cell (``Poly3DCollection``).
points  – one scatter marker per cell.
"""

import io
from pathlib import Path
from typing import Sequence, Union

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from mpl_toolkits.mplot3d.art3d import Poly3DCollection  # noqa: E402

from TensorGrid.core.config import CUBE_SCALE  # noqa: E402
from TensorGrid.core.layout import BoxInstance  # noqa: E402
from TensorGrid.viz.base import (  # noqa: E402
    CUBE_QUADS, DEFAULT_COLORMAP, EDGE_COLOR, BasePlotter, cell_colors,
)


class MatplotlibPlotter(BasePlotter):
    """Plotter drawing onto a matplotlib 3D Axes."""

    backend              = "matplotlib"
    default_plot_type    = "cubes"
    available_plot_types = ["cubes", "points"]

    def plot(self, instances: Sequence[BoxInstance], plot_type: str = None,
             axis_labels=None, labels: Sequence[str] = (), ax=None, **kwargs):
        plot_type = self._check_plot_type(plot_type)
        if ax is None:
            fig = plt.figure(figsize=kwargs.get('figsize', (10, 8)))
            ax = fig.add_subplot(111, projection='3d')

        titles = self._axis_titles(axis_labels)
        ax.set_xlabel(titles['x'], fontsize=12, labelpad=10)
        ax.set_ylabel(titles['y'], fontsize=12, labelpad=10)
        ax.set_zlabel(titles['z'], fontsize=12, labelpad=10)
        if kwargs.get('title'):
            ax.set_title(kwargs['title'], fontsize=14, fontweight='bold')

        if not instances:
            return ax

        centers = self._centers(instances)
        colors = cell_colors(instances, kwargs.get('cmap', DEFAULT_COLORMAP))

        if plot_type == 'cubes':
            corners = self._cube_vertices(centers, kwargs.get('scale', CUBE_SCALE))
            faces = corners[:, CUBE_QUADS, :].reshape(-1, 4, 3)
            face_colors = [c for c in colors for _ in range(len(CUBE_QUADS))]
            ax.add_collection3d(Poly3DCollection(
                faces, facecolors=face_colors, edgecolors=EDGE_COLOR,
                linewidths=0.3, alpha=kwargs.get('alpha', 1.0),
            ))
        else:
            ax.scatter(centers[:, 0], centers[:, 1], centers[:, 2],
                       c=colors, s=kwargs.get('marker_size', 20), depthshade=True)

        low = centers.min(axis=0) - 0.5
        high = centers.max(axis=0) + 0.5
        ax.set_xlim(low[0], high[0])
        ax.set_ylim(low[1], high[1])
        ax.set_zlim(low[2], high[2])
        ax.set_box_aspect(tuple(high - low))
        ax.view_init(elev=kwargs.get('elev', 25), azim=kwargs.get('azim', -60))
        return ax


def render_layout(instances: Sequence[BoxInstance], ax=None, **kwargs):
    """Shortcut for ``MatplotlibPlotter().plot(...)``."""
    return MatplotlibPlotter().plot(instances, ax=ax, **kwargs)


def save_fig_to_bytes(fig, format='png', dpi=200) -> io.BytesIO:
    """Save matplotlib figure to bytes buffer for download."""
    buf = io.BytesIO()
    fig.savefig(buf, format=format, dpi=dpi, bbox_inches='tight')
    buf.seek(0)
    return buf


def save_layout_png(instances: Sequence[BoxInstance],
                    path: Union[str, Path, None] = None,
                    dpi: int = 200, **kwargs) -> io.BytesIO:
    """
    Render *instances* and return the PNG bytes; also write them to
    *path* when given.
    """
    ax = render_layout(instances, **kwargs)
    fig = ax.get_figure()
    try:
        buf = save_fig_to_bytes(fig, format='png', dpi=dpi)
    finally:
        plt.close(fig)
    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(buf.getvalue())
        print(f"  ✓ Saved image to: {path}")
    return buf
