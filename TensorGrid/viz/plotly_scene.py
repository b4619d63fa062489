#!/usr/bin/env python3
"""
Interactive plotly rendering of a layout.

Plot types
----------
cubes   – merged Mesh3d of scaled cubes, black edges, hover markers.
points  – one marker per cell (cheaper for large layouts).

Cells with a value are heat-coloured from the min/max-normalised values;
the others use ``BASE_COLOR``.
"""

from typing import List, Optional, Sequence

import numpy as np
import plotly.graph_objects as go

from TensorGrid.core.config import CUBE_SCALE
from TensorGrid.core.layout import BoxInstance
from TensorGrid.core.utils import describe_instance
from TensorGrid.viz.base import (
    CUBE_EDGES, CUBE_TRIANGLES, DEFAULT_COLORMAP, EDGE_COLOR, BasePlotter,
    cell_colors,
)


class PlotlyPlotter(BasePlotter):
    """Plotter producing a ``plotly.graph_objects.Figure``."""

    backend              = "plotly"
    default_plot_type    = "cubes"
    available_plot_types = ["cubes", "points"]

    def plot(self, instances: Sequence[BoxInstance], plot_type: str = None,
             axis_labels=None, labels: Sequence[str] = (), **kwargs):
        plot_type = self._check_plot_type(plot_type)
        cmap = kwargs.get('cmap', DEFAULT_COLORMAP)

        fig = go.Figure()
        if instances:
            centers = self._centers(instances)
            colors = cell_colors(instances, cmap)
            hover = [describe_instance(inst, labels) for inst in instances]

            if plot_type == 'cubes':
                scale = kwargs.get('scale', CUBE_SCALE)
                fig.add_trace(self._mesh_trace(centers, colors, scale))
                fig.add_trace(self._edge_trace(centers, scale))
                fig.add_trace(self._hover_trace(centers, colors, hover,
                                                size=2, opacity=0.2))
            else:
                fig.add_trace(self._hover_trace(centers, colors, hover,
                                                size=kwargs.get('marker_size', 6),
                                                opacity=1.0))

        titles = self._axis_titles(axis_labels)
        fig.update_layout(
            title=kwargs.get('title', ''),
            showlegend=False,
            scene=dict(
                xaxis_title=titles['x'],
                yaxis_title=titles['y'],
                zaxis_title=titles['z'],
                aspectmode='data',
            ),
            margin=dict(l=0, r=0, t=40 if kwargs.get('title') else 0, b=0),
        )
        return fig

    # ------------------------------------------------------------------
    # traces
    # ------------------------------------------------------------------

    def _mesh_trace(self, centers: np.ndarray, colors: List[str],
                    scale: float) -> go.Mesh3d:
        verts = self._cube_vertices(centers, scale).reshape(-1, 3)
        offsets = (np.arange(len(centers)) * 8)[:, None, None]
        tris = (CUBE_TRIANGLES[None, :, :] + offsets).reshape(-1, 3)
        facecolor = [c for c in colors for _ in range(len(CUBE_TRIANGLES))]
        return go.Mesh3d(
            x=verts[:, 0], y=verts[:, 1], z=verts[:, 2],
            i=tris[:, 0], j=tris[:, 1], k=tris[:, 2],
            facecolor=facecolor,
            flatshading=True,
            hoverinfo='skip',
        )

    def _edge_trace(self, centers: np.ndarray, scale: float) -> go.Scatter3d:
        corners = self._cube_vertices(centers, scale)
        # (n_cubes * 12, 2, 3) segments, separated by None for plotly
        segments = corners[:, CUBE_EDGES, :].reshape(-1, 2, 3)
        xs: list = []
        ys: list = []
        zs: list = []
        for (x0, y0, z0), (x1, y1, z1) in segments:
            xs += [x0, x1, None]
            ys += [y0, y1, None]
            zs += [z0, z1, None]
        return go.Scatter3d(x=xs, y=ys, z=zs, mode='lines',
                            line=dict(color=EDGE_COLOR, width=1),
                            hoverinfo='skip')

    @staticmethod
    def _hover_trace(centers: np.ndarray, colors: List[str], hover: List[str],
                     size: float, opacity: float) -> go.Scatter3d:
        return go.Scatter3d(
            x=centers[:, 0], y=centers[:, 1], z=centers[:, 2],
            mode='markers',
            marker=dict(size=size, color=colors, opacity=opacity),
            text=hover,
            hoverinfo='text',
        )


def build_figure(instances: Sequence[BoxInstance], axis_labels=None,
                 labels: Sequence[str] = (), plot_type: Optional[str] = None,
                 **kwargs) -> go.Figure:
    """Shortcut for ``PlotlyPlotter().plot(...)``."""
    return PlotlyPlotter().plot(instances, plot_type=plot_type,
                                axis_labels=axis_labels, labels=labels, **kwargs)
