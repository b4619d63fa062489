#!/usr/bin/env python3
"""
BasePlotter – abstract base class for every layout renderer.

Plotters are *stateless*: they receive an already-computed list of
``BoxInstance`` (the output of ``compute_layout``) and produce a figure.
They have no knowledge of parsing, sampling or sessions and never feed
anything back into the layout.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import matplotlib
import numpy as np
from matplotlib.colors import to_hex

from TensorGrid.core.config import CUBE_SCALE
from TensorGrid.core.layout import BoxInstance
from TensorGrid.core.utils import normalize_values

BASE_COLOR = "#3f3f46"
EDGE_COLOR = "black"
DEFAULT_COLORMAP = "viridis"
COLORMAPS = ["viridis", "plasma", "inferno", "magma", "cividis",
             "turbo", "coolwarm", "RdYlBu", "seismic"]

# unit cube corners, scaled per plot
CUBE_CORNERS = np.array([
    [-1, -1, -1], [1, -1, -1], [1, 1, -1], [-1, 1, -1],
    [-1, -1, 1], [1, -1, 1], [1, 1, 1], [-1, 1, 1],
], dtype=float) * 0.5

CUBE_TRIANGLES = np.array([
    [0, 1, 2], [0, 2, 3],      # z-
    [4, 5, 6], [4, 6, 7],      # z+
    [0, 1, 5], [0, 5, 4],      # y-
    [3, 2, 6], [3, 6, 7],      # y+
    [0, 3, 7], [0, 7, 4],      # x-
    [1, 2, 6], [1, 6, 5],      # x+
])

CUBE_QUADS = np.array([
    [0, 1, 2, 3], [4, 5, 6, 7],
    [0, 1, 5, 4], [3, 2, 6, 7],
    [0, 3, 7, 4], [1, 2, 6, 5],
])

CUBE_EDGES = np.array([
    [0, 1], [1, 2], [2, 3], [3, 0],
    [4, 5], [5, 6], [6, 7], [7, 4],
    [0, 4], [1, 5], [2, 6], [3, 7],
])


class BasePlotter(ABC):
    """Abstract base for layout plotters."""

    backend: str                  # e.g. "plotly"
    default_plot_type: str        # used when caller omits plot_type
    available_plot_types: list    # for documentation / validation

    @abstractmethod
    def plot(self, instances: Sequence[BoxInstance], plot_type: str = None,
             axis_labels=None, labels: Sequence[str] = (), **kwargs):
        """
        Render a layout.

        Parameters
        ----------
        instances : list of BoxInstance
            Output of ``compute_layout``.
        plot_type : str
            ``"cubes"`` or ``"points"``.
        axis_labels : AxisLabels, optional
            Axis titles; plain X / Y / Z when None.
        labels : list of str
            Dimension labels used in hover text.
        **kwargs
            Extra styling: ``title``, ``cmap``, ``scale``, etc.
        """
        ...

    # ------------------------------------------------------------------
    # shared helpers
    # ------------------------------------------------------------------

    def _check_plot_type(self, plot_type: Optional[str]) -> str:
        if plot_type is None:
            plot_type = self.default_plot_type
        if plot_type not in self.available_plot_types:
            raise ValueError(
                f"Unknown plot_type '{plot_type}'. "
                f"Available: {self.available_plot_types}"
            )
        return plot_type

    @staticmethod
    def _centers(instances: Sequence[BoxInstance]) -> np.ndarray:
        return np.array([inst.position for inst in instances],
                        dtype=float).reshape(-1, 3)

    @staticmethod
    def _cube_vertices(centers: np.ndarray, scale: float = CUBE_SCALE) -> np.ndarray:
        """``(n_cubes, 8, 3)`` corner coordinates."""
        return centers[:, None, :] + CUBE_CORNERS[None, :, :] * scale

    @staticmethod
    def _axis_titles(axis_labels) -> dict:
        if axis_labels is None:
            return {'x': 'X', 'y': 'Y', 'z': 'Z'}
        return {axis: label.text() for axis, label in axis_labels.as_dict().items()}


def cell_colors(instances: Sequence[BoxInstance],
                cmap: str = DEFAULT_COLORMAP) -> List[str]:
    """
    One hex colour per instance.

    Valued cells are heat-coloured from their min/max-normalised value;
    cells without a value get ``BASE_COLOR``.
    """
    colormap = matplotlib.colormaps[cmap]
    return [BASE_COLOR if v is None else to_hex(colormap(v))
            for v in normalize_values(instances)]
