#!/usr/bin/env python3
"""
ViewSession – the user-facing state behind one TensorGrid view.

A session owns the raw text inputs (shape, labels, JSON data) and the
view options. Everything else (shape, role assignment, axis labels,
layout) is derived on demand, so the layout is always recomputed from
scratch from the current inputs.
"""

from typing import Dict, List, Optional

from TensorGrid.core.axes import (
    DIM_ORDERS, SLICING, TILING, AxisLabels, SpatialDims, build_axis_labels,
    check_mode, default_spatial_dims, derive_outer_dims, dim_label,
    page_dims, parse_labels,
)
from TensorGrid.core.config import (
    DEFAULT_LABELS_TEXT, DEFAULT_SHAPE_TEXT, clamp_max_cells,
    default_dim_order, default_max_cells,
)
from TensorGrid.core.layout import BoxInstance, LayoutConfig, compute_layout
from TensorGrid.core.parsing import TensorData, parse_shape, parse_tensor
from TensorGrid.core.settings import LayoutSettings


class ViewSession:
    """
    Inputs and derived layout for one view.

    Attributes
    ----------
    shape_text, labels_text, data_text : str
        Raw text inputs. ``data_text`` takes precedence over
        ``shape_text`` when it parses as a JSON array.
    mode : str
        ``"tiling"`` or ``"slicing"``.
    dim_order : str
        ``"first-to-last"`` or ``"last-to-first"``; picks the spatial dims.
    max_cells : int
        Downsampling cap, clamped into ``MAX_CELLS_RANGE``.
    slice_indices : dict
        ``{dim: index}`` selections for page dims.
    """

    def __init__(self, shape_text: str = DEFAULT_SHAPE_TEXT,
                 labels_text: str = DEFAULT_LABELS_TEXT,
                 data_text: str = "",
                 mode: str = TILING,
                 dim_order: Optional[str] = None,
                 max_cells: Optional[int] = None):
        self.shape_text = shape_text
        self.labels_text = labels_text
        self.data_text = data_text
        self.mode = check_mode(mode)
        self.dim_order = dim_order or default_dim_order()
        if self.dim_order not in DIM_ORDERS:
            raise ValueError(
                f"Unknown dim_order '{self.dim_order}'. Available: {list(DIM_ORDERS)}"
            )
        self.max_cells = clamp_max_cells(
            max_cells if max_cells is not None else default_max_cells()
        )
        self.slice_indices: Dict[int, int] = {}

    # ------------------------------------------------------------------
    # input updates
    # ------------------------------------------------------------------

    def set_shape_text(self, text: str):
        """Replace the shape text; previous slice selections are dropped."""
        self.shape_text = text
        self.slice_indices = {}

    def set_slice_index(self, dim: int, index: int):
        self.slice_indices = {**self.slice_indices, dim: int(index)}

    def set_mode(self, mode: str):
        self.mode = check_mode(mode)

    def set_max_cells(self, value: int):
        self.max_cells = clamp_max_cells(value)

    # ------------------------------------------------------------------
    # derived state
    # ------------------------------------------------------------------

    @property
    def tensor(self) -> Optional[TensorData]:
        if not self.data_text.strip():
            return None
        return parse_tensor(self.data_text)

    @property
    def shape(self) -> List[int]:
        tensor = self.tensor
        if tensor is not None:
            return tensor.shape
        return parse_shape(self.shape_text)

    @property
    def labels(self) -> List[str]:
        return parse_labels(self.labels_text)

    @property
    def spatial_dims(self) -> SpatialDims:
        return default_spatial_dims(len(self.shape), self.dim_order)

    @property
    def outer_dims(self) -> List[int]:
        return derive_outer_dims(len(self.shape), self.spatial_dims)

    @property
    def page_dims(self) -> List[int]:
        """Outer dims that need a slice selector in the current mode."""
        return page_dims(self.outer_dims, self.mode)

    @property
    def axis_labels(self) -> AxisLabels:
        return build_axis_labels(self.spatial_dims, self.outer_dims,
                                 self.mode, self.labels)

    def label_for(self, dim: int) -> str:
        return dim_label(self.labels, dim)

    def config(self) -> LayoutConfig:
        tensor = self.tensor
        return LayoutConfig(
            shape=self.shape,
            spatial_dims=self.spatial_dims,
            outer_dims=self.outer_dims,
            mode=self.mode,
            slice_indices=dict(self.slice_indices),
            max_cells_per_dim=self.max_cells,
            data=tensor.values if tensor is not None else None,
        )

    def layout(self) -> List[BoxInstance]:
        return compute_layout(self.config())

    def settings(self) -> LayoutSettings:
        return LayoutSettings.from_config(self.config())

    def is_slicing(self) -> bool:
        return self.mode == SLICING
