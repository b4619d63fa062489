#!/usr/bin/env python3
"""
Layout engine – place one unit cube per (sampled) tensor element.

Pipeline
--------
1. Split dimensions into spatial / page / tile roles (``axes``).
2. Sample each dimension (``sampling.sample_indices``); a page dim keeps
   only its clamped slice index.
3. Give every tile dim a world axis (Y, X, Z cycle) and a step that is
   large enough to hold all inner repetitions plus ``SPACING``.
4. Walk the Cartesian product of the sampled sets, dimension 0 outermost,
   and compute each cube position. Y and Z are negated so that index 0
   sits at the top / front.
5. Shift everything so the bounding box is centred on the origin.

``compute_layout`` is a pure function of its ``LayoutConfig``: no state is
kept between calls and the returned instances are new objects each time.
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from TensorGrid.core.axes import (
    TILING, SpatialDims, check_mode, derive_outer_dims, page_dims,
    tile_axis_for, tile_dims, valid_spatial_dims,
)
from TensorGrid.core.config import DEFAULT_MAX_CELLS, SPACING
from TensorGrid.core.sampling import clamp_index, sample_indices
from TensorGrid.core.values import Number, lookup_value, to_tensor_value


@dataclass
class LayoutConfig:
    """
    Everything the layout depends on.

    Attributes
    ----------
    shape : list of int
        Size of every dimension.
    spatial_dims : tuple
        ``(dim_for_x, dim_for_y, dim_for_z)``; any slot may be None.
    outer_dims : list of int, optional
        Dims not bound to a spatial slot. Derived when None.
    mode : str
        ``"tiling"`` or ``"slicing"``.
    slice_indices : dict
        ``{dim: index}`` for page dims; missing entries mean index 0.
    max_cells_per_dim : int
        Downsampling cap applied to every non-page dim.
    data : nested lists or TensorValue, optional
        Values to attach to the cubes.
    """
    shape: List[int]
    spatial_dims: SpatialDims = (None, None, None)
    outer_dims: Optional[List[int]] = None
    mode: str = TILING
    slice_indices: Dict[int, int] = field(default_factory=dict)
    max_cells_per_dim: int = DEFAULT_MAX_CELLS
    data: Any = None


@dataclass(frozen=True)
class BoxInstance:
    """One rendered cell."""
    id: str
    position: Tuple[float, float, float]
    index_path: Tuple[int, ...]
    value: Optional[Number] = None

    def to_dict(self) -> dict:
        """JSON-safe dict; ``value`` is omitted when absent."""
        data = {
            'id': self.id,
            'position': list(self.position),
            'indexPath': list(self.index_path),
        }
        if self.value is not None:
            data['value'] = self.value
        return data


@dataclass(frozen=True)
class TileStep:
    """World axis and per-index offset of one tile dimension."""
    axis: str
    step: int


# ---------------------------------------------------------------------------
# building blocks
# ---------------------------------------------------------------------------

def sampled_index_sets(shape: Sequence[int],
                       pages: Iterable[int],
                       slice_indices: Dict[int, int],
                       max_cells: int) -> List[List[int]]:
    """Sampled original indices for every dimension."""
    pages = set(pages)
    result = []
    for dim, size in enumerate(shape):
        if dim in pages:
            if size <= 0:
                result.append([])
            else:
                result.append([clamp_index(slice_indices.get(dim, 0), size)])
        else:
            result.append(sample_indices(size, max_cells))
    return result


def block_steps(spatial_dims: SpatialDims,
                dim_indices: Sequence[Sequence[int]]) -> Dict[str, int]:
    """Distance between neighbouring blocks along x, y and z."""
    steps = {}
    for axis, dim in zip(("x", "y", "z"), spatial_dims):
        block = len(dim_indices[dim]) if dim is not None else 1
        steps[axis] = block + SPACING
    return steps


def assign_tile_steps(tiles: Sequence[int],
                      dim_indices: Sequence[Sequence[int]],
                      base_steps: Dict[str, int]) -> Dict[int, TileStep]:
    """
    Cycle *tiles* onto Y, X, Z and compute their steps.

    A tile dim takes the current step of its axis; that axis then grows
    to ``step * n_cells + SPACING`` so the next tile dim on it spaces whole
    groups of repetitions apart without overlap.
    """
    running = dict(base_steps)
    steps: Dict[int, TileStep] = {}
    for position, dim in enumerate(tiles):
        axis = tile_axis_for(position)
        steps[dim] = TileStep(axis=axis, step=running[axis])
        running[axis] = running[axis] * len(dim_indices[dim]) + SPACING
    return steps


def center_positions(positions: Sequence[Sequence[float]]) -> np.ndarray:
    """Translate *positions* so their bounding box is centred on the origin."""
    arr = np.asarray(positions, dtype=float).reshape(-1, 3)
    if len(arr) == 0:
        return arr
    center = (arr.min(axis=0) + arr.max(axis=0)) / 2.0
    return arr - center


def resolve_roles(config: LayoutConfig) -> Tuple[SpatialDims, List[int], List[int], List[int]]:
    """Return ``(spatial_dims, outer_dims, page_dims, tile_dims)`` for *config*."""
    rank = len(config.shape)
    mode = check_mode(config.mode)
    spatial = valid_spatial_dims(config.spatial_dims, rank)
    outer = config.outer_dims
    if outer is None:
        outer = derive_outer_dims(rank, spatial)
    outer = [d for d in outer if 0 <= d < rank]
    return spatial, outer, page_dims(outer, mode), tile_dims(outer, mode)


def count_instances(config: LayoutConfig) -> int:
    """Number of instances ``compute_layout`` would return, without laying out."""
    if not config.shape:
        return 0
    _, _, pages, _ = resolve_roles(config)
    dim_indices = sampled_index_sets(config.shape, pages, config.slice_indices,
                                     config.max_cells_per_dim)
    return int(np.prod([len(ix) for ix in dim_indices], dtype=np.int64))


# ---------------------------------------------------------------------------
# main entry point
# ---------------------------------------------------------------------------

def compute_layout(config: LayoutConfig) -> List[BoxInstance]:
    """
    Lay out every sampled element of ``config.shape`` as a unit cube.

    Returns
    -------
    list of BoxInstance
        In dimension-0-outermost order. Empty for an empty shape.

    Examples
    --------
    >>> cfg = LayoutConfig(shape=[2, 3, 4, 5], spatial_dims=(1, 2, 3),
    ...                    outer_dims=[0], mode="slicing",
    ...                    slice_indices={0: 1})
    >>> len(compute_layout(cfg))
    60
    """
    shape = list(config.shape)
    if not shape:
        return []

    spatial, _, pages, tiles = resolve_roles(config)
    dim_indices = sampled_index_sets(shape, pages, config.slice_indices,
                                     config.max_cells_per_dim)
    tile_steps = assign_tile_steps(tiles, dim_indices,
                                   block_steps(spatial, dim_indices))
    values = to_tensor_value(config.data) if config.data is not None else None
    sx, sy, sz = spatial

    index_paths = []
    raw_positions = []
    # each entry pairs an index with its rank inside the sampled set
    ranked = [list(enumerate(indices)) for indices in dim_indices]
    for combo in itertools.product(*ranked):
        ranks = [r for r, _ in combo]

        offset = {"x": 0, "y": 0, "z": 0}
        for dim, tile in tile_steps.items():
            offset[tile.axis] += ranks[dim] * tile.step

        rx = ranks[sx] if sx is not None else 0
        ry = ranks[sy] if sy is not None else 0
        rz = ranks[sz] if sz is not None else 0

        index_paths.append(tuple(i for _, i in combo))
        raw_positions.append((rx + offset["x"],
                              -ry - offset["y"],
                              -rz - offset["z"]))

    centered = center_positions(raw_positions)

    instances = []
    for index_path, pos in zip(index_paths, centered):
        instances.append(BoxInstance(
            id=",".join(str(i) for i in index_path),
            position=(float(pos[0]), float(pos[1]), float(pos[2])),
            index_path=index_path,
            value=lookup_value(values, index_path) if values is not None else None,
        ))
    return instances
