#!/usr/bin/env python3
"""
Dimension roles and axis labelling.

Spatial dims are bound to world X / Y / Z through a 3-slot tuple
``(dim_for_x, dim_for_y, dim_for_z)``; any slot may be ``None``.
Every other dimension is an *outer* dim: tiled across the world axes in
tiling mode, or collapsed to one selected index (a *page*) in slicing mode.

Tile dims are cycled onto world axes in the order Y, X, Z, Y, X, Z, ...
(``TILE_AXIS_CYCLE``). Both the layout engine and the axis labels use
``tile_axis_for`` so they always agree.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

SpatialDims = Tuple[Optional[int], Optional[int], Optional[int]]

# ---------------------------------------------------------------------------
# modes and orders
# ---------------------------------------------------------------------------
TILING = "tiling"
SLICING = "slicing"
MODES = (TILING, SLICING)

FIRST_TO_LAST = "first-to-last"
LAST_TO_FIRST = "last-to-first"
DIM_ORDERS = (FIRST_TO_LAST, LAST_TO_FIRST)

AXES = ("x", "y", "z")
TILE_AXIS_CYCLE = ("y", "x", "z")


def check_mode(mode: str) -> str:
    if mode not in MODES:
        raise ValueError(f"Unknown mode '{mode}'. Available: {list(MODES)}")
    return mode


def tile_axis_for(position: int) -> str:
    """World axis for the tile dim at *position* in the tile order."""
    return TILE_AXIS_CYCLE[position % len(TILE_AXIS_CYCLE)]


# ---------------------------------------------------------------------------
# role assignment
# ---------------------------------------------------------------------------

def _three_slots(spatial_dims: Sequence[Optional[int]]) -> List[Optional[int]]:
    slots = list(spatial_dims)[:3]
    return slots + [None] * (3 - len(slots))


def valid_spatial_dims(spatial_dims: Sequence[Optional[int]], rank: int) -> SpatialDims:
    """Replace slots that name a dimension outside ``[0, rank)`` with None."""
    return tuple(d if d is not None and 0 <= d < rank else None
                 for d in _three_slots(spatial_dims))


def default_spatial_dims(rank: int, dim_order: str = FIRST_TO_LAST) -> SpatialDims:
    """
    Spatial slots for a tensor of *rank* dims.

    ``first-to-last``: Y <- dim 0, X <- dim 1, Z <- dim 2.
    ``last-to-first``: Y <- last, X <- second to last, Z <- third to last.
    Slots without a matching dimension are None.
    """
    if dim_order == FIRST_TO_LAST:
        slots = (1, 0, 2)
    elif dim_order == LAST_TO_FIRST:
        slots = (rank - 2, rank - 1, rank - 3)
    else:
        raise ValueError(
            f"Unknown dim_order '{dim_order}'. Available: {list(DIM_ORDERS)}"
        )
    return valid_spatial_dims(slots, rank)


def derive_outer_dims(rank: int, spatial_dims: Sequence[Optional[int]]) -> List[int]:
    """Dims not bound to a spatial slot, in ascending order."""
    bound = {d for d in spatial_dims if d is not None}
    return [d for d in range(rank) if d not in bound]


def page_dims(outer_dims: Sequence[int], mode: str) -> List[int]:
    """Outer dims collapsed to a single selected index under *mode*."""
    return list(outer_dims) if check_mode(mode) == SLICING else []


def tile_dims(outer_dims: Sequence[int], mode: str) -> List[int]:
    """Outer dims repeated as tiles under *mode*, in ascending order."""
    return sorted(set(outer_dims)) if check_mode(mode) == TILING else []


# ---------------------------------------------------------------------------
# labels
# ---------------------------------------------------------------------------

def parse_labels(text: str) -> List[str]:
    """Split comma-separated labels, dropping blanks."""
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def dim_label(labels: Sequence[str], dim: int) -> str:
    """User label for *dim*, or ``d<dim>`` when none was given."""
    if 0 <= dim < len(labels) and labels[dim]:
        return labels[dim]
    return f"d{dim}"


@dataclass
class AxisLabel:
    """Label for one world axis: its spatial dim plus any tiled dims."""
    primary: str
    tiled: List[str] = field(default_factory=list)

    def text(self) -> str:
        if not self.tiled:
            return self.primary
        return f"{self.primary} ({', '.join(self.tiled)})"


@dataclass
class AxisLabels:
    x: AxisLabel
    y: AxisLabel
    z: AxisLabel

    def as_dict(self) -> Dict[str, AxisLabel]:
        return {"x": self.x, "y": self.y, "z": self.z}


def build_axis_labels(spatial_dims: Sequence[Optional[int]],
                      outer_dims: Sequence[int],
                      mode: str,
                      labels: Sequence[str] = ()) -> AxisLabels:
    """
    Describe what each world axis shows.

    The primary label is the spatial dim on that axis (or the axis letter
    when the slot is empty); tile dims are appended to the axis the
    tiling cycle puts them on. Slicing mode has no tiled labels.
    """
    result = {}
    for axis, dim in zip(AXES, _three_slots(spatial_dims)):
        primary = dim_label(labels, dim) if dim is not None else axis.upper()
        result[axis] = AxisLabel(primary=primary)

    for position, dim in enumerate(tile_dims(outer_dims, mode)):
        result[tile_axis_for(position)].tiled.append(dim_label(labels, dim))

    return AxisLabels(**result)
