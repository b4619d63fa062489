#!/usr/bin/env python3
"""
Shared constants and environment-driven defaults.

Environment variables
---------------------
TENSORGRID_MAX_CELLS  – initial max-cells-per-dimension for new sessions.
TENSORGRID_DIM_ORDER  – initial dimension order (``first-to-last`` or
                        ``last-to-first``).
"""

import os
import warnings

from TensorGrid.core.axes import DIM_ORDERS, FIRST_TO_LAST

MAX_RANK = 8
SPACING = 2                  # gap between tiled blocks, in cube widths
CUBE_SCALE = 0.85            # rendered cube edge relative to the unit cell

DEFAULT_MAX_CELLS = 8
MAX_CELLS_RANGE = (2, 20)

DEFAULT_SHAPE_TEXT = "2, 3, 4, 5"
DEFAULT_LABELS_TEXT = "B, C, H, W"
DEFAULT_PORT = 5648

ENV_MAX_CELLS = "TENSORGRID_MAX_CELLS"
ENV_DIM_ORDER = "TENSORGRID_DIM_ORDER"


def clamp_max_cells(value: int) -> int:
    """Clamp *value* into ``MAX_CELLS_RANGE``."""
    low, high = MAX_CELLS_RANGE
    return max(low, min(int(value), high))


def default_max_cells() -> int:
    """Initial cap, read from ``TENSORGRID_MAX_CELLS`` when set."""
    raw = os.environ.get(ENV_MAX_CELLS, "").strip()
    if not raw:
        return DEFAULT_MAX_CELLS
    try:
        return clamp_max_cells(int(raw))
    except ValueError:
        warnings.warn(
            f"Ignoring {ENV_MAX_CELLS}={raw!r}: not an integer. "
            f"Using {DEFAULT_MAX_CELLS}."
        )
        return DEFAULT_MAX_CELLS


def default_dim_order() -> str:
    """Initial dimension order, read from ``TENSORGRID_DIM_ORDER`` when set."""
    raw = os.environ.get(ENV_DIM_ORDER, "").strip().lower()
    if not raw:
        return FIRST_TO_LAST
    if raw not in DIM_ORDERS:
        warnings.warn(
            f"Ignoring {ENV_DIM_ORDER}={raw!r}. Available: {list(DIM_ORDERS)}"
        )
        return FIRST_TO_LAST
    return raw
