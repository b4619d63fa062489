#!/usr/bin/env python3
"""
Utility functions for consumers of a computed layout.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from TensorGrid.core.axes import dim_label
from TensorGrid.core.layout import BoxInstance


def value_range(instances: Sequence[BoxInstance]) -> Optional[Tuple[float, float]]:
    """``(min, max)`` of the instance values, or None when no instance has one."""
    values = [inst.value for inst in instances if inst.value is not None]
    if not values:
        return None
    return float(min(values)), float(max(values))


def normalize_values(instances: Sequence[BoxInstance]) -> List[Optional[float]]:
    """
    Min/max-normalise instance values into ``[0, 1]`` for heat colouring.

    Instances without a value map to None. When all values are equal,
    every valued instance maps to 0.5.
    """
    bounds = value_range(instances)
    if bounds is None:
        return [None] * len(instances)
    vmin, vmax = bounds
    span = vmax - vmin
    result = []
    for inst in instances:
        if inst.value is None:
            result.append(None)
        elif span == 0:
            result.append(0.5)
        else:
            result.append((inst.value - vmin) / span)
    return result


def _format_value(value) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def describe_instance(instance: BoxInstance, labels: Sequence[str] = ()) -> str:
    """
    Hover text for one cube.

    Examples
    --------
    >>> inst = BoxInstance("1,0", (0.0, 0.0, 0.0), (1, 0), 3.0)
    >>> describe_instance(inst, ["H", "W"])
    'H=1, W=0 | value: 3'
    """
    text = ", ".join(f"{dim_label(labels, dim)}={idx}"
                     for dim, idx in enumerate(instance.index_path))
    if instance.value is not None:
        text += f" | value: {_format_value(instance.value)}"
    return text


def layout_to_dataframe(instances: Sequence[BoxInstance],
                        labels: Sequence[str] = ()) -> pd.DataFrame:
    """
    Flatten a layout into a table.

    Columns: ``id``, ``x``, ``y``, ``z``, one column per dimension (named
    by its label, suffixed with ``_d<dim>`` on a name clash) and ``value``.
    """
    rank = len(instances[0].index_path) if instances else 0
    dim_cols = []
    for d in range(rank):
        col = dim_label(labels, d)
        if col in ('id', 'x', 'y', 'z', 'value') or col in dim_cols:
            col = f"{col}_d{d}"
        dim_cols.append(col)

    if not instances:
        return pd.DataFrame(columns=['id', 'x', 'y', 'z'] + dim_cols + ['value'])

    positions = np.array([inst.position for inst in instances], dtype=float)
    paths = np.array([inst.index_path for inst in instances], dtype=int)

    df = pd.DataFrame({
        'id': [inst.id for inst in instances],
        'x': positions[:, 0],
        'y': positions[:, 1],
        'z': positions[:, 2],
    })
    for dim, col in enumerate(dim_cols):
        df[col] = paths[:, dim]
    values = [np.nan if inst.value is None else inst.value for inst in instances]
    # float64 would round integers beyond 2**53
    exact = any(isinstance(v, int) and abs(v) > 2 ** 53 for v in values)
    df['value'] = pd.Series(values, dtype=object if exact else None)
    return df


def save_layout_to_csv(instances: Sequence[BoxInstance],
                       path: Path,
                       labels: Sequence[str] = ()) -> Path:
    """Write ``layout_to_dataframe(instances, labels)`` to *path*."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    layout_to_dataframe(instances, labels).to_csv(path, index=False)
    print(f"  ✓ Saved {len(instances)} cells to: {path}")
    return path
