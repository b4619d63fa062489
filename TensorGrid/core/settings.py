#!/usr/bin/env python3
"""
Layout settings export / import.

The JSON keys match the settings files written by the browser version of
TensorGrid (``tensor-grid-settings.json``), so files can be exchanged.
"""

import json
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from TensorGrid.core.axes import TILING, SpatialDims, check_mode
from TensorGrid.core.config import DEFAULT_MAX_CELLS
from TensorGrid.core.layout import LayoutConfig, resolve_roles

_KEYS = ('shape', 'spatialDims', 'outerDims', 'mode', 'maxCells', 'sliceIndices')


@dataclass
class LayoutSettings:
    """Serializable subset of a ``LayoutConfig`` (no tensor data)."""
    shape: List[int]
    spatial_dims: SpatialDims = (None, None, None)
    outer_dims: List[int] = field(default_factory=list)
    mode: str = TILING
    max_cells: int = DEFAULT_MAX_CELLS
    slice_indices: Dict[int, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'shape': list(self.shape),
            'spatialDims': list(self.spatial_dims),
            'outerDims': list(self.outer_dims),
            'mode': self.mode,
            'maxCells': self.max_cells,
            'sliceIndices': {str(k): v for k, v in self.slice_indices.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'LayoutSettings':
        """Create from dictionary."""
        unknown = sorted(set(data) - set(_KEYS))
        if unknown:
            warnings.warn(f"Ignoring unknown settings keys: {unknown}")

        spatial = list(data.get('spatialDims', [None, None, None]))[:3]
        spatial += [None] * (3 - len(spatial))
        return cls(
            shape=[int(s) for s in data.get('shape', [])],
            spatial_dims=tuple(None if d is None else int(d) for d in spatial),
            outer_dims=[int(d) for d in data.get('outerDims', [])],
            mode=check_mode(data.get('mode', TILING)),
            max_cells=int(data.get('maxCells', DEFAULT_MAX_CELLS)),
            slice_indices={int(k): int(v)
                           for k, v in data.get('sliceIndices', {}).items()},
        )

    @classmethod
    def from_config(cls, config: LayoutConfig) -> 'LayoutSettings':
        outer = config.outer_dims
        if outer is None:
            _, outer, _, _ = resolve_roles(config)
        return cls(
            shape=list(config.shape),
            spatial_dims=tuple(config.spatial_dims),
            outer_dims=list(outer),
            mode=config.mode,
            max_cells=config.max_cells_per_dim,
            slice_indices=dict(config.slice_indices),
        )

    def to_config(self, data: Optional[Any] = None) -> LayoutConfig:
        """Rebuild a ``LayoutConfig``, optionally attaching tensor *data*."""
        return LayoutConfig(
            shape=list(self.shape),
            spatial_dims=tuple(self.spatial_dims),
            outer_dims=list(self.outer_dims),
            mode=self.mode,
            slice_indices=dict(self.slice_indices),
            max_cells_per_dim=self.max_cells,
            data=data,
        )


def settings_to_json(settings: LayoutSettings) -> str:
    return json.dumps(settings.to_dict(), indent=2)


def save_settings(settings: LayoutSettings, path: Union[str, Path]) -> Path:
    """Write *settings* to *path* as indented JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        f.write(settings_to_json(settings))
    print(f"  ✓ Saved settings to: {path}")
    return path


def load_settings(path: Union[str, Path]) -> LayoutSettings:
    """Read settings written by ``save_settings``."""
    with open(path, 'r') as f:
        return LayoutSettings.from_dict(json.load(f))
