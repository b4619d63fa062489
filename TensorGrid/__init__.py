#!/usr/bin/env python3
"""
TensorGrid: 3D cube layouts for inspecting N-dimensional tensor shapes.

Maps a tensor shape (rank up to 8) onto positioned unit cells so that every
element (or a downsampled subset of them) can be drawn as a cube.

Main Components
---------------
compute_layout : Layout engine
    LayoutConfig in, list of BoxInstance out
LayoutConfig : Layout input
    Shape, spatial dims, mode, slice selections, max cells, data
BoxInstance : One rendered cell
    id, centred position, index path, optional value
ViewSession : Text inputs + derived layout
    Shape / label / JSON data text, mode, dimension order

Parsing
-------
parse_shape : Shape from free-form text ("B: 2, C: 3")
parse_tensor : Shape + values from a JSON array literal
parse_labels : Comma-separated dimension labels

Utilities
---------
sample_indices : Evenly spaced downsampling of one dimension
lookup_value : Value at an index path in nested data
save_layout_to_csv : Write a layout as a table
save_settings / load_settings : Layout settings as JSON

Basic Usage
-----------
>>> from TensorGrid import LayoutConfig, compute_layout
>>>
>>> cfg = LayoutConfig(
...     shape=[2, 3, 4, 5],
...     spatial_dims=(1, 2, 3),
...     mode="tiling",
...     max_cells_per_dim=8,
... )
>>> cells = compute_layout(cfg)
>>> len(cells)
120
>>>
>>> # Or drive everything from text, as the web app does
>>> from TensorGrid import ViewSession
>>> session = ViewSession(shape_text="B: 2, C: 3, H: 4, W: 5", mode="slicing")
>>> session.set_slice_index(3, 4)
>>> len(session.layout())
24
"""

from TensorGrid.version import __version__

__author__ = "TensorGrid Team"

# Import main classes for public API
from TensorGrid.core.layout import BoxInstance, LayoutConfig, compute_layout
from TensorGrid.core.parsing import TensorData, parse_shape, parse_tensor
from TensorGrid.core.sampling import sample_indices
from TensorGrid.core.values import Nested, Scalar, lookup_value
from TensorGrid.core.axes import parse_labels
from TensorGrid.core.session import ViewSession
from TensorGrid.core.settings import LayoutSettings, load_settings, save_settings
from TensorGrid.core.utils import save_layout_to_csv


# Define public API
__all__ = [
    # Layout engine
    'compute_layout',
    'LayoutConfig',
    'BoxInstance',
    'ViewSession',

    # Parsing
    'parse_shape',
    'parse_tensor',
    'parse_labels',
    'TensorData',

    # Values
    'Scalar',
    'Nested',
    'lookup_value',

    # Utilities
    'sample_indices',
    'LayoutSettings',
    'save_settings',
    'load_settings',
    'save_layout_to_csv',
]


# Package information
def get_version():
    """Get package version."""
    return __version__


def get_info():
    """Get package information."""
    return {
        'name': 'TensorGrid',
        'version': __version__,
        'description': '3D cube layouts for inspecting N-dimensional tensor shapes',
        'author': __author__,
    }
