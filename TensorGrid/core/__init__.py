"""Core module: parsing, sampling, values, layout engine and sessions."""

from TensorGrid.core.parsing import TensorData, parse_shape, parse_tensor
from TensorGrid.core.sampling import sample_indices
from TensorGrid.core.values import Nested, Scalar, lookup_value, to_tensor_value
from TensorGrid.core.axes import (
    AxisLabels, build_axis_labels, default_spatial_dims, derive_outer_dims,
    parse_labels,
)
from TensorGrid.core.layout import (
    BoxInstance, LayoutConfig, compute_layout, count_instances,
)
from TensorGrid.core.settings import LayoutSettings, load_settings, save_settings
from TensorGrid.core.session import ViewSession
from TensorGrid.core.utils import (
    describe_instance, layout_to_dataframe, normalize_values,
    save_layout_to_csv, value_range,
)

__all__ = [
    'TensorData', 'parse_shape', 'parse_tensor',
    'sample_indices',
    'Scalar', 'Nested', 'lookup_value', 'to_tensor_value',
    'AxisLabels', 'build_axis_labels', 'default_spatial_dims',
    'derive_outer_dims', 'parse_labels',
    'BoxInstance', 'LayoutConfig', 'compute_layout', 'count_instances',
    'LayoutSettings', 'load_settings', 'save_settings',
    'ViewSession',
    'describe_instance', 'layout_to_dataframe', 'normalize_values',
    'save_layout_to_csv', 'value_range',
]
