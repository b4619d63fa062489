from math import prod

import numpy as np
import pytest

from TensorGrid.core.config import SPACING
from TensorGrid.core.layout import (
    BoxInstance, LayoutConfig, TileStep, assign_tile_steps, block_steps,
    center_positions, compute_layout, count_instances, sampled_index_sets,
)
from TensorGrid.core.sampling import sample_indices


def _by_path(layout):
    return {inst.index_path: np.array(inst.position) for inst in layout}


def _assert_centered(layout):
    positions = np.array([inst.position for inst in layout])
    mid = (positions.min(axis=0) + positions.max(axis=0)) / 2.0
    assert np.allclose(mid, 0.0)


CONFIGS = [
    LayoutConfig(shape=[10], spatial_dims=(0, None, None), outer_dims=[],
                 max_cells_per_dim=10),
    LayoutConfig(shape=[4, 4, 4], spatial_dims=(0, 1, 2), outer_dims=[],
                 max_cells_per_dim=8),
    LayoutConfig(shape=[2, 3, 4, 5], spatial_dims=(1, 2, 3), outer_dims=[0],
                 max_cells_per_dim=8),
    LayoutConfig(shape=[2, 3, 4, 5], spatial_dims=(1, 2, 3), outer_dims=[0],
                 mode="slicing", slice_indices={0: 1}),
    LayoutConfig(shape=[2, 2, 2, 3, 4, 5], spatial_dims=(3, 4, 5),
                 outer_dims=[0, 1, 2]),
    LayoutConfig(shape=[3, 2, 2, 2, 30, 4, 5], spatial_dims=(5, 4, 6),
                 outer_dims=[0, 1, 2, 3], max_cells_per_dim=6),
    LayoutConfig(shape=[7, 50, 3], spatial_dims=(1, 0, None), outer_dims=[2],
                 mode="slicing", slice_indices={2: 9}, max_cells_per_dim=4),
]


# ---------------------------------------------------------------------------
# sizes
# ---------------------------------------------------------------------------

def test_empty_shape_gives_empty_layout():
    assert compute_layout(LayoutConfig(shape=[])) == []


def test_one_dimensional_layout_is_centered_on_x():
    layout = compute_layout(CONFIGS[0])
    assert len(layout) == 10
    assert layout[0].position[0] == pytest.approx(-4.5)
    assert layout[9].position[0] == pytest.approx(4.5)
    assert all(inst.position[1] == pytest.approx(0.0) for inst in layout)
    assert all(inst.position[2] == pytest.approx(0.0) for inst in layout)


def test_three_dimensional_layout():
    assert len(compute_layout(CONFIGS[1])) == 64


def test_four_dimensional_tiling_keeps_every_outer_index():
    assert len(compute_layout(CONFIGS[2])) == 120


def test_four_dimensional_slicing_keeps_one_outer_index():
    layout = compute_layout(CONFIGS[3])
    assert len(layout) == 60
    assert all(inst.index_path[0] == 1 for inst in layout)


def test_six_dimensional_tiling():
    assert len(compute_layout(CONFIGS[4])) == 480


@pytest.mark.parametrize("config", CONFIGS)
def test_instance_count_is_product_of_sampled_sets(config):
    layout = compute_layout(config)
    pages = config.outer_dims if config.mode == "slicing" else []
    sets = sampled_index_sets(config.shape, pages, config.slice_indices,
                              config.max_cells_per_dim)
    assert len(layout) == prod(len(s) for s in sets)
    assert count_instances(config) == len(layout)


@pytest.mark.parametrize("config", CONFIGS)
def test_every_index_path_appears_exactly_once(config):
    layout = compute_layout(config)
    pages = config.outer_dims if config.mode == "slicing" else []
    sets = sampled_index_sets(config.shape, pages, config.slice_indices,
                              config.max_cells_per_dim)
    paths = [inst.index_path for inst in layout]
    assert len(set(paths)) == len(paths)
    for path in paths:
        assert all(idx in allowed for idx, allowed in zip(path, sets))


@pytest.mark.parametrize("config", CONFIGS)
def test_ids_are_unique_and_follow_index_path(config):
    layout = compute_layout(config)
    ids = [inst.id for inst in layout]
    assert len(set(ids)) == len(ids)
    assert all(inst.id == ",".join(map(str, inst.index_path)) for inst in layout)


@pytest.mark.parametrize("config", CONFIGS)
def test_layout_is_centered(config):
    _assert_centered(compute_layout(config))


@pytest.mark.parametrize("config", CONFIGS[1:])
def test_tiled_cubes_never_overlap(config):
    layout = compute_layout(config)
    positions = {tuple(np.round(inst.position, 6)) for inst in layout}
    assert len(positions) == len(layout)


@pytest.mark.parametrize("config", CONFIGS)
def test_layout_is_idempotent(config):
    assert compute_layout(config) == compute_layout(config)


def test_order_is_dimension_zero_outermost():
    layout = compute_layout(LayoutConfig(shape=[2, 3], spatial_dims=(1, 0, None)))
    assert [inst.index_path for inst in layout] == [
        (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2),
    ]


# ---------------------------------------------------------------------------
# positions
# ---------------------------------------------------------------------------

def test_y_and_z_grow_away_from_index_zero():
    layout = _by_path(compute_layout(
        LayoutConfig(shape=[3, 3, 3], spatial_dims=(0, 1, 2))
    ))
    origin = layout[(0, 0, 0)]
    assert tuple(layout[(1, 0, 0)] - origin) == (1.0, 0.0, 0.0)
    assert tuple(layout[(0, 1, 0)] - origin) == (0.0, -1.0, 0.0)
    assert tuple(layout[(0, 0, 1)] - origin) == (0.0, 0.0, -1.0)


def test_first_tile_dim_steps_along_y_past_the_block():
    layout = _by_path(compute_layout(CONFIGS[2]))
    # block on Y holds 4 cells, plus SPACING
    offset = layout[(1, 0, 0, 0)] - layout[(0, 0, 0, 0)]
    assert tuple(offset) == (0.0, -(4 + SPACING), 0.0)


def test_tile_dims_cycle_y_x_z():
    layout = _by_path(compute_layout(CONFIGS[4]))
    origin = layout[(0, 0, 0, 0, 0, 0)]
    assert tuple(layout[(1, 0, 0, 0, 0, 0)] - origin) == (0.0, -6.0, 0.0)
    assert tuple(layout[(0, 1, 0, 0, 0, 0)] - origin) == (5.0, 0.0, 0.0)
    assert tuple(layout[(0, 0, 1, 0, 0, 0)] - origin) == (0.0, 0.0, -7.0)


def test_steps_compound_when_an_axis_is_reused():
    dim_indices = [[0, 1], [0, 1], [0, 1], [0, 1], [0, 1, 2], [0, 1, 2, 3], [0, 1, 2, 3, 4]]
    base = block_steps((4, 5, 6), dim_indices)
    assert base == {"x": 5, "y": 6, "z": 7}

    steps = assign_tile_steps([0, 1, 2, 3], dim_indices, base)
    assert steps[0] == TileStep("y", 6)
    assert steps[1] == TileStep("x", 5)
    assert steps[2] == TileStep("z", 7)
    assert steps[3] == TileStep("y", 6 * 2 + SPACING)


def test_unbound_spatial_slot_counts_as_block_of_one():
    assert block_steps((0, None, None), [[0, 1, 2]]) == {
        "x": 3 + SPACING, "y": 1 + SPACING, "z": 1 + SPACING,
    }


def test_size_one_dimension_adds_no_spread():
    layout = compute_layout(LayoutConfig(shape=[1, 4], spatial_dims=(1, 0, None)))
    assert len(layout) == 4
    assert {inst.position[1] for inst in layout} == {0.0}


def test_center_positions():
    centered = center_positions([(0, 0, 0), (2, -4, 6)])
    assert np.allclose(centered, [[-1, 2, -3], [1, -2, 3]])
    assert center_positions([]).shape == (0, 3)


# ---------------------------------------------------------------------------
# downsampling and slicing
# ---------------------------------------------------------------------------

def test_large_dimension_is_downsampled():
    layout = compute_layout(LayoutConfig(shape=[100], spatial_dims=(0, None, None),
                                         max_cells_per_dim=5))
    assert [inst.index_path[0] for inst in layout] == [0, 25, 50, 74, 99]
    # cubes stay adjacent: position follows the rank, not the original index
    assert [inst.position[0] for inst in layout] == [-2.0, -1.0, 0.0, 1.0, 2.0]


def test_page_dims_are_not_downsampled_but_pinned():
    config = CONFIGS[6]
    layout = compute_layout(config)
    assert {inst.index_path[2] for inst in layout} == {2}
    assert len(layout) == 4 * len(sample_indices(50, 4))


def test_slice_index_is_clamped():
    base = dict(shape=[2, 3, 4, 5], spatial_dims=(1, 2, 3), outer_dims=[0],
                mode="slicing")
    high = compute_layout(LayoutConfig(slice_indices={0: 99}, **base))
    low = compute_layout(LayoutConfig(slice_indices={0: -3}, **base))
    assert {inst.index_path[0] for inst in high} == {1}
    assert {inst.index_path[0] for inst in low} == {0}


def test_missing_slice_index_defaults_to_zero():
    layout = compute_layout(LayoutConfig(shape=[3, 2], spatial_dims=(1, None, None),
                                         outer_dims=[0], mode="slicing"))
    assert {inst.index_path[0] for inst in layout} == {0}


def test_tiling_ignores_slice_indices():
    config = LayoutConfig(shape=[2, 3, 4, 5], spatial_dims=(1, 2, 3),
                          outer_dims=[0], slice_indices={0: 1})
    assert len(compute_layout(config)) == 120


def test_outer_dims_are_derived_when_omitted():
    config = LayoutConfig(shape=[2, 3, 4, 5], spatial_dims=(1, 2, 3),
                          mode="slicing", slice_indices={0: 1})
    assert len(compute_layout(config)) == 60


def test_out_of_range_dims_are_ignored():
    layout = compute_layout(LayoutConfig(shape=[3], spatial_dims=(0, 7, None),
                                         outer_dims=[4]))
    assert len(layout) == 3


def test_empty_dimension_gives_empty_layout():
    assert compute_layout(LayoutConfig(shape=[0], spatial_dims=(0, None, None))) == []


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        compute_layout(LayoutConfig(shape=[2], mode="stacking"))


# ---------------------------------------------------------------------------
# values
# ---------------------------------------------------------------------------

def test_values_are_attached_from_data():
    layout = compute_layout(LayoutConfig(shape=[2, 2], spatial_dims=(1, 0, None),
                                         data=[[1, 2], [3, 4]]))
    values = {inst.index_path: inst.value for inst in layout}
    assert values == {(0, 0): 1, (0, 1): 2, (1, 0): 3, (1, 1): 4}


def test_missing_values_stay_absent():
    layout = compute_layout(LayoutConfig(shape=[2, 2], spatial_dims=(1, 0, None),
                                         data=[[1]]))
    values = {inst.index_path: inst.value for inst in layout}
    assert values[(0, 0)] == 1
    assert values[(0, 1)] is None
    assert values[(1, 0)] is None


def test_no_data_means_no_values():
    layout = compute_layout(CONFIGS[1])
    assert all(inst.value is None for inst in layout)


def test_box_instance_to_dict():
    inst = BoxInstance("1,0", (0.5, -1.0, 0.0), (1, 0), 3.0)
    assert inst.to_dict() == {
        'id': "1,0", 'position': [0.5, -1.0, 0.0], 'indexPath': [1, 0], 'value': 3.0,
    }
    assert 'value' not in BoxInstance("0", (0.0, 0.0, 0.0), (0,)).to_dict()
