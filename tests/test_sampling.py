import pytest

from TensorGrid.core.sampling import clamp_index, sample_indices


def test_sample_indices_known_values():
    assert sample_indices(10, 4) == [0, 3, 6, 9]
    assert sample_indices(100, 5) == [0, 25, 50, 74, 99]
    assert sample_indices(5, 8) == [0, 1, 2, 3, 4]


def test_sample_indices_without_downsampling_keeps_every_index():
    assert sample_indices(8, 8) == list(range(8))
    assert sample_indices(1, 8) == [0]


def test_sample_indices_cap_below_two_keeps_first_index():
    assert sample_indices(10, 1) == [0]
    assert sample_indices(10, 0) == [0]


def test_sample_indices_empty_dimension():
    assert sample_indices(0, 8) == []


@pytest.mark.parametrize("cap", [2, 3, 5, 8, 13, 20])
def test_sample_indices_anchors_both_endpoints(cap):
    for size in range(cap + 1, 120):
        picks = sample_indices(size, cap)
        assert picks[0] == 0
        assert picks[-1] == size - 1
        assert len(picks) <= cap
        assert all(a < b for a, b in zip(picks, picks[1:]))


def test_sample_indices_returns_python_ints():
    assert all(type(i) is int for i in sample_indices(1000, 7))


def test_clamp_index():
    assert clamp_index(5, 3) == 2
    assert clamp_index(-4, 3) == 0
    assert clamp_index(1, 3) == 1
