import pytest

from TensorGrid.core.parsing import infer_shape, parse_shape, parse_tensor
from TensorGrid.core.values import Nested, Scalar


def test_parse_shape_accepts_free_form_text():
    assert parse_shape("[10, 20]") == [10, 20]
    assert parse_shape("B: 10, L: 20") == [10, 20]
    assert parse_shape("[4, 4, 4]") == [4, 4, 4]
    assert parse_shape("4x4x4") == [4, 4, 4]


def test_parse_shape_without_digits_is_empty():
    assert parse_shape("") == []
    assert parse_shape("batch, channels") == []


def test_parse_shape_drops_zero_sizes():
    assert parse_shape("0, 3, 00, 2") == [3, 2]


def test_parse_shape_keeps_first_eight_dimensions():
    with pytest.warns(UserWarning):
        dims = parse_shape("1 2 3 4 5 6 7 8 9 10")
    assert dims == [1, 2, 3, 4, 5, 6, 7, 8]


def test_parse_tensor_infers_shape_and_keeps_data():
    tensor = parse_tensor("[[1, 2], [3, 4]]")
    assert tensor.shape == [2, 2]
    assert tensor.data == [[1, 2], [3, 4]]
    assert isinstance(tensor.values, Nested)
    assert tensor.values.items[1].items[0] == Scalar(3.0)


def test_parse_tensor_follows_first_element_of_ragged_input():
    tensor = parse_tensor("[[1, 2, 3], [4]]")
    assert tensor.shape == [2, 3]


def test_parse_tensor_stops_at_empty_level():
    assert parse_tensor("[]").shape == [0]
    assert parse_tensor("[[], [1]]").shape == [2, 0]


@pytest.mark.parametrize("text", [
    "",
    "   ",
    "not json",
    "[1, 2",
    "42",
    '{"a": [1, 2]}',
    '"[1, 2]"',
    "[NaN]",
    "Infinity",
    "[" * 100000,
    "[" * 5000 + "1" + "]" * 5000,
])
def test_parse_tensor_rejects_non_arrays(text):
    assert parse_tensor(text) is None


def test_infer_shape_of_scalar_is_empty():
    assert infer_shape(3) == []


def test_parse_tensor_accepts_integers_too_large_for_a_float():
    tensor = parse_tensor("[1, " + "9" * 400 + ", -" + "9" * 400 + "]")
    assert tensor.shape == [3]
    assert tensor.values == Nested(
        (Scalar(1), Scalar(float("inf")), Scalar(float("-inf")))
    )
