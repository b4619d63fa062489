from TensorGrid.core.values import Nested, Scalar, lookup_value, to_tensor_value


def test_lookup_value_round_trip():
    data = [[1, 2], [3, 4]]
    assert lookup_value(data, [1, 0]) == 3
    assert lookup_value(data, [5, 0]) is None


def test_lookup_value_rejects_negative_indices():
    assert lookup_value([[1, 2], [3, 4]], [-1, 0]) is None


def test_lookup_value_needs_a_number_at_the_end_of_the_path():
    data = [[1, 2], [3, 4]]
    assert lookup_value(data, [0]) is None
    assert lookup_value(data, [0, 0, 0]) is None


def test_lookup_value_ignores_non_numeric_leaves():
    data = [[1, "two", None, True]]
    assert lookup_value(data, [0, 0]) == 1
    assert lookup_value(data, [0, 1]) is None
    assert lookup_value(data, [0, 2]) is None
    assert lookup_value(data, [0, 3]) is None


def test_lookup_value_without_data():
    assert lookup_value(None, [0]) is None


def test_to_tensor_value_builds_recursive_value():
    value = to_tensor_value([[1.5], 2])
    assert value == Nested((Nested((Scalar(1.5),)), Scalar(2.0)))
    assert lookup_value(value, [0, 0]) == 1.5
    assert lookup_value(value, [1]) == 2.0


def test_to_tensor_value_passes_existing_values_through():
    value = Nested((Scalar(1.0),))
    assert to_tensor_value(value) is value


def test_integer_leaves_stay_exact():
    big = 2 ** 60 + 1
    value = lookup_value([[big, 2]], [0, 0])
    assert value == big
    assert isinstance(value, int)


def test_integer_too_large_for_a_float_becomes_infinity():
    huge = 10 ** 400
    assert to_tensor_value([huge, -huge]) == Nested(
        (Scalar(float("inf")), Scalar(float("-inf")))
    )


def test_lookup_value_walks_deep_data_without_recursing():
    node = Scalar(7)
    for _ in range(5000):
        node = Nested((node,))
    assert lookup_value(node, [0] * 5000) == 7
    assert lookup_value(node, [0] * 4999 + [1]) is None
