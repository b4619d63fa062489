#!/usr/bin/env python3
"""
Nested tensor values and index-path lookup.

A tensor literal is held as a small recursive type:

    Scalar   – a single number
    Nested   – an ordered sequence of child values

Leaves that are not numbers (strings, booleans, ``null``) are stored as
``None`` so that a lookup landing on them reports "no value" instead of
inventing one.
"""

from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Optional, Sequence, Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Scalar:
    """A single numeric leaf. Integers stay exact."""
    value: Number


@dataclass(frozen=True)
class Nested:
    """An ordered sequence of child values."""
    items: Tuple[Optional["TensorValue"], ...]

    def __len__(self) -> int:
        return len(self.items)


TensorValue = Union[Scalar, Nested]


def _is_number(obj: Any) -> bool:
    # bool is a subclass of int, but JSON true/false are not numbers
    return isinstance(obj, Real) and not isinstance(obj, bool)


def _to_number(obj: Any) -> Number:
    if isinstance(obj, Integral):
        value = int(obj)
        try:
            float(value)
        except OverflowError:
            return float("inf") if value > 0 else float("-inf")
        return value
    return float(obj)


def to_tensor_value(obj: Any) -> Optional[TensorValue]:
    """
    Convert JSON-decoded Python data into a ``TensorValue``.

    Lists and tuples become ``Nested``, numbers become ``Scalar`` and
    anything else becomes ``None``. An integer too large for a float becomes
    a signed infinity.
    """
    if isinstance(obj, (Scalar, Nested)):
        return obj
    if isinstance(obj, (list, tuple)):
        return Nested(tuple(to_tensor_value(item) for item in obj))
    if _is_number(obj):
        return Scalar(_to_number(obj))
    return None


def lookup_value(data: Any, index_path: Sequence[int]) -> Optional[Number]:
    """
    Return the number stored at *index_path*, or ``None``.

    Parameters
    ----------
    data : TensorValue or nested lists, optional
        Source values. Plain nested lists are converted on the fly.
    index_path : sequence of int
        One index per nesting level.

    Returns
    -------
    int, float or None
        ``None`` when a level is not a sequence, an index is out of
        bounds, or the final node is not a number.

    Examples
    --------
    >>> lookup_value([[1, 2], [3, 4]], [1, 0])
    3
    >>> lookup_value([[1, 2], [3, 4]], [5, 0]) is None
    True
    """
    if data is None:
        return None
    if not isinstance(data, (Scalar, Nested)):
        data = to_tensor_value(data)
    node = data
    for idx in index_path:
        if not isinstance(node, Nested) or idx < 0 or idx >= len(node.items):
            return None
        node = node.items[idx]
    return node.value if isinstance(node, Scalar) else None
