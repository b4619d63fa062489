#!/usr/bin/env python3
"""
Shape and tensor-literal parsing.

Both parsers are forgiving: malformed input yields an empty shape or
``None`` rather than an exception.
"""

import json
import re
import warnings
from dataclasses import dataclass
from typing import Any, List, Optional

from TensorGrid.core.config import MAX_RANK
from TensorGrid.core.values import TensorValue, to_tensor_value

_DIGITS = re.compile(r"\d+")


@dataclass
class TensorData:
    """A parsed tensor literal: inferred shape plus the raw nested values."""
    shape: List[int]
    data: Any
    values: Optional[TensorValue] = None

    def __post_init__(self):
        if self.values is None:
            self.values = to_tensor_value(self.data)


def parse_shape(text: str) -> List[int]:
    """
    Extract a shape from free-form text.

    Every run of digits is read as one dimension, so ``"[4,4,4]"``,
    ``"4 x 4 x 4"`` and ``"B: 4, H: 4, W: 4"`` all give ``[4, 4, 4]``.
    Zero-sized entries are dropped and at most ``MAX_RANK`` dimensions
    are kept.

    Examples
    --------
    >>> parse_shape("B: 10, L: 20")
    [10, 20]
    >>> parse_shape("no digits")
    []
    """
    if not text:
        return []
    dims = [int(m) for m in _DIGITS.findall(text)]
    dims = [d for d in dims if d > 0]
    if len(dims) > MAX_RANK:
        warnings.warn(
            f"Shape has {len(dims)} dimensions; keeping the first {MAX_RANK}."
        )
        dims = dims[:MAX_RANK]
    return dims


def _reject_constant(name: str):
    raise ValueError(f"Unsupported JSON constant: {name}")


def infer_shape(data: Any) -> List[int]:
    """Shape of a nested list, following the first element of each level."""
    shape: List[int] = []
    node = data
    while isinstance(node, list):
        shape.append(len(node))
        if not node:
            break
        node = node[0]
    return shape


def parse_tensor(text: str) -> Optional[TensorData]:
    """
    Parse a JSON array literal into a ``TensorData``.

    Returns ``None`` when *text* is not valid JSON, the top level is not
    an array, or the nesting is too deep to decode. Ragged input is not
    rejected; the shape then describes the path through the first element
    of every level.

    Examples
    --------
    >>> parse_tensor("[[1, 2], [3, 4]]").shape
    [2, 2]
    >>> parse_tensor("{}") is None
    True
    """
    if not text or not text.strip():
        return None
    try:
        data = json.loads(text, parse_constant=_reject_constant)
        if not isinstance(data, list):
            return None
        return TensorData(shape=infer_shape(data), data=data)
    except (ValueError, RecursionError):
        return None
