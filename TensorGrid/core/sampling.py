#!/usr/bin/env python3
"""
Index downsampling for dimensions too large to draw in full.
"""

from typing import List

import numpy as np


def sample_indices(size: int, max_cells: int) -> List[int]:
    """
    Choose an evenly spaced, ordered subset of ``range(size)``.

    Parameters
    ----------
    size : int
        True length of the dimension.
    max_cells : int
        Maximum number of indices to keep.

    Returns
    -------
    list of int
        Every index when ``size <= max_cells``; ``[0]`` when
        ``max_cells < 2``; otherwise ``max_cells`` points spread from 0 to
        ``size - 1`` inclusive, rounded half-up, with duplicates removed
        (so the result may be slightly shorter than ``max_cells``).

    Examples
    --------
    >>> sample_indices(10, 4)
    [0, 3, 6, 9]
    >>> sample_indices(100, 5)
    [0, 25, 50, 74, 99]
    >>> sample_indices(5, 8)
    [0, 1, 2, 3, 4]
    """
    if size <= 0:
        return []
    if size <= max_cells:
        return list(range(size))
    if max_cells < 2:
        return [0]

    step = (size - 1) / (max_cells - 1)
    picks = np.floor(np.arange(max_cells) * step + 0.5).astype(int)
    # dict keeps first-occurrence order
    return [int(i) for i in dict.fromkeys(picks.tolist())]


def clamp_index(index: int, size: int) -> int:
    """Clamp *index* into ``[0, size - 1]``."""
    return max(0, min(int(index), size - 1))
