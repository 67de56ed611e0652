"""Affine rescaling of a value array into a target range."""

import numpy as np
from typing import Sequence, Union


def normalize_values(
    values: Union[Sequence[float], np.ndarray],
    min_value: float = 0.0,
    max_value: float = 1.0,
) -> np.ndarray:
    """
    Rescale values into [min_value, max_value].

    Order-preserving: the smallest input maps to min_value, the largest to
    max_value. Constant input maps every element to the range midpoint.
    Empty input returns an empty array.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return np.empty(0, dtype=np.float64)

    lo = float(np.min(values))
    hi = float(np.max(values))
    span = hi - lo

    if span == 0:
        return np.full(values.shape, (min_value + max_value) / 2.0)

    return min_value + (values - lo) / span * (max_value - min_value)
