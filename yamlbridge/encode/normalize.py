from __future__ import annotations

from typing import Any, List

import numpy as np

from yamlbridge.errors import HigherDimensionsNotSupported

MAX_NDIM = 3


def normalize(value: Any) -> Any:
    """
    Split a dense 2-D or 3-D array into a list of slices along axis 0.

    Works for shapes:
      - scalars, (N,) and non-array values: returned unchanged
      - (N, M): list of N row vectors of shape (M,)
      - (N, M, K): list of N matrices of shape (M, K)

    Slices are views and are normalized again by the caller as it recurses, so
    the final sequence nesting depth equals ``value.ndim``.

    Raises HigherDimensionsNotSupported for ndim > 3.
    """
    if not isinstance(value, np.ndarray) or value.ndim <= 1:
        return value
    if value.ndim > MAX_NDIM:
        raise HigherDimensionsNotSupported(
            f"Arrays with more than {MAX_NDIM} dimensions are not supported, got shape {value.shape}."
            " Use nested lists instead."
        )
    rows: List[np.ndarray] = [value[i] for i in range(value.shape[0])]
    return rows
