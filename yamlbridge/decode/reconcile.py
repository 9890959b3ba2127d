from __future__ import annotations

from typing import Any, List, Optional

import numpy as np

from yamlbridge.config import LoadOptions

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)
UINT64_MAX = int(np.iinfo(np.uint64).max)


def reconcile(value: Any, options: LoadOptions = LoadOptions()) -> Any:
    """
    Turn uniform numeric sequences of a decoded value into numpy arrays.

    Works bottom-up:
      - a non-empty list of numbers becomes a 1-D array (int64, uint64 when a
        value only fits the unsigned range, float64 as soon as a float is present),
      - a non-empty list of booleans becomes a 1-D bool array,
      - a list of arrays with identical shape and compatible dtype is stacked
        into one more dimension, up to ``options.max_array_ndim``.

    Everything else (mixed content, strings, nulls, ragged rows, empty lists)
    stays a list. Mappings are reconciled value by value.
    """
    if isinstance(value, dict):
        return {k: reconcile(v, options) for k, v in value.items()}
    if isinstance(value, list):
        items = [reconcile(v, options) for v in value]
        if options.convert_to_array:
            arr = _as_array(items, int(options.max_array_ndim))
            if arr is not None:
                return arr
        return items
    return value


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _as_array(items: List[Any], max_ndim: int) -> Optional[np.ndarray]:
    if not items:
        return None
    if all(isinstance(x, bool) for x in items):
        return np.array(items, dtype=bool)
    if all(_is_number(x) for x in items):
        dtype = _number_dtype(items)
        return None if dtype is None else np.array(items, dtype=dtype)
    if all(isinstance(x, np.ndarray) for x in items):
        return _stack(items, max_ndim)
    return None


def _number_dtype(items: List[Any]) -> Optional[type]:
    if any(isinstance(x, float) for x in items):
        return np.float64
    if all(INT64_MIN <= x <= INT64_MAX for x in items):
        return np.int64
    if all(0 <= x <= UINT64_MAX for x in items):
        return np.uint64
    return None


def _stack(arrays: List[np.ndarray], max_ndim: int) -> Optional[np.ndarray]:
    first = arrays[0]
    if first.ndim + 1 > max_ndim:
        return None
    if any(a.shape != first.shape for a in arrays):
        return None
    dtypes = {a.dtype for a in arrays}
    if len(dtypes) == 1:
        return np.stack(arrays)
    kinds = {dt.kind for dt in dtypes}
    # int64 + uint64 has no lossless common type
    if "b" in kinds or "f" not in kinds:
        return None
    return np.stack(arrays).astype(np.float64)
