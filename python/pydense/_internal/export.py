from __future__ import annotations

from typing import Any

import numpy as np


def _safe_shape(obj: Any) -> tuple[int, int] | None:
    try:
        return int(obj.rows()), int(obj.cols())
    except Exception:
        pass
    shape = getattr(obj, "shape", None)
    if isinstance(shape, tuple) and len(shape) == 2:
        return int(shape[0]), int(shape[1])
    return None


def export_to_numpy(obj: Any, *, dtype: Any = None) -> Any:
    """Materialize a matrix-like object as a fresh 2-D NumPy array.

    The result never aliases the source storage; float64 unless a dtype is
    requested.
    """
    shape = _safe_shape(obj)
    if shape is None:
        raise TypeError(f"expected a matrix-like object, got {type(obj).__name__}")

    target_dtype = np.float64 if dtype is None else np.dtype(dtype)
    rows, cols = shape

    tolist = getattr(obj, "tolist", None)
    if callable(tolist):
        return np.array(tolist(), dtype=target_dtype).reshape(rows, cols)

    out = np.empty((rows, cols), dtype=target_dtype)
    for i in range(rows):
        for j in range(cols):
            out[i, j] = obj.get(i, j)
    return out
