from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np

from .errors import InvalidShapeError


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def is_matrix_like(value: Any) -> bool:
    return all(callable(getattr(value, name, None)) for name in ("rows", "cols", "get"))


def coerce_sequence_rows(candidate: Any) -> tuple[int, int, list[list[Any]]]:
    if not is_sequence_like(candidate):
        raise TypeError(
            "Matrix data must be provided as a rectangular nested sequence or a 2-D NumPy array."
        )
    rows = []
    for row in candidate:
        if not (is_sequence_like(row) or (isinstance(row, np.ndarray) and row.ndim == 1)):
            raise TypeError("Each matrix row must be a sequence of entries.")
        rows.append(list(row))
    if not rows or not rows[0]:
        raise InvalidShapeError("Matrix data must not be empty.")
    cols = len(rows[0])
    for row in rows:
        if len(row) != cols:
            raise InvalidShapeError(
                "Matrix data must be rectangular (every row the same length)."
            )
    return len(rows), cols, rows


def coerce_general_matrix(candidate: Any) -> tuple[int, int, list[list[Any]]]:
    """Normalize supported inputs to ``(rows, cols, nested rows)``."""
    if is_matrix_like(candidate):
        rows = int(candidate.rows())
        cols = int(candidate.cols())
        data = [[candidate.get(i, j) for j in range(cols)] for i in range(rows)]
        return rows, cols, data

    if not isinstance(candidate, np.ndarray) and not is_sequence_like(candidate):
        raise TypeError(
            "Matrix data must be provided as a rectangular nested sequence or a 2-D NumPy array."
        )

    try:
        array = np.asarray(candidate)
    except ValueError:
        # Ragged nested input; the row walk reports which shape rule failed.
        return coerce_sequence_rows(candidate)

    if array.ndim != 2:
        if not isinstance(candidate, np.ndarray):
            return coerce_sequence_rows(candidate)
        raise InvalidShapeError(
            f"Matrix input must be a 2-D array, got {array.ndim} dimension(s)."
        )
    # Object arrays pass through; Matrix.set rejects non-real entries.
    if array.dtype.kind not in "biufO":
        raise TypeError(f"Matrix input must hold real numbers, got dtype {array.dtype}.")
    return int(array.shape[0]), int(array.shape[1]), array.tolist()
