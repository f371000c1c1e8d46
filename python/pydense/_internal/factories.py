from __future__ import annotations

from typing import Any

from .coercion import coerce_general_matrix, is_matrix_like, is_sequence_like
from .dense import Matrix


def matrix(data: Any) -> Matrix:
    """Build a Matrix from nested rows, a 2-D NumPy array or another matrix."""
    rows, cols, values = coerce_general_matrix(data)
    out = Matrix(rows, cols)
    for i in range(rows):
        for j in range(cols):
            out.set(i, j, values[i][j])
    return out


def zeros(rows: int, cols: int) -> Matrix:
    return Matrix(rows, cols)


def _identity_shape(source: Any) -> tuple[Any, Any]:
    if is_matrix_like(source):
        return source.rows(), source.cols()
    if is_sequence_like(source):
        if len(source) != 2:
            raise TypeError("identity shape must be a (rows, cols) pair")
        return source[0], source[1]
    return source, source


def identity(source: Any) -> Matrix:
    """Matrix with ones on the main diagonal.

    `source` is a size n (square), a (rows, cols) pair, or a matrix whose
    shape is copied.
    """
    rows, cols = _identity_shape(source)
    out = Matrix(rows, cols)
    for i in range(min(out.rows(), out.cols())):
        out.set(i, i, 1.0)
    return out
