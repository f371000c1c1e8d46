from __future__ import annotations

import numbers
import operator
import sys
import warnings
from typing import IO, Any, Iterator

from . import export as _export
from . import formatting as _formatting
from .errors import DimensionMismatchError, InvalidShapeError, OutOfRangeError
from .runtime import get_settings
from .warnings import PyDensePerformanceWarning


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, not bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from None


def _as_float(value: Any) -> float:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Matrix values must be real numbers, got {type(value).__name__}")
    return float(value)


class Matrix(_formatting.MatrixMixin):
    """Dense rows x cols grid of floats.

    The shape is fixed at construction; cell values change only through
    `set` (or `m[i, j] = v`). `add` and `multiply` return new matrices that
    share no storage with their operands.

    Indices are 0-based and bounds-checked. Negative indices are rejected
    rather than counted from the end.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int):
        rows = _as_int(rows, "rows")
        cols = _as_int(cols, "cols")
        if rows <= 0 or cols <= 0:
            raise InvalidShapeError(
                f"Matrix dimensions must be positive, got ({rows}, {cols})"
            )
        self._rows = rows
        self._cols = cols
        self._data: list[list[float]] = [[0.0] * cols for _ in range(rows)]

    def rows(self) -> int:
        return self._rows

    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def _check_index(self, op: str, row: Any, col: Any) -> tuple[int, int]:
        r = _as_int(row, "row")
        c = _as_int(col, "col")
        if r < 0 or r >= self._rows or c < 0 or c >= self._cols:
            raise OutOfRangeError(op, (r, c), self.shape)
        return r, c

    def get(self, row: int, col: int) -> float:
        r, c = self._check_index("get", row, col)
        return self._data[r][c]

    def set(self, row: int, col: int, value: float) -> None:
        r, c = self._check_index("set", row, col)
        self._data[r][c] = _as_float(value)

    def add(self, other: Matrix) -> Matrix:
        """Elementwise sum; both operands must have the same shape."""
        if not isinstance(other, Matrix):
            raise TypeError(f"add expects a Matrix, got {type(other).__name__}")
        if other.shape != self.shape:
            raise DimensionMismatchError("add", self.shape, other.shape)

        result = Matrix(self._rows, self._cols)
        for i in range(self._rows):
            a_row = self._data[i]
            b_row = other._data[i]
            result._data[i] = [a_row[j] + b_row[j] for j in range(self._cols)]
        return result

    def multiply(self, other: Matrix) -> Matrix:
        """Standard matrix product ``self @ other``.

        Each output cell starts from 0.0 and accumulates
        ``self[i][k] * other[k][j]`` for ascending k, so results are
        reproducible bit-for-bit for identical inputs.
        """
        return self._product(other, stacklevel=3)

    def _product(self, other: Matrix, *, stacklevel: int) -> Matrix:
        if not isinstance(other, Matrix):
            raise TypeError(f"multiply expects a Matrix, got {type(other).__name__}")
        if self._cols != other._rows:
            raise DimensionMismatchError("multiply", self.shape, other.shape)

        rows = self._rows
        inner = self._cols
        cols = other._cols

        limit = get_settings().matmul_warn_ops
        if limit is not None and rows * inner * cols > limit:
            warnings.warn(
                f"multiply of {self.shape} by {other.shape} runs {rows * inner * cols} "
                "multiply-adds in pure Python; this may be slow.",
                PyDensePerformanceWarning,
                stacklevel=stacklevel,
            )

        rhs = other._data
        result = Matrix(rows, cols)
        for i in range(rows):
            a_row = self._data[i]
            out_row = result._data[i]
            for j in range(cols):
                acc = 0.0
                for k in range(inner):
                    acc += a_row[k] * rhs[k][j]
                out_row[j] = acc
        return result

    def print(self, file: IO[str] | None = None) -> None:
        """Write one line per row, values separated by single spaces.

        Values use ``%g`` formatting. This is a debugging aid, not a
        serialization format.
        """
        stream = sys.stdout if file is None else file
        stream.write(_formatting.render_rows(self))
        stream.flush()

    def tolist(self) -> list[list[float]]:
        return [list(row) for row in self._data]

    def copy(self) -> Matrix:
        result = Matrix(self._rows, self._cols)
        result._data = self.tolist()
        return result

    def __len__(self) -> int:
        return self._rows

    def __iter__(self) -> Iterator[list[float]]:
        for row in self._data:
            yield list(row)

    def _split_key(self, key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, col) tuple")
        return key

    def __getitem__(self, key: Any) -> float:
        i, j = self._split_key(key)
        return self.get(i, j)

    def __setitem__(self, key: Any, value: float) -> None:
        i, j = self._split_key(key)
        self.set(i, j, value)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._product(other, stacklevel=3)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        # Cell-by-cell so NaN never compares equal, not even to itself.
        return all(
            x == y
            for a_row, b_row in zip(self._data, other._data)
            for x, y in zip(a_row, b_row)
        )

    def __array__(self, dtype: Any = None, copy: Any = None) -> Any:
        if copy is False:
            raise ValueError("Matrix cannot be exported to NumPy without a copy")
        return _export.export_to_numpy(self, dtype=dtype)
