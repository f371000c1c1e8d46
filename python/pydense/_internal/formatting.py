from __future__ import annotations

from typing import Any

from .runtime import get_settings


def format_value(value: float) -> str:
    return f"{value:g}"


def _edge_indices(length: int, edge_items: int) -> tuple[list[int], list[int], bool]:
    if length <= edge_items * 2:
        return list(range(length)), [], False
    head = list(range(edge_items))
    tail = list(range(length - edge_items, length))
    return head, tail, True


def _format_matrix_row(
    matrix: Any,
    row_index: int,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries = [format_value(matrix.get(row_index, col)) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(format_value(matrix.get(row_index, col)) for col in col_tail)
    return " ".join(entries)


def render_rows(matrix: Any) -> str:
    """Plain text used by `Matrix.print`: one line per row, cells space-separated."""
    rows, cols = matrix.shape
    lines = []
    for i in range(rows):
        lines.append(" ".join(format_value(matrix.get(i, j)) for j in range(cols)) + "\n")
    return "".join(lines)


def matrix_str(self: Any) -> str:
    rows, cols = self.shape
    header = f"{self.__class__.__name__}(shape=({rows}, {cols}))"

    edge_items = get_settings().edge_items
    row_head, row_tail, rows_truncated = _edge_indices(rows, edge_items)
    col_head, col_tail, cols_truncated = _edge_indices(cols, edge_items)

    lines = [header, "["]
    for row_index in row_head:
        row_repr = _format_matrix_row(self, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        row_repr = _format_matrix_row(self, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    lines.append("]")
    return "\n".join(lines)


class MatrixMixin:
    def __str__(self) -> str:
        return matrix_str(self)

    def __repr__(self) -> str:
        shape = getattr(self, "shape", None)
        return f"<{self.__class__.__name__} shape={shape}>"
