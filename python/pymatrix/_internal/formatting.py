from __future__ import annotations

from typing import Any

from . import settings as _settings


def _edge_indices(length: int, edge_items: int) -> tuple[list[int], list[int], bool]:
    if length <= edge_items * 2:
        return list(range(length)), [], False
    head = list(range(edge_items))
    tail = list(range(length - edge_items, length))
    return head, tail, True


def _format_value(value: Any) -> str:
    np_module = _settings.get().np_module
    if np_module is not None and isinstance(value, np_module.generic):
        value = value.item()
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, complex):
        return f"{value.real:g}{value.imag:+g}j"
    return str(value)


def _format_matrix_row(
    matrix: Any,
    row_index: int,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries: list[str] = [_format_value(matrix.get(row_index, col)) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(_format_value(matrix.get(row_index, col)) for col in col_tail)
    return " ".join(entries)


def matrix_str(self: Any) -> str:
    rows = self.rows()
    cols = self.cols()

    info = [f"shape=({rows}, {cols})"]
    dtype = getattr(self, "dtype", None)
    if dtype is not None:
        info.append(f"dtype={dtype}")

    header = f"{self.__class__.__name__}({', '.join(info)})"

    if rows == 0 or cols == 0:
        return header + "\n[]"

    edge_items = _settings.get().edge_items
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
        dtype = getattr(self, "dtype", None)
        return f"<{self.__class__.__name__} shape={shape} dtype={dtype}>"
