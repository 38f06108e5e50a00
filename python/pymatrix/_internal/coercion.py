from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

from .errors import ShapeError


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def coerce_sequence_rows(candidate: Any) -> tuple[int, int, list[list[Any]]]:
    if not is_sequence_like(candidate):
        raise TypeError("Matrix data must be provided as a nested sequence or a NumPy array.")
    rows = list(candidate)
    if not rows:
        raise ShapeError("Matrix data must not be empty.")
    if not all(is_sequence_like(row) for row in rows):
        raise TypeError("matrix(...) expects 2D input; each row must be a sequence of entries.")
    rows = [list(row) for row in rows]
    cols = len(rows[0])
    if cols == 0:
        raise ShapeError("Matrix rows must not be empty.")
    for row in rows:
        if len(row) != cols:
            raise ShapeError("Matrix data must be rectangular (every row the same length).")
        if any(is_sequence_like(entry) for entry in row):
            raise TypeError("matrix(...) expects 2D input, not deeper nesting.")
    return len(rows), cols, rows


def coerce_general_matrix(candidate: Any, *, np_module: Any | None) -> tuple[int, int, list[list[Any]]]:
    """Return ``(rows, cols, nested_rows)`` for any supported 2D source."""
    rows_attr: Any = getattr(candidate, "rows", None)
    cols_attr: Any = getattr(candidate, "cols", None)
    get_attr: Any = getattr(candidate, "get", None)
    if callable(rows_attr) and callable(cols_attr) and callable(get_attr):
        r = int(rows_attr())
        c = int(cols_attr())
        if r <= 0 or c <= 0:
            raise ShapeError("Matrix data must not be empty.")
        return r, c, [[get_attr(i, j) for j in range(c)] for i in range(r)]

    if np_module is not None and isinstance(candidate, np_module.ndarray):
        if candidate.ndim != 2:
            raise TypeError("matrix(...) expects 2D input")
        if candidate.size == 0:
            raise ShapeError("Matrix data must not be empty.")
        # tolist() yields Python scalars, which the dtype coercers accept directly.
        return int(candidate.shape[0]), int(candidate.shape[1]), candidate.tolist()

    return coerce_sequence_rows(candidate)
