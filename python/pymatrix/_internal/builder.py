from __future__ import annotations

from typing import Any

from .coercion import coerce_sequence_rows
from .errors import BuilderConsumedError, ShapeError
from .matrix import Matrix, _check_dimension, populate


class MatrixBuilder:
    """Stage a matrix shape (and optionally its contents) before building it.

    Setters record values without validating them and return the builder, so
    calls chain::

        m = MatrixBuilder().set_columns(3).set_rows(2).finalize()

    ``finalize()`` is where the shape is checked. A successful finalize
    consumes the builder; any further use raises BuilderConsumedError.
    """

    def __init__(self) -> None:
        self._column_count: Any = 0
        self._row_count: Any = 0
        self._dtype: Any = None
        self._elements: list[list[Any]] | None = None
        self._consumed = False

    def _ensure_live(self) -> None:
        if self._consumed:
            raise BuilderConsumedError("MatrixBuilder has already been finalized")

    @property
    def column_count(self) -> Any:
        return self._column_count

    @property
    def row_count(self) -> Any:
        return self._row_count

    @property
    def consumed(self) -> bool:
        return self._consumed

    def set_columns(self, n: int) -> "MatrixBuilder":
        self._ensure_live()
        self._column_count = n
        return self

    set_cols = set_columns

    def set_rows(self, n: int) -> "MatrixBuilder":
        self._ensure_live()
        self._row_count = n
        return self

    def set_dtype(self, dtype: Any) -> "MatrixBuilder":
        self._ensure_live()
        self._dtype = dtype
        return self

    def set_elements(self, rows: Any) -> "MatrixBuilder":
        """Stage initial contents as nested rows, ``rows[i][j]`` -> ``(i, j)``."""
        self._ensure_live()
        self._elements = rows
        return self

    def finalize(self) -> Matrix:
        self._ensure_live()

        cols = _check_dimension(self._column_count, "columns")
        rows = _check_dimension(self._row_count, "rows")
        if cols == 0:
            raise ShapeError("columns cannot be zero")
        if rows == 0:
            raise ShapeError("rows cannot be zero")

        result = Matrix(rows, cols, dtype=self._dtype)
        if self._elements is not None:
            data_rows, data_cols, nested = coerce_sequence_rows(self._elements)
            if (data_rows, data_cols) != (rows, cols):
                raise ShapeError(
                    f"staged elements have shape ({data_rows}, {data_cols}), "
                    f"expected ({rows}, {cols})"
                )
            populate(result, nested)

        self._consumed = True
        self._elements = None
        return result

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "staged"
        return (
            f"MatrixBuilder(columns={self._column_count}, rows={self._row_count}, "
            f"dtype={self._dtype}, {state})"
        )
