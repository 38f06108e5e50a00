"""Dense matrix over a numeric element type.

Addressing convention
---------------------
Elements live in one flat list in column-major order: the offset of
``(row, col)`` is ``row + col * rows()``, so the first index varies fastest
down the buffer. ``_offset`` is the only place that formula exists; reads,
writes and the identity diagonal all go through it.
"""
from __future__ import annotations

import operator
from typing import Any

from . import settings as _settings
from .dtypes import ElementType
from .errors import OutOfBounds, ShapeError
from .formatting import MatrixMixin


def _check_dimension(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not bool")
    try:
        n = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an int, got {type(value).__name__}") from None
    if n < 0:
        raise ValueError(f"{name} must be non-negative, got {n}")
    return n


def _check_index(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("matrix indices must be integers, not bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"matrix indices must be integers, got {type(value).__name__}") from None


class Matrix(MatrixMixin):
    """A ``rows x cols`` grid of numbers in a flat, exclusively owned buffer.

    ``Matrix(rows, cols)`` zero-fills the buffer with the dtype's additive
    identity. Zero dimensions are allowed here; use ``MatrixBuilder`` when a
    degenerate shape must be rejected.
    """

    def __init__(self, rows: int, cols: int, dtype: Any = None):
        self._rows = _check_dimension(rows, "rows")
        self._cols = _check_dimension(cols, "cols")
        self._dtype: ElementType = _settings.get().resolve_dtype(dtype)
        self._data: list[Any] = [self._dtype.zero] * (self._rows * self._cols)

    @classmethod
    def _from_buffer(cls, rows: int, cols: int, dtype: ElementType, data: list[Any]) -> "Matrix":
        # Entries must already be coerced to dtype.
        if len(data) != rows * cols:
            raise ShapeError(f"buffer of length {len(data)} cannot hold a {rows}x{cols} matrix")
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._cols = cols
        obj._dtype = dtype
        obj._data = data
        return obj

    # --- shape ---

    def rows(self) -> int:
        return self._rows

    def cols(self) -> int:
        return self._cols

    columns = cols

    def size(self) -> int:
        return self._rows * self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def dtype(self) -> ElementType:
        return self._dtype

    def is_square(self) -> bool:
        return self._rows == self._cols

    # --- element access ---

    def _offset(self, row: Any, col: Any) -> int:
        r = _check_index(row)
        c = _check_index(col)
        if not (0 <= r < self._rows and 0 <= c < self._cols):
            raise OutOfBounds(r, c, self.shape)
        return r + c * self._rows

    def get(self, row: int, col: int) -> Any:
        return self._data[self._offset(row, col)]

    def set(self, row: int, col: int, value: Any) -> None:
        offset = self._offset(row, col)
        self._data[offset] = self._dtype.coerce(value)

    def __getitem__(self, key: Any) -> Any:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be provided as [row, col]")
        return self.get(key[0], key[1])

    def __setitem__(self, key: Any, value: Any) -> None:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be provided as [row, col]")
        self.set(key[0], key[1], value)

    # --- bulk mutation ---

    def fill_with(self, value: Any) -> "Matrix":
        """Set every element to ``value`` and return ``self``."""
        coerced = self._dtype.coerce(value)
        self._data = [coerced] * self.size()
        return self

    def identity(self) -> "Matrix":
        """Overwrite this square matrix with the identity and return ``self``.

        Raises ShapeError, without touching the buffer, when the matrix is
        not square.
        """
        if not self.is_square():
            raise ShapeError("matrix is not square")
        self.fill_with(self._dtype.zero)
        one = self._dtype.one
        for i in range(self._cols):
            self._data[self._offset(i, i)] = one
        return self

    # --- views/copies ---

    @property
    def elements(self) -> tuple[Any, ...]:
        """Snapshot of the flat buffer in storage (column-major) order."""
        return tuple(self._data)

    def copy(self) -> "Matrix":
        return Matrix._from_buffer(self._rows, self._cols, self._dtype, list(self._data))

    def to_list(self) -> list[list[Any]]:
        return [[self.get(i, j) for j in range(self._cols)] for i in range(self._rows)]

    def to_numpy(self) -> Any:
        np_module = _settings.get().np_module
        if np_module is None:
            raise ImportError("NumPy is required for Matrix.to_numpy()")
        np_dtype = self._dtype.numpy_dtype or object
        return np_module.array(self.to_list(), dtype=np_dtype).reshape(self._rows, self._cols)

    def __array__(self, dtype: Any = None, copy: Any = None) -> Any:
        arr = self.to_numpy()
        if dtype is not None:
            arr = arr.astype(dtype)
        return arr

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.shape == other.shape
            and self._dtype == other._dtype
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]


def populate(matrix: Matrix, nested: list[list[Any]]) -> Matrix:
    """Write ``nested[i][j]`` to ``(i, j)`` for every coordinate of ``matrix``."""
    for i in range(matrix.rows()):
        row = nested[i]
        for j in range(matrix.cols()):
            matrix.set(i, j, row[j])
    return matrix
