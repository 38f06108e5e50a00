"""Dense two-dimensional matrices with bounds-checked access and staged construction."""
from __future__ import annotations

from typing import Any

__version__ = "0.1.0"

from ._internal import settings as _settings_mod
from ._internal import factories as _factories
from ._internal.builder import MatrixBuilder
from ._internal.dtypes import (
    BOOL,
    COMPLEX128,
    FLOAT64,
    INT64,
    ElementType,
    require_dtype as _require_dtype,
)
from ._internal.errors import (
    BuilderConsumedError,
    OutOfBounds,
    PyMatrixError,
    ShapeError,
)
from ._internal.matrix import Matrix
from ._internal.warnings import PyMatrixDTypeWarning, PyMatrixWarning

try:  # NumPy is optional at runtime
    import numpy as _np
except ImportError:  # pragma: no cover - exercised when numpy is absent
    _np = None

_settings = _settings_mod.configure(np_module=_np)

# Public dtype tokens. Any of these, a Python builtin type, a NumPy dtype or an
# ElementType instance is accepted wherever a dtype is.
int64 = INT64
int_ = INT64
float64 = FLOAT64
float_ = FLOAT64
complex128 = COMPLEX128
bool_ = BOOL


def matrix(source: Any, dtype: Any = None) -> Matrix:
    """Create a matrix from 2D data.

    Accepts nested sequences, 2D NumPy arrays and matrix-like objects exposing
    ``rows()``, ``cols()`` and ``get(i, j)``. Without ``dtype`` the element type
    is inferred: all bools -> bool, all integers -> int64, any complex ->
    complex128, otherwise float64.
    """
    return _factories.matrix_factory(source, dtype=dtype, np_module=_np)


def zeros(rows: int, cols: int, dtype: Any = None) -> Matrix:
    """Allocate a zero-filled ``rows x cols`` matrix."""
    return _factories.zeros_factory(rows, cols, dtype=dtype)


def identity(n: int, dtype: Any = None) -> Matrix:
    """Create an ``n x n`` identity matrix."""
    return _factories.identity_factory(n, dtype=dtype)


def asarray(obj: Any) -> Matrix:
    return _factories.asarray_factory(obj, np_module=_np)


def set_default_dtype(dtype: Any) -> None:
    """Set the dtype used when ``dtype`` is omitted (initially float64)."""
    _settings.set_default_dtype(dtype)


def get_default_dtype() -> ElementType:
    return _settings.default_dtype


def set_print_options(*, edge_items: int | None = None) -> None:
    """Configure ``str(matrix)``: rows/cols beyond ``2 * edge_items`` are elided."""
    if edge_items is not None:
        _settings.set_edge_items(edge_items)


def dtype(token: Any) -> ElementType:
    """Resolve a dtype token (string, builtin type, NumPy dtype) to an ElementType."""
    return _require_dtype(token, np_module=_np)


__all__ = [
    "BuilderConsumedError",
    "ElementType",
    "Matrix",
    "MatrixBuilder",
    "OutOfBounds",
    "PyMatrixDTypeWarning",
    "PyMatrixError",
    "PyMatrixWarning",
    "ShapeError",
    "asarray",
    "bool_",
    "complex128",
    "dtype",
    "float64",
    "float_",
    "get_default_dtype",
    "identity",
    "int64",
    "int_",
    "matrix",
    "set_default_dtype",
    "set_print_options",
    "zeros",
]
