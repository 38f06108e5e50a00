from __future__ import annotations

import numbers
from typing import Any

from .coercion import coerce_general_matrix, is_sequence_like
from .dtypes import infer_dtype, require_dtype
from .matrix import Matrix, populate


def _is_scalar_0d(value: Any) -> bool:
    if isinstance(value, numbers.Number):
        return True
    return getattr(value, "ndim", None) == 0


def matrix_factory(source: Any, *, dtype: Any, np_module: Any | None) -> Matrix:
    if _is_scalar_0d(source):
        raise TypeError(
            "matrix(...) constructs from data; shape allocation uses zeros/identity. "
            "Scalars/0D are not supported."
        )

    if isinstance(source, Matrix):
        if dtype is not None:
            raise TypeError(
                "matrix(...) does not accept dtype when source is already a matrix. "
                "Pass data instead."
            )
        return source

    if np_module is not None and isinstance(source, np_module.ndarray):
        if source.ndim != 2:
            raise TypeError("matrix(...) expects 2D input")
        if dtype is None and source.size and source.dtype.kind in "biufc":
            dtype = source.dtype
    elif is_sequence_like(source) and len(source) > 0 and not is_sequence_like(source[0]):
        raise TypeError("matrix(...) expects 2D input")

    rows, cols, nested = coerce_general_matrix(source, np_module=np_module)

    if dtype is None:
        element_type = infer_dtype([v for row in nested for v in row])
    else:
        element_type = require_dtype(dtype, np_module=np_module)
    return populate(Matrix(rows, cols, dtype=element_type), nested)


def zeros_factory(rows: int, cols: int, *, dtype: Any) -> Matrix:
    return Matrix(rows, cols, dtype=dtype)


def identity_factory(n: int, *, dtype: Any) -> Matrix:
    return Matrix(n, n, dtype=dtype).identity()


def asarray_factory(obj: Any, *, np_module: Any | None) -> Matrix:
    if isinstance(obj, Matrix):
        return obj
    return matrix_factory(obj, dtype=None, np_module=np_module)
