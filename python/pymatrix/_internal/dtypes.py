from __future__ import annotations

import numbers
import warnings
from dataclasses import dataclass
from typing import Any, Callable

from .warnings import PyMatrixDTypeWarning


@dataclass(frozen=True)
class ElementType:
    """Numeric element type of a matrix.

    ``zero`` and ``one`` are the additive and multiplicative identities used by
    zero-initialization and ``identity()``. ``coerce`` converts a caller value
    into the stored representation and raises TypeError for values the type
    cannot represent. ``numpy_dtype`` names the NumPy equivalent used for
    export (None exports as ``object``).
    """

    name: str
    zero: Any
    one: Any
    coerce: Callable[[Any], Any]
    numpy_dtype: str | None = None

    def __repr__(self) -> str:
        return f"ElementType({self.name!r})"

    def __str__(self) -> str:
        return self.name


def _numpy_kind(value: Any) -> str | None:
    # NumPy scalars carry a dtype; plain Python numbers do not.
    return getattr(getattr(value, "dtype", None), "kind", None)


def _reject(value: Any, name: str) -> TypeError:
    return TypeError(f"cannot store {value!r} ({type(value).__name__}) in a {name} matrix")


def _coerce_int(value: Any) -> int:
    if isinstance(value, numbers.Integral) or _numpy_kind(value) == "b":
        return int(value)
    if isinstance(value, numbers.Real):
        as_float = float(value)
        if as_float.is_integer():
            return int(as_float)
    raise _reject(value, "int64")


def _coerce_float(value: Any) -> float:
    if isinstance(value, numbers.Real) or _numpy_kind(value) == "b":
        return float(value)
    raise _reject(value, "float64")


def _coerce_complex(value: Any) -> complex:
    if isinstance(value, numbers.Complex) or _numpy_kind(value) == "b":
        return complex(value)
    raise _reject(value, "complex128")


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool) or _numpy_kind(value) == "b":
        return bool(value)
    if isinstance(value, numbers.Integral) and value in (0, 1):
        return bool(value)
    raise _reject(value, "bool")


INT64 = ElementType("int64", 0, 1, _coerce_int, "int64")
FLOAT64 = ElementType("float64", 0.0, 1.0, _coerce_float, "float64")
COMPLEX128 = ElementType("complex128", 0j, 1 + 0j, _coerce_complex, "complex128")
BOOL = ElementType("bool", False, True, _coerce_bool, "bool")

BUILTIN_DTYPES: dict[str, ElementType] = {
    dt.name: dt for dt in (INT64, FLOAT64, COMPLEX128, BOOL)
}

_ALIASES: dict[str, ElementType] = {
    "int": INT64,
    "int64": INT64,
    "i64": INT64,
    "integer": INT64,
    "float": FLOAT64,
    "float64": FLOAT64,
    "f64": FLOAT64,
    "double": FLOAT64,
    "complex": COMPLEX128,
    "complex128": COMPLEX128,
    "complex_float64": COMPLEX128,
    "bool": BOOL,
    "bool_": BOOL,
    "bit": BOOL,
}


def _warn_width(np_dtype: Any, target: ElementType) -> None:
    warnings.warn(
        f"NumPy dtype {np_dtype} is stored as {target.name}; "
        "fixed-width precision and wraparound are not emulated.",
        PyMatrixDTypeWarning,
        stacklevel=4,
    )


def normalize_dtype(dtype: Any, *, np_module: Any | None) -> ElementType | None:
    """Normalize user-provided dtype tokens into an ElementType.

    Accepted inputs include:
    - ElementType instances (returned unchanged, custom types included)
    - Python builtins: int, float, complex, bool
    - Case-insensitive strings: "int64", "int", "f64", "double", "complex", "bit", ...
    - NumPy dtypes/scalar types: np.int16, np.dtype("float32"), np.complex64, ...

    Returns None when ``dtype`` is None or not recognized.
    """

    if dtype is None:
        return None

    if isinstance(dtype, ElementType):
        return dtype

    # bool is checked first; it is a subclass of int.
    if dtype is bool:
        return BOOL
    if dtype is int:
        return INT64
    if dtype is float:
        return FLOAT64
    if dtype is complex:
        return COMPLEX128

    if isinstance(dtype, str):
        return _ALIASES.get(dtype.strip().lower())

    if np_module is None:
        return None

    try:
        np_dtype = np_module.dtype(dtype)
    except TypeError:
        return None

    kind = np_dtype.kind
    if kind == "b":
        return BOOL
    if kind in ("i", "u"):
        if np_dtype != np_module.dtype("int64"):
            _warn_width(np_dtype, INT64)
        return INT64
    if kind == "f":
        if np_dtype != np_module.dtype("float64"):
            _warn_width(np_dtype, FLOAT64)
        return FLOAT64
    if kind == "c":
        if np_dtype != np_module.dtype("complex128"):
            _warn_width(np_dtype, COMPLEX128)
        return COMPLEX128
    return None


def require_dtype(dtype: Any, *, np_module: Any | None) -> ElementType:
    resolved = normalize_dtype(dtype, np_module=np_module)
    if resolved is None:
        raise TypeError(f"Unsupported dtype: {dtype!r}")
    return resolved


def infer_dtype(values: list[Any]) -> ElementType:
    """Pick the narrowest built-in dtype able to hold every value."""
    if values and all(isinstance(v, bool) or _numpy_kind(v) == "b" for v in values):
        return BOOL
    if all(isinstance(v, numbers.Integral) or _numpy_kind(v) == "b" for v in values):
        return INT64
    if any(isinstance(v, numbers.Complex) and not isinstance(v, numbers.Real) for v in values):
        return COMPLEX128
    return FLOAT64
