from __future__ import annotations

import os
from typing import Any

from . import dtypes as _dtypes

DEFAULT_DTYPE_ENV = "PYMATRIX_DEFAULT_DTYPE"
EDGE_ITEMS_ENV = "PYMATRIX_EDGE_ITEMS"


class Settings:
    """Process-wide defaults.

    Initial values come from the environment; ``set_*`` calls override them
    for the rest of the process.
    """

    def __init__(self, *, np_module: Any | None, environ: Any = None) -> None:
        self._np = np_module
        env = os.environ if environ is None else environ
        self._default_dtype = _dtypes.FLOAT64
        self._edge_items = 4

        raw_dtype = env.get(DEFAULT_DTYPE_ENV)
        if raw_dtype:
            resolved = _dtypes.normalize_dtype(raw_dtype, np_module=None)
            if resolved is None:
                raise ValueError(f"{DEFAULT_DTYPE_ENV}={raw_dtype!r} is not a known dtype")
            self._default_dtype = resolved

        raw_edge = env.get(EDGE_ITEMS_ENV)
        if raw_edge:
            try:
                edge = int(raw_edge)
            except ValueError:
                raise ValueError(f"{EDGE_ITEMS_ENV}={raw_edge!r} is not an integer") from None
            self.set_edge_items(edge)

    @property
    def np_module(self) -> Any | None:
        return self._np

    @property
    def default_dtype(self) -> _dtypes.ElementType:
        return self._default_dtype

    def set_default_dtype(self, dtype: Any) -> None:
        self._default_dtype = _dtypes.require_dtype(dtype, np_module=self._np)

    @property
    def edge_items(self) -> int:
        return self._edge_items

    def set_edge_items(self, edge_items: int) -> None:
        if isinstance(edge_items, bool) or not isinstance(edge_items, int):
            raise TypeError("edge_items must be an int")
        if edge_items < 1:
            raise ValueError("edge_items must be at least 1")
        self._edge_items = edge_items

    def resolve_dtype(self, dtype: Any) -> _dtypes.ElementType:
        if dtype is None:
            return self._default_dtype
        return _dtypes.require_dtype(dtype, np_module=self._np)


_settings: Settings | None = None


def configure(*, np_module: Any | None, environ: Any = None) -> Settings:
    global _settings
    _settings = Settings(np_module=np_module, environ=environ)
    return _settings


def get() -> Settings:
    if _settings is None:
        raise RuntimeError("pymatrix settings are not configured")
    return _settings
