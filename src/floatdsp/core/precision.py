"""Element type resolution and precision-bound operation surfaces."""

from __future__ import annotations

from functools import partial
from typing import Any

import numpy as np

SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))

_ALIASES = {
    "f32": "float32",
    "single": "float32",
    "f64": "float64",
    "double": "float64",
}


def resolve_dtype(dtype: Any = np.float64) -> np.dtype:
    """Return the numpy dtype for a supported element type spelling.

    Only IEEE binary32 and binary64 are supported; any other spelling raises
    ``ValueError``.
    """

    if isinstance(dtype, str):
        dtype = _ALIASES.get(dtype.strip().lower(), dtype.strip().lower())
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise ValueError(f"Unsupported element type: {dtype!r}") from exc
    if resolved not in SUPPORTED_DTYPES:
        raise ValueError(f"Unsupported element type '{resolved}'. Supported: float32|float64")
    return resolved


def as_real_array(values: Any, dtype: Any = np.float64) -> np.ndarray:
    """Copy ``values`` into a fresh 1-D array of the element type.

    ``None`` is the empty sequence.
    """

    dt = resolve_dtype(dtype)
    if values is None:
        return np.empty(0, dtype=dt)
    return np.array(values, dtype=dt, copy=True).reshape(-1)


class Precision:
    """All registered operations with the element type fixed.

    Attribute names match the module-level function names, so
    ``Precision("float32").average_filter(a, 3)`` computes in single
    precision.
    """

    def __init__(self, dtype: Any) -> None:
        self.dtype = resolve_dtype(dtype)
        from floatdsp.core.registry import operations
        from floatdsp.ops import register_builtin_operations

        register_builtin_operations()
        self._names: list[str] = []
        for spec in operations().values():
            attr = spec.func.__name__
            setattr(self, attr, partial(spec.func, dtype=self.dtype))
            self._names.append(attr)

    @property
    def name(self) -> str:
        return self.dtype.name

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._names))

    def __repr__(self) -> str:
        return f"Precision({self.dtype.name!r})"
