"""Element-wise unary transforms with IEEE 754 semantics."""

from __future__ import annotations

from typing import Any

import numpy as np

from floatdsp.core.precision import as_real_array, resolve_dtype


def negative(a: Any, dtype: Any = np.float64) -> np.ndarray:
    """Negate every element."""
    return np.negative(as_real_array(a, dtype))


def absolute(a: Any, dtype: Any = np.float64) -> np.ndarray:
    """Absolute value of every element; ``-0`` maps to ``+0``, NaN stays NaN."""
    return np.abs(as_real_array(a, dtype))


def abs_value(x: float, dtype: Any = np.float64) -> np.floating:
    """Scalar absolute value with the same semantics as :func:`absolute`."""
    dt = resolve_dtype(dtype)
    return np.abs(dt.type(x))


def add_offset(a: Any, offset: float, dtype: Any = np.float64) -> np.ndarray:
    """Add ``offset`` to every element."""
    dt = resolve_dtype(dtype)
    arr = as_real_array(a, dt)
    with np.errstate(all="ignore"):
        return arr + dt.type(offset)


def scale(a: Any, factor: float, dtype: Any = np.float64) -> np.ndarray:
    """Multiply every element by ``factor``."""
    dt = resolve_dtype(dtype)
    arr = as_real_array(a, dt)
    with np.errstate(all="ignore"):
        return arr * dt.type(factor)
