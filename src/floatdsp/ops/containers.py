"""Sequence constructors and reorderings."""

from __future__ import annotations

from typing import Any

import numpy as np

from floatdsp.core.precision import as_real_array, resolve_dtype


def copy(a: Any, dtype: Any = np.float64) -> np.ndarray:
    """Return a fresh copy of ``a``."""
    return as_real_array(a, dtype)


def repeat(x: float, n: int, dtype: Any = np.float64) -> np.ndarray:
    """Return ``n`` copies of ``x``; empty for ``n <= 0``."""
    dt = resolve_dtype(dtype)
    n = int(n)
    if n <= 0:
        return np.empty(0, dtype=dt)
    return np.full(n, x, dtype=dt)


def reverse(x: Any, dtype: Any = np.float64) -> np.ndarray:
    """Return the elements of ``x`` in reverse order."""
    return as_real_array(x, dtype)[::-1].copy()


def inclusive_range(a: int, b: int, dtype: Any = np.float64) -> np.ndarray:
    """Enumerate the integers from ``a`` to ``b``, both ends included.

    Counts down when ``a > b``, so the result always has ``|a - b| + 1``
    elements.
    """
    dt = resolve_dtype(dtype)
    start, stop = int(a), int(b)
    if start <= stop:
        return np.arange(start, stop + 1).astype(dt)
    return np.arange(start, stop - 1, -1).astype(dt)


def every_nth(a: Any, n: int, dtype: Any = np.float64) -> np.ndarray:
    """Take the elements at indices ``0, n, 2n, ...``; empty for ``n <= 0``."""
    arr = as_real_array(a, dtype)
    n = int(n)
    if n <= 0:
        return arr[:0].copy()
    return arr[::n].copy()
