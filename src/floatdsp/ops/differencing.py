"""Finite differences."""

from __future__ import annotations

from typing import Any

import numpy as np

from floatdsp.core.precision import as_real_array


def derivative(a: Any, dtype: Any = np.float64) -> np.ndarray:
    """Forward differences ``a[i + 1] - a[i]``.

    Sequences of length 0 or 1 yield zeros of the same length, so a single
    sample differentiates to ``[0]`` rather than to an empty sequence.
    """
    arr = as_real_array(a, dtype)
    if arr.size <= 1:
        return np.zeros_like(arr)
    with np.errstate(all="ignore"):
        return np.diff(arr)


def nth_derivative(a: Any, n: int, dtype: Any = np.float64) -> np.ndarray:
    """Apply :func:`derivative` ``n`` times; a copy of ``a`` for ``n <= 0``."""
    d = as_real_array(a, dtype)
    for _ in range(max(int(n), 0)):
        if d.size <= 1:
            # differencing a single sample gives [0], a fixed point
            return np.zeros_like(d)
        d = derivative(d, dtype)
    return d
