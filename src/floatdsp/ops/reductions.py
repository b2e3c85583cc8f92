"""Extremum search and arithmetic mean."""

from __future__ import annotations

from typing import Any

import numpy as np

from floatdsp.core.precision import as_real_array, resolve_dtype
from floatdsp.core.types import MinMax


def min_max(a: Any, dtype: Any = np.float64) -> MinMax:
    """Indices and values of the first minimum and first maximum of ``a``.

    The result is what a left-to-right scan with strict ``<`` and ``>`` from
    index 0 produces: ties keep the earliest index and NaN never displaces a
    running extremum, so a leading NaN is reported as both extremes. An empty
    sequence yields ``(-1, +inf, -1, -inf)``; prefer :func:`extrema` when the
    caller needs to tell "no data" apart.
    """
    dt = resolve_dtype(dtype)
    arr = as_real_array(a, dt)
    if arr.size == 0:
        return MinMax(-1, dt.type(np.inf), -1, dt.type(-np.inf))
    if np.isnan(arr[0]):
        return MinMax(0, arr[0], 0, arr[0])

    nan = np.isnan(arr)
    # masked NaNs can only tie with a real extreme that occurs earlier
    i_min = int(np.argmin(np.where(nan, dt.type(np.inf), arr)))
    i_max = int(np.argmax(np.where(nan, dt.type(-np.inf), arr)))
    return MinMax(i_min, arr[i_min], i_max, arr[i_max])


def extrema(a: Any, dtype: Any = np.float64) -> MinMax | None:
    """Like :func:`min_max` but ``None`` for an empty sequence."""
    arr = as_real_array(a, dtype)
    if arr.size == 0:
        return None
    return min_max(arr, dtype)


def min_index(a: Any, dtype: Any = np.float64) -> int:
    """Index of the first minimum; -1 when empty."""
    return min_max(a, dtype).min_index


def min_value(a: Any, dtype: Any = np.float64) -> np.floating:
    """Minimum value; +inf when empty."""
    return min_max(a, dtype).min_value


def max_index(a: Any, dtype: Any = np.float64) -> int:
    """Index of the first maximum; -1 when empty."""
    return min_max(a, dtype).max_index


def max_value(a: Any, dtype: Any = np.float64) -> np.floating:
    """Maximum value; -inf when empty."""
    return min_max(a, dtype).max_value


def sequential_sum(arr: np.ndarray) -> np.floating:
    # add.accumulate is strictly left to right, unlike the pairwise np.sum
    if arr.size == 0:
        return arr.dtype.type(0)
    return np.add.accumulate(arr)[-1]


def average(a: Any, dtype: Any = np.float64) -> np.floating:
    """Arithmetic mean of ``a``; 0 when empty."""
    dt = resolve_dtype(dtype)
    arr = as_real_array(a, dt)
    if arr.size == 0:
        return dt.type(0)
    with np.errstate(all="ignore"):
        return sequential_sum(arr) / dt.type(arr.size)
