"""Moving-window smoothing filters.

Both filters clip the window to the sequence length first. A clipped width of
one or less returns a copy of the input; otherwise the output has
``len(a) - w + 1`` elements and element ``i`` summarises ``a[i:i + w]``.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from floatdsp.core.precision import as_real_array, resolve_dtype
from floatdsp.ops.ordering import upper_median
from floatdsp.ops.reductions import sequential_sum


def clip_width(width: int, length: int) -> int:
    return min(int(width), length)


def average_filter(a: Any, width: int, dtype: Any = np.float64) -> np.ndarray:
    """Moving mean over windows of ``width`` elements.

    Uses a sliding sum: the first window is summed left to right, each later
    window adds ``a[i + w - 1] - a[i - 1]`` to the running sum, and every sum
    is divided by ``w``. Rounding therefore accumulates along the sequence
    exactly as the running update does.
    """
    dt = resolve_dtype(dtype)
    arr = as_real_array(a, dt)
    w = clip_width(width, arr.size)
    if w <= 1:
        return arr

    with np.errstate(all="ignore"):
        seed = np.array([sequential_sum(arr[:w])], dtype=dt)
        deltas = arr[w:] - arr[: arr.size - w]
        sums = np.add.accumulate(np.concatenate((seed, deltas)))
        return sums / dt.type(w)


def median_filter(a: Any, width: int, dtype: Any = np.float64) -> np.ndarray:
    """Moving median over windows of ``width`` elements.

    The median is element ``w // 2`` of the sorted window, so even widths pick
    the upper of the two middle values.
    """
    dt = resolve_dtype(dtype)
    arr = as_real_array(a, dt)
    w = clip_width(width, arr.size)
    if w <= 1:
        return arr

    out = np.empty(arr.size - w + 1, dtype=dt)
    scratch = np.empty(w, dtype=dt)
    for i in range(out.size):
        out[i] = upper_median(arr[i : i + w], scratch)
    return out
