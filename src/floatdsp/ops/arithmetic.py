"""Element-wise arithmetic across any number of sequences.

Inputs of different lengths are truncated to the shortest one. Calling with
no sequences returns an empty sequence.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from floatdsp.core.precision import as_real_array, resolve_dtype


def _truncated(sequences: tuple[Any, ...], dtype: Any) -> list[np.ndarray]:
    arrays = [as_real_array(s, dtype) for s in sequences]
    n = min(arr.size for arr in arrays)
    return [arr[:n] for arr in arrays]


def add(*sequences: Any, dtype: Any = np.float64) -> np.ndarray:
    """Element-wise sum, accumulated in argument order starting from zero."""
    dt = resolve_dtype(dtype)
    if not sequences:
        return np.empty(0, dtype=dt)
    arrays = _truncated(sequences, dt)
    total = np.zeros(arrays[0].size, dtype=dt)
    with np.errstate(all="ignore"):
        for arr in arrays:
            total += arr
    return total


def sub(*sequences: Any, dtype: Any = np.float64) -> np.ndarray:
    """First sequence minus each of the others, in argument order."""
    dt = resolve_dtype(dtype)
    if not sequences:
        return np.empty(0, dtype=dt)
    first, *rest = _truncated(sequences, dt)
    diff = first.copy()
    with np.errstate(all="ignore"):
        for arr in rest:
            diff -= arr
    return diff
