"""Window ordering helpers for the median filter."""

from __future__ import annotations

import numpy as np


def sort_window(window: np.ndarray, scratch: np.ndarray | None = None) -> np.ndarray:
    """Copy ``window`` into ``scratch`` and sort it ascending in place.

    ``scratch`` must have the window's length and dtype; it is allocated when
    omitted. NaN sorts last.
    """

    if scratch is None:
        scratch = np.empty(len(window), dtype=np.asarray(window).dtype)
    scratch[:] = window
    scratch.sort()
    return scratch


def upper_median(window: np.ndarray, scratch: np.ndarray | None = None) -> np.floating:
    """Element ``len // 2`` of the sorted window.

    For even lengths this is the upper of the two central values.
    """

    ordered = sort_window(window, scratch)
    return ordered[len(ordered) // 2]
