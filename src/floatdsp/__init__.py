"""One-dimensional signal-processing and statistics primitives over float sequences.

Module-level functions compute in double precision. ``f32`` and ``f64`` expose
the same operations bound to single and double precision.
"""

from floatdsp.core.precision import Precision, as_real_array, resolve_dtype
from floatdsp.core.types import MinMax
from floatdsp.ops import (
    abs_value,
    absolute,
    add,
    add_offset,
    average,
    average_filter,
    copy,
    derivative,
    every_nth,
    extrema,
    inclusive_range,
    max_index,
    max_value,
    median_filter,
    min_index,
    min_max,
    min_value,
    negative,
    nth_derivative,
    repeat,
    reverse,
    scale,
    sub,
)

f32 = Precision("float32")
f64 = Precision("float64")

__all__ = [
    "MinMax",
    "Precision",
    "as_real_array",
    "resolve_dtype",
    "f32",
    "f64",
    "abs_value",
    "absolute",
    "add",
    "add_offset",
    "average",
    "average_filter",
    "copy",
    "derivative",
    "every_nth",
    "extrema",
    "inclusive_range",
    "max_index",
    "max_value",
    "median_filter",
    "min_index",
    "min_max",
    "min_value",
    "negative",
    "nth_derivative",
    "repeat",
    "reverse",
    "scale",
    "sub",
]
