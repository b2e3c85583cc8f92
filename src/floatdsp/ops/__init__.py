"""Built-in operations and their registration."""

from floatdsp.ops.arithmetic import add, sub
from floatdsp.ops.containers import copy, every_nth, inclusive_range, repeat, reverse
from floatdsp.ops.differencing import derivative, nth_derivative
from floatdsp.ops.elementwise import abs_value, absolute, add_offset, negative, scale
from floatdsp.ops.filters import average_filter, median_filter
from floatdsp.ops.reductions import (
    average,
    extrema,
    max_index,
    max_value,
    min_index,
    min_max,
    min_value,
)

__all__ = [
    "register_builtin_operations",
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

BUILTIN_OPERATIONS = (
    ("copy", copy, "transform", ()),
    ("repeat", repeat, "generate", ("x", "n")),
    ("reverse", reverse, "transform", ()),
    ("range", inclusive_range, "generate", ("a", "b")),
    ("every_nth", every_nth, "transform", ("n",)),
    ("min_max", min_max, "reduce", ()),
    ("extrema", extrema, "reduce", ()),
    ("min_index", min_index, "reduce", ()),
    ("min_value", min_value, "reduce", ()),
    ("max_index", max_index, "reduce", ()),
    ("max_value", max_value, "reduce", ()),
    ("average", average, "reduce", ()),
    ("negative", negative, "transform", ()),
    ("abs", absolute, "transform", ()),
    ("abs_value", abs_value, "scalar", ("x",)),
    ("add_offset", add_offset, "transform", ("offset",)),
    ("scale", scale, "transform", ("factor",)),
    ("average_filter", average_filter, "transform", ("width",)),
    ("median_filter", median_filter, "transform", ("width",)),
    ("derivative", derivative, "transform", ()),
    ("nth_derivative", nth_derivative, "transform", ("n",)),
    ("add", add, "combine", ()),
    ("sub", sub, "combine", ()),
)


def register_builtin_operations() -> None:
    from floatdsp.core.registry import register_operation

    for name, func, kind, params in BUILTIN_OPERATIONS:
        register_operation(name, func, kind, params)
