"""Implementation of `floatdsp apply`."""

from __future__ import annotations

import argparse
import logging
from typing import Any

import numpy as np
import yaml

from floatdsp.core.precision import resolve_dtype
from floatdsp.core.registry import get_operation
from floatdsp.core.types import MinMax
from floatdsp.data.io import load_table, select_series, write_series

logger = logging.getLogger(__name__)


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("apply", help="Apply a single operation")
    parser.add_argument("op", help="Operation name (see `floatdsp ops`)")
    parser.add_argument("input", nargs="?", default=None, help="Input table (.csv, .txt or .npy)")
    parser.add_argument("--column", default=None, help="Input column (default: first column)")
    parser.add_argument("--with", dest="with_columns", nargs="+", default=[], help="Extra columns for add/sub")
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Operation parameter; values are parsed as YAML scalars",
    )
    parser.add_argument("--precision", default="float64", help="Element type: float32|float64")
    parser.add_argument("--out", default=None, help="Write sequence output to this CSV instead of stdout")
    parser.set_defaults(func=cmd_apply)


def parse_params(items: list[str]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Parameters must look like KEY=VALUE, got '{item}'")
        params[key.strip()] = yaml.safe_load(value)
    return params


def cmd_apply(args: argparse.Namespace) -> int:
    spec = get_operation(args.op)
    dtype = resolve_dtype(args.precision)
    params = parse_params(args.param)

    unknown = sorted(set(params) - set(spec.params))
    if unknown:
        raise ValueError(f"Unknown parameters for '{spec.name}': {', '.join(unknown)}")
    missing = sorted(set(spec.params) - set(params))
    if missing:
        raise ValueError(f"Missing parameters for '{spec.name}': {', '.join(missing)}")

    if spec.kind in {"generate", "scalar"}:
        if args.input is not None:
            logger.warning("'%s' takes no input table; ignoring %s", spec.name, args.input)
        result = spec.func(**params, dtype=dtype)
    else:
        if args.input is None:
            raise ValueError(f"'{spec.name}' needs an input table")
        table = load_table(args.input)
        series = select_series(table, args.column)
        if spec.kind == "combine":
            others = [select_series(table, c) for c in args.with_columns]
            result = spec.func(series, *others, dtype=dtype)
        else:
            result = spec.func(series, **params, dtype=dtype)

    if isinstance(result, np.ndarray):
        if args.out:
            path = write_series(result, args.out)
            print(f"Wrote {result.size} values to {path}")
        else:
            for value in result:
                print(value)
    elif isinstance(result, MinMax):
        for key, value in result._asdict().items():
            print(f"{key}: {value}")
    elif result is None:
        print("empty")
    else:
        print(result)
    return 0
