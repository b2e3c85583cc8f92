"""Implementation of `floatdsp run`."""

from __future__ import annotations

import argparse
import sys

from floatdsp.core.pipeline import run_pipeline


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("run", help="Run a configured chain of operations")
    parser.add_argument("input", help="Input table (.csv, .txt or .npy)")
    parser.add_argument("--config", default=None, help="Config YAML")
    parser.add_argument("--out", required=True, help="Output folder")
    parser.add_argument("--precision", default=None, help="Override element type: float32|float64")
    parser.add_argument("--column", default=None, help="Override input column")
    parser.add_argument("--plot", action="store_true", default=None, help="Write series.png")
    parser.set_defaults(func=cmd_run)


def cmd_run(args: argparse.Namespace) -> int:
    overrides: dict = {}
    if args.precision is not None:
        overrides["precision"] = args.precision
    if args.column is not None:
        overrides["input"] = {"column": args.column}

    result = run_pipeline(
        input_path=args.input,
        out_dir=args.out,
        config_path=args.config,
        overrides=overrides,
        plot=args.plot,
        argv=sys.argv[1:],
    )

    print(f"Wrote {result.series.size} values to {args.out}/series.csv")
    print(f"Wrote summary to {args.out}/summary.json")
    print(f"Wrote resolved config to {args.out}/config_resolved.yaml")
    if "figure" in result.metadata:
        print(f"Wrote figure to {result.metadata['figure']}")
    return 0
