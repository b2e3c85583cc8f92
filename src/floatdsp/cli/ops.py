"""Implementation of `floatdsp ops`."""

from __future__ import annotations

import argparse
import json

from floatdsp.core.registry import operations


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("ops", help="List available operations")
    parser.add_argument("--json", action="store_true", help="Print operations as JSON")
    parser.set_defaults(func=cmd_ops)


def cmd_ops(args: argparse.Namespace) -> int:
    specs = sorted(operations().values(), key=lambda s: s.name)
    if args.json:
        payload = [{"name": s.name, "kind": s.kind, "params": list(s.params), "doc": s.doc} for s in specs]
        print(json.dumps(payload, indent=2))
        return 0

    for spec in specs:
        params = ", ".join(spec.params) or "-"
        print(f"{spec.name:<16} {spec.kind:<10} {params:<10} {spec.doc}")
    return 0
