"""``floatdsp`` command: list, apply or chain sequence operations."""

from __future__ import annotations

import argparse
import logging
import sys

from floatdsp.cli import apply, ops, run
from floatdsp.core.logging import setup_logging
from floatdsp.core.versioning import dependency_versions
from floatdsp.ops import register_builtin_operations

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    version = dependency_versions(("floatdsp",))["floatdsp"] or "unknown"
    parser = argparse.ArgumentParser(
        prog="floatdsp",
        description="Filters, differences and reductions over float32/float64 sequences",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each step at DEBUG level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {version}")

    commands = parser.add_subparsers(dest="command", metavar="{ops,apply,run}")
    for module in (ops, apply, run):
        module.register(commands)
    return parser


def main(argv: list[str] | None = None) -> int:
    register_builtin_operations()
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        return int(args.func(args))
    except KeyboardInterrupt:
        logger.warning("floatdsp %s interrupted", args.command)
        return 130


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
