"""Command-line entry point for the project-convention checker."""

import argparse
import logging
import sys
from pathlib import Path

from projcheck.run_check import run_check


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its 'check' subcommand."""
    ap = argparse.ArgumentParser(
        prog="projcheck",
        description=(
            "Check an R data-analysis project tree against naming, layout, and "
            "script conventions."
        ),
    )
    sub = ap.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Check a project tree")
    check.add_argument(
        "root",
        type=Path,
        help="Root directory of the project to check",
    )
    check.add_argument(
        "--config",
        type=Path,
        help="Checker configuration YAML (default: <root>/.projcheck.yml if present)",
    )
    check.add_argument(
        "--json",
        type=Path,
        help="Also write the report as JSON to this path",
    )
    check.add_argument(
        "--show-passes",
        action="store_true",
        help="List passing checks as well as violations",
    )
    check.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the checker CLI."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    return run_check(args)


if __name__ == "__main__":
    raise SystemExit(main())
