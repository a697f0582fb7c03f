"""Orchestration logic for checking a project tree against the conventions."""

import argparse
import logging
from pathlib import Path

from projcheck.check_report import EXIT_INVALID, CheckReport
from projcheck.compute_config_hash import compute_config_hash
from projcheck.config_error import ConfigError
from projcheck.load_config import load_config
from projcheck.rule_engine import RuleEngine
from projcheck.tree_scanner import scan_tree

logger = logging.getLogger(__name__)


def check_project(root: Path, config_path: str | Path | None = None) -> CheckReport:
    """Scan root, apply the rules, and return the report.

    Raises ConfigError for unusable configuration and OSError for an
    invalid root.
    """
    config = load_config(config_path, root=root)
    records = scan_tree(root, config["ignore_dirs"])

    report = CheckReport(root.as_posix(), compute_config_hash(config))
    report.add_results(RuleEngine(config).run(records))
    return report


def run_check(args: argparse.Namespace) -> int:
    """Execute the check command and return its exit status."""
    root = Path(args.root)
    try:
        report = check_project(root, args.config)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_INVALID
    except OSError as exc:
        logger.error("Invalid root %s: %s", root, exc)
        return EXIT_INVALID

    print(report.render_text(show_passes=args.show_passes))

    if args.json:
        try:
            report.write_json(args.json)
        except OSError as exc:
            logger.error("Cannot write JSON report %s: %s", args.json, exc)
            return EXIT_INVALID
        logger.info("JSON report written to %s", args.json)

    return report.exit_status
