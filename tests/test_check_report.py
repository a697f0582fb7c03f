"""Tests for the CheckReport logic."""

import json
from pathlib import Path

from projcheck.check_report import CheckReport
from projcheck.models import FAIL, PASS, WARN, RuleResult


def _sample_report() -> CheckReport:
    report = CheckReport("/project", "hash123")
    report.add_result(RuleResult("ordinal-prefix", "01_load.R", PASS))
    report.add_result(
        RuleResult("file-case", "02_Clean.R", FAIL, "file names should be lowercase")
    )
    report.add_result(
        RuleResult("ordinal-prefix", "3_plot.R", WARN, "prefix should be padded")
    )
    return report


def test_report_counts() -> None:
    """Verify summary and per-rule counts."""
    report = _sample_report()
    assert report.counts() == {"pass": 1, "warn": 1, "fail": 1}
    assert report.rule_counts() == {
        "ordinal-prefix": {"pass": 1, "warn": 1, "fail": 0},
        "file-case": {"pass": 0, "warn": 0, "fail": 1},
    }


def test_exit_status() -> None:
    """Verify the exit status reflects fail-severity results only."""
    report = _sample_report()
    assert report.has_failures
    assert report.exit_status == 1

    clean = CheckReport("/project", "hash123")
    clean.add_results(
        [RuleResult("root-config", ".", PASS), RuleResult("x", ".", WARN)]
    )
    assert not clean.has_failures
    assert clean.exit_status == 0


def test_render_text_hides_passes_by_default() -> None:
    """Verify the text report lists violations grouped by target."""
    text = _sample_report().render_text()
    assert "02_Clean.R\n  FAIL [file-case]: file names should be lowercase" in text
    assert "3_plot.R\n  WARN [ordinal-prefix]: prefix should be padded" in text
    assert "01_load.R" not in text
    assert text.endswith("FAILED: 1 failed, 1 warnings, 1 passed (2 rules)")


def test_render_text_show_passes() -> None:
    """Verify passing results are listed on request."""
    text = _sample_report().render_text(show_passes=True)
    assert "01_load.R\n  ok   [ordinal-prefix]" in text


def test_write_json(tmp_path: Path) -> None:
    """Verify the JSON report carries meta, results, and stats."""
    output_file = tmp_path / "report.json"
    _sample_report().write_json(output_file)

    content = json.loads(output_file.read_text(encoding="utf-8"))
    assert content["meta"]["config_hash"] == "hash123"
    assert content["meta"]["total_results"] == 3  # noqa: PLR2004
    assert content["meta"]["exit_status"] == 1
    assert content["results"][1] == {
        "rule_id": "file-case",
        "target": "02_Clean.R",
        "status": "fail",
        "message": "file names should be lowercase",
    }
    assert content["stats"]["counts"]["fail"] == 1


def test_report_equality() -> None:
    """Verify reports with the same results compare equal."""
    assert _sample_report() == _sample_report()
    other = _sample_report()
    other.add_result(RuleResult("root-config", ".", PASS))
    assert other != _sample_report()
