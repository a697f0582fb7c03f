"""Tests for applying the rule set to whole project trees."""

from pathlib import Path

import yaml

from projcheck.load_config import load_config
from projcheck.models import FAIL, PASS, WARN, FileRecord, RuleResult
from projcheck.rule import RecordRule
from projcheck.rule_engine import RuleEngine
from projcheck.run_check import check_project
from projcheck.tree_scanner import scan_tree

NAMING_RULES = {
    "ordinal-prefix",
    "directory-case",
    "file-case",
    "separator-consistency",
    "unique-ordinal",
}

GOOD_SCRIPT = "# Load the raw survey data\nraw_data <- read.csv('x.csv')\n"


def _build_project(root: Path, *, with_config: bool = True) -> Path:
    """Create a small R project that follows every convention."""
    files = {
        "README.md": "# Survey analysis\n",
        "01_Raw_Data/01_survey_2020.csv": "a,b\n",
        "02_Scripts/01_load_data.R": GOOD_SCRIPT,
        "02_Scripts/02_clean_data.R": GOOD_SCRIPT,
        "03_Output/01_summary_table.csv": "a,b\n",
    }
    if with_config:
        files["config.yml"] = "default:\n  data_dir: 01_Raw_Data\n"
    for rel, text in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


def test_conforming_tree_has_no_failures(tmp_path: Path) -> None:
    """Verify a correctly prefixed tree reports zero naming failures."""
    report = check_project(_build_project(tmp_path))

    naming = [r for r in report.results if r.rule_id in NAMING_RULES]
    assert naming
    assert all(r.status == PASS for r in naming)
    assert report.counts()[FAIL] == 0
    assert report.exit_status == 0


def test_missing_root_config_fails_once(tmp_path: Path) -> None:
    """Verify a tree without a root configuration file fails exactly once."""
    report = check_project(_build_project(tmp_path, with_config=False))

    config_results = [r for r in report.results if r.rule_id == "root-config"]
    assert len(config_results) == 1
    assert config_results[0].status == FAIL
    assert [r for r in report.results if r.status == FAIL] == config_results
    assert report.exit_status == 1


def test_check_is_idempotent(tmp_path: Path) -> None:
    """Verify two runs over an unchanged tree give identical reports."""
    root = _build_project(tmp_path)
    (root / "analysis.R").write_text("myVar <- 1\n", encoding="utf-8")

    first = check_project(root)
    second = check_project(root)
    assert first == second
    assert first.results == second.results


def test_results_are_ordered(tmp_path: Path) -> None:
    """Verify record rules come in scan order, followed by tree rules."""
    root = _build_project(tmp_path)
    config = load_config()
    scan_order = [r.rel_path for r in scan_tree(root, config["ignore_dirs"])]
    results = RuleEngine(config).run(scan_tree(root, config["ignore_dirs"]))

    first_tree = next(i for i, r in enumerate(results) if r.rule_id == "root-config")
    record_targets = list(dict.fromkeys(r.target for r in results[:first_tree]))
    assert record_targets[0] == "01_Raw_Data"
    assert record_targets == [p for p in scan_order if p in record_targets]
    assert {r.rule_id for r in results[first_tree:]} <= {
        "root-config",
        "separator-consistency",
        "unique-ordinal",
    }


def test_violations_are_reported(tmp_path: Path) -> None:
    """Verify a non-conforming tree collects failures instead of aborting."""
    root = _build_project(tmp_path)
    (root / "02_Scripts" / "analysis.R").write_text(GOOD_SCRIPT, encoding="utf-8")
    (root / "04_figures").mkdir()

    report = check_project(root)
    failed = {(r.rule_id, r.target) for r in report.results if r.status == FAIL}
    assert ("ordinal-prefix", "02_Scripts/analysis.R") in failed
    assert ("directory-case", "04_figures") in failed
    assert report.exit_status == 1


def test_severity_policy_warn_and_off(tmp_path: Path) -> None:
    """Verify 'warn' downgrades failures and 'off' disables a rule."""
    root = _build_project(tmp_path, with_config=False)
    (root / "04_figures").mkdir()
    (root / ".projcheck.yml").write_text(
        yaml.dump({"severity": {"root-config": "warn", "directory-case": "off"}}),
        encoding="utf-8",
    )

    report = check_project(root)
    rule_ids = {r.rule_id for r in report.results}
    assert "directory-case" not in rule_ids
    config_results = [r for r in report.results if r.rule_id == "root-config"]
    assert [r.status for r in config_results] == [WARN]
    assert report.exit_status == 0


class _BrokenRule(RecordRule):
    rule_id = "broken"

    def check(self, record: FileRecord) -> RuleResult:
        msg = f"cannot judge {record.name}"
        raise ValueError(msg)


def test_crashing_rule_becomes_warning(tmp_path: Path) -> None:
    """Verify a rule raising an exception does not abort the run."""
    root = _build_project(tmp_path)
    config = load_config()
    engine = RuleEngine(config, rules=[_BrokenRule(config)])

    results = engine.run(scan_tree(root))
    assert results
    assert all(r.status == WARN for r in results)
    assert "cannot judge" in results[0].message
