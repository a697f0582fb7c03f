"""Logic for aggregating rule results into a report and an exit status."""

import json
from pathlib import Path
from typing import Any

from projcheck.models import FAIL, PASS, STATUSES, WARN, RuleResult

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_INVALID = 2

STATUS_LABELS = {FAIL: "FAIL", WARN: "WARN", PASS: "ok"}


class CheckReport:
    """Collects rule results for one checked tree and summarizes them."""

    def __init__(self, root: str, config_hash: str) -> None:
        """Initialize the report with the checked root and configuration hash."""
        self.root = root
        self.config_hash = config_hash
        self.results: list[RuleResult] = []

    def __eq__(self, other: object) -> bool:
        """Compare reports by root, configuration, and results."""
        if not isinstance(other, CheckReport):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def add_result(self, result: RuleResult) -> None:
        """Add a single rule result to the report."""
        self.results.append(result)

    def add_results(self, results: list[RuleResult]) -> None:
        """Add rule results in order."""
        self.results.extend(results)

    def counts(self) -> dict[str, int]:
        """Return the number of results per status."""
        totals = dict.fromkeys(STATUSES, 0)
        for r in self.results:
            totals[r.status] += 1
        return totals

    def rule_counts(self) -> dict[str, dict[str, int]]:
        """Return the number of results per status for every rule."""
        per_rule: dict[str, dict[str, int]] = {}
        for r in self.results:
            per_rule.setdefault(r.rule_id, dict.fromkeys(STATUSES, 0))[r.status] += 1
        return per_rule

    @property
    def has_failures(self) -> bool:
        """Check if any fail-severity result exists."""
        return any(r.status == FAIL for r in self.results)

    @property
    def exit_status(self) -> int:
        """Return the process exit code for this report."""
        return EXIT_FAILURES if self.has_failures else EXIT_OK

    def render_text(self, *, show_passes: bool = False) -> str:
        """Render a human-readable report grouped by target."""
        by_target: dict[str, list[RuleResult]] = {}
        for r in self.results:
            if r.status != PASS or show_passes:
                by_target.setdefault(r.target, []).append(r)

        lines = [f"Checked {self.root}", ""]
        for target, results in by_target.items():
            lines.append(target)
            for r in results:
                detail = f": {r.message}" if r.message else ""
                lines.append(f"  {STATUS_LABELS[r.status]:<4} [{r.rule_id}]{detail}")
        if by_target:
            lines.append("")

        c = self.counts()
        verdict = "FAILED" if self.has_failures else "PASSED"
        lines.append(
            f"{verdict}: {c[FAIL]} failed, {c[WARN]} warnings, {c[PASS]} passed "
            f"({len(self.rule_counts())} rules)"
        )
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view of the report."""
        return {
            "meta": {
                "root": self.root,
                "config_hash": self.config_hash,
                "total_results": len(self.results),
                "exit_status": self.exit_status,
            },
            "results": [
                {
                    "rule_id": r.rule_id,
                    "target": r.target,
                    "status": r.status,
                    "message": r.message,
                }
                for r in self.results
            ],
            "stats": {
                "counts": self.counts(),
                "rule_counts": self.rule_counts(),
            },
        }

    def write_json(self, path: str | Path) -> None:
        """Write the report to a JSON file."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
