"""Rule requiring a configuration file at the project root."""

from collections.abc import Iterable

from projcheck.models import ROOT_TARGET, FileRecord, RuleResult
from projcheck.rule import TreeRule


class RootConfigRule(TreeRule):
    """The project root holds one of the configured configuration files."""

    rule_id = "root-config"
    description = "a configuration file exists at the root"

    def check_tree(self, records: Iterable[FileRecord]) -> list[RuleResult]:
        """Return a single result for the tree root."""
        expected = list(self.config.get("config_files", []))
        found = sorted(
            r.name
            for r in records
            if r.depth == 0 and not r.is_dir and r.name in expected
        )
        if found:
            return [self.passed(ROOT_TARGET, f"found {found[0]}")]
        return [
            self.failed(
                ROOT_TARGET,
                "missing root configuration file (expected one of: "
                + ", ".join(expected)
                + ")",
            )
        ]
