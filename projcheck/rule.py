"""Base classes for the checks run by the rule engine."""

from collections.abc import Iterable
from typing import Any

from projcheck.is_exempt import is_exempt
from projcheck.models import FAIL, PASS, ROOT_TARGET, WARN, FileRecord, RuleResult


class Rule:
    """A named check configured from the checker configuration."""

    rule_id = ""
    description = ""

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize the rule with the effective configuration."""
        self.config = config
        self.exempt_names: list[str] = list(config.get("exempt_names", []))

    def is_exempt(self, record: FileRecord) -> bool:
        """Check if the naming rules should skip this record."""
        return is_exempt(record.name, self.exempt_names)

    def passed(self, target: str = ROOT_TARGET, message: str = "") -> RuleResult:
        """Build a passing result."""
        return RuleResult(self.rule_id, target, PASS, message)

    def warned(self, target: str, message: str) -> RuleResult:
        """Build a warning result."""
        return RuleResult(self.rule_id, target, WARN, message)

    def failed(self, target: str, message: str) -> RuleResult:
        """Build a failing result."""
        return RuleResult(self.rule_id, target, FAIL, message)


class RecordRule(Rule):
    """A rule judged independently for every applicable record."""

    def applies_to(self, record: FileRecord) -> bool:
        """Check if the rule should judge this record."""
        return not self.is_exempt(record)

    def check(self, record: FileRecord) -> RuleResult:
        """Return exactly one result for the record."""
        raise NotImplementedError


class TreeRule(Rule):
    """A rule judged over the whole scanned tree."""

    def check_tree(self, records: Iterable[FileRecord]) -> list[RuleResult]:
        """Return results for the root or for individual records."""
        raise NotImplementedError
