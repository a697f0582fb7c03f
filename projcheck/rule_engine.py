"""Logic for applying the configured rules to a scanned tree."""

import logging
from collections.abc import Iterable
from typing import Any

from projcheck.build_rules import build_rules
from projcheck.models import FAIL, ROOT_TARGET, WARN, FileRecord, RuleResult
from projcheck.rule import RecordRule, Rule, TreeRule

logger = logging.getLogger(__name__)


class RuleEngine:
    """Runs record rules per entry, then tree rules, under the severity policy."""

    def __init__(self, config: dict[str, Any], rules: list[Rule] | None = None) -> None:
        """Initialize the engine with the configuration and optional rule set."""
        self.config = config
        self.severity: dict[str, str] = config.get("severity", {})
        self.rules = rules if rules is not None else build_rules(config)

    def run(self, records: Iterable[FileRecord]) -> list[RuleResult]:
        """Return results in scan order, record rules before tree rules."""
        record_rules = [r for r in self.rules if isinstance(r, RecordRule)]
        tree_rules = [r for r in self.rules if isinstance(r, TreeRule)]

        seen: list[FileRecord] = []
        results: list[RuleResult] = []
        for record in records:
            seen.append(record)
            for rule in record_rules:
                results.extend(self._run_record_rule(rule, record))

        for rule in tree_rules:
            results.extend(self._run_tree_rule(rule, seen))

        return [self.apply_policy(r) for r in results]

    def apply_policy(self, result: RuleResult) -> RuleResult:
        """Downgrade failures of rules whose policy is 'warn'."""
        if result.status == FAIL and self.severity.get(result.rule_id) == WARN:
            return RuleResult(result.rule_id, result.target, WARN, result.message)
        return result

    def _run_record_rule(
        self, rule: RecordRule, record: FileRecord
    ) -> list[RuleResult]:
        try:
            if not rule.applies_to(record):
                return []
            return [rule.check(record)]
        except Exception as exc:
            logger.exception("Rule %s crashed on %s", rule.rule_id, record.rel_path)
            return [rule.warned(record.rel_path, f"rule error: {exc}")]

    def _run_tree_rule(
        self, rule: TreeRule, records: list[FileRecord]
    ) -> list[RuleResult]:
        try:
            return rule.check_tree(records)
        except Exception as exc:
            logger.exception("Rule %s crashed on the tree", rule.rule_id)
            return [rule.warned(ROOT_TARGET, f"rule error: {exc}")]
