"""Rule flagging siblings that share an ordinal prefix."""

from collections.abc import Iterable

from projcheck.models import FileRecord, RuleResult
from projcheck.rule import TreeRule

SiblingKey = tuple[str, bool, int | None]


class UniqueOrdinalRule(TreeRule):
    """Sibling files (and sibling directories) carry distinct ordinals."""

    rule_id = "unique-ordinal"
    description = "sibling entries do not share an ordinal prefix"

    def check_tree(self, records: Iterable[FileRecord]) -> list[RuleResult]:
        """Warn every record whose ordinal is reused by a sibling of the same kind."""
        numbered = [
            r for r in records if r.ordinal is not None and not self.is_exempt(r)
        ]

        groups: dict[SiblingKey, list[FileRecord]] = {}
        for r in numbered:
            groups.setdefault(_sibling_key(r), []).append(r)

        results: list[RuleResult] = []
        for r in numbered:
            others = [s.name for s in groups[_sibling_key(r)] if s is not r]
            if others:
                results.append(
                    self.warned(
                        r.rel_path,
                        f"ordinal {r.ordinal} is also used by " + ", ".join(others),
                    )
                )
            else:
                results.append(self.passed(r.rel_path))
        return results


def _sibling_key(record: FileRecord) -> SiblingKey:
    return (record.parent_rel, record.is_dir, record.ordinal)
