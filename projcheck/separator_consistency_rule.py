"""Rule requiring a single word-separation convention across names."""

from collections import Counter
from collections.abc import Iterable
from typing import Any

from projcheck.models import FileRecord, RuleResult
from projcheck.naming_style import CAMEL_CASE, MIXED, SINGLE_WORD, naming_style
from projcheck.rule import TreeRule
from projcheck.tokenizer import SEPARATOR_NAMES, Tokenizer

# Tie-break order when two conventions are equally common
STYLE_PREFERENCE = [*SEPARATOR_NAMES.values(), CAMEL_CASE]


class SeparatorConsistencyRule(TreeRule):
    """Names join words with one separator, the same one across the tree."""

    rule_id = "separator-consistency"
    description = "naming uses a single consistent word-separation convention"

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize the rule and its word tokenizer."""
        super().__init__(config)
        self.tokenizer = Tokenizer()

    def check_tree(self, records: Iterable[FileRecord]) -> list[RuleResult]:
        """Fail names mixing separators, warn on names off the dominant convention."""
        styled = [
            (r, naming_style(r.name_segment, self.tokenizer))
            for r in records
            if not self.is_exempt(r)
        ]
        dominant = self.dominant_style(style for _, style in styled)

        results: list[RuleResult] = []
        for record, style in styled:
            if style == MIXED:
                used = sorted(self.tokenizer.separators_in(record.name_segment))
                results.append(
                    self.failed(
                        record.rel_path,
                        "name mixes separators: "
                        + " ".join(repr(s) for s in used),
                    )
                )
            elif style not in (SINGLE_WORD, dominant):
                results.append(
                    self.warned(
                        record.rel_path,
                        f"name uses {style} but the project mostly uses {dominant}",
                    )
                )
            else:
                results.append(self.passed(record.rel_path))
        return results

    @staticmethod
    def dominant_style(styles: Iterable[str]) -> str | None:
        """Return the most common multi-word convention, or None if there is none."""
        counts = Counter(s for s in styles if s in STYLE_PREFERENCE)
        if not counts:
            return None
        return min(counts, key=lambda s: (-counts[s], STYLE_PREFERENCE.index(s)))
