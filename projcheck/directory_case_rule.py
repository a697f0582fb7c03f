"""Rule requiring Capitalized, separated words in directory names."""

from typing import Any

from projcheck.models import FileRecord, RuleResult
from projcheck.rule import RecordRule
from projcheck.tokenizer import Tokenizer


class DirectoryCaseRule(RecordRule):
    """Directory names use Capitalized words joined by a separator."""

    rule_id = "directory-case"
    description = "directories use capitalized words with separators"

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize the rule and its word tokenizer."""
        super().__init__(config)
        self.tokenizer = Tokenizer()

    def applies_to(self, record: FileRecord) -> bool:
        """Check directories that aren't exempt."""
        return record.is_dir and super().applies_to(record)

    def check(self, record: FileRecord) -> RuleResult:
        """Fail lowercase words and words run together without a separator."""
        segment = record.name_segment
        words = [w for w in self.tokenizer.tokenize(segment) if w[0].isalpha()]

        lowercase = [w for w in words if not w[0].isupper()]
        if lowercase:
            return self.failed(
                record.rel_path,
                "directory words should be capitalized: " + ", ".join(lowercase),
            )
        if len(words) > 1 and not self.tokenizer.separators_in(segment):
            return self.failed(
                record.rel_path,
                f"directory words should be joined by a separator (e.g. "
                f"'{'_'.join(words)}')",
            )
        return self.passed(record.rel_path)
