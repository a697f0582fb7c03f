"""Rule forbidding capital letters in file names."""

from projcheck.models import FileRecord, RuleResult
from projcheck.rule import RecordRule


class FileCaseRule(RecordRule):
    """File names (extension aside) are written in lowercase."""

    rule_id = "file-case"
    description = "file names do not use capitalized words"

    def applies_to(self, record: FileRecord) -> bool:
        """Check files that aren't exempt."""
        return not record.is_dir and super().applies_to(record)

    def check(self, record: FileRecord) -> RuleResult:
        """Fail names with any uppercase letter before the extension."""
        segment = record.name_segment
        if segment != segment.lower():
            stem = record.name[: len(record.name) - len(record.extension)]
            suggestion = stem.lower() + record.extension
            return self.failed(
                record.rel_path, f"file names should be lowercase (e.g. '{suggestion}')"
            )
        return self.passed(record.rel_path)
