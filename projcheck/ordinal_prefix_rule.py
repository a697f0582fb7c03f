"""Rule requiring a leading ordinal prefix on files and directories."""

from projcheck.models import FileRecord, RuleResult
from projcheck.rule import RecordRule


class OrdinalPrefixRule(RecordRule):
    """Every entry name starts with a zero-padded ordinal number."""

    rule_id = "ordinal-prefix"
    description = "file and directory names start with an ordinal prefix"

    def check(self, record: FileRecord) -> RuleResult:
        """Fail unprefixed names, warn on prefixes narrower than ordinal_width."""
        width = self.config.get("ordinal_width", 2)
        if record.ordinal is None:
            example = "01_Name" if record.is_dir else "01_name"
            return self.failed(
                record.rel_path, f"missing ordinal prefix (e.g. '{example}')"
            )
        if len(record.ordinal_text) < width:
            padded = record.ordinal_text.zfill(width)
            return self.warned(
                record.rel_path,
                f"ordinal prefix '{record.ordinal_text}' should be zero-padded "
                f"to {width} digits ('{padded}')",
            )
        return self.passed(record.rel_path)
