"""Base class for rules that read the content of R scripts."""

import logging

from projcheck.models import FileRecord, RuleResult
from projcheck.rule import RecordRule

logger = logging.getLogger(__name__)


class ScriptRule(RecordRule):
    """A record rule applied to the text of script files."""

    def applies_to(self, record: FileRecord) -> bool:
        """Check if the record is a script file."""
        extensions = self.config.get("script_extensions", [])
        return not record.is_dir and record.extension in extensions

    def check(self, record: FileRecord) -> RuleResult:
        """Read the script and judge its text."""
        try:
            text = record.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read script %s: %s", record.path, exc)
            return self.warned(record.rel_path, f"could not read script: {exc}")
        return self.check_text(record, text)

    def check_text(self, record: FileRecord, text: str) -> RuleResult:
        """Return exactly one result for the script text."""
        raise NotImplementedError
