"""Rule requiring R scripts to open with a comment header."""

from projcheck.models import FileRecord, RuleResult
from projcheck.script_code_lines import NOTEBOOK_EXTENSIONS
from projcheck.script_rule import ScriptRule


class ScriptHeaderRule(ScriptRule):
    """Scripts describe themselves in a leading comment block."""

    rule_id = "script-header"
    description = "scripts open with a comment header"

    def check_text(self, record: FileRecord, text: str) -> RuleResult:
        """Warn when the first non-blank line isn't a comment (or front matter)."""
        first = next((line.strip() for line in text.splitlines() if line.strip()), "")
        if not first:
            return self.warned(record.rel_path, "script is empty")
        if first.startswith("#"):
            return self.passed(record.rel_path)
        if first == "---" and record.extension.lower() in NOTEBOOK_EXTENSIONS:
            return self.passed(record.rel_path)
        return self.warned(
            record.rel_path,
            "script should open with a comment header describing its purpose",
        )
