"""Rule requiring snake_case names for variables assigned in R scripts."""

import re

from projcheck.models import FileRecord, RuleResult
from projcheck.naming_style import is_snake_case
from projcheck.script_code_lines import script_code_lines
from projcheck.script_rule import ScriptRule

# Top-level assignments only: `x <- ...`, `x <<- ...` or `x = ...` at column 0
ARROW_ASSIGN_RE = re.compile(r"^([A-Za-z.][A-Za-z0-9._]*)\s*<<?-")
EQUALS_ASSIGN_RE = re.compile(r"^([A-Za-z.][A-Za-z0-9._]*)\s*=(?!=)")


class VariableNamingRule(ScriptRule):
    """Assigned variable names are lower snake_case."""

    rule_id = "variable-naming"
    description = "variables use snake_case names"

    def check_text(self, record: FileRecord, text: str) -> RuleResult:
        """Warn listing every non-snake_case name with its first line."""
        offenders: dict[str, int] = {}
        for lineno, line in script_code_lines(text, record.extension):
            match = ARROW_ASSIGN_RE.match(line) or EQUALS_ASSIGN_RE.match(line)
            if match and not is_snake_case(match.group(1)):
                offenders.setdefault(match.group(1), lineno)

        if offenders:
            listed = ", ".join(f"{name} (line {n})" for name, n in offenders.items())
            return self.warned(
                record.rel_path, f"non-snake_case variable names: {listed}"
            )
        return self.passed(record.rel_path)
