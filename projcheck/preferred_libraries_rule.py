"""Rule steering R scripts away from discouraged packages."""

import re

from projcheck.models import FileRecord, RuleResult
from projcheck.script_code_lines import script_code_lines
from projcheck.script_rule import ScriptRule

LIBRARY_CALL_RE = re.compile(
    r"\b(library|require)\s*\(\s*[\"']?([A-Za-z][A-Za-z0-9.]*)[\"']?"
)


class PreferredLibrariesRule(ScriptRule):
    """Scripts load packages with library() and avoid superseded packages."""

    rule_id = "preferred-libraries"
    description = "scripts prefer the recommended data-manipulation packages"

    def check_text(self, record: FileRecord, text: str) -> RuleResult:
        """Warn on discouraged packages and on require() calls."""
        discouraged: dict[str, str] = self.config.get("discouraged_libraries", {})
        problems: list[str] = []
        for lineno, line in script_code_lines(text, record.extension):
            for func, package in LIBRARY_CALL_RE.findall(line):
                if package in discouraged:
                    problems.append(
                        f"line {lineno}: {package} is discouraged, "
                        f"prefer {discouraged[package]}"
                    )
                if func == "require":
                    problems.append(
                        f"line {lineno}: use library({package}) instead of require()"
                    )

        if problems:
            return self.warned(record.rel_path, "; ".join(problems))
        return self.passed(record.rel_path)
