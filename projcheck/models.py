"""Data models for scanned entries and rule outcomes."""

from dataclasses import dataclass
from pathlib import Path

PASS = "pass"
WARN = "warn"
FAIL = "fail"

STATUSES = (PASS, WARN, FAIL)

ROOT_TARGET = "."


@dataclass(frozen=True)
class FileRecord:
    """Represents one filesystem entry found by the tree scanner."""

    path: Path
    rel_path: str  # POSIX separators, relative to the checked root
    is_dir: bool
    depth: int
    ordinal: int | None
    ordinal_text: str  # digits as written, e.g. "01"
    name_segment: str  # name after the prefix, extension removed for files
    extension: str = ""

    @property
    def name(self) -> str:
        """Return the entry's base name."""
        return self.path.name

    @property
    def parent_rel(self) -> str:
        """Return the relative path of the containing directory."""
        parent = self.rel_path.rpartition("/")[0]
        return parent or ROOT_TARGET


@dataclass(frozen=True)
class RuleResult:
    """Represents the outcome of one rule applied to one target."""

    rule_id: str
    target: str  # a FileRecord.rel_path or ROOT_TARGET
    status: str  # pass/warn/fail
    message: str = ""
