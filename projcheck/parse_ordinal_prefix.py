"""Logic for splitting a leading ordinal number off an entry name."""

import re

ORDINAL_RE = re.compile(r"^(\d+)(?:[_\-. ]|(?=[A-Za-z])|$)(.*)$", re.DOTALL)


def parse_ordinal_prefix(name: str) -> tuple[int | None, str, str]:
    """Return (ordinal, ordinal_text, remainder) for a name.

    "01_Load-Data" -> (1, "01", "Load-Data")
    "2analysis.R"  -> (2, "2", "analysis.R")
    "README.md"    -> (None, "", "README.md")
    """
    match = ORDINAL_RE.match(name)
    if not match:
        return None, "", name
    digits, rest = match.group(1), match.group(2)
    return int(digits), digits, rest
