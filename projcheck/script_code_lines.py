"""Logic for extracting the R code lines of a script or notebook."""

import re

CHUNK_START_RE = re.compile(r"^\s*```+\s*\{\s*r\b", re.IGNORECASE)
CHUNK_END_RE = re.compile(r"^\s*```+\s*$")

NOTEBOOK_EXTENSIONS = frozenset({".rmd", ".qmd"})


def script_code_lines(text: str, extension: str) -> list[tuple[int, str]]:
    """Return (line_number, line) pairs holding R code, comments excluded.

    Plain scripts contribute every line; R Markdown and Quarto documents
    contribute only lines inside ```{r} chunks.
    """
    in_chunk = extension.lower() not in NOTEBOOK_EXTENSIONS
    notebook = not in_chunk
    lines: list[tuple[int, str]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if notebook:
            if not in_chunk and CHUNK_START_RE.match(line):
                in_chunk = True
                continue
            if in_chunk and CHUNK_END_RE.match(line):
                in_chunk = False
                continue
        if not in_chunk or line.lstrip().startswith("#"):
            continue
        lines.append((lineno, line))
    return lines
