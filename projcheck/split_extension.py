"""Logic for splitting a file name into its stem and extension."""

import os

# Outer suffixes that wrap another format, as in "survey.csv.gz"
COMPRESSION_SUFFIXES = frozenset({".gz", ".bz2", ".xz", ".zst", ".zip", ".7z"})


def split_extension(name: str) -> tuple[str, str]:
    """Return (stem, extension) for a file name.

    A compression suffix keeps the suffix it wraps as part of the extension:

    "01_load_data.R"       -> ("01_load_data", ".R")
    "01_raw_data.csv.gz"   -> ("01_raw_data", ".csv.gz")
    "02_archive.tar.gz"    -> ("02_archive", ".tar.gz")
    "01.R"                 -> ("01", ".R")
    ".Rprofile"            -> (".Rprofile", "")
    """
    stem, extension = os.path.splitext(name)
    if extension.lower() in COMPRESSION_SUFFIXES:
        stem, inner = os.path.splitext(stem)
        extension = inner + extension
    return stem, extension
