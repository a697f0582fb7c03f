"""Logic for walking a project tree into ordered file records."""

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from projcheck.models import FileRecord
from projcheck.parse_ordinal_prefix import parse_ordinal_prefix
from projcheck.split_extension import split_extension

logger = logging.getLogger(__name__)


def scan_tree(root: Path, ignore_dirs: Iterable[str] = ()) -> Iterator[FileRecord]:
    """Return a lazy, depth-first sequence of records below root.

    Directories come before their contents; siblings are sorted by name.
    The root itself is validated eagerly and raises OSError when it is
    missing, not a directory, or unreadable.
    """
    root = Path(root).resolve()
    if not root.exists():
        msg = f"Root does not exist: {root}"
        raise FileNotFoundError(msg)
    if not root.is_dir():
        msg = f"Root is not a directory: {root}"
        raise NotADirectoryError(msg)
    if not os.access(root, os.R_OK | os.X_OK):
        msg = f"Root is not readable: {root}"
        raise PermissionError(msg)

    entries = _list_dir(root)
    return _walk(root, entries, frozenset(ignore_dirs), depth=0)


def make_record(root: Path, path: Path, depth: int, *, is_dir: bool) -> FileRecord:
    """Build a FileRecord for one entry."""
    stem, extension = (path.name, "") if is_dir else split_extension(path.name)
    ordinal, ordinal_text, segment = parse_ordinal_prefix(stem)
    return FileRecord(
        path=path,
        rel_path=path.relative_to(root).as_posix(),
        is_dir=is_dir,
        depth=depth,
        ordinal=ordinal,
        ordinal_text=ordinal_text,
        name_segment=segment,
        extension=extension,
    )


def _list_dir(directory: Path) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as it:
        entries = list(it)
    entries.sort(key=lambda e: (e.name.lower(), e.name))
    return entries


def _walk(
    root: Path,
    entries: list[os.DirEntry[str]],
    ignore_dirs: frozenset[str],
    depth: int,
) -> Iterator[FileRecord]:
    for entry in entries:
        is_dir = entry.is_dir(follow_symlinks=False)
        if is_dir and entry.name in ignore_dirs:
            logger.debug("Skipping ignored directory %s", entry.path)
            continue

        yield make_record(root, Path(entry.path), depth, is_dir=is_dir)

        if is_dir:
            try:
                children = _list_dir(Path(entry.path))
            except OSError as exc:
                logger.warning("Cannot read directory %s: %s", entry.path, exc)
                continue
            yield from _walk(root, children, ignore_dirs, depth + 1)
