"""Predicate for names that the naming rules skip."""

from fnmatch import fnmatchcase


def is_exempt(name: str, patterns: list[str]) -> bool:
    """Check if a base name matches any of the exempt glob patterns."""
    return any(fnmatchcase(name, pattern) for pattern in patterns)
