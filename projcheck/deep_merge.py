"""Logic for merging user configuration over the checker defaults."""

from typing import Any

ADDITIVE_KEYS = frozenset({"exempt_names", "ignore_dirs"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Mappings are merged recursively.
    - Lists in 'update' replace lists in 'base', except for ADDITIVE_KEYS,
      which keep the base entries and append new ones in order.
    """
    result = dict(base)
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(current, list)
            and isinstance(value, list)
        ):
            result[key] = list(dict.fromkeys([*current, *value]))
        else:
            result[key] = value
    return result
