"""Logic for loading the checker configuration and merging it with defaults."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from projcheck.config_error import ConfigError
from projcheck.deep_merge import deep_merge

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAME = ".projcheck.yml"

SEVERITIES = ("fail", "warn", "off")

DEFAULT_CONFIG: dict[str, Any] = {
    "config_files": ["config.yml", "config.yaml"],
    "ordinal_width": 2,
    "script_extensions": [".R", ".r", ".Rmd", ".qmd"],
    "exempt_names": [
        "README*",
        "LICENSE*",
        "DESCRIPTION",
        "NAMESPACE",
        "*.Rproj",
        ".*",
        "config.yml",
        "config.yaml",
        "renv.lock",
    ],
    "ignore_dirs": [
        ".git",
        ".Rproj.user",
        "renv",
        "packrat",
        "__pycache__",
        ".venv",
    ],
    "severity": {
        "ordinal-prefix": "fail",
        "directory-case": "fail",
        "file-case": "fail",
        "root-config": "fail",
        "separator-consistency": "fail",
        "unique-ordinal": "warn",
        "script-header": "warn",
        "variable-naming": "warn",
        "preferred-libraries": "warn",
    },
    "discouraged_libraries": {
        "plyr": "dplyr",
        "reshape": "tidyr",
        "reshape2": "tidyr",
    },
}


def load_config(
    path: str | Path | None = None, root: Path | None = None
) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    An explicit path must exist. Without one, a .projcheck.yml at the
    checked root is used when present.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if path is not None:
        p = Path(path)
        if not p.is_file():
            msg = f"Configuration file not found: {p}"
            raise ConfigError(msg)
    elif root is not None and (root / PROJECT_CONFIG_NAME).is_file():
        p = root / PROJECT_CONFIG_NAME
        logger.debug("Using project configuration %s", p)
    else:
        return config

    try:
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Could not read configuration {p}: {exc}"
        raise ConfigError(msg) from exc

    if not isinstance(user_config, dict):
        msg = f"Configuration {p} must be a mapping, got {type(user_config).__name__}"
        raise ConfigError(msg)

    config = deep_merge(config, user_config)
    _validate(config)
    return config


def _validate(config: dict[str, Any]) -> None:
    severity = config.get("severity")
    if not isinstance(severity, dict):
        msg = "'severity' must map rule ids to fail/warn/off"
        raise ConfigError(msg)
    for rule_id, level in severity.items():
        # YAML 1.1 reads a bare `off` as false
        if level is False:
            severity[rule_id] = "off"
    for rule_id, level in severity.items():
        if rule_id not in DEFAULT_CONFIG["severity"]:
            known = ", ".join(DEFAULT_CONFIG["severity"])
            msg = f"Unknown rule {rule_id!r} in 'severity' (known rules: {known})"
            raise ConfigError(msg)
        if level not in SEVERITIES:
            msg = f"Unknown severity {level!r} for rule {rule_id!r}"
            raise ConfigError(msg)
    width = config.get("ordinal_width")
    if not isinstance(width, int) or isinstance(width, bool) or width < 1:
        msg = f"'ordinal_width' must be a positive integer, got {width!r}"
        raise ConfigError(msg)
