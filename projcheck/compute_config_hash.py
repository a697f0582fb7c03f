"""Logic for fingerprinting the effective checker configuration."""

import hashlib
import json
from typing import Any


def compute_config_hash(config: dict[str, Any]) -> str:
    """Return a short, key-order independent SHA-256 digest of the configuration."""
    canonical = json.dumps(config, sort_keys=True, ensure_ascii=True, default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:16]
