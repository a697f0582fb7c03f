"""Error raised for unusable checker configuration."""


class ConfigError(Exception):
    """The checker configuration file is missing, malformed, or invalid."""
