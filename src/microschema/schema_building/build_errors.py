"""Errors raised while building schema fragments."""


class ConfigurationError(Exception):
    """Raised when a constructor is called with an unusable configuration."""


class InvalidRequiredList(ConfigurationError):
    """Raised when an object's ``required`` option is not a list."""


class UnsupportedPatternFlags(ConfigurationError):
    """Raised when a compiled string pattern carries regex flags."""
