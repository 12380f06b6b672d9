"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Required configuration is missing or invalid.

    Raised on startup-class paths; callers should surface it, not retry.
    """

    pass
