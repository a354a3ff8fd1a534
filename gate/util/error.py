"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error.

    Raised at startup when required configuration is missing.
    The process must not start when this is raised.
    """

    pass
