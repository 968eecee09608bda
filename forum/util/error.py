"""Utility layer errors."""


class UtilError(Exception):
    """Base for failures while wiring the application together."""


class ConfigurationError(UtilError):
    """Settings are unusable for the current environment."""
