"""
Exception types raised by the configuration layer.
"""


class HabbusError(Exception):
    """Base class for errors raised by HabbusBot."""


class MissingGuildIdError(HabbusError, ValueError):
    """A configuration save was requested without a guild ID."""


class ConfigPersistenceError(HabbusError):
    """The settings file could not be written."""

    def __init__(self, path, cause: Exception):
        super().__init__(f"Could not write settings to {path}: {cause}")
        self.path = path
        self.cause = cause


class OAuthError(HabbusError):
    """The Discord OAuth2 exchange or an identity lookup failed."""
