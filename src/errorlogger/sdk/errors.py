"""Errors raised by the SDK layer."""

class SdkError(Exception):
    """Base class for client, config and CLI failures."""


class RemoteServiceError(SdkError):
    """The collection service answered with something the client cannot use."""


class ConfigError(SdkError):
    """Missing or invalid settings (credentials, base URL, timeout, log level)."""
