"""Core exception hierarchy."""

class ErrorLoggerError(Exception):
    """Base class for errorlogger errors."""


class PlatformProbeError(ErrorLoggerError):
    """Host platform could not be queried."""
