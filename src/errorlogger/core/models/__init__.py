"""Core models."""

from .severity import ErrorKind, SeverityLevel
from .records import ErrorRecord, PlatformDescriptor, RegistrationState, utc_timestamp

__all__ = [
    "ErrorKind",
    "SeverityLevel",
    "ErrorRecord",
    "PlatformDescriptor",
    "RegistrationState",
    "utc_timestamp",
]
