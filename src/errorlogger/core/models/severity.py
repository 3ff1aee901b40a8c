"""Severity levels and the closed set of error kinds they are derived from."""
from __future__ import annotations

from enum import Enum


class SeverityLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorKind(str, Enum):
    """Concrete kinds of failure a host application can raise.

    Call sites either pass a kind explicitly or let
    :func:`errorlogger.core.classifier.kind_of` derive one from an exception.
    """

    # process/runtime level
    ISOLATE_SPAWN = "isolate_spawn"
    MISSING_PLUGIN = "missing_plugin"
    OS_ERROR = "os_error"

    # I/O and rendering
    IO_EXCEPTION = "io_exception"
    PICTURE_RASTERIZATION = "picture_rasterization"
    PLATFORM_EXCEPTION = "platform_exception"
    NETWORK_IMAGE_LOAD = "network_image_load"

    # recoverable input/filesystem problems
    FORMAT = "format"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    PATH_EXISTS = "path_exists"
    PATH_NOT_FOUND = "path_not_found"
    PATH_ACCESS = "path_access"
    TIMEOUT = "timeout"

    DEFERRED_LOAD = "deferred_load"
    TICKER_CANCELED = "ticker_canceled"

    UNKNOWN = "unknown"
