"""Client-side error reporting: classify, enrich and forward uncaught errors."""

from errorlogger.sdk.client import ErrorLoggerClient, Reporter
from errorlogger.sdk.hooks import initialize, install_hooks

__all__ = ["ErrorLoggerClient", "Reporter", "initialize", "install_hooks"]
