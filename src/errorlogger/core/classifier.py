"""Severity classification.

Two small, deterministic steps:

- ``kind_of`` turns a Python exception into an :class:`ErrorKind` by walking
  the exception's class hierarchy against an exact-type table, so the most
  specific known class wins (``FileNotFoundError`` before ``OSError``).
- ``classify`` maps an :class:`ErrorKind` to a :class:`SeverityLevel` using
  four disjoint membership sets. It never fails; anything unmatched is
  reported as ``error``.
"""
from __future__ import annotations

import asyncio
import io
from concurrent.futures.process import BrokenProcessPool
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

import requests

from .models import ErrorKind, SeverityLevel

CRITICAL_KINDS: FrozenSet[ErrorKind] = frozenset(
    {
        ErrorKind.ISOLATE_SPAWN,
        ErrorKind.MISSING_PLUGIN,
        ErrorKind.OS_ERROR,
    }
)
ERROR_KINDS: FrozenSet[ErrorKind] = frozenset(
    {
        ErrorKind.IO_EXCEPTION,
        ErrorKind.PICTURE_RASTERIZATION,
        ErrorKind.PLATFORM_EXCEPTION,
        ErrorKind.NETWORK_IMAGE_LOAD,
    }
)
WARNING_KINDS: FrozenSet[ErrorKind] = frozenset(
    {
        ErrorKind.FORMAT,
        ErrorKind.UNSUPPORTED_OPERATION,
        ErrorKind.PATH_EXISTS,
        ErrorKind.PATH_NOT_FOUND,
        ErrorKind.PATH_ACCESS,
        ErrorKind.TIMEOUT,
    }
)
INFO_KINDS: FrozenSet[ErrorKind] = frozenset(
    {
        ErrorKind.DEFERRED_LOAD,
        ErrorKind.TICKER_CANCELED,
    }
)

# Lookup order matters only for the implicit default.
_SEVERITY_TABLE: Tuple[Tuple[FrozenSet[ErrorKind], SeverityLevel], ...] = (
    (CRITICAL_KINDS, SeverityLevel.CRITICAL),
    (ERROR_KINDS, SeverityLevel.ERROR),
    (WARNING_KINDS, SeverityLevel.WARNING),
    (INFO_KINDS, SeverityLevel.INFO),
)

DEFAULT_SEVERITY = SeverityLevel.ERROR

EXCEPTION_KINDS: Dict[type, ErrorKind] = {
    ChildProcessError: ErrorKind.ISOLATE_SPAWN,
    BrokenProcessPool: ErrorKind.ISOLATE_SPAWN,
    ImportError: ErrorKind.MISSING_PLUGIN,
    OSError: ErrorKind.OS_ERROR,
    ConnectionError: ErrorKind.IO_EXCEPTION,
    EOFError: ErrorKind.IO_EXCEPTION,
    BlockingIOError: ErrorKind.IO_EXCEPTION,
    requests.RequestException: ErrorKind.IO_EXCEPTION,
    ValueError: ErrorKind.FORMAT,
    NotImplementedError: ErrorKind.UNSUPPORTED_OPERATION,
    io.UnsupportedOperation: ErrorKind.UNSUPPORTED_OPERATION,
    FileExistsError: ErrorKind.PATH_EXISTS,
    FileNotFoundError: ErrorKind.PATH_NOT_FOUND,
    NotADirectoryError: ErrorKind.PATH_NOT_FOUND,
    IsADirectoryError: ErrorKind.PATH_NOT_FOUND,
    PermissionError: ErrorKind.PATH_ACCESS,
    TimeoutError: ErrorKind.TIMEOUT,
    requests.Timeout: ErrorKind.TIMEOUT,
    asyncio.CancelledError: ErrorKind.TICKER_CANCELED,
}


def classify(kind: ErrorKind) -> SeverityLevel:
    for members, level in _SEVERITY_TABLE:
        if kind in members:
            return level
    return DEFAULT_SEVERITY


def kind_of(
    error: BaseException | ErrorKind,
    overrides: Optional[Mapping[type, ErrorKind]] = None,
) -> ErrorKind:
    """Resolve the :class:`ErrorKind` for an exception.

    ``overrides`` lets a host application map its own exception classes; it
    is consulted before the built-in table at every level of the hierarchy.
    """
    if isinstance(error, ErrorKind):
        return error
    for cls in type(error).__mro__:
        if overrides and cls in overrides:
            return overrides[cls]
        if cls in EXCEPTION_KINDS:
            return EXCEPTION_KINDS[cls]
    return ErrorKind.UNKNOWN


def severity_for(
    error: BaseException | ErrorKind,
    overrides: Optional[Mapping[type, ErrorKind]] = None,
) -> SeverityLevel:
    return classify(kind_of(error, overrides))
