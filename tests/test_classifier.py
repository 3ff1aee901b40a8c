import asyncio

import pytest
import requests

from errorlogger.core.classifier import classify, kind_of, severity_for
from errorlogger.core.models import ErrorKind, SeverityLevel


@pytest.mark.parametrize(
    "kind, expected",
    [
        (ErrorKind.ISOLATE_SPAWN, SeverityLevel.CRITICAL),
        (ErrorKind.MISSING_PLUGIN, SeverityLevel.CRITICAL),
        (ErrorKind.OS_ERROR, SeverityLevel.CRITICAL),
        (ErrorKind.IO_EXCEPTION, SeverityLevel.ERROR),
        (ErrorKind.PICTURE_RASTERIZATION, SeverityLevel.ERROR),
        (ErrorKind.PLATFORM_EXCEPTION, SeverityLevel.ERROR),
        (ErrorKind.NETWORK_IMAGE_LOAD, SeverityLevel.ERROR),
        (ErrorKind.FORMAT, SeverityLevel.WARNING),
        (ErrorKind.UNSUPPORTED_OPERATION, SeverityLevel.WARNING),
        (ErrorKind.PATH_EXISTS, SeverityLevel.WARNING),
        (ErrorKind.PATH_NOT_FOUND, SeverityLevel.WARNING),
        (ErrorKind.PATH_ACCESS, SeverityLevel.WARNING),
        (ErrorKind.TIMEOUT, SeverityLevel.WARNING),
        (ErrorKind.DEFERRED_LOAD, SeverityLevel.INFO),
        (ErrorKind.TICKER_CANCELED, SeverityLevel.INFO),
    ],
)
def test_classify_documented_levels(kind, expected):
    assert classify(kind) is expected


def test_unknown_kind_defaults_to_error():
    assert classify(ErrorKind.UNKNOWN) is SeverityLevel.ERROR


def test_every_kind_is_classified():
    for kind in ErrorKind:
        assert isinstance(classify(kind), SeverityLevel)


def test_most_specific_exception_class_wins():
    assert kind_of(FileNotFoundError("x")) is ErrorKind.PATH_NOT_FOUND
    assert kind_of(PermissionError("x")) is ErrorKind.PATH_ACCESS
    assert kind_of(OSError("x")) is ErrorKind.OS_ERROR
    assert kind_of(TimeoutError()) is ErrorKind.TIMEOUT
    assert kind_of(ModuleNotFoundError("plugin")) is ErrorKind.MISSING_PLUGIN


def test_requests_errors_are_not_critical():
    assert kind_of(requests.ReadTimeout()) is ErrorKind.TIMEOUT
    assert kind_of(requests.ConnectionError()) is ErrorKind.IO_EXCEPTION
    assert severity_for(requests.ConnectionError()) is SeverityLevel.ERROR


def test_misc_mappings():
    assert kind_of(ValueError("bad")) is ErrorKind.FORMAT
    assert kind_of(NotImplementedError()) is ErrorKind.UNSUPPORTED_OPERATION
    assert kind_of(asyncio.CancelledError()) is ErrorKind.TICKER_CANCELED
    assert severity_for(ChildProcessError()) is SeverityLevel.CRITICAL


def test_unmapped_exception_is_unknown():
    class Boom(Exception):
        pass

    assert kind_of(Boom()) is ErrorKind.UNKNOWN
    assert severity_for(KeyError("k")) is SeverityLevel.ERROR


def test_overrides_take_precedence():
    class RenderError(RuntimeError):
        pass

    overrides = {RenderError: ErrorKind.PICTURE_RASTERIZATION, ValueError: ErrorKind.DEFERRED_LOAD}
    assert kind_of(RenderError(), overrides) is ErrorKind.PICTURE_RASTERIZATION
    assert severity_for(ValueError(), overrides) is SeverityLevel.INFO


def test_explicit_kind_passes_through():
    assert kind_of(ErrorKind.TICKER_CANCELED) is ErrorKind.TICKER_CANCELED
