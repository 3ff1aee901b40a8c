"""Python client for the error collection service."""
from __future__ import annotations

import traceback
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from types import TracebackType
from typing import Any, Dict, Mapping, Optional, Protocol, Union

import requests

from errorlogger.core.classifier import classify, kind_of
from errorlogger.core.config import (
    API_KEY_HEADER,
    BAD_RESPONSE_MESSAGE,
    ERRORS_PATH,
    INVALID_CREDENTIALS_MESSAGE,
    REQUEST_FAILED_MESSAGE,
    TIMEOUT_MESSAGE,
    VALIDATE_PATH,
)
from errorlogger.core.models import ErrorKind, ErrorRecord, RegistrationState
from errorlogger.core.platform import HostProbe, detect_platform
from errorlogger.core.utils.logging import get_logger

from .config import SdkConfig, load_config
from .errors import ConfigError, RemoteServiceError

logger = get_logger("errorlogger.client")

StackTraceLike = Union[str, TracebackType, None]


class Reporter(Protocol):
    def report(self, error: BaseException, stack_trace: StackTraceLike = None) -> None:
        ...


def format_stack_trace(error: BaseException, stack_trace: StackTraceLike = None) -> str:
    if isinstance(stack_trace, str):
        return stack_trace
    if isinstance(stack_trace, TracebackType):
        return "".join(traceback.format_tb(stack_trace))
    if error.__traceback__ is not None:
        return "".join(traceback.format_tb(error.__traceback__))
    return ""


def format_message(error: BaseException) -> str:
    # exception text only; notes attached with add_note() are not part of it
    name = type(error).__name__
    text = str(error)
    return f"{name}: {text}" if text else name


def _parse_app_id(response: requests.Response) -> Optional[int]:
    try:
        body = response.json()
    except ValueError as exc:
        raise RemoteServiceError(f"Validation response is not JSON: {response.text[:500]}") from exc
    if not isinstance(body, dict):
        raise RemoteServiceError("Unexpected validation response")
    value = body.get("data")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise RemoteServiceError(f"Application id is not an integer: {value!r}")
    return value


class ErrorLoggerClient:
    """Registers an application and forwards its errors to the collection service.

    All state lives on the instance (``self.state``), so several clients can
    coexist and tests can inject a prepared :class:`RegistrationState`.
    Neither :meth:`register` nor :meth:`report` raises on transport
    failures; the last failure is readable from :attr:`error_message`.
    """

    def __init__(
        self,
        config: SdkConfig | None = None,
        state: RegistrationState | None = None,
        probe: HostProbe | None = None,
        platform_target: str | None = None,
        kind_overrides: Mapping[type, ErrorKind] | None = None,
    ) -> None:
        self.config = config or load_config()
        self.state = state or RegistrationState()
        self.probe = probe
        self.platform_target = platform_target
        self.kind_overrides = dict(kind_overrides or {})

    # --- public properties ---
    @property
    def error_message(self) -> str:
        return self.state.last_error_message

    @property
    def application_id(self) -> Optional[int]:
        return self.state.application_id

    @property
    def app_identifier(self) -> Optional[str]:
        return self.state.app_identifier

    @property
    def api_key(self) -> Optional[str]:
        return self.state.api_key

    # --- public methods ---
    def register(self, app_identifier: str | None = None, api_key: str | None = None) -> None:
        """Validate the app identifier/API key pair and store the application id."""
        if app_identifier is None:
            app_identifier = self.config.app_identifier
        if api_key is None:
            api_key = self.config.api_key
        if app_identifier is None or api_key is None:
            raise ConfigError("Registration requires an app identifier and an API key")

        self.state.app_identifier = app_identifier
        self.state.api_key = api_key
        self.state.application_id = None

        response = self._post(VALIDATE_PATH, {"appIdentifier": app_identifier})
        if response is None:
            return

        if response.status_code != 200:
            logger.warning(
                "Validation rejected with status %s: %s", response.status_code, response.text[:500]
            )
            self.state.last_error_message = INVALID_CREDENTIALS_MESSAGE
            return

        try:
            app_id = _parse_app_id(response)
        except RemoteServiceError as exc:
            logger.error("Could not read application id: %s", exc)
            self.state.last_error_message = BAD_RESPONSE_MESSAGE
            return
        self.state.application_id = app_id
        logger.info("Registered %s as application %s", app_identifier, app_id)

    def build_record(
        self,
        error: BaseException,
        stack_trace: StackTraceLike = None,
        kind: ErrorKind | None = None,
    ) -> ErrorRecord:
        severity = classify(kind or kind_of(error, self.kind_overrides))
        descriptor = detect_platform(self.platform_target, self.probe)
        return ErrorRecord(
            severity=severity,
            message=format_message(error),
            stack_trace=format_stack_trace(error, stack_trace),
            platform_name=descriptor.name,
            platform_version=descriptor.version,
            application_id=self.state.effective_app_id,
        )

    def report(
        self,
        error: BaseException,
        stack_trace: StackTraceLike = None,
        kind: ErrorKind | None = None,
    ) -> None:
        """Send one error to the collection service. Never raises."""
        try:
            record = self.build_record(error, stack_trace, kind)
        except Exception:  # noqa: BLE001
            logger.exception("Could not build error record for %r", error)
            return

        try:
            response = self._post(ERRORS_PATH, record.to_payload())
        except Exception:  # noqa: BLE001
            self.state.last_error_message = REQUEST_FAILED_MESSAGE
            logger.exception("Could not send error report for %r", error)
            return
        if response is not None:
            logger.debug("Error report answered with status %s", response.status_code)

    # --- internal helpers ---
    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.state.api_key is not None:
            headers[API_KEY_HEADER] = self.state.api_key
        return headers

    def _send(self, url: str, body: Dict[str, Any]) -> requests.Response:
        return requests.post(
            url,
            headers=self._headers(),
            json=body,
            timeout=self.config.timeout_seconds,
        )

    def _post(self, path: str, body: Dict[str, Any]) -> requests.Response | None:
        """POST ``body`` and wait at most ``timeout_seconds`` for the whole exchange.

        requests' own timeout only bounds connect and each socket read, so the
        call runs on a worker thread and the deadline is applied to its result.
        A call that misses the deadline is abandoned, not cancelled.
        """
        url = f"{self.config.base_url.rstrip('/')}{path}"
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="errorlogger-post")
        try:
            future = executor.submit(self._send, url, body)
            return future.result(timeout=self.config.timeout_seconds)
        except (FutureTimeout, requests.Timeout):
            self.state.last_error_message = TIMEOUT_MESSAGE
            logger.error("Request to %s timed out", url, exc_info=True)
        except requests.RequestException:
            self.state.last_error_message = REQUEST_FAILED_MESSAGE
            logger.error("Request to %s failed", url, exc_info=True)
        except Exception:  # noqa: BLE001
            self.state.last_error_message = REQUEST_FAILED_MESSAGE
            logger.exception("Request to %s could not be sent", url)
        finally:
            executor.shutdown(wait=False)
        return None
