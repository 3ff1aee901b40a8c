"""Per-error records and the registration state they read from."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, NamedTuple, Optional

from ..config import UNREGISTERED_APP_ID
from .severity import SeverityLevel


class PlatformDescriptor(NamedTuple):
    name: str = ""
    version: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.name and not self.version


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class RegistrationState:
    """Credentials and outcome of the registration handshake.

    ``application_id`` is only ever set after a successful (HTTP 200)
    validation call; ``last_error_message`` holds the most recent failure.
    """

    app_identifier: Optional[str] = None
    api_key: Optional[str] = None
    application_id: Optional[int] = None
    last_error_message: str = ""

    @property
    def is_registered(self) -> bool:
        return self.application_id is not None

    @property
    def effective_app_id(self) -> int:
        if self.application_id is None:
            return UNREGISTERED_APP_ID
        return self.application_id


@dataclass(frozen=True)
class ErrorRecord:
    severity: SeverityLevel
    message: str
    stack_trace: str
    platform_name: str
    platform_version: str
    application_id: int = UNREGISTERED_APP_ID
    timestamp_utc: str = field(default_factory=utc_timestamp)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "appId": self.application_id,
            "severity": self.severity.value,
            "errorMessage": self.message,
            "stackTrace": self.stack_trace,
            "platform": self.platform_name,
            "platformVersion": self.platform_version,
            "errorDatetime": self.timestamp_utc,
        }
