"""Core defaults (no environment reads)."""
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.fel.grod.ovh"
DEFAULT_TIMEOUT_SECONDS = 10.0
UNREGISTERED_APP_ID = 0

VALIDATE_PATH = "/app/validate"
ERRORS_PATH = "/errors"
API_KEY_HEADER = "api_key"

TIMEOUT_MESSAGE = "API Timedout"
INVALID_CREDENTIALS_MESSAGE = "Either App Identifier or Api Key is invalid!"
REQUEST_FAILED_MESSAGE = "API request failed"
BAD_RESPONSE_MESSAGE = "Unexpected response from validation endpoint"


@dataclass
class CoreDefaults:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    unregistered_app_id: int = UNREGISTERED_APP_ID


DEFAULTS = CoreDefaults()
