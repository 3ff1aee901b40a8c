import pytest

ENV_VARS = (
    "ERRORLOGGER_BASE_URL",
    "ERRORLOGGER_TIMEOUT",
    "ERRORLOGGER_APP_IDENTIFIER",
    "ERRORLOGGER_API_KEY",
    "ERRORLOGGER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else str(payload)

    def json(self):
        if self._payload is None and self.text:
            raise ValueError("not json")
        return self._payload


class RecordingPost:
    """Stands in for ``requests.post`` and remembers every call."""

    def __init__(self, response=None, exc: Exception | None = None):
        self.response = response or FakeResponse(200, {"data": None})
        self.exc = exc
        self.calls = []

    def __call__(self, url, headers=None, json=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def recording_post():
    return RecordingPost
