from datetime import datetime, timezone

from errorlogger.core.models import ErrorRecord, RegistrationState, SeverityLevel, utc_timestamp


def test_utc_timestamp_format():
    moment = datetime(2024, 3, 1, 12, 30, 5, 123456, tzinfo=timezone.utc)
    assert utc_timestamp(moment) == "2024-03-01T12:30:05.123Z"


def test_registration_state_sentinel():
    state = RegistrationState()
    assert not state.is_registered
    assert state.effective_app_id == 0
    state.application_id = 42
    assert state.effective_app_id == 42


def test_record_payload_keys():
    record = ErrorRecord(
        severity=SeverityLevel.WARNING,
        message="ValueError: bad",
        stack_trace="trace",
        platform_name="Linux",
        platform_version="Ubuntu 22.04",
        application_id=3,
        timestamp_utc="2024-03-01T12:30:05.123Z",
    )
    assert record.to_payload() == {
        "appId": 3,
        "severity": "warning",
        "errorMessage": "ValueError: bad",
        "stackTrace": "trace",
        "platform": "Linux",
        "platformVersion": "Ubuntu 22.04",
        "errorDatetime": "2024-03-01T12:30:05.123Z",
    }
