import pytest

from errorlogger.sdk.config import SdkConfig, load_config, merge_cli_overrides
from errorlogger.sdk.errors import ConfigError


def test_defaults_when_file_missing(tmp_path):
    cfg = load_config(tmp_path / "missing.toml")
    assert cfg.base_url == "https://api.fel.grod.ovh"
    assert cfg.timeout_seconds == 10
    assert cfg.app_identifier is None
    assert cfg.api_key is None


def test_toml_section(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[errorlogger]\nbase_url = "https://collector.test/"\napp_identifier = "my-app"\n'
        'api_key = "secret"\ntimeout_seconds = 3\nlog_level = "debug"\n',
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.base_url == "https://collector.test"
    assert cfg.app_identifier == "my-app"
    assert cfg.api_key == "secret"
    assert cfg.timeout_seconds == 3
    assert cfg.log_level == "DEBUG"


def test_yaml_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("errorlogger:\n  app_identifier: yaml-app\n", encoding="utf-8")
    assert load_config(path).app_identifier == "yaml-app"


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.toml"
    path.write_text('[errorlogger]\napi_key = "file-key"\n', encoding="utf-8")
    monkeypatch.setenv("ERRORLOGGER_API_KEY", "env-key")
    monkeypatch.setenv("ERRORLOGGER_TIMEOUT", "2.5")
    cfg = load_config(path)
    assert cfg.api_key == "env-key"
    assert cfg.timeout_seconds == 2.5


@pytest.mark.parametrize("value", ["zero", "0", "-1"])
def test_invalid_timeout(tmp_path, monkeypatch, value):
    monkeypatch.setenv("ERRORLOGGER_TIMEOUT", value)
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.toml")


def test_invalid_base_url(tmp_path, monkeypatch):
    monkeypatch.setenv("ERRORLOGGER_BASE_URL", "ftp://nope")
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.toml")


def test_invalid_log_level(tmp_path, monkeypatch):
    monkeypatch.setenv("ERRORLOGGER_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.toml")


def test_unparsable_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[errorlogger\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_merge_cli_overrides_copies():
    base = SdkConfig(app_identifier="a", api_key="k")
    merged = merge_cli_overrides(base, base_url="https://other.test/", api_key="k2", timeout_seconds=4)
    assert merged.base_url == "https://other.test"
    assert merged.api_key == "k2"
    assert merged.app_identifier == "a"
    assert merged.timeout_seconds == 4
    assert base.api_key == "k"
