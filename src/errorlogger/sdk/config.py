"""SDK configuration loader."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

import yaml

from errorlogger.core.config import DEFAULTS
from errorlogger.core.utils.io import load_structured

from .errors import ConfigError


@dataclass
class SdkConfig:
    base_url: str = DEFAULTS.base_url
    timeout_seconds: float = DEFAULTS.timeout_seconds
    app_identifier: Optional[str] = None
    api_key: Optional[str] = None
    log_level: str = "WARNING"


DEFAULT_CONFIG_PATH = Path.home() / ".errorlogger" / "config.toml"
CONFIG_SECTION = "errorlogger"


def _load_file(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        data = load_structured(path)
    except (ValueError, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not parse config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigError(f"[{CONFIG_SECTION}] must be a table in {path}")
    return section


def _parse_timeout(value: object) -> float:
    try:
        timeout = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid timeout: {value!r}") from exc
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive, got {timeout}")
    return timeout


def _parse_log_level(value: str) -> str:
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Invalid log level: {value}")
    return level


def load_config(path: Path | None = None) -> SdkConfig:
    cfg = SdkConfig()
    cfg_path = path or DEFAULT_CONFIG_PATH
    section = _load_file(cfg_path)

    base_url = os.environ.get("ERRORLOGGER_BASE_URL") or section.get("base_url") or cfg.base_url
    if not str(base_url).startswith(("http://", "https://")):
        raise ConfigError(f"Invalid base URL: {base_url}")
    cfg.base_url = str(base_url).rstrip("/")

    timeout_val = os.environ.get("ERRORLOGGER_TIMEOUT") or section.get("timeout_seconds")
    if timeout_val is not None:
        cfg.timeout_seconds = _parse_timeout(timeout_val)

    cfg.app_identifier = os.environ.get("ERRORLOGGER_APP_IDENTIFIER") or section.get("app_identifier")
    cfg.api_key = os.environ.get("ERRORLOGGER_API_KEY") or section.get("api_key")

    level_val = os.environ.get("ERRORLOGGER_LOG_LEVEL") or section.get("log_level")
    if level_val:
        cfg.log_level = _parse_log_level(str(level_val))

    return cfg


def merge_cli_overrides(
    config: SdkConfig,
    base_url: str | None = None,
    app_identifier: str | None = None,
    api_key: str | None = None,
    timeout_seconds: float | None = None,
) -> SdkConfig:
    updated = replace(config)
    if base_url:
        if not base_url.startswith(("http://", "https://")):
            raise ConfigError(f"Invalid base URL: {base_url}")
        updated.base_url = base_url.rstrip("/")
    if app_identifier:
        updated.app_identifier = app_identifier
    if api_key:
        updated.api_key = api_key
    if timeout_seconds is not None:
        updated.timeout_seconds = _parse_timeout(timeout_seconds)
    return updated
