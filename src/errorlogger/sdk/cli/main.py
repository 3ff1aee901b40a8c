"""errorlogger CLI entrypoint."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from errorlogger.core.classifier import classify
from errorlogger.core.models import ErrorKind
from errorlogger.core.platform import TARGETS, detect_platform
from errorlogger.core.utils.io import dump_toml_section
from errorlogger.core.utils.logging import set_level
from errorlogger.sdk.client import ErrorLoggerClient
from errorlogger.sdk.config import CONFIG_SECTION, DEFAULT_CONFIG_PATH, load_config, merge_cli_overrides
from errorlogger.sdk.connectivity import is_connected
from errorlogger.sdk.errors import ConfigError

app = typer.Typer(add_completion=False, help="errorlogger CLI")


class Context:
    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self.config = load_config(self.config_path)
        self.verbose = False


# --- utility helpers ---

def _handle_exc(err: Exception) -> None:
    """Print a concise error and exit non-zero."""
    typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=1)


def _make_client(
    ctx: Context,
    base_url: str | None,
    app_identifier: str | None,
    api_key: str | None,
) -> ErrorLoggerClient:
    try:
        cfg = merge_cli_overrides(ctx.config, base_url=base_url, app_identifier=app_identifier, api_key=api_key)
    except ConfigError as exc:
        _handle_exc(exc)
    return ErrorLoggerClient(config=cfg)


def _register(client: ErrorLoggerClient) -> None:
    try:
        client.register()
    except ConfigError as exc:
        _handle_exc(exc)


# --- CLI commands ---


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", help="Config file (toml/yaml/json)"),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
) -> None:
    if ctx.obj is None:
        try:
            ctx.obj = Context(config)
        except ConfigError as exc:
            _handle_exc(exc)
    ctx.obj.verbose = verbose
    set_level("DEBUG" if verbose else ctx.obj.config.log_level)


@app.command()
def init(
    ctx: typer.Context,
    app_identifier: str = typer.Option(..., "--app-identifier", help="App identifier from the web platform"),
    api_key: str = typer.Option(..., "--api-key", help="API key from the web platform"),
    base_url: str = typer.Option("", "--base-url", help="Collection service base URL"),
) -> None:
    context: Context = ctx.obj
    values = {
        "base_url": base_url or context.config.base_url,
        "timeout_seconds": context.config.timeout_seconds,
        "app_identifier": app_identifier,
        "api_key": api_key,
    }
    target = context.config_path
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(dump_toml_section(CONFIG_SECTION, values), encoding="utf-8")
    typer.echo(f"Wrote TOML config to {target}")


@app.command()
def validate(
    ctx: typer.Context,
    app_identifier: Optional[str] = typer.Option(None, "--app-identifier"),
    api_key: Optional[str] = typer.Option(None, "--api-key"),
    base_url: Optional[str] = typer.Option(None, "--base-url"),
) -> None:
    """Run the registration handshake and print the application id."""
    client = _make_client(ctx.obj, base_url, app_identifier, api_key)
    _register(client)
    if client.application_id is None:
        typer.echo(client.error_message or "Service returned no application id", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(client.application_id))


@app.command()
def report(
    ctx: typer.Context,
    message: str = typer.Argument(..., help="Error message to send"),
    kind: ErrorKind = typer.Option(ErrorKind.UNKNOWN, "--kind", help="Error kind used for severity"),
    app_identifier: Optional[str] = typer.Option(None, "--app-identifier"),
    api_key: Optional[str] = typer.Option(None, "--api-key"),
    base_url: Optional[str] = typer.Option(None, "--base-url"),
) -> None:
    """Register, then send a synthetic error."""
    client = _make_client(ctx.obj, base_url, app_identifier, api_key)
    _register(client)
    client.report(RuntimeError(message), stack_trace="", kind=kind)
    if client.error_message:
        typer.echo(client.error_message, err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Reported {classify(kind).value}: {message}")


@app.command()
def platform(
    target: Optional[str] = typer.Option(None, "--target", help=f"One of: {', '.join(TARGETS)}"),
) -> None:
    descriptor = detect_platform(target)
    typer.echo(json.dumps({"platform": descriptor.name, "platformVersion": descriptor.version}))


@app.command()
def connectivity() -> None:
    connected = is_connected()
    typer.echo("connected" if connected else "offline")
    if not connected:
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover
    app()
