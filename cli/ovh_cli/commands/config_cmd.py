from __future__ import annotations

import typer

from ovh_client import ConfigError, ConfigResolver

from .. import console

app = typer.Typer(help="Show how credentials and endpoint are resolved (read-only).")


def mask_secret(value: str) -> str:
    if not value:
        return "(empty)"
    if len(value) <= 4:
        return "****"
    return value[:2] + "*" * (len(value) - 4) + value[-2:]


def _resolver() -> ConfigResolver:
    return ConfigResolver()


@app.command("show")
def show_config(
        endpoint: str = typer.Option("", "--endpoint", "-e", help="Endpoint name or URL to resolve."),
):
    try:
        cfg = _resolver().resolve(endpoint)
    except ConfigError as e:
        console.err(str(e))
        raise typer.Exit(code=2)

    consumer_state = "(set)" if cfg.consumer_key else "(empty)"
    console.console.print(f"endpoint={cfg.endpoint}", markup=False, soft_wrap=True)
    console.console.print(f"application_key={cfg.app_key}", markup=False, soft_wrap=True)
    console.console.print(f"application_secret={mask_secret(cfg.app_secret)}", markup=False, soft_wrap=True)
    console.console.print(f"consumer_key={consumer_state}", markup=False, soft_wrap=True)


@app.command("sources")
def show_sources():
    for path, state in _resolver().sources():
        console.console.print(f"{path} ({state})", markup=False, soft_wrap=True)
