from __future__ import annotations

import typer

from clearag_client.config_types import FAILURE_POLICIES

from .. import console
from ..config import config_path, load_config, normalize_host, save_config

app = typer.Typer(help="Manage stored ClearAg credentials and defaults.")


@app.command("show")
def show_config() -> None:
    cfg = load_config()
    key_state = "(set)" if cfg.app_key else "(empty)"
    console.console.print(
        f"host={cfg.host} app_id={cfg.app_id or '(empty)'} app_key={key_state} "
        f"failure_policy={cfg.failure_policy} unitcode={cfg.unitcode or '(default)'}"
    )


@app.command("set")
def set_config(
        app_id: str | None = typer.Option(None, "--app-id", help="Application id."),
        app_key: str | None = typer.Option(None, "--app-key", help="Application key."),
        host: str | None = typer.Option(None, "--host", help="API host."),
        policy: str | None = typer.Option(None, "--policy", help="Failure policy: tolerant or strict."),
        unitcode: str | None = typer.Option(None, "--unitcode", help="Default unit code."),
) -> None:
    cfg = load_config()

    if app_id is not None:
        cfg.app_id = app_id.strip()
    if app_key is not None:
        cfg.app_key = app_key.strip()
    if host is not None:
        cfg.host = normalize_host(host) or cfg.host
    if policy is not None:
        policy = policy.strip().lower()
        if policy not in FAILURE_POLICIES:
            console.err(f"Unknown policy {policy!r}, expected one of: {', '.join(FAILURE_POLICIES)}.")
            raise typer.Exit(code=2)
        cfg.failure_policy = policy
    if unitcode is not None:
        cfg.unitcode = unitcode.strip() or None

    save_config(cfg)
    console.ok(f"Config updated: {config_path()}")
