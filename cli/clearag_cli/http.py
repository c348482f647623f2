from __future__ import annotations

import logging

from clearag_client import ClearAgClient, ClientConfig, LoggerConfig

from .config import AppConfig, apply_env, normalize_host


def make_client(cfg: AppConfig, *, host_override: str | None = None, verbose: bool = False) -> ClearAgClient:
    effective = apply_env(cfg)
    client_cfg = ClientConfig(
        app_id=effective.app_id,
        app_key=effective.app_key,
        host=normalize_host(host_override) or effective.host,
        failure_policy=effective.failure_policy,
        logger_config=LoggerConfig(url=verbose, params=verbose),
        debug=verbose,
    )
    logger = logging.getLogger("clearag_cli.requests") if verbose else None
    return ClearAgClient(client_cfg, logger)
