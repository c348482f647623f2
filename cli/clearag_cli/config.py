from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from clearag_client.config_types import DEFAULT_HOST, FAILURE_POLICIES

APP_NAME = "clearag"
CONFIG_FILENAME = "config.toml"

ENV_APP_ID = "CLEARAG_APP_ID"
ENV_APP_KEY = "CLEARAG_APP_KEY"
ENV_HOST = "CLEARAG_HOST"


@dataclass
class AppConfig:
    app_id: str = ""
    app_key: str = ""
    host: str = DEFAULT_HOST
    failure_policy: str = "tolerant"
    unitcode: str | None = None


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_host(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        return f"http://{value}"
    return f"https://{value}"


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    auth_raw = data.get("auth") or {}
    if isinstance(auth_raw, dict):
        cfg.app_id = str(auth_raw.get("app_id") or "")
        cfg.app_key = str(auth_raw.get("app_key") or "")
    cfg.host = normalize_host(str(data.get("host") or "")) or DEFAULT_HOST
    policy = str(data.get("failure_policy") or "").strip().lower()
    if policy in FAILURE_POLICIES:
        cfg.failure_policy = policy
    unitcode = data.get("unitcode")
    cfg.unitcode = unitcode if isinstance(unitcode, str) and unitcode else None
    return cfg


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {
        "host": cfg.host,
        "failure_policy": cfg.failure_policy,
        "auth": {
            "app_id": cfg.app_id,
            "app_key": cfg.app_key,
        },
    }
    if cfg.unitcode:
        data["unitcode"] = cfg.unitcode
    return data


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def apply_env(cfg: AppConfig) -> AppConfig:
    app_id = os.getenv(ENV_APP_ID, "").strip()
    app_key = os.getenv(ENV_APP_KEY, "").strip()
    host = normalize_host(os.getenv(ENV_HOST, ""))
    return AppConfig(
        app_id=app_id or cfg.app_id,
        app_key=app_key or cfg.app_key,
        host=host or cfg.host,
        failure_policy=cfg.failure_policy,
        unitcode=cfg.unitcode,
    )


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
