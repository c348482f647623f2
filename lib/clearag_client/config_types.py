from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .errors import ConfigError

DEFAULT_HOST = "https://ag.us.clearapis.com"
DEFAULT_TIMEOUT_S = 180.0
DEFAULT_LOG_LEVEL = "verbose"
DEFAULT_RESPONSE_TYPE = "json"

RESPONSE_TYPES = ("json", "text", "bytes")
FAILURE_POLICIES = ("tolerant", "strict")


@dataclass(frozen=True)
class LoggerConfig:
    url: bool = False
    params: bool = False
    data: bool = False
    response: bool = False

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "LoggerConfig":
        if not raw:
            return cls()
        return cls(
            url=bool(raw.get("url")),
            params=bool(raw.get("params")),
            data=bool(raw.get("data")),
            response=bool(raw.get("response")),
        )


@dataclass(frozen=True)
class ClientConfig:
    app_id: str = ""
    app_key: str = ""
    host: str = DEFAULT_HOST
    response_type: str = DEFAULT_RESPONSE_TYPE
    timeout_s: float | None = DEFAULT_TIMEOUT_S
    log_level: str = DEFAULT_LOG_LEVEL
    logger_config: LoggerConfig = field(default_factory=LoggerConfig)
    debug: bool = False
    failure_policy: str = "tolerant"

    def __post_init__(self) -> None:
        if self.response_type not in RESPONSE_TYPES:
            raise ConfigError(f"unsupported response_type {self.response_type!r}")
        if self.failure_policy not in FAILURE_POLICIES:
            raise ConfigError(f"unsupported failure_policy {self.failure_policy!r}")

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "ClientConfig":
        """Build a config from a loose options mapping.

        Both camelCase and snake_case spellings are accepted. Falsy values
        fall back to the defaults.
        """
        opts = options or {}

        def pick(*names: str) -> Any:
            for name in names:
                value = opts.get(name)
                if value:
                    return value
            return None

        logger_config = pick("loggerConfig", "logger_config")
        if not isinstance(logger_config, LoggerConfig):
            logger_config = LoggerConfig.from_mapping(logger_config)

        timeout = pick("timeout", "timeout_s")
        return cls(
            app_id=str(pick("appId", "app_id") or ""),
            app_key=str(pick("appKey", "app_key") or ""),
            host=str(pick("host") or DEFAULT_HOST),
            response_type=str(pick("responseType", "response_type") or DEFAULT_RESPONSE_TYPE),
            timeout_s=float(timeout) if timeout else DEFAULT_TIMEOUT_S,
            log_level=str(pick("logLevel", "log_level") or DEFAULT_LOG_LEVEL),
            logger_config=logger_config,
            debug=bool(pick("debug")),
            failure_policy=str(pick("failurePolicy", "failure_policy") or "tolerant"),
        )
