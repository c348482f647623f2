from __future__ import annotations

import json
import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from .config_types import LoggerConfig

CLIENT_NAME = "clearag-api"

# winston-style level names onto stdlib levels
LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "http": logging.DEBUG,
    "verbose": logging.DEBUG,
    "debug": logging.DEBUG,
    "silly": logging.DEBUG,
}


@runtime_checkable
class LogSink(Protocol):
    def emit(self, level: str, message: str) -> None:
        ...


class NullSink:
    def emit(self, level: str, message: str) -> None:
        return None


class LoggingSink:
    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def emit(self, level: str, message: str) -> None:
        self._logger.log(LEVELS.get(level.lower(), logging.INFO), message)


class CallableSink:
    """Adapter for loggers exposing one method per level, e.g. ``logger.verbose(msg)``."""

    def __init__(self, target: Any):
        self._target = target

    def emit(self, level: str, message: str) -> None:
        method = getattr(self._target, level, None)
        if method is None:
            method = getattr(self._target, "info")
        method(message)


def as_sink(logger: Any) -> LogSink:
    if logger is None:
        return NullSink()
    if isinstance(logger, logging.Logger):
        return LoggingSink(logger)
    if isinstance(logger, LogSink):
        return logger
    return CallableSink(logger)


def _dump(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        return f"<{len(value)} bytes>"
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(value)


def _request_path(response: httpx.Response | None) -> str | None:
    if response is None:
        return None
    try:
        return response.request.url.raw_path.decode("ascii")
    except RuntimeError:
        # response built without a request
        return None


def format_request_log(
        flags: LoggerConfig,
        method: str,
        url: str,
        endpoint: str,
        *,
        data: Any = None,
        response: httpx.Response | None = None,
        payload: Any = None,
) -> str:
    parts: list[str | None] = [f"[{CLIENT_NAME}]", method]
    parts.append(url if flags.url else None)
    parts.append((_request_path(response) or endpoint) if flags.params else None)
    parts.append(_dump(data) if flags.data else None)
    if response is not None:
        parts.append(f"{response.status_code} {response.reason_phrase}".strip())
        parts.append(_dump(payload) if flags.response else None)
    return " ".join(p for p in parts if p)
