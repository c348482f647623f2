from __future__ import annotations

from typing import Any


class ClearAgClientError(Exception):
    """Base client error."""


class ConfigError(ClearAgClientError):
    """Invalid client configuration."""


class NetworkError(ClearAgClientError):
    """Transport/network layer error."""


class ApiError(ClearAgClientError):
    def __init__(self, status_code: int, message: str, meta: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.meta = meta


class AuthError(ApiError):
    """Auth-related API error."""


class NotFoundError(ApiError):
    """The requested resource does not exist (HTTP 404)."""


def api_error_for(status_code: int, message: str, meta: Any = None) -> ApiError:
    if status_code == 404:
        return NotFoundError(status_code, message, meta)
    if status_code in (401, 403):
        return AuthError(status_code, message, meta)
    return ApiError(status_code, message, meta)
