from .client import ClearAgClient
from .config_types import ClientConfig, LoggerConfig
from .errors import ApiError, AuthError, ClearAgClientError, ConfigError, NetworkError, NotFoundError
from .logsink import LogSink, LoggingSink, NullSink

__all__ = [
    "ClearAgClient",
    "ClientConfig",
    "LoggerConfig",
    "ApiError",
    "AuthError",
    "ClearAgClientError",
    "ConfigError",
    "NetworkError",
    "NotFoundError",
    "LogSink",
    "LoggingSink",
    "NullSink",
]
