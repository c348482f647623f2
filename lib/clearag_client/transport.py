from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import NetworkError, api_error_for
from .logsink import LogSink, NullSink, format_request_log

log = logging.getLogger(__name__)

APP_ID_PARAM = "app_id"
APP_KEY_PARAM = "app_key"


@dataclass
class RequestSpec:
    method: str
    endpoint: str
    params: dict[str, Any] = field(default_factory=dict)
    app_id: str | None = None
    app_key: str | None = None
    data: Any = None


def build_api_url(host: str, endpoint: str) -> str:
    if not endpoint.startswith("/"):
        endpoint = "/" + endpoint
    return host.rstrip("/") + endpoint


def resolve_credential(instance_value: str | None, call_value: str | None) -> str | None:
    """Instance-level credentials win over per-call ones."""
    if instance_value:
        return instance_value
    if call_value:
        return call_value
    return None


def inject_credentials(
        params: dict[str, Any],
        cfg: ClientConfig,
        app_id: str | None = None,
        app_key: str | None = None,
) -> dict[str, Any]:
    params[APP_ID_PARAM] = resolve_credential(cfg.app_id, app_id)
    params[APP_KEY_PARAM] = resolve_credential(cfg.app_key, app_key)
    return params


def _query_params(params: dict[str, Any]) -> dict[str, Any]:
    # None never reaches the wire, httpx would send it as an empty value
    return {k: v for k, v in params.items() if v is not None}


def _decode(r: httpx.Response, response_type: str) -> Any:
    if response_type == "bytes":
        return r.content
    if response_type == "text":
        return r.text
    if not r.content:
        return None
    try:
        return r.json()
    except ValueError:
        return r.text


class Transport:
    def __init__(
            self,
            cfg: ClientConfig,
            sink: LogSink | None = None,
            *,
            http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._cfg = cfg
        self._sink = sink or NullSink()
        self._http_transport = http_transport

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    async def get(
            self,
            endpoint: str,
            params: dict[str, Any] | None = None,
            app_id: str | None = None,
            app_key: str | None = None,
    ) -> Any:
        spec = RequestSpec("GET", endpoint, params=dict(params or {}), app_id=app_id, app_key=app_key)
        return await self.request(spec)

    async def request(self, spec: RequestSpec) -> Any:
        cfg = self._cfg
        url = build_api_url(cfg.host, spec.endpoint)
        inject_credentials(spec.params, cfg, spec.app_id, spec.app_key)

        try:
            async with httpx.AsyncClient(
                    transport=self._http_transport,
                    timeout=cfg.timeout_s,
                    follow_redirects=True,
            ) as client:
                r = await client.request(
                    spec.method,
                    url,
                    params=_query_params(spec.params),
                    json=spec.data,
                )
        except httpx.RequestError as e:
            self._write_log(spec, url, level="error")
            raise NetworkError(f"{spec.method} {url} failed: {e}") from e

        payload = _decode(r, cfg.response_type)
        if cfg.failure_policy == "strict":
            return self._classify_strict(spec, url, r, payload)
        return self._classify_tolerant(spec, url, r, payload)

    def _classify_strict(self, spec: RequestSpec, url: str, r: httpx.Response, payload: Any) -> Any:
        if not 200 <= r.status_code < 300:
            self._write_log(spec, url, r, payload, level="error")
            raise api_error_for(r.status_code, f"{r.status_code} - {url} failed", payload)
        self._write_log(spec, url, r, payload)
        return payload

    def _classify_tolerant(self, spec: RequestSpec, url: str, r: httpx.Response, payload: Any) -> Any:
        try:
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._write_log(spec, url, e.response, payload, level="error")
            if e.response.status_code == 404:
                return None
            status = e.response.status_code
            raise api_error_for(status, f"{status} - {url} failed", payload) from e
        self._write_log(spec, url, r, payload)
        return payload

    def _write_log(
            self,
            spec: RequestSpec,
            url: str,
            response: httpx.Response | None = None,
            payload: Any = None,
            *,
            level: str | None = None,
    ) -> None:
        try:
            line = format_request_log(
                self._cfg.logger_config,
                spec.method,
                url,
                spec.endpoint,
                data=spec.data,
                response=response,
                payload=payload,
            )
            self._sink.emit(level or self._cfg.log_level, line)
        except Exception:
            # the request outcome must still reach the caller
            log.warning("failed to write request log for %s %s", spec.method, url, exc_info=True)
