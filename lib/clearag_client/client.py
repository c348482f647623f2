from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from .config_types import ClientConfig
from .logsink import LogSink, as_sink
from .transport import Transport


class ClearAgClient:
    def __init__(
            self,
            cfg: ClientConfig,
            logger: Any = None,
            *,
            transport: httpx.AsyncBaseTransport | None = None,
    ):
        if logger is None and cfg.debug:
            logger = logging.getLogger("clearag_client")
        self._t = Transport(cfg, as_sink(logger), http_transport=transport)

    @classmethod
    def from_options(
            cls,
            options: Mapping[str, Any] | None = None,
            logger: LogSink | logging.Logger | None = None,
            *,
            transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ClearAgClient":
        return cls(ClientConfig.from_options(options), logger, transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._t.config

    # --- API methods ---
    async def daily_historical_air_temperature(
            self,
            start: int,
            end: int,
            latitude: float | None = None,
            longitude: float | None = None,
            location: str | None = None,
            unitcode: str | None = None,
            *,
            app_id: str | None = None,
            app_key: str | None = None,
    ) -> Any:
        """Daily historical air temperature for a location.

        Values cover midnight to 11:59 p.m. in the location's time zone, at
        most 366 days per query, from January 1, 1980 through the previous
        complete day.

        :param start: start of the range, Unix timestamp
        :param end: end of the range, Unix timestamp
        :param latitude: latitude in decimal degrees, used when ``location`` is empty
        :param longitude: longitude in decimal degrees, used when ``location`` is empty
        :param location: up to five coordinates, ``[(<lat_1>,<lon_1>),(<lat_2>,<lon_2>)]``
        :param unitcode: ``us-std`` (service default), ``si-std``, ``us-std-precise`` or ``si-std-precise``
        """
        params = {
            "start": start,
            "end": end,
            "location": location if location else f"{latitude}, {longitude}",
            "unitcode": unitcode,
        }
        return await self._t.get("/v1.2/historical/daily/air_temp", params, app_id, app_key)
