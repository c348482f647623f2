from __future__ import annotations

import asyncio

import typer

from clearag_client import ApiError, NetworkError

from .. import console
from ..config import load_config
from ..http import make_client


def air_temp(
        ctx: typer.Context,
        start: int = typer.Option(..., "--start", help="Start of the range, Unix timestamp."),
        end: int = typer.Option(..., "--end", help="End of the range, Unix timestamp."),
        lat: float | None = typer.Option(None, "--lat", help="Latitude in decimal degrees."),
        lon: float | None = typer.Option(None, "--lon", help="Longitude in decimal degrees."),
        location: str | None = typer.Option(None, "--location", help="Raw location string, overrides --lat/--lon."),
        unitcode: str | None = typer.Option(None, "--unitcode", help="us-std, si-std, us-std-precise or si-std-precise."),
        host: str | None = typer.Option(None, "--host", help="Override API host."),
) -> None:
    """Daily historical air temperature."""
    if not location and (lat is None or lon is None):
        console.err("Either --location or both --lat and --lon are required.")
        raise typer.Exit(code=2)

    verbose = bool((ctx.obj or {}).get("verbose"))
    cfg = load_config()
    client = make_client(cfg, host_override=host, verbose=verbose)
    try:
        data = asyncio.run(
            client.daily_historical_air_temperature(
                start,
                end,
                lat,
                lon,
                location,
                unitcode or cfg.unitcode,
            )
        )
    except ApiError as e:
        console.err(f"API error {e.status_code}: {e.message}")
        raise typer.Exit(code=1)
    except NetworkError as e:
        console.err(f"Network error: {e}")
        raise typer.Exit(code=1)

    if data is None:
        console.warn("No data found for this location and range.")
        return
    console.print_payload(data)
