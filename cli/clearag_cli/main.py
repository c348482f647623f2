from __future__ import annotations

import typer

from .commands import air_temp_cmd, config_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="clearag",
        help="ClearAg weather data CLI",
        no_args_is_help=True,
    )

    app.add_typer(config_cmd.app, name="config")
    app.command("air-temp")(air_temp_cmd.air_temp)

    @app.callback()
    def _main(
            ctx: typer.Context,
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        ctx.obj = {"verbose": verbose}
        setup_logging(verbose)

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
