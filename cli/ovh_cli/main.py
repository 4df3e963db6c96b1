from __future__ import annotations

import typer
from rich.table import Table

from ovh_client import ENDPOINTS

from . import console
from .commands import config_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="ovh",
        help="Inspect OVH API client configuration (ovh.conf files and OVH_* variables).",
        no_args_is_help=True,
    )
    app.add_typer(config_cmd.app, name="config")

    @app.command("endpoints")
    def list_endpoints():
        table = Table(title="Endpoints")
        table.add_column("name", style="bold")
        table.add_column("url")
        for name, url in ENDPOINTS.items():
            table.add_row(name, url)
        console.console.print(table)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()


if __name__ == "__main__":
    app()
