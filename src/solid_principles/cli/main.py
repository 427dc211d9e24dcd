"""Global options shared by every command."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import console
from .. import __version__


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"solid-principles {__version__}")
        raise typer.Exit()


@app.callback(no_args_is_help=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a TOML config file", dir_okay=False
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also append log records to this file", dir_okay=False
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """SOLID principles demos."""
    # Logging is set up per command, once the full config is known
    ctx.obj = {"verbose": verbose, "quiet": quiet, "config": config, "log_file": log_file}
