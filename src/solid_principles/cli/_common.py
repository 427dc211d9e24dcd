"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import DemoConfig, load_config
from ..exceptions import ConfigurationError
from ..logging_config import setup_logging

console = Console()


def resolve_config(ctx: typer.Context, output_dir: Optional[Path] = None) -> DemoConfig:
    """
    Build config from the global options plus a command's own overrides,
    then configure logging from it.

    Exits with code 1 on a configuration error.
    """
    options = ctx.obj or {}
    log_file = options.get("log_file")
    try:
        config = load_config(
            config_file=options.get("config"),
            verbose=options.get("verbose", False),
            quiet=options.get("quiet", False),
            output_dir=str(output_dir) if output_dir is not None else None,
            log_file=str(log_file) if log_file is not None else None,
        )
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)

    setup_logging(config.verbosity, config.log_file)
    return config
