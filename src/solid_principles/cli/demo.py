"""Run both walkthroughs."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import console, resolve_config
from ..demos import run_notification_demo, run_report_demo


@app.command()
def demo(
    ctx: typer.Context,
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory for the demo report files"
    ),
):
    """Run the dependency inversion and single responsibility demos."""
    config = resolve_config(ctx, output_dir)

    run_notification_demo(console)
    run_report_demo(
        config.output_path,
        console,
        report_file=config.report_file,
        encoding=config.encoding,
    )
