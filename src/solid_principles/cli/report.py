"""Generate and export a report."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from . import app
from ._common import console, resolve_config
from ..reports import FileManager, ReportV2


@app.command()
def report(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Report name, also its file name"),
    content: str = typer.Argument(..., help="Report text"),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory to write the report into"
    ),
):
    """Generate a report and export it to a file."""
    config = resolve_config(ctx, output_dir)

    file_manager = FileManager(
        config.output_path, encoding=config.encoding, default_name=config.default_file
    )
    new_report = ReportV2(name, file_manager)
    new_report.generate_report(content)

    if ReportV2.review_report(new_report):
        console.print("Review: [green]has content[/green]")
    else:
        console.print("Review: [yellow]empty[/yellow]")

    new_report.export_report()
    console.print(f"Exported to [blue]{escape(str(file_manager.resolve(name)))}[/blue]")
