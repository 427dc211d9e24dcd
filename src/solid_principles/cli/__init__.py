"""CLI entry point, registers all subcommands."""

import typer

app = typer.Typer(
    name="solid-principles",
    help="SOLID principles demos - dependency inversion and single responsibility",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .main import main as _main_callback  # noqa: F401, E402
from .notify import notify as _notify  # noqa: F401, E402
from .report import report as _report  # noqa: F401, E402
from .demo import demo as _demo  # noqa: F401, E402
