"""Console stand-in for a real delivery transport."""

from typing import Dict, Optional

from rich.console import Console

from .base import MessageChannel


class ConsoleChannel(MessageChannel):
    """Pretty-prints each record on standard output."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def emit(self, record: Dict[str, str]) -> None:
        self.console.print(record)
