"""File I/O exceptions used by the report savers."""

from pathlib import Path
from typing import Union

from .base import SolidPrinciplesError


class FileAccessError(SolidPrinciplesError):
    """Raised when a file cannot be opened, written or closed.

    Open, write and close failures are all reported with this one type.
    """

    def __init__(self, filepath: Union[str, Path], reason: str):
        super().__init__(f"Cannot access file: {filepath}", filepath=filepath, reason=reason)
        self.filepath = filepath
        self.reason = reason
