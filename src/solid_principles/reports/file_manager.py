"""
File operations for saving reports.

``FileManager`` owns a single file handle at a time. ``save_to_file`` is the
only entry point that swallows failures: it logs them and returns normally.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Optional, Union

from ..exceptions import FileAccessError

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "newFile.txt"

PathLike = Union[str, Path]


class FileManager:
    """
    Opens, writes and closes text files.

    Attributes:
        directory: Base directory for relative file names (None = cwd)
        encoding: Text encoding used when opening files
        default_name: File name save_to_file uses when none is given
        file: The currently open handle, or None
    """

    def __init__(
        self,
        directory: Optional[PathLike] = None,
        encoding: str = "utf-8",
        default_name: str = DEFAULT_FILE_NAME,
    ):
        self.directory = Path(directory) if directory is not None else None
        self.encoding = encoding
        self.default_name = default_name
        self.file: Optional[IO[str]] = None

    def resolve(self, file_name: PathLike) -> Path:
        """Resolve ``file_name`` against the base directory, if one is set."""
        path = Path(file_name)
        if self.directory is None or path.is_absolute():
            return path
        return self.directory / path

    def open_file(self, file_name: PathLike, mode: str = "r") -> None:
        """
        Open a file and hold on to its handle.

        Any previously held handle is closed first.

        Raises:
            FileAccessError: If the file cannot be opened
        """
        if self.file is not None:
            self.close_file()

        path = self.resolve(file_name)
        try:
            self.file = open(path, mode, encoding=self.encoding)
        except OSError as e:
            raise FileAccessError(path, f"Open failed: {e}")
        logger.debug("Opened %s (mode=%s)", path, mode)

    def write_file(self, content: str) -> None:
        """
        Write content to the currently open file.

        Raises:
            FileAccessError: If no file is open or the write fails
        """
        if self.file is None:
            raise FileAccessError("<none>", "No file is open")
        try:
            self.file.write(content)
        except (OSError, TypeError, ValueError) as e:
            raise FileAccessError(self.file.name, f"Write failed: {e}")

    def close_file(self) -> None:
        """Close the currently open file. Does nothing if none is open."""
        if self.file is None:
            return
        handle, self.file = self.file, None
        try:
            handle.close()
        except OSError as e:
            raise FileAccessError(handle.name, f"Close failed: {e}")
        logger.debug("Closed %s", handle.name)

    @contextmanager
    def opened(self, file_name: PathLike, mode: str = "r") -> Generator["FileManager", None, None]:
        """
        Context manager pairing open_file with close_file.

        The handle is closed on every exit path, including errors.
        """
        self.open_file(file_name, mode)
        try:
            yield self
        finally:
            self.close_file()

    def save_to_file(self, file_name: Optional[PathLike] = None, content: str = "") -> None:
        """
        Save content to a file, replacing anything already there.

        Failures are logged, never raised: the caller cannot tell success
        from failure except by whether the file exists.

        Args:
            file_name: Name of the file to write (defaults to ``default_name``)
            content: Text to write
        """
        if file_name is None:
            file_name = self.default_name

        try:
            with self.opened(file_name, "w"):
                self.write_file(content)
        except FileAccessError as e:
            logger.error("%r", str(e))
        except Exception as e:
            error = FileAccessError(self.resolve(file_name), f"Unexpected error: {e}")
            logger.error("%r", str(error))
