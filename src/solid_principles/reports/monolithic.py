"""
Report that generates, reviews and saves itself.

``Report`` mixes content handling with file handling. ``ReportV2`` splits
the file handling out into ``FileManager``.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..exceptions import FileAccessError

logger = logging.getLogger(__name__)

REPORT_FILE_NAME = "Report.txt"


class Report:
    """Generates, reviews and saves a report to a fixed file name."""

    def __init__(
        self,
        directory: Optional[Union[str, Path]] = None,
        file_name: str = REPORT_FILE_NAME,
        encoding: str = "utf-8",
    ):
        self.directory = Path(directory) if directory is not None else Path(".")
        self.file_name = file_name
        self.encoding = encoding
        self.content: Optional[str] = None

    def generate_report(self, content: str) -> None:
        self.content = content

    @staticmethod
    def review_report(report: "Report") -> bool:
        """Return True if the report has non-empty content."""
        return bool(report.content)

    def save_to_file(self) -> None:
        """Write the content to the report file. Errors are logged, not raised."""
        path = self.directory / self.file_name
        try:
            file = open(path, "w", encoding=self.encoding)
            try:
                file.write(self.content or "")
            finally:
                file.close()
        except OSError as e:
            logger.error("%r", str(FileAccessError(path, f"Save failed: {e}")))
        except Exception as e:
            logger.error("%r", str(FileAccessError(path, f"Unexpected error: {e}")))
