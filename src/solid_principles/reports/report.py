"""Report that delegates saving to a FileManager."""

from typing import Optional

from .file_manager import FileManager


class ReportV2:
    """
    Generates, reviews and exports a named report.

    Persistence is handled by ``FileManager``; this class only holds the
    report's name and content.

    Attributes:
        report_name: Name of the report, also used as its file name
        content: Report text, None until generate_report is called
    """

    def __init__(self, report_name: str, file_manager: Optional[FileManager] = None):
        self.report_name = report_name
        self.content: Optional[str] = None
        self._file_manager = file_manager

    def generate_report(self, content: str) -> None:
        """Set the report content exactly as given."""
        self.content = content

    @staticmethod
    def review_report(report: "ReportV2") -> bool:
        """Return True if the report has non-empty content."""
        return bool(report.content)

    def export_report(self) -> None:
        """
        Save the report to a file named after it.

        An unset report is written as an empty file.
        """
        file_manager = self._file_manager or FileManager()
        file_manager.save_to_file(self.report_name, self.content or "")
