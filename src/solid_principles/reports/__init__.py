"""Reports and the file handling they delegate to."""

from .file_manager import DEFAULT_FILE_NAME, FileManager
from .monolithic import REPORT_FILE_NAME, Report
from .report import ReportV2

__all__ = [
    "DEFAULT_FILE_NAME",
    "REPORT_FILE_NAME",
    "FileManager",
    "Report",
    "ReportV2",
]
