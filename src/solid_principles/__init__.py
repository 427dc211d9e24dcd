"""
SOLID Principles - before/after demos

Dependency inversion through a pluggable message sender, and single
responsibility through a report that hands file handling to a FileManager.
"""

__version__ = "0.1.0"

from .notifications import SMS, Email, MessageSender, NotificationService
from .reports import FileManager, ReportV2

__all__ = [
    "MessageSender",
    "Email",
    "SMS",
    "NotificationService",
    "ReportV2",
    "FileManager",
]
