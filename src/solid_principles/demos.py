"""Runnable before/after walkthroughs of both principles."""

from pathlib import Path
from typing import Optional, Union

from rich.console import Console

from .notifications import SMS, Email, NotificationSender, NotificationService
from .notifications.channels import ConsoleChannel
from .reports import REPORT_FILE_NAME, FileManager, Report, ReportV2

DEMO_RECIPIENT = "Othman"
DEMO_REPORT_NAME = "Report V2.txt"
DEMO_REPORT_CONTENT = "Lorem ipsum dolor, sit amet consectetur adipisicing elit."


def run_notification_demo(console: Optional[Console] = None) -> None:
    """
    Dependency inversion: a hard-wired mailer, then pluggable senders.

    The coupled sender builds its own mailer and console, so its record goes
    to standard output rather than to ``console``.
    """
    console = console or Console()

    console.rule("Before: NotificationSender -> Mailer")
    notification_sender = NotificationSender()
    notification_sender.send_notification("hello world", DEMO_RECIPIENT)

    console.rule("After: NotificationService -> MessageSender")
    email = Email(ConsoleChannel(console))
    sms = SMS(ConsoleChannel(console))

    notify_by_email = NotificationService(email)
    notify_by_sms = NotificationService(sms)
    notify_by_email.send_notification("notification via Email", DEMO_RECIPIENT)
    notify_by_sms.send_notification("notification via SMS", DEMO_RECIPIENT)


def run_report_demo(
    directory: Union[str, Path] = ".",
    console: Optional[Console] = None,
    report_file: str = REPORT_FILE_NAME,
    encoding: str = "utf-8",
) -> None:
    """Single responsibility: a self-saving report, then one using FileManager."""
    console = console or Console()

    console.rule("Before: Report saves itself")
    report = Report(directory, report_file, encoding=encoding)
    console.print(Report.review_report(report))
    report.generate_report("Report Created!")
    report.save_to_file()

    console.rule("After: ReportV2 delegates to FileManager")
    report_v2 = ReportV2(DEMO_REPORT_NAME, FileManager(directory, encoding=encoding))
    console.print(ReportV2.review_report(report_v2))
    report_v2.generate_report(DEMO_REPORT_CONTENT)
    report_v2.export_report()
