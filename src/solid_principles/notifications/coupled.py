"""
Tightly coupled notification sender.

``NotificationSender`` builds its own ``Mailer`` and can only ever send
e-mail. Kept as the counterpart to ``NotificationService``, which takes any
``MessageSender`` instead.
"""

from typing import Optional

from .base import Message, MessageChannel
from .channels import ConsoleChannel


class Mailer:
    """Sends e-mail messages."""

    def __init__(self, channel: Optional[MessageChannel] = None):
        self.channel = channel or ConsoleChannel()

    def send_email(self, content: str, recipient: str) -> None:
        self.channel.emit(Message(content, recipient).to_record())


class NotificationSender:
    """Sends notifications, but only through a ``Mailer`` it creates itself."""

    def __init__(self):
        self.mail_sender = Mailer()

    def send_notification(self, content: str, recipient: str) -> None:
        self.mail_sender.send_email(content, recipient)
