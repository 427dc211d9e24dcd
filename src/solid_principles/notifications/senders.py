"""Concrete message senders.

Both senders emit the same record shape; a real deployment would route
them to different transports.
"""

import logging
from typing import Optional

from .base import Message, MessageChannel, MessageSender
from .channels import ConsoleChannel

logger = logging.getLogger(__name__)


class Email(MessageSender):
    """Sends messages as e-mail. ``recipient`` is an e-mail address."""

    def __init__(self, channel: Optional[MessageChannel] = None):
        self.channel = channel or ConsoleChannel()

    def send_message(self, content: str, recipient: str) -> None:
        logger.debug("Sending email to %s", recipient)
        self.channel.emit(Message(content, recipient).to_record())


class SMS(MessageSender):
    """Sends messages as SMS. ``recipient`` is a phone number."""

    def __init__(self, channel: Optional[MessageChannel] = None):
        self.channel = channel or ConsoleChannel()

    def send_message(self, content: str, recipient: str) -> None:
        logger.debug("Sending SMS to %s", recipient)
        self.channel.emit(Message(content, recipient).to_record())
