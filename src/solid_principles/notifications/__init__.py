"""Notification senders and the service that uses them."""

from .base import Message, MessageChannel, MessageSender
from .channels import ConsoleChannel
from .coupled import Mailer, NotificationSender
from .senders import SMS, Email
from .service import NotificationService

__all__ = [
    "Message",
    "MessageChannel",
    "MessageSender",
    "ConsoleChannel",
    "Email",
    "SMS",
    "NotificationService",
    "Mailer",
    "NotificationSender",
]
