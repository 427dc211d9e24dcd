"""Notification service that depends only on the MessageSender capability."""

from .base import MessageSender


class NotificationService:
    """
    Sends notifications through whichever provider it was built with.

    The provider is any ``MessageSender``; swapping e-mail for SMS (or
    anything else) needs no change here.
    """

    def __init__(self, provider: MessageSender):
        self.provider = provider

    def send_notification(self, content: str, recipient: str) -> None:
        """Forward ``content`` and ``recipient`` to the provider unchanged."""
        self.provider.send_message(content, recipient)
