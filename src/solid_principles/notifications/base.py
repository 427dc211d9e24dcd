"""Abstractions for sending messages.

``MessageSender`` is the capability a ``NotificationService`` depends on;
``MessageChannel`` is where a sender hands its record off.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Message:
    """A piece of content addressed to one recipient."""

    content: str
    recipient: str

    def to_record(self) -> Dict[str, str]:
        """Structured record emitted on a channel: ``{"to", "message"}``."""
        return {"to": self.recipient, "message": self.content}


class MessageChannel(ABC):
    """Destination that accepts emitted message records."""

    @abstractmethod
    def emit(self, record: Dict[str, str]) -> None:
        """Deliver one ``{"to": ..., "message": ...}`` record."""
        pass


class MessageSender(ABC):
    """
    Capability for anything that can send a message.

    New delivery methods implement this class; consumers never need to know
    which one they were given.
    """

    @abstractmethod
    def send_message(self, content: str, recipient: str) -> None:
        """Send ``content`` to ``recipient``. Nothing is returned."""
        pass
