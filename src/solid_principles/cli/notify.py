"""Send a notification through a chosen provider."""

from enum import Enum

import typer

from . import app
from ._common import console, resolve_config
from ..notifications import SMS, Email, MessageSender, NotificationService
from ..notifications.channels import ConsoleChannel


class Provider(str, Enum):
    email = "email"
    sms = "sms"


@app.command()
def notify(
    ctx: typer.Context,
    content: str = typer.Argument(..., help="Notification text"),
    recipient: str = typer.Argument(..., help="Who receives it"),
    via: Provider = typer.Option(Provider.email, "--via", help="Delivery provider"),
):
    """Send a notification via e-mail or SMS."""
    # Nothing here is configurable; this only applies logging settings
    resolve_config(ctx)

    channel = ConsoleChannel(console)
    provider: MessageSender = Email(channel) if via is Provider.email else SMS(channel)
    NotificationService(provider).send_notification(content, recipient)
