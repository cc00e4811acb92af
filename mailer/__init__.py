"""
Lightweight client for the Mailer API.

Usage::

    from mailer import Creds, EmailRequest, MailerClient

    client = MailerClient("https://mailer.example.com")
    client.send(EmailRequest(
        creds=Creds(email="noreply@example.com", pwd="your-password"),
        from_name="Example Bot",
        to_list=["user@example.com"],
        subject="Welcome!",
        body="<h1>Hello world</h1><p>This is a test.</p>",
        html=True,
    ))
"""

from .core.config import MailerSettings, get_settings
from .core.logging_config import setup_logging, setup_logging_from_settings
from .shared.models.email import Creds, EmailRequest, EmailResponse
from .shared.clients.mailer_client import MailerClient
from .shared.exceptions import (
    MailerError,
    SerializationError,
    TransportError,
    ResponseDecodeError,
    BackendRejectionError,
)

__version__ = "1.0.0"

__all__ = [
    "MailerClient",
    "Creds",
    "EmailRequest",
    "EmailResponse",
    "MailerSettings",
    "get_settings",
    "setup_logging",
    "setup_logging_from_settings",
    "MailerError",
    "SerializationError",
    "TransportError",
    "ResponseDecodeError",
    "BackendRejectionError",
]
