"""
Shared exceptions for the mailer client.

Defines custom exception classes for different error scenarios.
"""

from .api_exceptions import *
from .data_exceptions import *

__all__ = [
    # API Exceptions
    'MailerError',
    'TransportError',
    'BackendRejectionError',
    'create_transport_error_from_httpx_error',

    # Data Exceptions
    'SerializationError',
    'ResponseDecodeError',
    'DECODE_FAILURE_MESSAGE',
]
