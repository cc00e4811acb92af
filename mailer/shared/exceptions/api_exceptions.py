"""
Transport and backend exception classes for the Mailer API.

Provides the exception hierarchy raised by the mailer client.
"""

from typing import Optional, Dict, Any
import httpx


class MailerError(Exception):
    """Base exception for all mailer client errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        return self.message


class TransportError(MailerError):
    """Network connectivity error (DNS, refused connection, timeout, TLS)"""

    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.original_exception = original_exception


class BackendRejectionError(MailerError):
    """The backend answered with a well-formed response and success=false"""

    def __init__(self, backend_message: str, status_code: Optional[int] = None):
        super().__init__(f"failed to send email: {backend_message}")
        self.backend_message = backend_message
        self.status_code = status_code


def create_transport_error_from_httpx_error(error: Exception) -> TransportError:
    """
    Create TransportError from httpx exceptions.

    Args:
        error: Original httpx exception

    Returns:
        TransportError with appropriate message
    """
    error_type = type(error).__name__

    if isinstance(error, httpx.ConnectTimeout):
        return TransportError(f"Connection timed out: {str(error)}", error)
    elif isinstance(error, httpx.ReadTimeout):
        return TransportError(f"Read timeout: {str(error)}", error)
    elif isinstance(error, httpx.WriteTimeout):
        return TransportError(f"Write timeout: {str(error)}", error)
    elif isinstance(error, httpx.PoolTimeout):
        return TransportError(f"Connection pool timeout: {str(error)}", error)
    elif isinstance(error, httpx.TimeoutException):
        return TransportError(f"Request timed out: {str(error)}", error)
    elif isinstance(error, httpx.ConnectError):
        return TransportError(f"Connection failed: {str(error)}", error)
    elif isinstance(error, httpx.UnsupportedProtocol):
        return TransportError(f"Unsupported URL: {str(error)}", error)
    elif isinstance(error, httpx.InvalidURL):
        return TransportError(f"Invalid URL: {str(error)}", error)
    else:
        return TransportError(f"Network error ({error_type}): {str(error)}", error)
