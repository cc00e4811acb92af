"""
Data-related exception classes.

Handles request serialization and response decoding errors.
"""

from typing import Optional
from .api_exceptions import MailerError


DECODE_FAILURE_MESSAGE = "email sent but failed to decode response"


class SerializationError(MailerError):
    """Request could not be encoded to JSON"""

    def __init__(
        self,
        message: str = "failed to encode email request",
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class ResponseDecodeError(MailerError):
    """Response body could not be decoded.

    The request reached the wire before this is raised, so delivery may
    still have happened.
    """

    def __init__(
        self,
        message: str = DECODE_FAILURE_MESSAGE,
        status_code: Optional[int] = None,
        raw_content: Optional[str] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.raw_content = raw_content[:500] if raw_content else None  # Limit for logging
