"""
Mailer API Client implementation.

Implements BaseAPIClient for the Mailer backend: one POST to ``/send`` per
email, with the JSON body as the sole authority on the outcome.

Credentials travel inside the request body, so confidentiality depends
entirely on the base URL using https.
"""

from typing import Any, Mapping, Optional, Union
import logging

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from ...core.interfaces.base_api_client import BaseAPIClient
from ...core.config import DEFAULT_TIMEOUT_SECONDS, MailerSettings, get_settings
from ..models.email import EmailRequest, EmailResponse
from ..exceptions import (
    SerializationError,
    ResponseDecodeError,
    BackendRejectionError
)

logger = logging.getLogger(__name__)

SEND_ENDPOINT = "/send"


class MailerClient(BaseAPIClient[EmailRequest, None]):
    """
    Mailer API client implementing BaseAPIClient.

    Every call is a single attempt; there is no retry, queuing or batching.
    The client keeps no per-call state and can be shared across threads
    (``send``) or tasks (``async_send``).
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: Optional[httpx.Client] = None,
        async_http_client: Optional[httpx.AsyncClient] = None
    ):
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            http_client=http_client,
            async_http_client=async_http_client
        )

    @classmethod
    def from_settings(cls, settings: Optional[MailerSettings] = None, **kwargs) -> "MailerClient":
        """Build a client from ``MAILER_*`` environment settings"""
        settings = settings or get_settings()
        if not settings.base_url:
            raise ValueError("MAILER_BASE_URL is not configured")
        kwargs.setdefault("timeout", settings.timeout)
        return cls(settings.base_url, **kwargs)

    def send(self, request: Union[EmailRequest, Mapping[str, Any]]) -> None:
        """
        Send one email through the Mailer backend.

        Args:
            request: The email to send, or a mapping in the wire shape

        Raises:
            SerializationError: the request could not be encoded
            TransportError: the HTTP round trip failed
            ResponseDecodeError: the request went out but the reply was unreadable
            BackendRejectionError: the backend answered with success=false
        """
        return self.request(SEND_ENDPOINT, request)

    async def async_send(self, request: Union[EmailRequest, Mapping[str, Any]]) -> None:
        """Async version of send(); same outcomes and exceptions"""
        return await self.async_request(SEND_ENDPOINT, request)

    def _serialize_request(self, payload: Union[EmailRequest, Mapping[str, Any]]) -> bytes:
        try:
            if not isinstance(payload, EmailRequest):
                payload = EmailRequest.model_validate(payload)
            logger.debug("Sending email to %d recipient(s)", len(payload.to_list))
            return payload.to_payload()
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise SerializationError(f"failed to encode email request: {e}", e) from e

    def _transform_response(self, response: httpx.Response) -> None:
        """Interpret the reply body; the HTTP status is not consulted"""
        try:
            result = EmailResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise ResponseDecodeError(
                status_code=response.status_code,
                raw_content=response.text
            ) from e

        if not result.success:
            raise BackendRejectionError(result.message, status_code=response.status_code)
        return None
