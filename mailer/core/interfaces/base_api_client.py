"""
Base API Client interface and abstract implementation.

Implements the Template Method pattern for JSON-over-HTTP APIs: subclasses
decide how a request is encoded and how a response is interpreted, the base
class owns the httpx transports and the wire call.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, TypeVar, Generic
import asyncio
import logging
import time

import httpx

from ..config import DEFAULT_TIMEOUT_SECONDS
from ...shared.exceptions import TransportError, create_transport_error_from_httpx_error

logger = logging.getLogger(__name__)

RequestT = TypeVar('RequestT')
ResultT = TypeVar('ResultT')


class BaseAPIClient(ABC, Generic[RequestT, ResultT]):
    """
    Abstract base class for API clients implementing Template Method pattern.

    A sync ``httpx.Client`` is allocated at construction unless one is
    injected; the async one is allocated on first use. Injected clients
    belong to the caller and are never closed here.

    ``timeout`` is also an overall deadline for one call (connect, upload
    and the whole response body), on top of httpx's per-phase timeouts.
    An async client allocated here is only closed by ``aclose()`` or
    ``async with``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: Optional[httpx.Client] = None,
        async_http_client: Optional[httpx.AsyncClient] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

        self._owns_client = http_client is None
        self.client: httpx.Client = http_client or httpx.Client(timeout=timeout)

        self._owns_async_client = async_http_client is None
        self._async_client: Optional[httpx.AsyncClient] = async_http_client

        # Plain prefix check: a malformed URL must only fail at send time
        if not self.base_url.lower().startswith("https://"):
            logger.warning(
                "Base URL %s is not https; request bodies will travel unencrypted",
                self.base_url
            )

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def close(self) -> None:
        if self._owns_async_client and self._async_client is not None and not self._async_client.is_closed:
            logger.warning(
                "close() does not release the async HTTP client; use aclose() or 'async with'"
            )
        if self._owns_client:
            self.client.close()

    async def aclose(self) -> None:
        if self._owns_async_client and self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None
        self.close()

    @property
    def async_client(self) -> httpx.AsyncClient:
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(timeout=self.timeout)
        return self._async_client

    # Template method pattern implementation
    def request(self, endpoint: str, payload: RequestT) -> ResultT:
        """
        Template method for making API requests.

        Follows the pattern:
        1. Encode the payload
        2. Pre-process request
        3. Make HTTP request
        4. Transform to domain result
        """
        content = self._serialize_request(payload)
        request_params = self._preprocess_request(endpoint, content)
        response = self._make_request(request_params)
        return self._transform_response(response)

    async def async_request(self, endpoint: str, payload: RequestT) -> ResultT:
        """
        Async template method for making API requests.

        Similar to request() but uses the async HTTP client.
        """
        content = self._serialize_request(payload)
        request_params = self._preprocess_request(endpoint, content)
        response = await self._make_async_request(request_params)
        return self._transform_response(response)

    def _preprocess_request(self, endpoint: str, content: bytes) -> Dict[str, Any]:
        """Hook method for request preprocessing"""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        return {
            "method": "POST",
            "url": url,
            "content": content,
            "headers": {"Content-Type": "application/json"}
        }

    def _make_request(self, request_params: Dict[str, Any]) -> httpx.Response:
        """Make a single HTTP request; no retries"""
        logger.debug(
            "%s %s (%d bytes)",
            request_params["method"], request_params["url"], len(request_params["content"])
        )
        deadline = time.monotonic() + self.timeout
        try:
            # Stream the body so a slow trickle cannot outlive the deadline
            with self.client.stream(**request_params) as response:
                self._check_deadline(deadline)
                chunks = []
                for chunk in response.iter_bytes():
                    chunks.append(chunk)
                    self._check_deadline(deadline)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise create_transport_error_from_httpx_error(e) from e

        logger.debug(
            "Received HTTP %s from %s", response.status_code, request_params["url"],
            extra={"status_code": response.status_code}
        )
        return self._buffered_response(response, b"".join(chunks))

    async def _make_async_request(self, request_params: Dict[str, Any]) -> httpx.Response:
        """Make a single async HTTP request; no retries"""
        logger.debug(
            "ASYNC %s %s (%d bytes)",
            request_params["method"], request_params["url"], len(request_params["content"])
        )
        try:
            response = await asyncio.wait_for(
                self.async_client.request(**request_params), timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            raise self._deadline_error() from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise create_transport_error_from_httpx_error(e) from e

        logger.debug(
            "Received HTTP %s from %s", response.status_code, request_params["url"],
            extra={"status_code": response.status_code}
        )
        return response

    def _check_deadline(self, deadline: float) -> None:
        if time.monotonic() > deadline:
            raise self._deadline_error()

    def _deadline_error(self) -> TransportError:
        return TransportError(f"Request timed out: exceeded the {self.timeout}s deadline")

    @staticmethod
    def _buffered_response(response: httpx.Response, content: bytes) -> httpx.Response:
        """Rebuild a fully read response from its already-decoded body"""
        headers = {}
        content_type = response.headers.get("Content-Type")
        if content_type:
            headers["Content-Type"] = content_type
        return httpx.Response(
            response.status_code,
            headers=headers,
            content=content,
            request=response.request
        )

    @abstractmethod
    def _serialize_request(self, payload: RequestT) -> bytes:
        """Encode the payload into the request body (must be implemented by subclasses)"""
        pass

    @abstractmethod
    def _transform_response(self, response: httpx.Response) -> ResultT:
        """Transform raw response to domain result (must be implemented by subclasses)"""
        pass
