"""
Pytest configuration and shared fixtures.

Provides sample requests and httpx clients backed by ``httpx.MockTransport``.
"""

import json
import logging
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from mailer.shared.clients.mailer_client import MailerClient
from mailer.shared.models.email import Creds, EmailRequest

BASE_URL = "https://mailer.example.com"


@pytest.fixture
def sample_creds() -> Creds:
    return Creds(email="noreply@example.com", pwd="s3cret-pass")


@pytest.fixture
def sample_email_request(sample_creds) -> EmailRequest:
    return EmailRequest(
        creds=sample_creds,
        to_list=["user@example.com", "other@example.com"],
        subject="Welcome!",
        body="<h1>Hello world</h1><p>This is a test.</p>",
        html=True,
        from_name="Example Bot",
    )


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    """Requests seen by the mock transports built in a test"""
    return []


@pytest.fixture
def mock_backend(recorded_requests) -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport answering every request with a fixed reply.

    ``body`` is JSON-encoded unless it is already ``bytes``.
    """
    def _factory(body: Any = None, status_code: int = 200, raw: Optional[bytes] = None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if raw is not None:
                return httpx.Response(status_code, content=raw)
            return httpx.Response(status_code, json=body)
        return httpx.MockTransport(handler)
    return _factory


@pytest.fixture
def mailer_client_factory(mock_backend) -> Callable[..., MailerClient]:
    """Build a MailerClient whose sync and async transports share one mock backend"""
    created: List[MailerClient] = []

    def _factory(body: Any = None, status_code: int = 200, raw: Optional[bytes] = None,
                 base_url: str = BASE_URL) -> MailerClient:
        transport = mock_backend(body=body, status_code=status_code, raw=raw)
        client = MailerClient(
            base_url,
            http_client=httpx.Client(transport=transport),
            async_http_client=httpx.AsyncClient(transport=transport),
        )
        created.append(client)
        return client

    yield _factory

    for client in created:
        client.client.close()


@pytest.fixture
def request_json() -> Callable[[httpx.Request], Dict[str, Any]]:
    """Decode the JSON body of a recorded request"""
    def _decode(request: httpx.Request) -> Dict[str, Any]:
        return json.loads(request.content)
    return _decode


@pytest.fixture
def restore_mailer_logger():
    """Undo handler and level changes made to the ``mailer`` logger"""
    logger = logging.getLogger("mailer")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
