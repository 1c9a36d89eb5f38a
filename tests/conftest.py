"""
Shared fixtures for Fortnite-API client tests.
"""

from typing import Any, List, Optional

import httpx
import pytest
import pytest_asyncio

from fortnite_api.client import FortniteAPIClient
from fortnite_api.constants import Language
from fortnite_api.core.config import Settings


class TransportSpy:
    """Mock transport handler that records every request it answers."""

    def __init__(self, body: Optional[Any] = None, status_code: int = 200):
        self.body = body if body is not None else {"status": 200, "data": {}}
        self.status_code = status_code
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def urls(self) -> List[str]:
        return [str(request.url) for request in self.requests]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, key=None, language=Language.ENGLISH)


@pytest.fixture
def spy():
    """Transport spy answering with an empty success envelope."""
    return TransportSpy()


@pytest_asyncio.fixture
async def client(settings, spy):
    """Create a test client with an API key."""
    client = FortniteAPIClient(
        key="test_api_key", settings=settings, transport=spy.transport()
    )
    yield client
    await client.close()


@pytest_asyncio.fixture
async def anonymous_client(settings, spy):
    """Create a test client without an API key."""
    client = FortniteAPIClient(settings=settings, transport=spy.transport())
    yield client
    await client.close()
