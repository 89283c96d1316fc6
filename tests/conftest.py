"""Pytest fixtures and shared test configuration.

Fixtures:
    - store: Fresh transcript store with the default greeting
    - async_client: HTTPX client for the FastAPI host
    - image_data_url: Small PNG payload as a data URL
"""

import base64
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from zentro.api import create_app
from zentro.chat.state import ChatStore

# 1x1 transparent PNG
PIXEL_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


@pytest.fixture
def store() -> ChatStore:
    """Return a transcript store holding only the greeting."""
    return ChatStore()


@pytest.fixture
def image_data_url() -> str:
    """Return a PNG image encoded as a data URL."""
    return "data:image/png;base64," + base64.b64encode(PIXEL_PNG).decode("ascii")


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
