"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - backend: In-memory backend double recording every call
    - api_client: ApiClient wired to the backend over ASGITransport
    - sample_pdf_bytes: Minimal PDF payload for uploads
    - mock_session_id: Consistent session ID for tests
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport

from pdfchat.client.api_client import ApiClient
from pdfchat.client.config import ClientConfig
from tests.backend_stub import BackendStub


@pytest.fixture
def backend() -> BackendStub:
    """Return a fresh backend double."""
    return BackendStub()


@pytest.fixture
async def api_client(backend: BackendStub) -> AsyncGenerator[ApiClient, None]:
    """Create an ApiClient talking to the backend double.

    Yields:
        ApiClient routed through ASGITransport.
    """
    config = ClientConfig(base_url="http://test", timeout=5.0)
    client = ApiClient(config=config, transport=ASGITransport(app=backend.app))
    async with client:
        yield client


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Return a small PDF-looking payload.

    The client never inspects the content, so a header plus filler is enough.
    """
    return b"%PDF-1.4\n" + b"Information security policy. " * 8 + b"\n%%EOF"


@pytest.fixture
def mock_session_id() -> str:
    """Generate consistent session ID for testing.

    Returns:
        Predictable session ID for test assertions.
    """
    return "test-session-12345"
