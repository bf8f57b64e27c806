"""Test package for PDF Chat.

Provides coverage for the API client facade, its configuration, the
request/response records and the chat page helpers.

Structure:
    - unit/: Individual function and class tests
    - integration/: Client contract tests against an in-memory backend
    - backend_stub.py: FastAPI double of the remote service

No network access: requests go through httpx.ASGITransport or
httpx.MockTransport. Leverages pytest with pytest-check for soft assertions.
"""
