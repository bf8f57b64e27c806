"""PDF Chat - typed async client for a RAG-backed PDF chat service.

Combines httpx for transport, Pydantic for the request/response records,
and NiceGUI for an optional chat interface.

Components:
    - client: REST facade (upload, retrieval, chat, sessions, messages)
    - models: Request/response schemas
    - ui: Web interface driving the client
"""

__version__ = "0.1.0"
