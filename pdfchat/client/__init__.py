"""HTTP client for the PDF chat backend.

Typed async facade over the backend's REST endpoints.

Responsibilities:
    - PDF upload and RAG chunk retrieval
    - General chat turns
    - Session and message CRUD
    - Environment-driven configuration (base URL, timeout)

Holds no state between calls beyond the pooled httpx connection.
Errors from the HTTP layer propagate unchanged.
"""

from pdfchat.client.api_client import (
    ApiClient,
    close_api_client,
    create_session,
    delete_session,
    get_api_client,
    get_chat_history,
    get_sessions,
    retrieve_chunks,
    save_message,
    send_general_chat,
    upload_pdf,
)
from pdfchat.client.config import ClientConfig, get_client_config

__all__ = [
    "ApiClient",
    "ClientConfig",
    "close_api_client",
    "create_session",
    "delete_session",
    "get_api_client",
    "get_chat_history",
    "get_client_config",
    "get_sessions",
    "retrieve_chunks",
    "save_message",
    "send_general_chat",
    "upload_pdf",
]
