"""Async HTTP client for the PDF chat backend.

Every operation builds one request, awaits the response and returns the
parsed body. Non-2xx statuses raise ``httpx.HTTPStatusError`` and transport
failures raise ``httpx.RequestError``. Bodies that are not JSON or do not match
the expected record raise ``pydantic.ValidationError``. All are logged and
re-raised as-is.
There are no retries and no caching.

Endpoints:
    - POST /upload-pdf: Multipart PDF upload
    - POST /retrieve: RAG chunks for a query against a PDF
    - POST /chat: General chat turn
    - POST /sessions, GET /sessions: Session create/list
    - GET /sessions/{id}/messages: Session history
    - POST /messages: Persist a message
    - DELETE /sessions/{id}: Session removal
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, BinaryIO, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from pdfchat.client.config import ClientConfig, get_client_config
from pdfchat.models.schemas import (
    ChatMessage,
    ChatSession,
    CreateSessionRequest,
    GeneralChatRequest,
    GeneralChatResponse,
    MessageHistory,
    MessageRole,
    RetrieveRequest,
    RetrieveResponse,
    SaveMessageRequest,
    SessionList,
    SessionMode,
    UploadResponse,
)

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
DEFAULT_UPLOAD_FILENAME = "document.pdf"

PdfSource = bytes | BinaryIO | str | Path

ModelT = TypeVar("ModelT", bound=BaseModel)


def _session_path(session_id: str) -> str:
    return f"/sessions/{quote(session_id, safe='')}"


class ApiClient:
    """Typed facade over the backend's REST endpoints.

    Wraps a single ``httpx.AsyncClient`` so connections are pooled across
    calls. Use as an async context manager or call ``aclose()`` when done.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport (e.g. ASGITransport in tests).
        """
        self._config = config or get_client_config()
        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            headers={"Accept": "application/json"},
            timeout=self._config.timeout,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send one request and fail on non-success status.

        Raises:
            httpx.HTTPStatusError: Backend answered with a non-2xx status.
            httpx.RequestError: Network failure or timeout.
        """
        logger.debug(f"{method} {path}")
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"{method} {path} failed with HTTP {e.response.status_code}")
            raise
        except httpx.RequestError as e:
            logger.warning(f"{method} {path} failed: {e!r}")
            raise
        return response

    def _parse(self, model: type[ModelT], response: httpx.Response) -> ModelT:
        """Validate a response body against a record.

        Raises:
            ValidationError: Body is not JSON or does not match the record.
        """
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            request = response.request
            logger.warning(
                f"{request.method} {request.url.path} returned a malformed {model.__name__} body: "
                f"{e.error_count()} error(s)"
            )
            raise

    async def upload_pdf(
        self,
        file: PdfSource,
        filename: str | None = None,
    ) -> UploadResponse:
        """Upload a PDF for ingestion.

        Args:
            file: PDF content as bytes, an open binary file, or a filesystem path.
            filename: Name sent with the upload. Defaults to the path's name,
                the file object's name, or ``document.pdf``.

        Returns:
            UploadResponse with the new pdf_id and chunk count.
        """
        if isinstance(file, (str, Path)):
            path = Path(file)
            content: bytes | BinaryIO = await asyncio.to_thread(path.read_bytes)
            filename = filename or path.name
        else:
            content = file
            if filename is None and not isinstance(file, bytes):
                filename = Path(getattr(file, "name", "") or DEFAULT_UPLOAD_FILENAME).name

        files = {"file": (filename or DEFAULT_UPLOAD_FILENAME, content, PDF_CONTENT_TYPE)}
        response = await self._request("POST", "/upload-pdf", files=files)
        result = self._parse(UploadResponse, response)
        logger.info(f"Uploaded PDF {result.pdf_id} ({result.number_of_chunks} chunks)")
        return result

    async def retrieve_chunks(self, query: str, pdf_id: str) -> list[str]:
        """Retrieve RAG chunks for a query against an uploaded PDF."""
        payload = RetrieveRequest(query=query, pdf_id=pdf_id)
        response = await self._request("POST", "/retrieve", json=payload.model_dump(mode="json"))
        return self._parse(RetrieveResponse, response).chunks

    async def send_general_chat(self, query: str, session_id: str) -> GeneralChatResponse:
        """Send a general chat message (no PDF context)."""
        payload = GeneralChatRequest(query=query, session_id=session_id)
        response = await self._request("POST", "/chat", json=payload.model_dump(mode="json"))
        return self._parse(GeneralChatResponse, response)

    async def create_session(
        self,
        name: str,
        mode: SessionMode | str,
        pdf_id: str | None = None,
    ) -> ChatSession:
        """Create a new chat session.

        ``pdf_id`` is left out of the request body when not given.
        """
        payload = CreateSessionRequest(name=name, mode=mode, pdf_id=pdf_id)
        response = await self._request(
            "POST", "/sessions", json=payload.model_dump(mode="json", exclude_none=True)
        )
        return self._parse(ChatSession, response)

    async def get_sessions(self) -> list[ChatSession]:
        response = await self._request("GET", "/sessions")
        return self._parse(SessionList, response).sessions

    async def get_chat_history(self, session_id: str) -> list[ChatMessage]:
        """Get the stored messages of a session."""
        response = await self._request("GET", f"{_session_path(session_id)}/messages")
        return self._parse(MessageHistory, response).messages

    async def save_message(
        self,
        session_id: str,
        role: MessageRole | str,
        content: str,
    ) -> ChatMessage:
        """Persist a message in a session."""
        payload = SaveMessageRequest(session_id=session_id, role=role, content=content)
        response = await self._request("POST", "/messages", json=payload.model_dump(mode="json"))
        return self._parse(ChatMessage, response)

    async def delete_session(self, session_id: str) -> None:
        await self._request("DELETE", _session_path(session_id))
        logger.info(f"Deleted session {session_id}")


# Module-level shared instance
_api_client: ApiClient | None = None


def get_api_client() -> ApiClient:
    """Get or create the shared API client.

    A closed client is replaced on the next call.

    Returns:
        The ApiClient instance.
    """
    global _api_client
    if _api_client is None or _api_client.is_closed:
        _api_client = ApiClient()
    return _api_client


async def close_api_client() -> None:
    """Close and forget the shared API client, if any."""
    global _api_client
    if _api_client is not None:
        await _api_client.aclose()
        _api_client = None


async def upload_pdf(file: PdfSource, filename: str | None = None) -> UploadResponse:
    """Upload a PDF file to the backend."""
    return await get_api_client().upload_pdf(file, filename)


async def retrieve_chunks(query: str, pdf_id: str) -> list[str]:
    """Retrieve RAG chunks from the backend (PDF mode)."""
    return await get_api_client().retrieve_chunks(query, pdf_id)


async def send_general_chat(query: str, session_id: str) -> GeneralChatResponse:
    """Send a general chat message (no PDF)."""
    return await get_api_client().send_general_chat(query, session_id)


async def create_session(
    name: str,
    mode: SessionMode | str,
    pdf_id: str | None = None,
) -> ChatSession:
    """Create a new chat session."""
    return await get_api_client().create_session(name, mode, pdf_id)


async def get_sessions() -> list[ChatSession]:
    """Get all chat sessions."""
    return await get_api_client().get_sessions()


async def get_chat_history(session_id: str) -> list[ChatMessage]:
    """Get chat history for a session."""
    return await get_api_client().get_chat_history(session_id)


async def save_message(session_id: str, role: MessageRole | str, content: str) -> ChatMessage:
    """Save a message to the backend."""
    return await get_api_client().save_message(session_id, role, content)


async def delete_session(session_id: str) -> None:
    """Delete a session."""
    await get_api_client().delete_session(session_id)
