"""Request and response records for the PDF chat backend.

Shapes mirror the backend's JSON exactly. Timestamps stay as the strings the
backend sends so a parsed record dumps back to the original body.
"""

from enum import Enum

from pydantic import BaseModel


class SessionMode(str, Enum):
    """Kind of conversation a session holds."""

    CHAT = "chat"
    PDF = "pdf"


class MessageRole(str, Enum):
    """Author of a stored message."""

    USER = "user"
    ASSISTANT = "assistant"


class UploadResponse(BaseModel):
    """Result of ingesting a PDF.

    Attributes:
        pdf_id: Backend identifier of the ingested document.
        number_of_chunks: Number of text chunks indexed for retrieval.
    """

    pdf_id: str
    number_of_chunks: int


class ChatSession(BaseModel):
    """A stored conversation.

    Attributes:
        id: Session identifier.
        name: Display name.
        mode: Whether the session chats freely or against a PDF.
        pdf_id: Document the session is bound to (PDF mode only).
        created_at: Creation timestamp as sent by the backend.
        updated_at: Last update timestamp as sent by the backend.
    """

    id: str
    name: str
    mode: SessionMode
    pdf_id: str | None = None
    created_at: str
    updated_at: str


class ChatMessage(BaseModel):
    """A single stored message in a session."""

    id: str
    session_id: str
    role: MessageRole
    content: str
    timestamp: str


class GeneralChatRequest(BaseModel):
    query: str
    session_id: str


class GeneralChatResponse(BaseModel):
    """Assistant reply for a general (non-PDF) chat turn.

    Attributes:
        response: The assistant's answer.
        message_id: Identifier of the stored assistant message.
    """

    response: str
    message_id: str


class RetrieveRequest(BaseModel):
    query: str
    pdf_id: str


class RetrieveResponse(BaseModel):
    chunks: list[str]


class CreateSessionRequest(BaseModel):
    name: str
    mode: SessionMode
    pdf_id: str | None = None


class SaveMessageRequest(BaseModel):
    session_id: str
    role: MessageRole
    content: str


class SessionList(BaseModel):
    sessions: list[ChatSession]


class MessageHistory(BaseModel):
    messages: list[ChatMessage]
