"""Pydantic records for the PDF chat backend API.

Provides type safety for every payload the client sends and receives.

Models:
    - ChatSession: Stored conversation (chat or PDF mode)
    - ChatMessage: Individual stored message
    - UploadResponse: Result of a PDF upload
    - GeneralChatRequest / GeneralChatResponse: General chat turn
    - RetrieveRequest / RetrieveResponse: RAG chunk retrieval
    - CreateSessionRequest, SaveMessageRequest: Write payloads
    - SessionList, MessageHistory: List envelopes
"""

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

__all__ = [
    "ChatMessage",
    "ChatSession",
    "CreateSessionRequest",
    "GeneralChatRequest",
    "GeneralChatResponse",
    "MessageHistory",
    "MessageRole",
    "RetrieveRequest",
    "RetrieveResponse",
    "SaveMessageRequest",
    "SessionList",
    "SessionMode",
    "UploadResponse",
]
