"""Text helpers for rendering backend records in the chat page."""

from datetime import datetime

from pdfchat.models.schemas import ChatMessage

NO_CHUNKS_REPLY = "I couldn't find anything relevant to that in this document."


def format_time(timestamp: str | None = None) -> str:
    """Format an ISO timestamp as a short clock time.

    Falls back to the current time when no timestamp is given and to the raw
    string when it is not ISO formatted.
    """
    if timestamp is None:
        return datetime.now().strftime("%I:%M %p")
    try:
        return datetime.fromisoformat(timestamp).strftime("%I:%M %p")
    except ValueError:
        return timestamp


def format_retrieved_chunks(chunks: list[str]) -> str:
    """Render retrieved chunks as a markdown assistant reply."""
    excerpts = [chunk.strip() for chunk in chunks if chunk.strip()]
    if not excerpts:
        return NO_CHUNKS_REPLY

    parts = ["Here are the most relevant passages from the document:"]
    for i, excerpt in enumerate(excerpts, start=1):
        quoted = "\n".join(f"> {line}" if line else ">" for line in excerpt.splitlines())
        parts.append(f"**Passage {i}**\n\n{quoted}")
    return "\n\n".join(parts)


def to_display_message(message: ChatMessage) -> dict[str, str]:
    return {
        "role": message.role.value,
        "content": message.content,
        "time": format_time(message.timestamp),
    }
