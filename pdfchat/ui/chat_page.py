"""NiceGUI chat interface backed by the PDF chat API client."""

import logging
from datetime import datetime

import httpx
from nicegui import events, ui
from pydantic import ValidationError

from pdfchat.client import api_client
from pdfchat.models.schemas import ChatSession, MessageRole, SessionMode
from pdfchat.ui.formatting import format_retrieved_chunks, to_display_message
from pdfchat.ui.state import PageState

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; }

    .header { background: linear-gradient(135deg, #0f766e 0%, #2563eb 100%); }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: white;
        color: #1f2937;
        border: 1px solid #e5e7eb;
        border-radius: 18px 18px 18px 4px;
    }

    .session-item { border-radius: 8px; padding: 4px 8px; }
    .session-item:hover { background: #f3f4f6; }
    .session-active { background: #e0e7ff; }
</style>
"""


BACKEND_ERRORS = (httpx.HTTPError, ValidationError)


def notify_error(action: str, error: Exception) -> None:
    """Report a failed backend call to the user."""
    if isinstance(error, httpx.HTTPStatusError):
        message = f"{action} failed: HTTP {error.response.status_code}"
    elif isinstance(error, ValidationError):
        message = f"{action} failed: unexpected response from the server"
    else:
        message = f"{action} failed: {error}"
    logger.warning(message)
    ui.notify(message, type="negative")


@ui.page("/")
async def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    state = PageState()

    input_field: ui.textarea
    send_btn: ui.button

    def render_message(msg: dict[str, str]) -> None:
        is_user = msg["role"] == MessageRole.USER.value
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align}"):
            with ui.column().classes("max-w-[75%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                    if is_user:
                        ui.label(msg["content"]).classes("text-sm").style("white-space: pre-wrap")
                    else:
                        ui.markdown(msg["content"]).classes("text-sm")
                ui.label(msg["time"]).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )

    @ui.refreshable
    def session_list() -> None:
        if not state.sessions:
            ui.label("No conversations yet").classes("text-sm text-gray-400 px-2")
            return
        for session in state.sessions:
            active = state.current is not None and state.current.id == session.id
            icon = "picture_as_pdf" if session.mode == SessionMode.PDF else "chat"
            with ui.row().classes(
                f"w-full items-center no-wrap session-item {'session-active' if active else ''}"
            ):
                with ui.row().classes("items-center no-wrap gap-2 flex-grow cursor-pointer").on(
                    "click", lambda s=session: open_session(s)
                ):
                    ui.icon(icon).classes("text-gray-500")
                    ui.label(session.name).classes("text-sm truncate")
                ui.button(
                    icon="delete", on_click=lambda s=session: remove_session(s)
                ).props("flat round dense size=sm color=grey")

    @ui.refreshable
    def message_list() -> None:
        if state.current is None:
            with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                ui.icon("forum").classes("text-5xl text-gray-300")
                ui.label("Start a chat or upload a PDF").classes("text-lg text-gray-400")
            return
        if not state.messages:
            hint = (
                f"Ask a question about {state.current.name}"
                if state.current.mode == SessionMode.PDF
                else "Start a conversation"
            )
            with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                ui.icon("forum").classes("text-5xl text-gray-300")
                ui.label(hint).classes("text-lg text-gray-400")
            return
        for msg in state.messages:
            render_message(msg)

    async def load_sessions() -> None:
        try:
            state.sessions = await api_client.get_sessions()
        except BACKEND_ERRORS as e:
            notify_error("Loading sessions", e)
            return
        session_list.refresh()

    async def open_session(session: ChatSession) -> None:
        state.current = session
        try:
            history = await api_client.get_chat_history(session.id)
        except BACKEND_ERRORS as e:
            notify_error("Loading history", e)
            history = []
        state.messages = [to_display_message(m) for m in history]
        session_list.refresh()
        message_list.refresh()

    async def new_chat() -> None:
        name = f"Chat {datetime.now().strftime('%b %d, %I:%M %p')}"
        try:
            session = await api_client.create_session(name, SessionMode.CHAT)
        except BACKEND_ERRORS as e:
            notify_error("Creating chat", e)
            return
        state.sessions.insert(0, session)
        await open_session(session)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        filename = e.file.name
        content = await e.file.read()
        try:
            result = await api_client.upload_pdf(content, filename)
            session = await api_client.create_session(filename, SessionMode.PDF, result.pdf_id)
        except BACKEND_ERRORS as err:
            notify_error(f"Uploading {filename}", err)
            return
        ui.notify(f"Indexed {filename} ({result.number_of_chunks} chunks)", type="positive")
        state.sessions.insert(0, session)
        await open_session(session)

    async def remove_session(session: ChatSession) -> None:
        try:
            await api_client.delete_session(session.id)
        except BACKEND_ERRORS as e:
            notify_error("Deleting session", e)
            return
        state.sessions = [s for s in state.sessions if s.id != session.id]
        if state.current is not None and state.current.id == session.id:
            state.current = None
            state.messages = []
            message_list.refresh()
        session_list.refresh()

    async def send_turn(session: ChatSession, text: str) -> str | None:
        state.add_message(MessageRole.USER.value, text)
        message_list.refresh()
        try:
            await api_client.save_message(session.id, MessageRole.USER, text)
            if session.mode == SessionMode.PDF and session.pdf_id:
                chunks = await api_client.retrieve_chunks(text, session.pdf_id)
                reply = format_retrieved_chunks(chunks)
                await api_client.save_message(session.id, MessageRole.ASSISTANT, reply)
                return reply
            # The backend stores the assistant reply for general chat
            return (await api_client.send_general_chat(text, session.id)).response
        except BACKEND_ERRORS as e:
            notify_error("Sending message", e)
            return None

    async def send_message() -> None:
        text = input_field.value.strip()
        if not text or not state.start_turn():
            return
        send_btn.disable()
        try:
            if state.current is None:
                await new_chat()
                if state.current is None:
                    return
            session = state.current
            input_field.value = ""
            reply = await send_turn(session, text)
        finally:
            state.finish_turn()
            send_btn.enable()

        if reply is not None and state.current is session:
            state.add_message(MessageRole.ASSISTANT.value, reply)
            message_list.refresh()

    # === UI Layout ===
    with ui.left_drawer(value=True).classes("bg-white border-r").props("width=280"):
        with ui.column().classes("w-full gap-3"):
            ui.button("New chat", icon="add", on_click=new_chat).props("unelevated").classes(
                "w-full"
            )
            ui.upload(
                label="Upload PDF",
                auto_upload=True,
                on_upload=handle_upload,
            ).props("accept=.pdf flat bordered").classes("w-full")
            ui.separator()
            session_list()

    with ui.header().classes("header items-center justify-between"):
        with ui.row().classes("items-center gap-3"):
            ui.icon("description").classes("text-white text-3xl")
            ui.label("PDF Chat").classes("text-lg font-semibold text-white")
        ui.label().bind_text_from(
            state, "current", lambda s: s.name if s is not None else ""
        ).classes("text-sm text-white/80")

    with ui.column().classes("w-full max-w-3xl mx-auto p-4 gap-4"):
        message_list()

    with ui.footer().classes("bg-white border-t"):
        with ui.row().classes("w-full max-w-3xl mx-auto gap-3 items-end no-wrap"):
            input_field = (
                ui.textarea(placeholder="Type a message...")
                .props("autogrow outlined dense rows=1")
                .classes("flex-grow")
                .on("keydown.enter.prevent", send_message)
            )
            send_btn = ui.button(icon="send", on_click=send_message).props("round unelevated")

    await ui.context.client.connected()
    await load_sessions()

