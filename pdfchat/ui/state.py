"""Per-client view state for the chat page."""

from pdfchat.models.schemas import ChatSession
from pdfchat.ui.formatting import format_time


class PageState:
    """View state of one browser client. The backend remains the source of truth.

    Attributes:
        sessions: Sessions shown in the sidebar, newest first.
        current: Open session, if any.
        messages: Display dicts (role, content, time) of the open session.
        is_busy: Whether a send is in flight.
    """

    def __init__(self) -> None:
        self.sessions: list[ChatSession] = []
        self.current: ChatSession | None = None
        self.messages: list[dict[str, str]] = []
        self.is_busy: bool = False

    def add_message(self, role: str, content: str) -> None:
        self.messages.append({"role": role, "content": content, "time": format_time()})

    def start_turn(self) -> bool:
        """Claim the send slot.

        Returns:
            False if another send is already in flight.
        """
        if self.is_busy:
            return False
        self.is_busy = True
        return True

    def finish_turn(self) -> None:
        self.is_busy = False
