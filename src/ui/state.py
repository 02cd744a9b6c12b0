"""View state for a chat page and the message exchange handler."""

import logging
from collections.abc import Callable

from src.agent.chat_agent import ChatService, ChatSession, get_chat_service
from src.agent.config import get_api_key
from src.models.schemas import Message, Role

logger = logging.getLogger(__name__)


class ChatState:
    """Manages chat state for one page visit.

    Holds the message list, loading flag, session handle and error string.
    Every mutation is followed by a call to ``on_change`` so the page can
    re-render.
    """

    def __init__(
        self,
        service: ChatService | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.messages: list[Message] = []
        self.is_loading: bool = False
        self.session: ChatSession | None = None
        self.error: str | None = None
        self.on_change = on_change
        self._service = service or get_chat_service()
        # Bumped by new_chat; an exchange started under an older value is stale
        self._generation = 0

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def add_message(self, role: Role, content: str) -> Message:
        message = Message(role=role, content=content)
        self.messages.append(message)
        return message

    def new_chat(self) -> None:
        """Drop the conversation and its remote session.

        An exchange still streaming keeps running but no longer writes to
        this state.
        """
        self._generation += 1
        self.messages = []
        self.session = None
        self.error = None
        self.is_loading = False
        self._notify()

    async def send_message(self, text: str) -> None:
        """Send user text and stream the model reply into the last message.

        Blank input and sends while an exchange is in flight are ignored.
        Failures are reported through ``error`` and a synthetic model message.
        """
        if not text.strip() or self.is_loading:
            return

        generation = self._generation
        self.add_message(Role.USER, text)
        self.is_loading = True
        self.error = None
        self._notify()

        try:
            api_key = get_api_key()

            if self.session is None:
                self.session = self._service.create_session(api_key)

            stream = await self._service.stream_message(self.session, text)
            if not self._is_current(generation):
                return

            reply = self.add_message(Role.MODEL, "")
            self._notify()

            async for chunk in stream:
                if not self._is_current(generation):
                    return
                reply.content += chunk
                self._notify()

        except Exception as e:
            detail = str(e) or "An unknown error occurred."
            logger.error(f"Error sending message: {detail}")
            if not self._is_current(generation):
                return
            self.error = (
                "Sorry, something went wrong. Please check your setup and try again. "
                f"Error: {detail}"
            )
            self.add_message(Role.MODEL, f"Sorry, an error occurred: {detail}")
        finally:
            if self._is_current(generation):
                self.is_loading = False
                self._notify()
