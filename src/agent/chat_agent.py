"""Gemini chat service with streaming support.

Thin wrapper around the Google GenAI SDK. A session is the SDK's async chat
object, which keeps prior turns, so callers only hold the handle and send one
message at a time.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any, Protocol

from google import genai
from google.genai import types

from src.agent.config import ChatConfig, get_chat_config

logger = logging.getLogger(__name__)


class ChatSession(Protocol):
    """Opaque handle to a remote conversational context."""

    async def send_message_stream(self, message: str) -> AsyncIterator[Any]: ...


class ChatService:
    """Service for opening Gemini chat sessions and streaming replies.

    Wraps the GenAI SDK with:
    - Lazy per-session client creation (the key is read at call time)
    - Fixed model and system instruction from config
    - Clean text-only streaming interface for the UI
    """

    def __init__(self, config: ChatConfig | None = None) -> None:
        """Initialize the chat service.

        Args:
            config: Optional chat configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_chat_config()

    @property
    def config(self) -> ChatConfig:
        return self._config

    def create_session(self, api_key: str) -> ChatSession:
        """Open a new chat session.

        Args:
            api_key: Google AI API key.

        Returns:
            Async chat object configured with the model and system instruction.
        """
        client = genai.Client(api_key=api_key)
        session = client.aio.chats.create(
            model=self._config.model_name,
            config=types.GenerateContentConfig(
                system_instruction=self._config.system_instruction,
            ),
        )
        logger.info(f"Created chat session with model {self._config.model_name}")
        return session

    async def stream_message(
        self,
        session: ChatSession,
        message: str,
    ) -> AsyncIterator[str]:
        """Request a streamed response for a message.

        Errors from the SDK propagate to the caller, both here and while
        iterating the returned stream.

        Args:
            session: Session returned by create_session.
            message: The user's message.

        Returns:
            Async iterator over response text increments in arrival order.
        """
        stream = await session.send_message_stream(message)
        return self._iter_text(stream)

    @staticmethod
    async def _iter_text(stream: AsyncIterator[Any]) -> AsyncIterator[str]:
        # Chunks carrying only metadata have text=None
        async for chunk in stream:
            if chunk.text:
                yield chunk.text


# Module-level singleton instance
_chat_service: ChatService | None = None


def get_chat_service() -> ChatService:
    """Get or create the global chat service.

    Returns:
        The ChatService instance.
    """
    global _chat_service
    if _chat_service is None:
        _chat_service = ChatService()
    return _chat_service
