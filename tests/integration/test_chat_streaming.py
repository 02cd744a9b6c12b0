"""Integration tests against the live Gemini streaming API.

Requirements:
    - API_KEY (or GEMINI_API_KEY / GOOGLE_API_KEY) environment variable
    - Tests are skipped without a key
"""

import os

import pytest

from src.agent.chat_agent import ChatService
from src.agent.config import API_KEY_ENV_VARS
from src.models.schemas import Role
from src.ui.state import ChatState


def has_api_key() -> bool:
    """Check if a Gemini API key is configured."""
    return any(os.environ.get(name, "").strip() for name in API_KEY_ENV_VARS)


requires_api_key = pytest.mark.skipif(
    not has_api_key(),
    reason="API_KEY not set - skipping live Gemini test",
)


@requires_api_key
class TestLiveExchange:
    """End-to-end exchanges through ChatState and the real SDK."""

    async def test_reply_is_streamed_into_model_message(self) -> None:
        state = ChatState(service=ChatService())
        increments = 0

        def count() -> None:
            nonlocal increments
            increments += 1

        state.on_change = count

        await state.send_message("Say the word 'hello' and nothing else")

        assert state.error is None
        assert [m.role for m in state.messages] == [Role.USER, Role.MODEL]
        assert "hello" in state.messages[-1].content.lower()
        # user, empty reply, at least one increment, loading cleared
        assert increments >= 4
        assert state.is_loading is False

    async def test_session_remembers_previous_turns(self) -> None:
        state = ChatState(service=ChatService())

        await state.send_message("My favourite colour is teal. Reply with OK.")
        await state.send_message("What is my favourite colour? Answer in one word.")

        assert state.error is None
        assert "teal" in state.messages[-1].content.lower()
