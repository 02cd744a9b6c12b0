"""Pytest fixtures and shared test configuration.

Fixtures:
    - async_client: HTTPX client for API testing
    - api_key: Fake API key set in the environment
    - no_api_key: Environment with every API key variable removed
    - fake_service: In-memory stand-in for ChatService
"""

import asyncio
from collections.abc import AsyncGenerator, AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from src.agent.config import API_KEY_ENV_VARS, ChatConfig
from src.api import app


class FakeChatService:
    """Records calls and replays scripted increments instead of calling Gemini."""

    def __init__(self, chunks: list[str] | None = None, error: Exception | None = None) -> None:
        self.config = ChatConfig(model_name="gemini-test", system_instruction="Be brief.")
        self.chunks = chunks or []
        self.error = error
        self.fail_after: int | None = None
        self.sessions_created = 0
        self.api_keys: list[str] = []
        self.sent: list[tuple[object, str]] = []
        self.on_chunk = None
        # When set, each increment waits for the event captured at stream start
        self.gate: asyncio.Event | None = None

    def create_session(self, api_key: str) -> object:
        self.sessions_created += 1
        self.api_keys.append(api_key)
        return object()

    async def stream_message(self, session: object, message: str) -> AsyncIterator[str]:
        self.sent.append((session, message))
        if self.error is not None and self.fail_after is None:
            raise self.error
        return self._replay()

    async def _replay(self) -> AsyncIterator[str]:
        gate = self.gate
        for index, chunk in enumerate(self.chunks):
            if gate is not None:
                await gate.wait()
            if self.fail_after is not None and index == self.fail_after:
                raise self.error
            if self.on_chunk is not None:
                self.on_chunk()
            yield chunk


@pytest.fixture
def api_key(monkeypatch: pytest.MonkeyPatch) -> str:
    """Set a fake API key and clear the fallback variables."""
    for name in API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("API_KEY", "test-key-12345")
    return "test-key-12345"


@pytest.fixture
def no_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every API key variable from the environment."""
    for name in API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_service() -> FakeChatService:
    return FakeChatService(chunks=["Hi", " there"])


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
