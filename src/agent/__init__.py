"""Gemini chat service for LLM access.

Responsibilities:
    - Chat session creation with a fixed model and system instruction
    - Streaming token delivery as plain text increments
    - Environment-driven configuration and API key lookup

Maintains clean separation from the UI layer.
"""

from src.agent.chat_agent import ChatService, ChatSession, get_chat_service
from src.agent.config import (
    ChatConfig,
    MissingApiKeyError,
    get_api_key,
    get_chat_config,
)

__all__ = [
    "ChatConfig",
    "ChatService",
    "ChatSession",
    "MissingApiKeyError",
    "get_api_key",
    "get_chat_config",
    "get_chat_service",
]
