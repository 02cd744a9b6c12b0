"""Chat configuration with environment variable loading.

Pydantic-based configuration for the Gemini chat service.
The API key is not part of the config; get_api_key reads it at call time.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

API_KEY_ENV_VARS = ("API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY")

DEFAULT_SYSTEM_INSTRUCTION = (
    "You are a friendly and knowledgeable AI assistant. "
    "Answer clearly and concisely, use Markdown for lists and code, "
    "and ask a short clarifying question when a request is ambiguous."
)

SUGGESTED_PROMPTS = (
    "Explain quantum computing in simple terms",
    "Write a short poem about the ocean",
    "Give me three ideas for a weekend project",
    "How do I reverse a list in Python?",
)


class MissingApiKeyError(Exception):
    """Raised when no API key is present in the environment."""

    pass


class ChatConfig(BaseModel):
    """Configuration for the Gemini chat service.

    Attributes:
        model_name: Model identifier passed at session creation.
        system_instruction: Fixed instruction attached to every new session.
        title: Title shown in the page header and browser tab.
    """

    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        description="Model to use",
    )
    system_instruction: str = Field(
        default_factory=lambda: os.getenv("SYSTEM_INSTRUCTION", DEFAULT_SYSTEM_INSTRUCTION),
        description="System instruction for new chat sessions",
    )
    title: str = Field(
        default_factory=lambda: os.getenv("APP_TITLE", "Gemini Chat"),
        description="Application title",
    )

    @field_validator("model_name", "system_instruction")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject blank values and strip surrounding whitespace."""
        if not v or not v.strip():
            raise ValueError("value must not be blank")
        return v.strip()


def get_chat_config() -> ChatConfig:
    """Create chat configuration from environment.

    Returns:
        Configured ChatConfig instance.
    """
    return ChatConfig()


def get_api_key() -> str:
    """Read the API key from the environment.

    Checked in order: API_KEY, GEMINI_API_KEY, GOOGLE_API_KEY.

    Returns:
        The stripped API key.

    Raises:
        MissingApiKeyError: If none of the variables holds a non-blank value.
    """
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    raise MissingApiKeyError("API_KEY environment variable not set.")
