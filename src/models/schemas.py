from enum import Enum

from pydantic import BaseModel


class Role(str, Enum):
    """Speaker of a chat message."""

    USER = "user"
    MODEL = "model"


class Message(BaseModel):
    """A single chat message in the conversation.

    Content is mutable: the trailing model message grows in place while a
    response streams in.

    Attributes:
        role: The speaker (user or model).
        content: The message text.
    """

    role: Role
    content: str = ""
