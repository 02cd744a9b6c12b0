"""Pydantic models for chat state.

Models:
    - Role: Message speaker (user or model)
    - Message: Individual message in conversation
"""

from src.models.schemas import Message, Role

__all__ = ["Message", "Role"]
