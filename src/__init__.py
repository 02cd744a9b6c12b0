"""Gemini Chat - single-page chat interface over the Gemini streaming API.

Combines NiceGUI for the page, FastAPI for health checks and hosting,
the Google GenAI SDK for model access, and Pydantic for data validation.

Components:
    - agent: Gemini chat sessions and streaming
    - ui: Chat page and its view state
    - api: HTTP application hosting the page
    - models: Message schemas
"""

__version__ = "0.1.0"
