"""Unit tests for individual components in isolation.

Coverage:
    - ui/: ChatState exchange handler and markdown formatting
    - agent/: Chat service and configuration

Uses fakes for the Gemini SDK. No network access.
"""
