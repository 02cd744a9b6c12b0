"""Test package for Gemini Chat.

Structure:
    - unit/: ChatState, chat service, config and formatting tests
    - integration/: HTTP application and live Gemini streaming tests

Live tests are skipped unless an API key is configured.
Leverages pytest with pytest-check for soft assertions.
"""
