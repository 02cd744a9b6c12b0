"""NiceGUI interface - single chat page driven by ChatState.

Responsibilities:
    - Header with title and "new chat" action
    - Message list with incremental rendering of streamed replies
    - Input box, suggested prompts and error display

All conversation logic lives in ChatState; the page only renders it.
"""
