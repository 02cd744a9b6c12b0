"""Integration tests for the HTTP application and the live Gemini API."""
