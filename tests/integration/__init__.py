"""Integration tests for components working together.

Coverage:
    - FastAPI host endpoints over ASGI transport
    - Full send pipeline against the live Gemini API (when configured)
"""
