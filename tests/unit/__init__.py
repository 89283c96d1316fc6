"""Unit tests for individual components in isolation.

Coverage:
    - chat/: Transcript store, send pipeline, citation merging, image payloads
    - agent/: Configuration and Gemini request/response conversion

The Gemini client is replaced with fakes or mocks; no network access.
"""
