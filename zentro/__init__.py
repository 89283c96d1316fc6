"""Zentro - multimodal chat assistant backed by Google Gemini.

Combines NiceGUI for the chat interface, FastAPI for hosting,
google-genai for streaming model access, and Pydantic for state and config.

Components:
    - agent: Gemini client wrapper and configuration
    - chat: Transcript store, citation merging, and the send pipeline
    - ui: Web interface for chat interactions
    - api: FastAPI host application
    - models: Message and stream schemas
"""

__version__ = "0.1.0"
