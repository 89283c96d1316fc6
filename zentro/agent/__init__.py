"""Gemini model access for the chat assistant.

Responsibilities:
    - Assistant configuration loaded from the environment
    - Transcript to Gemini history conversion
    - Chat sessions with system instruction and Google Search grounding
    - Streaming reply chunks with citation extraction

Maintains clean separation from the transcript store and the UI.
"""

from zentro.agent.config import AssistantConfig, get_assistant_config
from zentro.agent.gemini import ChatSession, GeminiChatService, get_chat_service

__all__ = [
    "AssistantConfig",
    "ChatSession",
    "GeminiChatService",
    "get_assistant_config",
    "get_chat_service",
]
