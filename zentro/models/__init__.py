"""Pydantic models for the chat transcript and streamed replies.

Provides type safety and validation for everything that flows between
the UI, the transcript store, and the model client.

Models:
    - Message: Individual message in the transcript
    - Source: Web citation attached to an assistant reply
    - StreamChunk: One increment of a streamed reply
    - Role / SendStatus: Enumerations for speakers and pipeline state
"""

from zentro.models.schemas import Message, Role, SendStatus, Source, StreamChunk

__all__ = ["Message", "Role", "SendStatus", "Source", "StreamChunk"]
