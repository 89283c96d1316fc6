"""Transcript, citation and streaming data models."""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Speaker of a transcript message."""

    USER = "user"
    ASSISTANT = "assistant"


class SendStatus(str, Enum):
    """Status values for the send pipeline."""

    IDLE = "idle"
    SENDING = "sending"


class Source(BaseModel):
    """A web reference the model grounded its answer on.

    Attributes:
        uri: Link to the cited page.
        title: Display title of the cited page.
    """

    model_config = ConfigDict(frozen=True)

    uri: str
    title: str


class Message(BaseModel):
    """A single message in the chat transcript.

    Messages are immutable. Streaming updates replace the message with
    a copy carrying the new content.

    Attributes:
        id: Opaque identifier, stable for the message's lifetime.
        role: Who wrote the message.
        content: Message text (markdown for assistant replies).
        timestamp: Creation time.
        image: Attached image as a data URL (user messages only).
        sources: Citation sources (assistant messages only).
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    role: Role
    content: str = ""
    timestamp: datetime = Field(default_factory=datetime.now)
    image: str | None = None
    sources: tuple[Source, ...] | None = None


class StreamChunk(BaseModel):
    """One unit of a streamed model reply.

    Attributes:
        text: Text added by this chunk (may be empty).
        sources: Web sources reported with this chunk.
    """

    text: str = ""
    sources: list[Source] = Field(default_factory=list)
