"""Gemini chat service with streaming support and search grounding.

Wraps the google-genai SDK behind a small interface the send pipeline
depends on:

1. **History conversion** - Transcript messages become ``types.Content``
   turns. The assistant role maps to Gemini's ``model`` role and an
   attached image is sent as an inline JPEG part ahead of the text.

2. **Chat sessions** - Each turn opens a fresh async chat seeded with the
   full prior transcript. The transcript is the source of truth, so no
   server-side session state is kept between turns.

3. **Streaming chunks** - SDK responses are reduced to ``StreamChunk``
   values carrying the text delta and any web sources from the grounding
   metadata.
"""

import logging
from collections.abc import AsyncIterator, Sequence

from google import genai
from google.genai import types
from google.genai.chats import AsyncChat

from zentro.agent.config import AssistantConfig, get_assistant_config
from zentro.chat.images import MODEL_IMAGE_MIME, decode_data_url
from zentro.models import Message, Role, Source, StreamChunk

logger = logging.getLogger(__name__)

_ROLE_MAP = {Role.USER: "user", Role.ASSISTANT: "model"}


def to_parts(message: Message) -> list[types.Part]:
    """Build the content parts for a message: image first, then text."""
    parts: list[types.Part] = []
    if message.image:
        parts.append(
            types.Part(
                inline_data=types.Blob(
                    data=decode_data_url(message.image),
                    mime_type=MODEL_IMAGE_MIME,
                )
            )
        )
    parts.append(types.Part(text=message.content))
    return parts


def to_content(message: Message) -> types.Content:
    return types.Content(role=_ROLE_MAP[message.role], parts=to_parts(message))


def build_history(messages: Sequence[Message]) -> list[types.Content]:
    """Convert transcript messages into Gemini chat history."""
    return [to_content(msg) for msg in messages]


def extract_sources(response: types.GenerateContentResponse) -> list[Source]:
    """Extract web citation sources from a response chunk.

    Grounding chunks without a web URI are skipped. A missing title
    falls back to the URI.
    """
    if not response.candidates:
        return []
    metadata = response.candidates[0].grounding_metadata
    if metadata is None or not metadata.grounding_chunks:
        return []

    sources: list[Source] = []
    for chunk in metadata.grounding_chunks:
        web = chunk.web
        if web is None or not web.uri:
            continue
        sources.append(Source(uri=web.uri, title=web.title or web.uri))
    return sources


def to_stream_chunk(response: types.GenerateContentResponse) -> StreamChunk:
    return StreamChunk(text=response.text or "", sources=extract_sources(response))


class ChatSession:
    """A single Gemini chat opened for one turn of the conversation."""

    def __init__(self, chat: AsyncChat) -> None:
        self._chat = chat

    async def stream_reply(self, message: Message) -> AsyncIterator[StreamChunk]:
        """Send a message and yield reply chunks as they arrive.

        Each chunk carries only the text added since the previous one.

        Args:
            message: The user's message for this turn.

        Yields:
            StreamChunk values with text deltas and web sources.
        """
        stream = await self._chat.send_message_stream(message=to_parts(message))
        async for response in stream:
            yield to_stream_chunk(response)


class GeminiChatService:
    """Service for opening streaming Gemini chats.

    Wraps the google-genai client with:
    - Transcript to history conversion
    - Fixed system instruction and Google Search grounding
    - A clean chunk interface for the send pipeline
    """

    def __init__(self, config: AssistantConfig | None = None) -> None:
        """Initialize the chat service.

        Args:
            config: Optional assistant configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_assistant_config()
        self._client = genai.Client(api_key=self._config.api_key)

    def _chat_config(self) -> types.GenerateContentConfig:
        tools = [types.Tool(google_search=types.GoogleSearch())] if self._config.enable_search else None
        return types.GenerateContentConfig(
            system_instruction=self._config.system_instruction,
            tools=tools,
        )

    def start_chat(self, history: Sequence[Message]) -> ChatSession:
        """Open a chat session seeded with the prior transcript.

        Args:
            history: Messages exchanged before the current turn.

        Returns:
            ChatSession ready to stream the next reply.
        """
        chat = self._client.aio.chats.create(
            model=self._config.model_name,
            history=build_history(history),
            config=self._chat_config(),
        )
        logger.debug(
            f"Opened chat with {self._config.model_name} ({len(history)} history messages)"
        )
        return ChatSession(chat)


def get_chat_service() -> GeminiChatService:
    """Create a chat service from the current environment.

    A new service is built for every send so a key added to the
    environment takes effect without a restart.

    Raises:
        pydantic.ValidationError: If GEMINI_API_KEY is not set.
    """
    return GeminiChatService()
