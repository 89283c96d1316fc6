"""Send pipeline: turns pending input into a streamed assistant reply.

One send runs at a time. The store's status flag is the only guard and
is checked synchronously when a send starts. Stream consumption runs in
its own task so the reply can be stopped without tearing down the page.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable, Sequence
from typing import Protocol

from zentro.agent.gemini import get_chat_service
from zentro.chat.citations import merge_sources
from zentro.chat.state import ChatStore
from zentro.models import Message, Role, SendStatus, Source, StreamChunk

logger = logging.getLogger(__name__)

IMAGE_ONLY_PROMPT = "Analyze this image"
ERROR_REPLY = "I'm sorry, I encountered an error. Please try again later."


class EmptyReplyError(RuntimeError):
    """The model finished its reply without producing any text."""


class ReplyStream(Protocol):
    def stream_reply(self, message: Message) -> AsyncIterator[StreamChunk]: ...


class ChatBackend(Protocol):
    def start_chat(self, history: Sequence[Message]) -> ReplyStream: ...


class ChatController:
    """Drives the Idle -> Sending -> Idle cycle for one chat page."""

    def __init__(
        self,
        store: ChatStore,
        backend_factory: Callable[[], ChatBackend] = get_chat_service,
    ) -> None:
        """Initialize the controller.

        Args:
            store: Transcript store the pipeline reads from and writes to.
            backend_factory: Builds the model backend for each send. Any
                error it raises (e.g. a missing API key) fails the send
                before a network call is made.
        """
        self._store = store
        self._backend_factory = backend_factory
        self._task: asyncio.Task[None] | None = None

    @property
    def is_streaming(self) -> bool:
        return self._task is not None and not self._task.done()

    async def send(self) -> None:
        """Send the pending draft and image, streaming the reply into the store.

        Does nothing if a send is already in flight or there is nothing
        to send.
        """
        state = self._store.state
        if state.is_sending or not (state.draft.strip() or state.pending_image):
            return

        history = state.messages
        text, image = self._store.take_pending()
        text = text.strip()
        user_message = Message(
            role=Role.USER,
            content=text or IMAGE_ONLY_PROMPT,
            image=image,
        )
        self._store.append(user_message)
        self._store.set_status(SendStatus.SENDING)

        placeholder_id: str | None = None
        try:
            backend = self._backend_factory()
            session = backend.start_chat(history)

            placeholder = Message(role=Role.ASSISTANT)
            placeholder_id = placeholder.id
            self._store.append(placeholder)

            self._task = asyncio.create_task(
                self._consume(session.stream_reply(user_message), placeholder_id)
            )
            await asyncio.wait({self._task})
            if self._task.cancelled():
                self._finish_stopped(placeholder_id)
            else:
                self._task.result()
        except Exception:
            logger.exception("Error calling Gemini API")
            if placeholder_id is not None:
                self._store.remove(placeholder_id)
            self._store.append(Message(role=Role.ASSISTANT, content=ERROR_REPLY))
        finally:
            if self._task is not None and not self._task.done():
                self._task.cancel()
            self._task = None
            self._store.set_status(SendStatus.IDLE)

    async def _consume(self, chunks: AsyncIterator[StreamChunk], message_id: str) -> None:
        full_response = ""
        sources: list[Source] = []
        async for chunk in chunks:
            full_response += chunk.text
            sources = merge_sources(sources, chunk.sources)
            self._store.update(
                message_id,
                content=full_response,
                sources=tuple(sources) if sources else None,
            )
        if not full_response:
            raise EmptyReplyError(f"Stream ended with no text ({len(sources)} sources)")
        logger.info(f"Reply complete: {len(full_response)} chars, {len(sources)} sources")

    def _finish_stopped(self, message_id: str) -> None:
        logger.info("Reply stopped by user")
        message = self._store.get(message_id)
        if message is not None and not message.content:
            self._store.remove(message_id)

    def stop(self) -> bool:
        """Cancel the reply currently streaming.

        Returns:
            True if a reply was in flight and has been cancelled.
        """
        task = self._task
        if task is None or task.done():
            return False
        task.cancel()
        return True

    def clear(self) -> None:
        self._store.clear()
