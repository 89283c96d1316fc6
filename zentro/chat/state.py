"""Transcript store for a single chat page.

State lives in an immutable ``ChatState`` snapshot. Every operation on
``ChatStore`` builds a new snapshot and notifies subscribers, so the UI
only ever re-renders from the latest state and never mutates it.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

from zentro.models import Message, Role, SendStatus

logger = logging.getLogger(__name__)

GREETING = "Hello! I'm your Gemini-powered assistant. How can I help you today?"
CLEARED_GREETING = "Chat cleared. How else can I help you?"

Listener = Callable[["ChatState"], None]


class ChatState(BaseModel):
    """Snapshot of everything the chat page displays.

    Attributes:
        messages: Transcript in insertion order.
        draft: Text currently in the input field.
        pending_image: Image waiting to be sent, as a data URL.
        status: Whether a send is in flight.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...]
    draft: str = ""
    pending_image: str | None = None
    status: SendStatus = SendStatus.IDLE

    @property
    def is_sending(self) -> bool:
        return self.status is SendStatus.SENDING

    @property
    def is_thinking(self) -> bool:
        """True while waiting for the first text of a reply."""
        return self.is_sending and bool(self.messages) and self.messages[-1].content == ""

    @property
    def can_send(self) -> bool:
        return not self.is_sending and (bool(self.draft.strip()) or self.pending_image is not None)


def greeting(text: str = GREETING) -> tuple[Message, ...]:
    """Return a fresh transcript holding a single assistant greeting."""
    return (Message(role=Role.ASSISTANT, content=text),)


def append_message(messages: Sequence[Message], message: Message) -> tuple[Message, ...]:
    return (*messages, message)


def replace_message(
    messages: Sequence[Message], message_id: str, **changes: Any
) -> tuple[Message, ...]:
    """Return a new transcript with one message replaced by an updated copy.

    Other entries are carried over as the same objects. An unknown id
    leaves the transcript unchanged.
    """
    return tuple(
        msg.model_copy(update=changes) if msg.id == message_id else msg for msg in messages
    )


def remove_message(messages: Sequence[Message], message_id: str) -> tuple[Message, ...]:
    return tuple(msg for msg in messages if msg.id != message_id)


class ChatStore:
    """Holds the current ``ChatState`` and publishes every change."""

    def __init__(self, initial: Sequence[Message] | None = None) -> None:
        messages = tuple(initial) if initial is not None else greeting()
        self._state = ChatState(messages=messages)
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ChatState:
        return self._state

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._state.messages

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with each new state.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, **changes: Any) -> None:
        new_state = self._state.model_copy(update=changes)
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    # Pending input

    def set_draft(self, text: str) -> None:
        self._commit(draft=text)

    def attach_image(self, data_url: str) -> None:
        self._commit(pending_image=data_url)

    def remove_image(self) -> None:
        self._commit(pending_image=None)

    def take_pending(self) -> tuple[str, str | None]:
        """Return the draft and pending image, clearing both."""
        text, image = self._state.draft, self._state.pending_image
        self._commit(draft="", pending_image=None)
        return text, image

    # Transcript

    def append(self, message: Message) -> None:
        self._commit(messages=append_message(self._state.messages, message))

    def update(self, message_id: str, **changes: Any) -> None:
        self._commit(messages=replace_message(self._state.messages, message_id, **changes))

    def remove(self, message_id: str) -> None:
        self._commit(messages=remove_message(self._state.messages, message_id))

    def get(self, message_id: str) -> Message | None:
        return next((msg for msg in self._state.messages if msg.id == message_id), None)

    def clear(self, notice: str = CLEARED_GREETING) -> None:
        """Replace the whole transcript with a single fresh greeting."""
        logger.debug(f"Clearing transcript of {len(self._state.messages)} messages")
        self._commit(messages=greeting(notice))

    def set_status(self, status: SendStatus) -> None:
        self._commit(status=status)
