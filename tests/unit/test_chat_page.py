"""Unit tests for chat page rendering decisions."""

import pytest_check as check

from zentro.chat.state import ChatState
from zentro.models import Message, Role, SendStatus
from zentro.ui.chat_page import INPUT_HINT, SEND_KEYS, shows_thinking


class TestThinkingIndicator:
    """Tests for when the pending-reply indicator replaces a message."""

    def test_empty_placeholder_while_sending(self) -> None:
        """The last empty assistant message shows the indicator during a send."""
        placeholder = Message(role=Role.ASSISTANT)
        state = ChatState(
            messages=(Message(role=Role.USER, content="q"), placeholder),
            status=SendStatus.SENDING,
        )

        assert shows_thinking(state, placeholder)

    def test_empty_message_when_idle(self) -> None:
        """An empty assistant message is rendered as a message once idle."""
        empty = Message(role=Role.ASSISTANT)
        state = ChatState(messages=(Message(role=Role.USER, content="q"), empty))

        assert not shows_thinking(state, empty)

    def test_only_last_message(self) -> None:
        """Earlier messages never show the indicator."""
        earlier = Message(role=Role.ASSISTANT, content="Hello")
        placeholder = Message(role=Role.ASSISTANT)
        state = ChatState(messages=(earlier, placeholder), status=SendStatus.SENDING)

        check.is_false(shows_thinking(state, earlier))
        check.is_true(shows_thinking(state, placeholder))


class TestInputKeys:
    """Tests for the message input keyboard binding."""

    def test_enter_sends_only_without_modifiers(self) -> None:
        """Shift+Enter is left to the textarea so it inserts a newline."""
        event, *modifiers = SEND_KEYS.split(".")

        check.equal(event, "keydown")
        check.is_in("enter", modifiers)
        check.is_in("exact", modifiers)
        check.less(modifiers.index("exact"), modifiers.index("prevent"))
        check.is_in("Shift + Enter", INPUT_HINT)
