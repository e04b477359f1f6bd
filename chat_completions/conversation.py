"""Conversation history tracker.

Keeps an ordered list of chat messages and builds requests from it. The
tracker does not talk to the network; pair it with :class:`LLMClient`::

    conversation = ChatConversation([TextMessage.system("Be brief.")])
    conversation.add_user("Hi")
    response = await client.complete(conversation.request("gpt-4o-mini"))
    conversation.add_assistant(response.first_content or "")
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .base.models import ChatConfigParameter, ChatMessage, ChatRequest, TextMessage


class ChatConversation:
    """Ordered message history with request construction helpers."""

    def __init__(self, history: Optional[Iterable[ChatMessage]] = None) -> None:
        self._history: List[ChatMessage] = list(history or ())

    @property
    def history(self) -> List[ChatMessage]:
        """A copy of the messages recorded so far."""
        return list(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def add(self, message: ChatMessage) -> None:
        self._history.append(message)

    def add_user(self, content: str) -> None:
        self.add(TextMessage.user(content))

    def add_assistant(self, content: str) -> None:
        self.add(TextMessage.assistant(content))

    def clear(self) -> None:
        self._history.clear()

    def request(
        self,
        model: str,
        *,
        stream: bool = False,
        config: Iterable[ChatConfigParameter] = (),
        additional_messages: Sequence[ChatMessage] = (),
    ) -> ChatRequest:
        """Build a request from the history followed by ``additional_messages``.

        ``additional_messages`` are not recorded in the history.
        """
        return ChatRequest.build(
            model,
            [*self._history, *additional_messages],
            config,
            stream=stream,
        )


__all__ = ["ChatConversation"]
