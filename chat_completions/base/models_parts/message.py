"""
Chat message types.

Defines the `Role` enumeration, the `ChatMessage` protocol every message
variant implements, and `TextMessage`, the plain-text variant. A message is
encoded through its own ``to_dict`` so variants may carry heterogeneous content
shapes (text, content-part arrays, tool call ids, ...).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Protocol

from ..errors import LLMError


class Role(str, Enum):
    """Participant roles in a chat conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


def coerce_role(value: "Role | str") -> Role:
    """Return ``value`` as a :class:`Role`, raising ``INVALID_VALUE`` when unknown."""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError as e:
        raise LLMError.invalid_value(f"Unknown message role: {value!r}") from e


class ChatMessage(Protocol):
    """An encodable chat participant turn.

    Implementations expose a fixed ``role`` and render themselves to a
    JSON-compatible mapping; ``ChatRequest`` encodes its message array by
    calling ``to_dict`` on each element.
    """

    @property
    def role(self) -> Role: ...

    def to_dict(self) -> Dict[str, Any]: ...


@dataclass(frozen=True)
class TextMessage:
    """A chat message with plain text content.

    Attributes:
        role: Author role; plain strings such as ``"user"`` are accepted.
        content: Message text.
    """

    role: Role
    content: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", coerce_role(self.role))

    def to_dict(self) -> Dict[str, Any]:
        """Render as ``{"role": ..., "content": ...}``."""
        return {"role": self.role.value, "content": self.content}

    @classmethod
    def system(cls, content: str) -> "TextMessage":
        return cls(Role.SYSTEM, content)

    @classmethod
    def user(cls, content: str) -> "TextMessage":
        return cls(Role.USER, content)

    @classmethod
    def assistant(cls, content: str) -> "TextMessage":
        return cls(Role.ASSISTANT, content)


__all__ = [
    "Role",
    "ChatMessage",
    "TextMessage",
    "coerce_role",
]
