"""
Decode target for a non-streaming chat completion response.

Attribute names match the snake_case wire fields. Unknown fields are ignored;
a missing required field or a type mismatch raises
``LLMError(DECODING_FAILED)`` and no partial value is produced.
"""
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import LLMError
from .message import Role


class _Decoded(BaseModel):
    model_config = ConfigDict(frozen=True, protected_namespaces=())


class ResponseMessage(_Decoded):
    """Assistant message of a completed choice."""

    role: Role
    content: Optional[str] = None


class Choice(_Decoded):
    index: int
    message: ResponseMessage
    finish_reason: Optional[str] = None


class Usage(_Decoded):
    """Token accounting reported by the server."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatResponse(_Decoded):
    """Non-streaming response envelope.

    Attributes:
        id: Server-assigned completion id.
        object: Object kind tag (``"chat.completion"``).
        created: Creation timestamp (Unix seconds).
        model: Model that produced the completion.
        choices: Ordered choices.
        usage: Optional token usage.
    """

    id: str
    object: str
    created: int
    model: str
    choices: List[Choice]
    usage: Optional[Usage] = None

    @property
    def first_content(self) -> Optional[str]:
        """Content of the first choice, if any."""
        return self.choices[0].message.content if self.choices else None


def decode_chat_response(data: Union[bytes, str]) -> ChatResponse:
    """Decode a JSON response body into a :class:`ChatResponse`.

    Raises:
        LLMError: ``DECODING_FAILED`` carrying the validator message.
    """
    try:
        return ChatResponse.model_validate_json(data)
    except ValidationError as e:
        raise LLMError.decoding_failed(str(e), raw=e) from e


__all__ = [
    "ResponseMessage",
    "Choice",
    "Usage",
    "ChatResponse",
    "decode_chat_response",
]
