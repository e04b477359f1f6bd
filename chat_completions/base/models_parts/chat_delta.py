"""
Decode target for one streamed SSE event.

Each ``ChatDelta`` is standalone: accumulating content across deltas is the
caller's responsibility.
"""
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import ValidationError

from ..errors import LLMError
from .chat_response import _Decoded
from .message import Role


class Delta(_Decoded):
    """Incremental message fragment; both fields are optional."""

    content: Optional[str] = None
    role: Optional[Role] = None


class DeltaChoice(_Decoded):
    index: int
    delta: Delta
    finish_reason: Optional[str] = None


class ChatDelta(_Decoded):
    """Streaming delta envelope."""

    choices: List[DeltaChoice]

    @property
    def content(self) -> str:
        """Concatenated content fragments of all choices ("" when none)."""
        return "".join(c.delta.content for c in self.choices if c.delta.content)

    @property
    def finish_reason(self) -> Optional[str]:
        """First finish reason reported by any choice."""
        return next((c.finish_reason for c in self.choices if c.finish_reason), None)


def decode_chat_delta(data: Union[bytes, str]) -> ChatDelta:
    """Decode one SSE ``data:`` payload into a :class:`ChatDelta`.

    Raises:
        LLMError: ``DECODING_FAILED`` carrying the validator message.
    """
    try:
        return ChatDelta.model_validate_json(data)
    except ValidationError as e:
        raise LLMError.decoding_failed(str(e), raw=e) from e


__all__ = [
    "Delta",
    "DeltaChoice",
    "ChatDelta",
    "decode_chat_delta",
]
