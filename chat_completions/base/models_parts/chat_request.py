"""
ChatRequest: the immutable request sent to a chat-completions endpoint.

Construction validates the model id and every optional parameter that is
supplied. ``to_dict`` renders the wire format: snake_case keys, optional fields
omitted when absent, and the message array rendered by each message's own
``to_dict``.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from ..errors import LLMError
from .config_parameters import (
    ChatConfigParameter,
    FrequencyPenalty,
    LogitBias,
    MaxTokens,
    N,
    PresencePenalty,
    Stop,
    Temperature,
    Tools,
    TopP,
    User,
)
from .message import ChatMessage
from .tool import Tool


@dataclass(frozen=True)
class ChatRequest:
    """Chat completion request.

    Attributes:
        model: Target model identifier (non-empty).
        messages: Ordered conversation turns.
        temperature: Sampling temperature in [0, 2].
        max_tokens: Completion token cap (> 0).
        top_p: Nucleus sampling threshold in [0, 1].
        frequency_penalty: In [-2, 2].
        presence_penalty: In [-2, 2].
        stream: Whether the server should stream SSE deltas.
        n: Number of choices (> 0).
        logit_bias: Token id to bias mapping.
        user: End-user identifier (non-empty).
        stop: Stop sequences (non-empty).
        tools: Tool definitions.

    Raises:
        LLMError: ``MISSING_MODEL`` for an empty model, ``INVALID_VALUE`` for
            an out-of-range parameter.
    """

    model: str
    messages: Tuple[ChatMessage, ...]
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    stream: bool = False
    n: Optional[int] = None
    logit_bias: Optional[Dict[str, int]] = None
    user: Optional[str] = None
    stop: Optional[Tuple[str, ...]] = None
    tools: Optional[Tuple[Tool, ...]] = None

    def __post_init__(self) -> None:
        if not self.model:
            raise LLMError.missing_model()
        object.__setattr__(self, "messages", tuple(self.messages))
        # Route directly supplied fields through the same validation as
        # configuration values.
        if self.temperature is not None:
            Temperature(self.temperature)
        if self.max_tokens is not None:
            MaxTokens(self.max_tokens)
        if self.top_p is not None:
            TopP(self.top_p)
        if self.frequency_penalty is not None:
            FrequencyPenalty(self.frequency_penalty)
        if self.presence_penalty is not None:
            PresencePenalty(self.presence_penalty)
        if self.n is not None:
            N(self.n)
        if self.logit_bias is not None:
            object.__setattr__(self, "logit_bias", LogitBias(self.logit_bias).value)
        if self.user is not None:
            User(self.user)
        if self.stop is not None:
            object.__setattr__(self, "stop", Stop(self.stop).value)
        if self.tools is not None:
            object.__setattr__(self, "tools", Tools(self.tools).value)

    @classmethod
    def build(
        cls,
        model: str,
        messages: Sequence[ChatMessage],
        config: Iterable[ChatConfigParameter] = (),
        *,
        stream: bool = False,
    ) -> "ChatRequest":
        """Create a request and apply ``config`` values in order.

        Example::

            ChatRequest.build(
                "gpt-4o-mini",
                [TextMessage.user("Hello")],
                [Temperature(0.7), MaxTokens(256)],
            )
        """
        request = cls(model=model, messages=tuple(messages), stream=stream)
        for parameter in config:
            request = parameter.apply(request)
        return request

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable wire representation of the request."""
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
        }
        optional_fields = (
            ("temperature", self.temperature),
            ("max_tokens", self.max_tokens),
            ("top_p", self.top_p),
            ("frequency_penalty", self.frequency_penalty),
            ("presence_penalty", self.presence_penalty),
        )
        payload.update({k: v for k, v in optional_fields if v is not None})
        payload["stream"] = self.stream
        if self.n is not None:
            payload["n"] = self.n
        if self.logit_bias is not None:
            payload["logit_bias"] = dict(self.logit_bias)
        if self.user is not None:
            payload["user"] = self.user
        if self.stop is not None:
            payload["stop"] = list(self.stop)
        if self.tools is not None:
            payload["tools"] = [t.to_dict() for t in self.tools]
        return payload


def encode_request(request: ChatRequest) -> bytes:
    """Serialize ``request`` to UTF-8 JSON bytes.

    Raises:
        LLMError: ``ENCODING_FAILED`` when a message cannot be rendered or the
            payload is not JSON-serializable.
    """
    try:
        payload = request.to_dict()
        return json.dumps(payload, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except LLMError:
        raise
    except Exception as e:
        raise LLMError.encoding_failed(str(e) or type(e).__name__, raw=e) from e


__all__ = [
    "ChatRequest",
    "encode_request",
]
