"""Models parts package public surface.

Re-exports individual models so callers can import from
`chat_completions.base.models_parts` if needed, while
`chat_completions.base.models` remains the primary stable import path.
"""

from .message import ChatMessage, Role, TextMessage
from .tool import Tool, ToolFunction
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
from .chat_request import ChatRequest, encode_request
from .chat_response import ChatResponse, Choice, ResponseMessage, Usage, decode_chat_response
from .chat_delta import ChatDelta, Delta, DeltaChoice, decode_chat_delta

__all__ = [
    "ChatMessage",
    "Role",
    "TextMessage",
    "Tool",
    "ToolFunction",
    "ChatConfigParameter",
    "Temperature",
    "MaxTokens",
    "TopP",
    "FrequencyPenalty",
    "PresencePenalty",
    "N",
    "LogitBias",
    "User",
    "Stop",
    "Tools",
    "ChatRequest",
    "encode_request",
    "ChatResponse",
    "Choice",
    "ResponseMessage",
    "Usage",
    "decode_chat_response",
    "ChatDelta",
    "Delta",
    "DeltaChoice",
    "decode_chat_delta",
]
