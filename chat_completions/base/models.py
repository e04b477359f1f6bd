"""
Request and response models public surface.

This module re-exports the one-class-per-file implementations under
``chat_completions.base.models_parts`` to preserve a stable import path.
"""

from .models_parts.message import ChatMessage, Role, TextMessage
from .models_parts.tool import Tool, ToolFunction
from .models_parts.config_parameters import (
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
from .models_parts.chat_request import ChatRequest, encode_request
from .models_parts.chat_response import (
    ChatResponse,
    Choice,
    ResponseMessage,
    Usage,
    decode_chat_response,
)
from .models_parts.chat_delta import ChatDelta, Delta, DeltaChoice, decode_chat_delta

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
