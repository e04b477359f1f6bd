"""chat_completions: async client for OpenAI-compatible chat-completion APIs.

Quick start::

    from chat_completions import LLMClient, ChatRequest, TextMessage, Temperature

    async with LLMClient("https://api.openai.com/v1/chat/completions", api_key) as client:
        request = ChatRequest.build("gpt-4o-mini", [TextMessage.user("Hi")], [Temperature(0.2)])
        response = await client.complete(request)

        streaming = ChatRequest.build("gpt-4o-mini", request.messages, stream=True)
        async with client.stream(streaming) as stream:
            async for delta in stream:
                print(delta.content, end="")
"""

from .base.errors import ErrorCode, LLMError
from .base.models import (
    ChatConfigParameter,
    ChatDelta,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    Choice,
    Delta,
    DeltaChoice,
    FrequencyPenalty,
    LogitBias,
    MaxTokens,
    N,
    PresencePenalty,
    ResponseMessage,
    Role,
    Stop,
    Temperature,
    TextMessage,
    Tool,
    ToolFunction,
    Tools,
    TopP,
    Usage,
    User,
)
from .base.http import TransportConfig
from .base.timeouts import TimeoutConfig
from .base.cancellation import CancellationToken, CancelledError
from .base.streaming import ChatStream, SSEDecoder, StreamTermination
from .base.logging import configure_logger
from .client import LLMClient
from .conversation import ChatConversation

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Client
    "LLMClient",
    "ChatConversation",
    "TransportConfig",
    "TimeoutConfig",
    # Errors
    "ErrorCode",
    "LLMError",
    # Request
    "Role",
    "ChatMessage",
    "TextMessage",
    "Tool",
    "ToolFunction",
    "ChatRequest",
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
    # Response
    "ChatResponse",
    "Choice",
    "ResponseMessage",
    "Usage",
    "ChatDelta",
    "Delta",
    "DeltaChoice",
    # Streaming
    "ChatStream",
    "SSEDecoder",
    "StreamTermination",
    "CancellationToken",
    "CancelledError",
    # Logging
    "configure_logger",
]
