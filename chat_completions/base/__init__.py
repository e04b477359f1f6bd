"""
Base package.

Transport-agnostic building blocks used by ``LLMClient``:
- Errors: normalized ``LLMError`` / ``ErrorCode`` taxonomy
- Models: request, configuration values, response and delta decode targets
- HTTP: transport configuration and async client construction
- Streaming: SSE decoder and the cancellable ``ChatStream``
- Logging, timeouts and cooperative cancellation
"""

from .errors import ErrorCode, LLMError
from .models import (
    ChatDelta,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    Role,
    TextMessage,
    Tool,
    ToolFunction,
)
from .http import TransportConfig
from .timeouts import TimeoutConfig, get_timeout_config
from .cancellation import CancellationToken, CancelledError
from .streaming import ChatStream, SSEDecoder, StreamMetrics, StreamTermination

__all__ = [
    # Errors
    "ErrorCode",
    "LLMError",
    # Models
    "Role",
    "ChatMessage",
    "TextMessage",
    "Tool",
    "ToolFunction",
    "ChatRequest",
    "ChatResponse",
    "ChatDelta",
    # Transport
    "TransportConfig",
    "TimeoutConfig",
    "get_timeout_config",
    # Cancellation
    "CancellationToken",
    "CancelledError",
    # Streaming
    "ChatStream",
    "SSEDecoder",
    "StreamMetrics",
    "StreamTermination",
]
