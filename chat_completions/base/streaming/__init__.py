"""Streaming package.

Exposes the SSE decoder, the ``ChatStream`` async sequence, its termination
causes and metrics under a single namespace.
"""

from .sse_decoder import DecoderState, SSEDecoder, iter_data_payloads, iter_deltas
from .stream_termination import StreamTermination
from .streaming_metrics import StreamMetrics
from .chat_stream import ChatStream, accumulate_text

__all__ = [
    "DecoderState",
    "SSEDecoder",
    "iter_data_payloads",
    "iter_deltas",
    "StreamTermination",
    "StreamMetrics",
    "ChatStream",
    "accumulate_text",
]
