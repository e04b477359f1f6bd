"""Cancellation error type.

Raised inside the streaming loop when a ``CancellationToken`` has been
cancelled. It never escapes to stream consumers: the stream ends cleanly and
records the cancellation as its termination cause.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when a stream observes a cooperative cancellation request.

    Distinct from ``asyncio.CancelledError``: task cancellation is driven by
    the event loop, while this error reflects a caller calling
    ``ChatStream.cancel()`` possibly from another thread.
    """


__all__ = ["CancelledError"]
