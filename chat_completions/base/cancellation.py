"""Cooperative cancellation primitives (public API facade).

``CancellationToken`` lets a caller stop an in-flight ``ChatStream`` from any
thread; ``CancelledError`` is the internal signal the streaming loop raises
when it observes the request.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
