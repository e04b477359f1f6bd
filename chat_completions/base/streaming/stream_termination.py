"""Termination causes recorded by ``ChatStream``.

The delta sequence itself ends silently whatever the cause; the recorded
termination is side information for callers that need to tell a normal
``[DONE]`` apart from a dropped connection or an HTTP error.
"""
from __future__ import annotations

from enum import Enum


class StreamTermination(str, Enum):
    """Why a stream stopped producing deltas."""

    DONE = "done"
    EXHAUSTED = "exhausted"
    RATE_LIMITED = "rate_limited"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"
    SETUP_FAILED = "setup_failed"
    CANCELLED = "cancelled"

    @property
    def is_clean(self) -> bool:
        """True for ``DONE`` and ``EXHAUSTED`` (the server closed the stream)."""
        return self in (StreamTermination.DONE, StreamTermination.EXHAUSTED)


__all__ = ["StreamTermination"]
