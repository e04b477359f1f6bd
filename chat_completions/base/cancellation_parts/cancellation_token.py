"""Cooperative cancellation token implementation.

``ChatStream`` polls its token before processing each chunk read from the
network, so a ``cancel`` issued from any thread stops the stream at the next
chunk boundary and releases the HTTP response.
"""

from __future__ import annotations

from threading import Lock

from .state import State
from .cancelled_error import CancelledError


class CancellationToken:
    """A thread-safe cooperative cancellation token.

    Only the first ``cancel`` call records its reason; later calls are no-ops.
    """

    def __init__(self) -> None:
        self._state = State()
        self._lock = Lock()

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: str | None = None) -> bool:
        """Request cancellation. Returns True if this call flipped the flag."""
        with self._lock:
            if self._state.cancelled:
                return False
            self._state.cancelled = True
            self._state.reason = reason
            return True

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if token is cancelled."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "stream cancelled")

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self._state.cancelled}, reason={self._state.reason!r})"


__all__ = ["CancellationToken"]
