"""ChatStream: the cancellable async sequence returned by ``LLMClient.stream``.

Lifecycle:
    * Nothing happens until the first ``__anext__``; the HTTP request is then
      opened through the ``starter`` supplied by the client.
    * Response bytes are fed to an :class:`SSEDecoder`; deltas are yielded in
      wire order with no read-ahead beyond SSE framing.
    * The sequence ends silently on ``[DONE]``, source exhaustion, setup
      failure, transport failure, 429 or any other non-2xx status. The cause
      is recorded in :attr:`ChatStream.termination` together with
      :attr:`status_code` and :attr:`error`.
    * Not restartable: once finished, iterating again yields nothing.

Cancellation:
    * ``await stream.aclose()`` (or leaving ``async with stream:``) closes the
      HTTP response immediately.
    * A bare ``break`` out of ``async for`` cannot be observed by the stream:
      the response stays open until ``aclose()`` is awaited or the stream is
      garbage collected. Consume inside ``async with`` to release it on exit.
    * ``stream.cancel(reason)`` is thread-safe and is observed before the next
      chunk is processed.
    * Cancelling the consuming asyncio task propagates ``CancelledError`` and
      closes the response on the way out.
"""
from __future__ import annotations

import logging
import time
from contextlib import AbstractAsyncContextManager
from typing import AsyncIterator, Callable, Iterable, List

import httpx

from ..cancellation import CancellationToken, CancelledError
from ..errors import ErrorCode, LLMError, classify_status, wrap_exception
from ..logging import LogContext, normalized_log_event
from ..models import ChatDelta
from .sse_decoder import SSEDecoder
from .stream_termination import StreamTermination
from .streaming_metrics import StreamMetrics

StreamStarter = Callable[[], AbstractAsyncContextManager[httpx.Response]]


def accumulate_text(deltas: Iterable[ChatDelta]) -> str:
    """Concatenate the content fragments of ``deltas``."""
    return "".join(d.content for d in deltas)


class ChatStream:
    """Async iterator of :class:`ChatDelta` values for one streaming call."""

    def __init__(
        self,
        starter: StreamStarter,
        *,
        logger: logging.Logger,
        ctx: LogContext | None = None,
        token: CancellationToken | None = None,
    ) -> None:
        self._starter = starter
        self._logger = logger
        self._ctx = ctx or LogContext()
        self._token = token or CancellationToken()
        self._decoder = SSEDecoder(logger=logger)
        self._termination: StreamTermination | None = None
        self._status_code: int | None = None
        self._error: LLMError | None = None
        self._cancel_reason: str | None = None
        self.metrics = StreamMetrics()
        self._gen = self._run()

    # Iteration -----------------------------------------------------------
    def __aiter__(self) -> "ChatStream":
        return self

    async def __anext__(self) -> ChatDelta:
        return await self._gen.__anext__()

    async def __aenter__(self) -> "ChatStream":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Stop the stream and release the HTTP response. Idempotent."""
        await self._gen.aclose()
        if self._termination is None:
            # Closed before the first __anext__: no request was ever sent.
            self._termination = StreamTermination.CANCELLED
            self._cancel_reason = "closed before start"

    def cancel(self, reason: str | None = None) -> None:
        """Request cooperative cancellation (safe from any thread)."""
        self._token.cancel(reason)

    async def collect(self) -> List[ChatDelta]:
        """Drain the stream into a list."""
        return [delta async for delta in self]

    async def text(self) -> str:
        """Drain the stream and return the concatenated content."""
        return accumulate_text(await self.collect())

    # Side information ----------------------------------------------------
    @property
    def termination(self) -> StreamTermination | None:
        """Why the stream ended, or ``None`` while it is still running."""
        return self._termination

    @property
    def finished(self) -> bool:
        return self._termination is not None

    @property
    def status_code(self) -> int | None:
        """HTTP status of the streaming response once received."""
        return self._status_code

    @property
    def error(self) -> LLMError | None:
        """Failure behind a ``SETUP_FAILED``/``TRANSPORT_ERROR``/HTTP termination."""
        return self._error

    @property
    def cancel_reason(self) -> str | None:
        return self._cancel_reason

    # Internals -----------------------------------------------------------
    def _terminate(self, termination: StreamTermination, error: LLMError | None = None) -> None:
        if self._termination is not None:
            return
        self._termination = termination
        self._error = error

    def _record_delta(self, t0: float) -> None:
        self.metrics.emitted += 1
        if self.metrics.time_to_first_delta_ms is None:
            self.metrics.time_to_first_delta_ms = (time.perf_counter() - t0) * 1000.0

    async def _run(self) -> AsyncIterator[ChatDelta]:
        t0 = time.perf_counter()
        normalized_log_event(self._logger, "stream.start", self._ctx, phase="start", emitted=None)
        try:
            self._token.raise_if_cancelled()
            try:
                opener = self._starter()
            except LLMError as e:
                self._terminate(StreamTermination.SETUP_FAILED, e)
                return
            async with opener as response:
                self._status_code = response.status_code
                code = classify_status(response.status_code)
                if code is ErrorCode.RATE_LIMIT:
                    self._terminate(StreamTermination.RATE_LIMITED, LLMError.rate_limit())
                    return
                if code is not None:
                    self._terminate(StreamTermination.HTTP_ERROR, LLMError.server_error(response.status_code))
                    return
                async for chunk in response.aiter_bytes():
                    self._token.raise_if_cancelled()
                    for delta in self._decoder.feed(chunk):
                        self._record_delta(t0)
                        yield delta
                    if self._decoder.terminated:
                        self._terminate(StreamTermination.DONE)
                        return
                self._token.raise_if_cancelled()
                self._decoder.close()
                self._terminate(StreamTermination.EXHAUSTED)
        except CancelledError as ce:
            self._cancel_reason = self._token.reason
            self._terminate(StreamTermination.CANCELLED)
            self._logger.debug("stream cancelled: %s", ce)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            err = wrap_exception(e)
            termination = (
                StreamTermination.SETUP_FAILED if err.code is ErrorCode.INVALID_URL else StreamTermination.TRANSPORT_ERROR
            )
            self._terminate(termination, err)
        except Exception as e:  # any other failure still ends the sequence silently
            self._terminate(StreamTermination.TRANSPORT_ERROR, wrap_exception(e))
        finally:
            # Reached without a termination when the consumer closed the
            # generator or the consuming task was cancelled.
            if self._termination is None:
                self._cancel_reason = self._token.reason or "consumer closed the stream"
                self._terminate(StreamTermination.CANCELLED)
            self._decoder.close()
            self._finalize(t0)

    def _finalize(self, t0: float) -> None:
        self.metrics.skipped = self._decoder.skipped
        self.metrics.total_duration_ms = (time.perf_counter() - t0) * 1000.0
        termination = self._termination
        failed = self._error is not None
        normalized_log_event(
            self._logger,
            "stream.error" if failed else "stream.end",
            self._ctx,
            phase="finalize",
            emitted=self.metrics.emitted > 0,
            error_code=self._error.code.value if self._error else None,
            level=logging.WARNING if failed else logging.INFO,
            termination=termination.value if termination else None,
            status_code=self._status_code,
            error=str(self._error) if self._error else None,
            cancel_reason=self._cancel_reason,
            **self.metrics.to_dict(),
        )


__all__ = ["ChatStream", "StreamStarter", "accumulate_text"]
