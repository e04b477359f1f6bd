"""
LLMClient: async transport client for OpenAI-compatible chat completions.

Purpose:
    Encode a :class:`ChatRequest`, POST it to the configured endpoint with a
    static bearer credential, and either decode a buffered
    :class:`ChatResponse` (``complete``) or hand the response byte stream to
    the SSE decoder (``stream``).

Error policy:
    ``complete`` raises :class:`LLMError` with a normalized ``ErrorCode``.
    ``stream`` never raises into the consumer; failures end the sequence and
    are recorded on the returned :class:`ChatStream`.

Concurrency:
    After construction the client only reads its base URL, credential and
    ``httpx.AsyncClient``; concurrent ``complete``/``stream`` calls share the
    HTTP client and keep all per-call state local. No retries are performed.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .base.cancellation import CancellationToken
from .base.errors import LLMError, error_for_response, wrap_exception
from .base.http import TransportConfig, build_async_client, owns_client
from .base.logging import LogContext, get_logger, normalized_log_event
from .base.models import ChatRequest, ChatResponse, decode_chat_response, encode_request
from .base.streaming import ChatStream
from .config import get_client_config

JSON_CONTENT_TYPE = "application/json"
EVENT_STREAM_CONTENT_TYPE = "text/event-stream"


class LLMClient:
    """Client for one chat-completions endpoint.

    Parameters:
        base_url: Full endpoint URL requests are POSTed to, e.g.
            ``https://api.openai.com/v1/chat/completions``.
        api_key: Bearer credential. Not validated; an empty key is sent as-is
            and rejected by the server.
        transport_config: Optional :class:`TransportConfig` (timeouts, extra
            headers, injected transport or client).

    Raises:
        LLMError: ``MISSING_BASE_URL`` when ``base_url`` is empty.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        transport_config: Optional[TransportConfig] = None,
    ) -> None:
        if not base_url:
            raise LLMError.missing_base_url()
        self._base_url = base_url
        self._api_key = api_key
        self._http = build_async_client(transport_config)
        self._owns_http = owns_client(transport_config)
        self._logger = get_logger("chat_completions.client")

    @classmethod
    def from_env(
        cls, transport_config: Optional[TransportConfig] = None, **overrides: Any
    ) -> "LLMClient":
        """Build a client from :func:`get_client_config` (defaults, env, overrides)."""
        cfg = get_client_config(overrides)
        return cls(cfg["base_url"], cfg.get("api_key") or "", transport_config)

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"LLMClient(base_url={self._base_url!r})"

    # Lifecycle -----------------------------------------------------------
    async def aclose(self) -> None:
        """Close the owned HTTP client; externally supplied clients are left open."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "LLMClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # Request construction ------------------------------------------------
    def _endpoint(self) -> httpx.URL:
        """Parse the base URL, raising ``INVALID_URL`` when it cannot be requested."""
        try:
            url = httpx.URL(self._base_url)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise LLMError.invalid_url(str(e)) from e
        if url.scheme not in ("http", "https") or not url.host:
            raise LLMError.invalid_url(f"Not an absolute http(s) URL: {self._base_url!r}")
        return url

    def _headers(self, *, stream: bool) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": JSON_CONTENT_TYPE,
        }
        if stream:
            headers["Accept"] = EVENT_STREAM_CONTENT_TYPE
        return headers

    def _prepare(self, request: ChatRequest) -> tuple[httpx.URL, bytes]:
        if self._http.is_closed:
            raise LLMError.network_error("client has been closed")
        return self._endpoint(), encode_request(request)

    def _context(self, request: ChatRequest) -> LogContext:
        ctx = LogContext(model=request.model)
        try:
            ctx.host = httpx.URL(self._base_url).host or None
        except (httpx.InvalidURL, TypeError, ValueError):
            ctx.host = None
        return ctx

    # Operations ----------------------------------------------------------
    async def complete(self, request: ChatRequest) -> ChatResponse:
        """Send ``request`` and return the decoded response.

        Raises:
            LLMError: ``INVALID_URL``, ``ENCODING_FAILED``, ``NETWORK_ERROR``,
                ``RATE_LIMIT``, ``SERVER_ERROR`` (status and body text) or
                ``DECODING_FAILED``. Calling after ``aclose()`` raises
                ``NETWORK_ERROR``.
        """
        ctx = self._context(request)
        normalized_log_event(self._logger, "chat.start", ctx, phase="start", emitted=None)
        try:
            url, body = self._prepare(request)
            try:
                response = await self._http.post(url, content=body, headers=self._headers(stream=False))
            except httpx.HTTPError as e:
                raise wrap_exception(e) from e
            ctx.request_id = response.headers.get("x-request-id")
            error = error_for_response(response.status_code, response.content)
            if error is not None:
                raise error
            result = decode_chat_response(response.content)
        except LLMError as e:
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                emitted=False,
                error_code=e.code.value,
                status_code=e.status_code,
                level=logging.WARNING,
            )
            raise
        ctx.response_id = result.id
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=True,
            status_code=response.status_code,
            choices=len(result.choices),
            total_tokens=result.usage.total_tokens if result.usage else None,
        )
        return result

    def stream(self, request: ChatRequest, *, token: Optional[CancellationToken] = None) -> ChatStream:
        """Return a lazy :class:`ChatStream` of deltas for ``request``.

        Nothing is sent until the stream is first iterated. Setup failures
        (invalid URL, encoding), transport failures and non-2xx statuses end
        the sequence without yielding; inspect ``stream.termination`` and
        ``stream.error`` to tell them apart from a normal ``[DONE]``.

        Use the stream as an async context manager so the HTTP response is
        released when the block exits, including after an early ``break``::

            async with client.stream(request) as stream:
                async for delta in stream:
                    if delta.finish_reason:
                        break

        Parameters:
            request: Request to send. Its ``stream`` flag is sent as given.
            token: Optional shared :class:`CancellationToken`.
        """

        def _open():
            url, body = self._prepare(request)
            return self._http.stream("POST", url, content=body, headers=self._headers(stream=True))

        return ChatStream(_open, logger=self._logger, ctx=self._context(request), token=token)


__all__ = ["LLMClient"]
