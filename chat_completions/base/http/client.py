"""HTTP transport configuration and client construction.

Purpose:
    Build the single ``httpx.AsyncClient`` an ``LLMClient`` owns for its
    lifetime. Timeouts derive from :func:`get_timeout_config` unless the caller
    supplies its own; no numeric literals are introduced here.

External dependencies:
    - ``httpx`` for the asynchronous HTTP client.

Lifecycle & cleanup:
    - The owning ``LLMClient`` closes the client via ``aclose()`` or its async
      context manager. An externally supplied ``httpx.AsyncClient`` is never
      closed by the library.

Thread-safety:
    ``httpx.AsyncClient`` is safe for concurrent requests on one event loop,
    which is the sharing model of ``LLMClient``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

import httpx

from ..timeouts import get_timeout_config


@dataclass(frozen=True)
class TransportConfig:
    """Options for the HTTP transport owned by a client.

    Attributes:
        timeout: Explicit ``httpx.Timeout`` or seconds. ``None`` uses
            :func:`get_timeout_config`.
        headers: Extra headers sent on every request. The ``Authorization``,
            ``Content-Type`` and ``Accept`` headers set per call take precedence.
        verify: TLS verification flag or CA bundle path.
        follow_redirects: Whether httpx follows redirects.
        transport: Optional ``httpx.AsyncBaseTransport`` (e.g.
            ``httpx.MockTransport`` in tests, or a transport with custom limits).
        http_client: Pre-built ``httpx.AsyncClient`` to use as-is. When set,
            the other options are ignored and the client is not closed by
            the library.
    """

    timeout: Optional[Union[httpx.Timeout, float]] = None
    headers: Dict[str, str] = field(default_factory=dict)
    verify: Union[bool, str] = True
    follow_redirects: bool = False
    transport: Optional[httpx.AsyncBaseTransport] = None
    http_client: Optional[httpx.AsyncClient] = None

    def resolved_timeout(self) -> httpx.Timeout:
        """Return the effective timeout for the transport."""
        if self.timeout is None:
            return get_timeout_config().to_httpx()
        if isinstance(self.timeout, httpx.Timeout):
            return self.timeout
        return httpx.Timeout(self.timeout)


def build_async_client(config: Optional[TransportConfig] = None) -> httpx.AsyncClient:
    """Return the ``httpx.AsyncClient`` described by ``config``.

    Parameters:
        config: Transport options; defaults to ``TransportConfig()``.

    Returns:
        ``config.http_client`` when supplied, otherwise a new client.
    """
    cfg = config or TransportConfig()
    if cfg.http_client is not None:
        return cfg.http_client
    kwargs = {
        "timeout": cfg.resolved_timeout(),
        "headers": dict(cfg.headers),
        "follow_redirects": cfg.follow_redirects,
    }
    if cfg.transport is not None:
        kwargs["transport"] = cfg.transport
    else:
        kwargs["verify"] = cfg.verify
    return httpx.AsyncClient(**kwargs)


def owns_client(config: Optional[TransportConfig]) -> bool:
    """Whether a client built from ``config`` should be closed by its owner."""
    return config is None or config.http_client is None


__all__ = ["TransportConfig", "build_async_client", "owns_client"]
