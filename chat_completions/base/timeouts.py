"""Timeout configuration for the HTTP transport.

The client itself never enforces a deadline: timeouts are applied by the
underlying ``httpx.AsyncClient`` through :class:`TransportConfig`. This module
centralizes the default values and their environment overrides so that no
numeric literals are scattered across call sites.

Supported environment variables (all optional, positive floats):
    CHAT_COMPLETIONS_TIMEOUT_CONNECT_SECONDS
    CHAT_COMPLETIONS_TIMEOUT_READ_SECONDS
    CHAT_COMPLETIONS_TIMEOUT_WRITE_SECONDS
    CHAT_COMPLETIONS_TIMEOUT_POOL_SECONDS

For streaming calls the read timeout bounds the idle gap between two chunks,
not the total duration of the stream.
"""
from __future__ import annotations

from dataclasses import dataclass
import os

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_timeout_seconds: Establishing the TCP/TLS connection.
        read_timeout_seconds: Waiting for the next bytes of a response.
        write_timeout_seconds: Sending the request body.
        pool_timeout_seconds: Waiting for a free connection from the pool.
    """

    connect_timeout_seconds: float = 30.0
    read_timeout_seconds: float = 60.0
    write_timeout_seconds: float = 30.0
    pool_timeout_seconds: float = 30.0

    def to_httpx(self) -> httpx.Timeout:
        """Return the equivalent ``httpx.Timeout``."""
        return httpx.Timeout(
            connect=self.connect_timeout_seconds,
            read=self.read_timeout_seconds,
            write=self.write_timeout_seconds,
            pool=self.pool_timeout_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None

_ENV_NAMES = (
    "CHAT_COMPLETIONS_TIMEOUT_CONNECT_SECONDS",
    "CHAT_COMPLETIONS_TIMEOUT_READ_SECONDS",
    "CHAT_COMPLETIONS_TIMEOUT_WRITE_SECONDS",
    "CHAT_COMPLETIONS_TIMEOUT_POOL_SECONDS",
)


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, returning ``default`` when unset or invalid."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig`.

    The cache is refreshed when any of the environment overrides changes so
    tests can adjust them with ``monkeypatch.setenv``.
    """
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - module cache
    guard = "/".join(os.getenv(name, "") for name in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED

    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=_parse_env_float(_ENV_NAMES[0], defaults.connect_timeout_seconds),
        read_timeout_seconds=_parse_env_float(_ENV_NAMES[1], defaults.read_timeout_seconds),
        write_timeout_seconds=_parse_env_float(_ENV_NAMES[2], defaults.write_timeout_seconds),
        pool_timeout_seconds=_parse_env_float(_ENV_NAMES[3], defaults.pool_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
]
