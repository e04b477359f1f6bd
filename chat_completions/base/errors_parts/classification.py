"""
Error classification helpers mapping HTTP statuses and transport exceptions
to normalized ErrorCode values.
"""
from __future__ import annotations

from typing import Optional

import httpx

from .error_code import ErrorCode
from .llm_error import LLMError


def is_success(status: int) -> bool:
    """Return True for 2xx statuses."""
    return 200 <= status <= 299


def classify_status(status: int) -> Optional[ErrorCode]:
    """Map an HTTP status to an ``ErrorCode``.

    Returns ``None`` for 2xx; ``RATE_LIMIT`` for 429 specifically; every other
    status is a ``SERVER_ERROR``.
    """
    if is_success(status):
        return None
    if status == 429:
        return ErrorCode.RATE_LIMIT
    return ErrorCode.SERVER_ERROR


def decode_body_text(content: bytes) -> Optional[str]:
    """Return the response body as text, or ``None`` when it is not valid UTF-8."""
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        return None


def error_for_response(status: int, content: bytes) -> Optional[LLMError]:
    """Build the ``LLMError`` for a non-2xx response (``None`` on success)."""
    code = classify_status(status)
    if code is None:
        return None
    if code is ErrorCode.RATE_LIMIT:
        return LLMError.rate_limit()
    return LLMError.server_error(status, decode_body_text(content))


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify a transport exception into an :class:`ErrorCode`.

    Precedence:
        1. LLMError passthrough.
        2. URL problems detected by httpx (``InvalidURL``, ``UnsupportedProtocol``).
        3. Any other exception raised while talking to the server.
    """
    if isinstance(exc, LLMError):
        return exc.code
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return ErrorCode.INVALID_URL
    return ErrorCode.NETWORK_ERROR


def wrap_exception(exc: BaseException) -> LLMError:
    """Return ``exc`` as an ``LLMError`` using :func:`classify_exception`."""
    if isinstance(exc, LLMError):
        return exc
    code = classify_exception(exc)
    return LLMError(code=code, message=str(exc) or type(exc).__name__, raw=exc)


__all__ = [
    "is_success",
    "classify_status",
    "decode_body_text",
    "error_for_response",
    "classify_exception",
    "wrap_exception",
]
