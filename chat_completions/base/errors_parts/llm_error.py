"""
Structured client error exception type.

Every failure surfaced by the library is an `LLMError` carrying a normalized
`ErrorCode`. Configuration failures are raised at construction time; transport
and decoding failures are raised from `LLMClient.complete`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .error_code import ErrorCode


@dataclass
class LLMError(Exception):
    """Represents a structured client error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable description (validator message, transport
            error text, or violated constraint). Empty for codes that carry no
            detail such as ``RATE_LIMIT``.
        status_code: HTTP status for ``SERVER_ERROR``.
        body: Raw response body text for ``SERVER_ERROR`` (``None`` when the
            body was not valid UTF-8).
        raw: Optional original exception for diagnostics. Excluded from
            equality so two errors compare equal on their observable fields.
    """

    code: ErrorCode
    message: str = ""
    status_code: Optional[int] = None
    body: Optional[str] = None
    raw: Optional[BaseException] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.code is ErrorCode.SERVER_ERROR:
            return f"{self.code.value}: HTTP {self.status_code}: {self.body or ''}".rstrip(": ")
        if self.message:
            return f"{self.code.value}: {self.message}"
        return self.code.value

    __hash__ = Exception.__hash__

    @property
    def is_retryable(self) -> bool:
        """Hint whether a caller-side retry could succeed (no retries happen here)."""
        if self.code in (ErrorCode.RATE_LIMIT, ErrorCode.NETWORK_ERROR):
            return True
        return self.code is ErrorCode.SERVER_ERROR and (self.status_code or 0) >= 500

    # Constructors mirroring the taxonomy ---------------------------------
    @classmethod
    def invalid_url(cls, message: str = "") -> "LLMError":
        return cls(ErrorCode.INVALID_URL, message)

    @classmethod
    def encoding_failed(cls, message: str, raw: Optional[BaseException] = None) -> "LLMError":
        return cls(ErrorCode.ENCODING_FAILED, message, raw=raw)

    @classmethod
    def network_error(cls, message: str, raw: Optional[BaseException] = None) -> "LLMError":
        return cls(ErrorCode.NETWORK_ERROR, message, raw=raw)

    @classmethod
    def decoding_failed(cls, message: str, raw: Optional[BaseException] = None) -> "LLMError":
        return cls(ErrorCode.DECODING_FAILED, message, raw=raw)

    @classmethod
    def server_error(cls, status_code: int, body: Optional[str] = None) -> "LLMError":
        return cls(ErrorCode.SERVER_ERROR, status_code=status_code, body=body)

    @classmethod
    def rate_limit(cls) -> "LLMError":
        return cls(ErrorCode.RATE_LIMIT)

    @classmethod
    def invalid_response(cls, message: str = "") -> "LLMError":
        return cls(ErrorCode.INVALID_RESPONSE, message)

    @classmethod
    def invalid_value(cls, message: str) -> "LLMError":
        return cls(ErrorCode.INVALID_VALUE, message)

    @classmethod
    def missing_base_url(cls) -> "LLMError":
        return cls(ErrorCode.MISSING_BASE_URL)

    @classmethod
    def missing_model(cls) -> "LLMError":
        return cls(ErrorCode.MISSING_MODEL)


__all__ = ["LLMError"]
