"""
Normalized client error codes (taxonomy).

Defines the `ErrorCode` enumeration carried by every `LLMError`. Values are
lowercase snake_case and are considered a stable public contract for logging
and caller-side branching.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated error codes representing the closed set of failure kinds."""

    INVALID_URL = "invalid_url"
    ENCODING_FAILED = "encoding_failed"
    NETWORK_ERROR = "network_error"
    DECODING_FAILED = "decoding_failed"
    SERVER_ERROR = "server_error"
    RATE_LIMIT = "rate_limit"
    INVALID_RESPONSE = "invalid_response"
    INVALID_VALUE = "invalid_value"
    MISSING_BASE_URL = "missing_base_url"
    MISSING_MODEL = "missing_model"


__all__ = ["ErrorCode"]
