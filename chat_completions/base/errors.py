"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``chat_completions.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.llm_error import LLMError
from .errors_parts.classification import (
    classify_exception,
    classify_status,
    error_for_response,
    is_success,
    wrap_exception,
)

__all__ = [
    "ErrorCode",
    "LLMError",
    "classify_exception",
    "classify_status",
    "error_for_response",
    "is_success",
    "wrap_exception",
]
