"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `chat_completions.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .llm_error import LLMError
from .classification import classify_exception, classify_status

__all__ = ["ErrorCode", "LLMError", "classify_exception", "classify_status"]
