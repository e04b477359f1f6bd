"""
Validated configuration values for a chat request.

Each value checks its own constraint when constructed and raises
``LLMError(INVALID_VALUE)`` naming the violated range and the offending value.
``apply`` returns a copy of a request with the value set; applying values in
sequence means the last writer for a field wins.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Dict, Protocol, Sequence, Tuple

from ..errors import LLMError
from .tool import Tool

if TYPE_CHECKING:
    from .chat_request import ChatRequest


class ChatConfigParameter(Protocol):
    """A configuration value that can be applied onto a request."""

    def apply(self, request: "ChatRequest") -> "ChatRequest": ...


def _require_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LLMError.invalid_value(f"{name} must be a number, got {value!r}")
    return value


def _require_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise LLMError.invalid_value(f"{name} must be an integer, got {value!r}")
    return value


def _check_range(name: str, value: Any, low: float, high: float) -> None:
    number = _require_number(name, value)
    if math.isnan(number) or not low <= number <= high:
        raise LLMError.invalid_value(f"{name} must be between {low} and {high}, got {value}")


def _check_positive(name: str, value: Any) -> None:
    if _require_int(name, value) <= 0:
        raise LLMError.invalid_value(f"{name} must be greater than 0, got {value}")


@dataclass(frozen=True)
class Temperature:
    """Sampling temperature in [0.0, 2.0]."""

    value: float

    def __post_init__(self) -> None:
        _check_range("Temperature", self.value, 0.0, 2.0)

    def apply(self, request: "ChatRequest") -> "ChatRequest":
        return replace(request, temperature=self.value)


@dataclass(frozen=True)
class MaxTokens:
    """Upper bound on generated tokens; must be positive."""

    value: int

    def __post_init__(self) -> None:
        _check_positive("MaxTokens", self.value)

    def apply(self, request: "ChatRequest") -> "ChatRequest":
        return replace(request, max_tokens=self.value)


@dataclass(frozen=True)
class TopP:
    """Nucleus sampling threshold in [0.0, 1.0]."""

    value: float

    def __post_init__(self) -> None:
        _check_range("TopP", self.value, 0.0, 1.0)

    def apply(self, request: "ChatRequest") -> "ChatRequest":
        return replace(request, top_p=self.value)


@dataclass(frozen=True)
class FrequencyPenalty:
    value: float

    def __post_init__(self) -> None:
        _check_range("FrequencyPenalty", self.value, -2.0, 2.0)

    def apply(self, request: "ChatRequest") -> "ChatRequest":
        return replace(request, frequency_penalty=self.value)


@dataclass(frozen=True)
class PresencePenalty:
    value: float

    def __post_init__(self) -> None:
        _check_range("PresencePenalty", self.value, -2.0, 2.0)

    def apply(self, request: "ChatRequest") -> "ChatRequest":
        return replace(request, presence_penalty=self.value)


@dataclass(frozen=True)
class N:
    """Number of choices to generate; must be positive."""

    value: int

    def __post_init__(self) -> None:
        _check_positive("N", self.value)

    def apply(self, request: "ChatRequest") -> "ChatRequest":
        return replace(request, n=self.value)


@dataclass(frozen=True)
class LogitBias:
    """Token id (as string) to bias mapping. Passed through unvalidated."""

    value: Dict[str, int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", dict(self.value))

    def apply(self, request: "ChatRequest") -> "ChatRequest":
        return replace(request, logit_bias=self.value)


@dataclass(frozen=True)
class User:
    """End-user identifier forwarded to the server; must be non-empty."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise LLMError.invalid_value("User identifier cannot be empty")

    def apply(self, request: "ChatRequest") -> "ChatRequest":
        return replace(request, user=self.value)


@dataclass(frozen=True)
class Stop:
    """Stop sequences; the list must be non-empty."""

    value: Tuple[str, ...]

    def __init__(self, value: Sequence[str]) -> None:
        if isinstance(value, str):
            raise LLMError.invalid_value(f"Stop sequences must be a list of strings, got {value!r}")
        sequences = tuple(value)
        if not sequences:
            raise LLMError.invalid_value("Stop sequences array cannot be empty")
        object.__setattr__(self, "value", sequences)

    def apply(self, request: "ChatRequest") -> "ChatRequest":
        return replace(request, stop=self.value)


@dataclass(frozen=True)
class Tools:
    """Tool definitions the model may call."""

    value: Tuple[Tool, ...]

    def __init__(self, value: Sequence[Tool]) -> None:
        object.__setattr__(self, "value", tuple(value))

    def apply(self, request: "ChatRequest") -> "ChatRequest":
        return replace(request, tools=self.value)


__all__ = [
    "ChatConfigParameter",
    "Temperature",
    "MaxTokens",
    "TopP",
    "FrequencyPenalty",
    "PresencePenalty",
    "N",
    "LogitBias",
    "User",
    "Stop",
    "Tools",
]
