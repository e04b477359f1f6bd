"""
Tool definitions attached to a chat request.

Tools are encoded as ``{"type": "function", "function": {"name",
"description", "parameters"}}``. ``parameters`` is passed through untouched,
typically a JSON Schema object.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class ToolFunction:
    """Function signature exposed to the model."""

    name: str
    description: str
    parameters: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": dict(self.parameters),
        }


@dataclass(frozen=True)
class Tool:
    """A tool the model may call; only ``"function"`` tools exist today."""

    function: ToolFunction
    type: str = "function"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "function": self.function.to_dict()}


__all__ = ["Tool", "ToolFunction"]
