"""Internal state holder for cancellation tokens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class State:
    """Cancellation flag plus the reason recorded by the first ``cancel`` call."""

    cancelled: bool = False
    reason: Optional[str] = None


__all__ = ["State"]
