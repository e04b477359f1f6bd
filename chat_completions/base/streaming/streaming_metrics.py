"""Streaming metrics data structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class StreamMetrics:
    """Counters and timings collected for a single ``ChatStream``.

    Attributes:
        emitted: Deltas yielded to the consumer.
        skipped: Payloads discarded because they failed to decode.
        time_to_first_delta_ms: Latency from stream start to the first delta.
        total_duration_ms: Latency from stream start to termination.
    """

    emitted: int = 0
    skipped: int = 0
    time_to_first_delta_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "emitted_count": self.emitted,
            "skipped_count": self.skipped,
            "time_to_first_delta_ms": self.time_to_first_delta_ms,
            "total_duration_ms": self.total_duration_ms,
        }


__all__ = ["StreamMetrics"]
