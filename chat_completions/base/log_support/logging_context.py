"""Per-call fields attached to every chat and stream log event.

The client fills ``model`` and the endpoint ``host`` before the request is
sent, then ``request_id`` (``x-request-id`` response header) and
``response_id`` (completion id) as they become known. The credential is never
part of the context.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Identifies one ``complete`` or ``stream`` call in structured logs.

    Attributes:
        model: Model id of the request.
        host: Host part of the endpoint URL (``None`` when the URL is invalid).
        request_id: Server request id, when the response carries one.
        response_id: ``id`` of the decoded completion.
        extra: Additional caller fields merged into each event.
    """

    model: Optional[str] = None
    host: Optional[str] = None
    request_id: Optional[str] = None
    response_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to event fields; ``extra`` is merged in and ``None`` values dropped."""
        fields = asdict(self)
        fields.update(fields.pop("extra") or {})
        return {k: v for k, v in fields.items() if v is not None}


__all__ = ["LogContext"]
