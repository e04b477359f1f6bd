"""Test helpers: fake streaming bodies, SSE event builders and response fixtures.

HTTP is faked with ``httpx.MockTransport``; no test touches the network.
:class:`ChunkedStream` replays fixed chunks and records whether the response
was closed.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional, Sequence

import httpx

BASE_URL = "https://llm.test/v1/chat/completions"
API_KEY = "sk-test-key"  # pragma: allowlist secret - fake credential


class ChunkedStream(httpx.AsyncByteStream):
    """Async response body yielding ``chunks`` one by one.

    ``fail_after`` raises ``httpx.ReadError`` once that many chunks were sent.
    """

    def __init__(self, chunks: Sequence[bytes], fail_after: Optional[int] = None) -> None:
        self._chunks = list(chunks)
        self._fail_after = fail_after
        self.sent = 0
        self.closed = False

    async def __aiter__(self):
        for chunk in self._chunks:
            if self._fail_after is not None and self.sent >= self._fail_after:
                raise httpx.ReadError("connection reset by peer")
            self.sent += 1
            yield chunk

    async def aclose(self) -> None:
        self.closed = True


def delta_event(content: Optional[str] = None, *, role: Optional[str] = None, finish_reason: Optional[str] = None) -> str:
    """Render one SSE event carrying a single-choice delta."""
    delta: Dict[str, Any] = {}
    if content is not None:
        delta["content"] = content
    if role is not None:
        delta["role"] = role
    payload = {"choices": [{"index": 0, "delta": delta, "finish_reason": finish_reason}]}
    return f"data: {json.dumps(payload, ensure_ascii=False)}\n\n"


DONE_EVENT = "data: [DONE]\n\n"


def completion_body(content: Optional[str] = "Hello there", **overrides: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o-mini",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 9, "completion_tokens": 3, "total_tokens": 12},
    }
    body.update(overrides)
    return body


class RecordingHandler:
    """MockTransport handler that records requests and replays one response factory."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self._respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last.content)


