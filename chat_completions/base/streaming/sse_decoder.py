"""Incremental Server-Sent Events decoder for chat completion streams.

Bytes arrive at arbitrary network granularity, so the decoder keeps a single
text buffer of everything not yet resolved into a complete event. An event
ends at a blank line (``"\\n\\n"``). Within an event, only lines starting with
``"data: "`` carry a payload; other lines (comments, ``event:``/``id:``
fields, keep-alives) are ignored. The payload ``[DONE]`` ends the stream.

Policy for malformed payloads: a payload that fails to decode as a
``ChatDelta`` is skipped and counted, never fatal to the stream.

States::

    BUFFERING --(blank line)--> emit 0..n deltas --> BUFFERING
    BUFFERING --([DONE] | close() | upstream failure)--> TERMINATED

``TERMINATED`` is final: further input is ignored.
"""
from __future__ import annotations

import codecs
import logging
from enum import Enum
from typing import AsyncIterable, AsyncIterator, Iterator, List, Optional, Union

from ..errors import LLMError
from ..logging import log_event
from ..models import ChatDelta, decode_chat_delta

EVENT_DELIMITER = "\n\n"
DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"


class DecoderState(str, Enum):
    BUFFERING = "buffering"
    TERMINATED = "terminated"


def iter_data_payloads(event: str) -> Iterator[str]:
    """Yield the ``data: `` payloads of one raw event, in line order."""
    for line in event.split("\n"):
        if line.startswith(DATA_PREFIX):
            yield line[len(DATA_PREFIX):]


class SSEDecoder:
    """Turns a chunked SSE byte stream into ``ChatDelta`` values.

    Usage::

        decoder = SSEDecoder()
        for chunk in chunks:
            for delta in decoder.feed(chunk):
                ...
            if decoder.terminated:
                break
        decoder.close()

    Attributes:
        decoded: Number of payloads successfully decoded.
        skipped: Number of payloads discarded because they failed to decode.
        saw_done: Whether the ``[DONE]`` sentinel ended the stream.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._buffer = ""
        self._scan_from = 0
        self._utf8 = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._logger = logger
        self.state = DecoderState.BUFFERING
        self.decoded = 0
        self.skipped = 0
        self.saw_done = False

    @property
    def terminated(self) -> bool:
        return self.state is DecoderState.TERMINATED

    @property
    def pending(self) -> str:
        """Buffered text of the event still being received."""
        return self._buffer

    def feed(self, chunk: Union[bytes, bytearray, str]) -> List[ChatDelta]:
        """Append ``chunk`` and return the deltas of every event it completes.

        Deltas decoded before a ``[DONE]`` in the same chunk are returned;
        nothing after the sentinel is processed.
        """
        if self.terminated:
            return []
        text = chunk if isinstance(chunk, str) else self._utf8.decode(bytes(chunk))
        if not text:
            return []
        self._buffer += text

        deltas: List[ChatDelta] = []
        while True:
            end = self._buffer.find(EVENT_DELIMITER, self._scan_from)
            if end < 0:
                # A delimiter may straddle this chunk and the next one.
                self._scan_from = max(0, len(self._buffer) - len(EVENT_DELIMITER) + 1)
                return deltas
            event = self._buffer[:end]
            self._buffer = self._buffer[end + len(EVENT_DELIMITER):]
            self._scan_from = 0
            for payload in iter_data_payloads(event):
                if payload == DONE_SENTINEL:
                    self.saw_done = True
                    self._terminate()
                    return deltas
                delta = self._decode(payload)
                if delta is not None:
                    deltas.append(delta)

    def close(self) -> None:
        """Mark the source exhausted; an incomplete trailing event is discarded."""
        if self.terminated:
            return
        self._utf8.decode(b"", final=True)
        self._terminate()

    def _terminate(self) -> None:
        self.state = DecoderState.TERMINATED
        self._buffer = ""
        self._scan_from = 0

    def _decode(self, payload: str) -> Optional[ChatDelta]:
        try:
            delta = decode_chat_delta(payload)
        except LLMError as e:
            self.skipped += 1
            if self._logger is not None:
                log_event(
                    self._logger,
                    "stream.decode_skipped",
                    level=logging.DEBUG,
                    payload_chars=len(payload),
                    error=e.message.splitlines()[0] if e.message else None,
                )
            return None
        self.decoded += 1
        return delta


async def iter_deltas(
    chunks: AsyncIterable[Union[bytes, str]],
    decoder: Optional[SSEDecoder] = None,
) -> AsyncIterator[ChatDelta]:
    """Decode an async byte source into deltas until ``[DONE]`` or exhaustion."""
    decoder = decoder or SSEDecoder()
    async for chunk in chunks:
        for delta in decoder.feed(chunk):
            yield delta
        if decoder.terminated:
            return
    decoder.close()


__all__ = [
    "DecoderState",
    "SSEDecoder",
    "iter_data_payloads",
    "iter_deltas",
    "EVENT_DELIMITER",
    "DATA_PREFIX",
    "DONE_SENTINEL",
]
