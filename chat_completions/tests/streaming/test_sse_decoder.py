"""SSEDecoder framing, payload extraction and termination.

Covers:
- single chunk with one delta and the [DONE] sentinel
- the same body split at every byte offset
- multi-byte UTF-8 characters split across chunks
- malformed payloads skipped without aborting
- non-data lines ignored, nothing processed after [DONE]
"""

from __future__ import annotations

import pytest

from chat_completions.base.streaming import DecoderState, SSEDecoder, iter_data_payloads, iter_deltas
from chat_completions.tests.helpers import DONE_EVENT, delta_event


def _contents(deltas):
    return [d.content for d in deltas]


def test_single_chunk_hello_then_done():
    decoder = SSEDecoder()
    chunk = 'data: {"choices":[{"index":0,"delta":{"content":"Hello"}}]}\n\ndata: [DONE]\n\n'
    deltas = decoder.feed(chunk.encode("utf-8"))
    assert _contents(deltas) == ["Hello"]  # nosec B101
    assert decoder.terminated  # nosec B101
    assert decoder.saw_done  # nosec B101
    assert decoder.feed(delta_event("late").encode()) == []  # nosec B101


def test_split_at_every_offset_yields_same_sequence():
    body = (delta_event("Hel", role="assistant") + delta_event("lo, ") + delta_event("wörld ✓") + DONE_EVENT).encode("utf-8")
    for i in range(1, len(body)):
        decoder = SSEDecoder()
        deltas = decoder.feed(body[:i]) + decoder.feed(body[i:])
        assert _contents(deltas) == ["Hel", "lo, ", "wörld ✓"], f"split at {i}"  # nosec B101
        assert decoder.saw_done  # nosec B101


def test_byte_by_byte_feed():
    body = (delta_event("a") + delta_event("é") + DONE_EVENT).encode("utf-8")
    decoder = SSEDecoder()
    deltas = []
    for i in range(len(body)):
        deltas.extend(decoder.feed(body[i:i + 1]))
    assert _contents(deltas) == ["a", "é"]  # nosec B101
    assert decoder.state is DecoderState.TERMINATED  # nosec B101


def test_several_events_in_one_chunk():
    decoder = SSEDecoder()
    deltas = decoder.feed((delta_event("a") + delta_event("b") + delta_event("c")).encode())
    assert _contents(deltas) == ["a", "b", "c"]  # nosec B101
    assert not decoder.terminated  # nosec B101


def test_partial_event_is_buffered_until_delimiter():
    decoder = SSEDecoder()
    event = delta_event("wait")
    assert decoder.feed(event[:-1]) == []  # nosec B101
    assert decoder.pending == event[:-1]  # nosec B101
    assert _contents(decoder.feed("\n")) == ["wait"]  # nosec B101
    assert decoder.pending == ""  # nosec B101


def test_malformed_payload_skipped_then_next_decoded():
    decoder = SSEDecoder()
    deltas = decoder.feed(b"data: {not json}\n\n" + delta_event("ok").encode())
    assert _contents(deltas) == ["ok"]  # nosec B101
    assert decoder.skipped == 1  # nosec B101
    assert decoder.decoded == 1  # nosec B101


def test_malformed_line_within_same_event_does_not_drop_following_line():
    decoder = SSEDecoder()
    event = 'data: garbage\ndata: {"choices":[{"index":0,"delta":{"content":"x"}}]}\n\n'
    assert _contents(decoder.feed(event)) == ["x"]  # nosec B101


def test_non_data_lines_are_ignored():
    decoder = SSEDecoder()
    chunk = (
        ": keep-alive\n\n"
        "event: message\nid: 7\n" + delta_event("hi") +
        "retry: 1000\n\n"
        "data:no-space\n\n"
    )
    assert _contents(decoder.feed(chunk)) == ["hi"]  # nosec B101
    assert decoder.skipped == 0  # nosec B101


def test_deltas_before_done_in_same_event_are_kept():
    decoder = SSEDecoder()
    event = 'data: {"choices":[{"index":0,"delta":{"content":"last"}}]}\ndata: [DONE]\ndata: {"choices":[]}\n\n'
    assert _contents(decoder.feed(event)) == ["last"]  # nosec B101
    assert decoder.terminated  # nosec B101


def test_close_discards_incomplete_trailing_event():
    decoder = SSEDecoder()
    assert _contents(decoder.feed(delta_event("a") + delta_event("b")[:-2])) == ["a"]  # nosec B101
    decoder.close()
    assert decoder.terminated  # nosec B101
    assert not decoder.saw_done  # nosec B101
    assert decoder.feed(b"\n\n") == []  # nosec B101


def test_invalid_utf8_is_replaced_not_fatal():
    decoder = SSEDecoder()
    deltas = decoder.feed(b"data: \xff\xfe\n\n" + delta_event("fine").encode())
    assert _contents(deltas) == ["fine"]  # nosec B101
    assert decoder.skipped == 1  # nosec B101


def test_iter_data_payloads():
    assert list(iter_data_payloads("event: x\ndata: one\n: c\ndata: two")) == ["one", "two"]  # nosec B101


@pytest.mark.asyncio
async def test_iter_deltas_over_async_source():
    async def source():
        yield delta_event("a").encode()
        yield DONE_EVENT.encode()
        yield delta_event("never").encode()

    got = [d.content async for d in iter_deltas(source())]
    assert got == ["a"]  # nosec B101


@pytest.mark.asyncio
async def test_iter_deltas_exhaustion_ends_cleanly():
    decoder = SSEDecoder()

    async def source():
        yield delta_event("a").encode()
        yield b"data: {\"choices\""

    got = [d.content async for d in iter_deltas(source(), decoder)]
    assert got == ["a"]  # nosec B101
    assert decoder.terminated  # nosec B101
    assert not decoder.saw_done  # nosec B101
