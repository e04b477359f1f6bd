"""Error taxonomy and classification helpers."""

from __future__ import annotations

import httpx
import pytest

from chat_completions import ErrorCode, LLMError
from chat_completions.base.errors import (
    classify_exception,
    classify_status,
    error_for_response,
    is_success,
    wrap_exception,
)


@pytest.mark.parametrize("status", [200, 201, 204, 299])
def test_success_statuses(status):
    assert is_success(status)  # nosec B101
    assert classify_status(status) is None  # nosec B101


@pytest.mark.parametrize(
    "status,code",
    [
        (429, ErrorCode.RATE_LIMIT),
        (400, ErrorCode.SERVER_ERROR),
        (401, ErrorCode.SERVER_ERROR),
        (500, ErrorCode.SERVER_ERROR),
        (503, ErrorCode.SERVER_ERROR),
        (302, ErrorCode.SERVER_ERROR),
    ],
)
def test_classify_status(status, code):
    assert classify_status(status) is code  # nosec B101


def test_rate_limit_ignores_body():
    err = error_for_response(429, b'{"error": "slow down"}')
    assert err == LLMError.rate_limit()  # nosec B101


def test_server_error_carries_status_and_body():
    err = error_for_response(500, b"boom")
    assert err == LLMError.server_error(500, "boom")  # nosec B101
    assert str(err) == "server_error: HTTP 500: boom"  # nosec B101


def test_server_error_body_none_when_not_utf8():
    err = error_for_response(502, b"\xff\xfe\xfa")
    assert err is not None  # nosec B101
    assert err.status_code == 502  # nosec B101
    assert err.body is None  # nosec B101


def test_error_for_success_is_none():
    assert error_for_response(200, b"{}") is None  # nosec B101


def test_classify_exception_precedence():
    assert classify_exception(LLMError.missing_model()) is ErrorCode.MISSING_MODEL  # nosec B101
    assert classify_exception(httpx.UnsupportedProtocol("ftp")) is ErrorCode.INVALID_URL  # nosec B101
    assert classify_exception(httpx.ConnectError("refused")) is ErrorCode.NETWORK_ERROR  # nosec B101
    assert classify_exception(OSError("broken pipe")) is ErrorCode.NETWORK_ERROR  # nosec B101


def test_wrap_exception_keeps_description_and_cause():
    exc = httpx.ConnectError("connection refused")
    err = wrap_exception(exc)
    assert err.code is ErrorCode.NETWORK_ERROR  # nosec B101
    assert err.message == "connection refused"  # nosec B101
    assert err.raw is exc  # nosec B101
    assert wrap_exception(err) is err  # nosec B101


def test_llm_error_is_exception_and_formats():
    err = LLMError.invalid_value("Temperature must be between 0.0 and 2.0, got 3")
    assert isinstance(err, Exception)  # nosec B101
    assert str(err) == "invalid_value: Temperature must be between 0.0 and 2.0, got 3"  # nosec B101
    assert str(LLMError.missing_base_url()) == "missing_base_url"  # nosec B101


def test_retryable_hints():
    assert LLMError.rate_limit().is_retryable  # nosec B101
    assert LLMError.network_error("reset").is_retryable  # nosec B101
    assert LLMError.server_error(503).is_retryable  # nosec B101
    assert not LLMError.server_error(400, "bad").is_retryable  # nosec B101
    assert not LLMError.decoding_failed("bad json").is_retryable  # nosec B101


def test_equality_ignores_raw():
    assert LLMError.network_error("x", raw=ValueError()) == LLMError.network_error("x")  # nosec B101
