"""Pytest fixtures for the chat_completions test suite."""

from __future__ import annotations

from typing import Callable, Iterator

import httpx
import pytest

from chat_completions import LLMClient, TransportConfig
from chat_completions.tests.helpers import API_KEY, BASE_URL


@pytest.fixture()
def make_client() -> Iterator[Callable[..., LLMClient]]:
    """Return a factory building an ``LLMClient`` backed by a MockTransport handler."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        base_url: str = BASE_URL,
        api_key: str = API_KEY,
    ) -> LLMClient:
        config = TransportConfig(transport=httpx.MockTransport(handler))
        return LLMClient(base_url, api_key, config)

    yield _make


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep real credentials and log level overrides out of the tests."""
    for name in (
        "CHAT_COMPLETIONS_BASE_URL",
        "CHAT_COMPLETIONS_API_KEY",
        "OPENAI_API_KEY",
        "CHAT_COMPLETIONS_MODEL",
        "CHAT_COMPLETIONS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
