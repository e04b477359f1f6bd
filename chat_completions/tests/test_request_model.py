"""Request construction, parameter validation and wire encoding."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Dict

import pytest

from chat_completions import (
    ChatRequest,
    ErrorCode,
    FrequencyPenalty,
    LLMError,
    LogitBias,
    MaxTokens,
    N,
    PresencePenalty,
    Role,
    Stop,
    Temperature,
    TextMessage,
    Tool,
    ToolFunction,
    Tools,
    TopP,
    User,
)
from chat_completions.base.models import encode_request


def _decoded(request: ChatRequest) -> Dict[str, Any]:
    return json.loads(encode_request(request))


def test_missing_model_fails_construction():
    with pytest.raises(LLMError) as ei:
        ChatRequest.build("", [TextMessage.user("hi")])
    assert ei.value.code is ErrorCode.MISSING_MODEL  # nosec B101


@pytest.mark.parametrize("value", [0.0, 0.7, 1.0, 2.0])
def test_temperature_accepts_range(value):
    assert Temperature(value).value == value  # nosec B101


@pytest.mark.parametrize("value", [-0.1, 2.5, math.nan])
def test_temperature_rejects_out_of_range(value):
    with pytest.raises(LLMError) as ei:
        Temperature(value)
    assert ei.value.code is ErrorCode.INVALID_VALUE  # nosec B101
    assert "between 0.0 and 2.0" in ei.value.message  # nosec B101


def test_temperature_message_names_offending_value():
    with pytest.raises(LLMError) as ei:
        Temperature(2.5)
    assert ei.value.message == "Temperature must be between 0.0 and 2.0, got 2.5"  # nosec B101


@pytest.mark.parametrize(
    "factory",
    [
        lambda: TopP(1.5),
        lambda: TopP(-0.01),
        lambda: FrequencyPenalty(-2.1),
        lambda: PresencePenalty(2.01),
        lambda: MaxTokens(0),
        lambda: N(-1),
        lambda: User(""),
        lambda: Stop([]),
        lambda: Stop("END"),
        lambda: Temperature("hot"),
        lambda: MaxTokens(True),
        lambda: MaxTokens(1.5),
    ],
)
def test_invalid_parameters_raise_invalid_value(factory):
    with pytest.raises(LLMError) as ei:
        factory()
    assert ei.value.code is ErrorCode.INVALID_VALUE  # nosec B101
    assert ei.value.message  # nosec B101


def test_boundary_values_are_accepted():
    ChatRequest.build(
        "m",
        [TextMessage.user("hi")],
        [TopP(0.0), TopP(1.0), FrequencyPenalty(-2.0), PresencePenalty(2.0), MaxTokens(1), N(1)],
    )


def test_empty_user_and_stop_messages():
    with pytest.raises(LLMError) as ei:
        User("")
    assert ei.value.message == "User identifier cannot be empty"  # nosec B101
    with pytest.raises(LLMError) as ei:
        Stop([])
    assert ei.value.message == "Stop sequences array cannot be empty"  # nosec B101


def test_direct_field_values_are_validated():
    with pytest.raises(LLMError) as ei:
        ChatRequest(model="m", messages=(), temperature=3.0)
    assert ei.value.code is ErrorCode.INVALID_VALUE  # nosec B101


def test_config_values_apply_in_order_last_writer_wins():
    req = ChatRequest.build(
        "m",
        [TextMessage.user("hi")],
        [Temperature(0.2), MaxTokens(10), Temperature(1.3)],
    )
    assert req.temperature == 1.3  # nosec B101
    assert req.max_tokens == 10  # nosec B101


def test_request_is_immutable():
    req = ChatRequest.build("m", [TextMessage.user("hi")])
    with pytest.raises(AttributeError):
        req.model = "other"  # type: ignore[misc]


def test_encoding_omits_absent_optionals():
    payload = _decoded(ChatRequest.build("gpt-4o-mini", [TextMessage.user("Hello")]))
    assert payload == {  # nosec B101
        "model": "gpt-4o-mini",
        "messages": [{"role": "user", "content": "Hello"}],
        "stream": False,
    }


def test_encoding_uses_snake_case_wire_names():
    req = ChatRequest.build(
        "gpt-4o-mini",
        [TextMessage.system("Be brief."), TextMessage.user("Hi")],
        [
            Temperature(0.5),
            MaxTokens(64),
            TopP(0.9),
            FrequencyPenalty(0.1),
            PresencePenalty(-0.1),
            N(2),
            LogitBias({"50256": -100}),
            User("user-42"),
            Stop(["\n\n", "END"]),
        ],
        stream=True,
    )
    payload = _decoded(req)
    assert payload["max_tokens"] == 64  # nosec B101
    assert payload["top_p"] == 0.9  # nosec B101
    assert payload["frequency_penalty"] == 0.1  # nosec B101
    assert payload["presence_penalty"] == -0.1  # nosec B101
    assert payload["logit_bias"] == {"50256": -100}  # nosec B101
    assert payload["stop"] == ["\n\n", "END"]  # nosec B101
    assert payload["user"] == "user-42"  # nosec B101
    assert payload["n"] == 2  # nosec B101
    assert payload["stream"] is True  # nosec B101
    assert payload["messages"][0] == {"role": "system", "content": "Be brief."}  # nosec B101
    for camel in ("maxTokens", "topP", "frequencyPenalty", "presencePenalty", "logitBias"):
        assert camel not in payload  # nosec B101


def test_tools_encoding_structure():
    weather = Tool(
        ToolFunction(
            name="get_weather",
            description="Current weather for a city",
            parameters={"type": "object", "properties": {"city": {"type": "string"}}, "required": ["city"]},
        )
    )
    payload = _decoded(ChatRequest.build("m", [TextMessage.user("Paris?")], [Tools([weather])]))
    assert payload["tools"] == [  # nosec B101
        {
            "type": "function",
            "function": {
                "name": "get_weather",
                "description": "Current weather for a city",
                "parameters": {
                    "type": "object",
                    "properties": {"city": {"type": "string"}},
                    "required": ["city"],
                },
            },
        }
    ]


@dataclass(frozen=True)
class ImageMessage:
    """Message variant with content-part array content."""

    url: str
    role: Role = Role.USER

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role": self.role.value,
            "content": [{"type": "image_url", "image_url": {"url": self.url}}],
        }


def test_custom_message_variant_uses_its_own_encoding():
    req = ChatRequest.build("m", [TextMessage.user("Describe:"), ImageMessage("https://img.test/cat.png")])
    payload = _decoded(req)
    assert payload["messages"][1] == {  # nosec B101
        "role": "user",
        "content": [{"type": "image_url", "image_url": {"url": "https://img.test/cat.png"}}],
    }


def test_message_encoding_failure_is_encoding_failed():
    class Broken:
        role = Role.USER

        def to_dict(self) -> Dict[str, Any]:
            return {"role": "user", "content": object()}

    with pytest.raises(LLMError) as ei:
        encode_request(ChatRequest.build("m", [Broken()]))
    assert ei.value.code is ErrorCode.ENCODING_FAILED  # nosec B101


def test_text_message_accepts_role_strings_and_rejects_unknown():
    assert TextMessage("assistant", "ok").role is Role.ASSISTANT  # nosec B101
    with pytest.raises(LLMError) as ei:
        TextMessage("narrator", "once upon a time")
    assert ei.value.code is ErrorCode.INVALID_VALUE  # nosec B101


def test_non_ascii_content_is_encoded_as_utf8():
    raw = encode_request(ChatRequest.build("m", [TextMessage.user("héllo 👋")]))
    assert "héllo 👋".encode("utf-8") in raw  # nosec B101
