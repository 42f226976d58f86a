"""Tests for the OpenAI vision client request building."""

from types import SimpleNamespace

import pytest

from config.settings import GenerativeConfig
from product_vision.ai.openai_client import OpenAIClient
from product_vision.errors import GenerativeConfigurationError


class FakeCompletions:
    def __init__(self, content="  {\"name\": \"Black Clogs\"}  "):
        self.content = content
        self.requests = []

    async def create(self, **kwargs):
        self.requests.append(kwargs)
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_client(model="gpt-4o") -> tuple[OpenAIClient, FakeCompletions]:
    client = OpenAIClient(GenerativeConfig(api_key="sk-test", model=model))
    completions = FakeCompletions()
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client, completions


def test_missing_key_is_a_configuration_error() -> None:
    with pytest.raises(GenerativeConfigurationError):
        OpenAIClient(GenerativeConfig(api_key=None))


@pytest.mark.asyncio
async def test_bytes_are_sent_as_data_url() -> None:
    client, completions = make_client()

    reply = await client.generate_with_image("describe", b"\x89PNG", json_mode=True)

    assert reply == '{"name": "Black Clogs"}'
    request = completions.requests[0]
    image_part = request["messages"][0]["content"][1]
    assert image_part["image_url"]["url"].startswith("data:image/jpeg;base64,")
    assert request["response_format"] == {"type": "json_object"}
    assert request["max_tokens"] == 450
    assert request["temperature"] == 0.3


@pytest.mark.asyncio
async def test_gpt5_uses_completion_token_limit() -> None:
    client, completions = make_client(model="gpt-5-mini")

    await client.generate_with_image("describe", b"img", max_tokens=100)

    request = completions.requests[0]
    assert request["max_completion_tokens"] == 100
    assert "max_tokens" not in request
    assert "response_format" not in request


@pytest.mark.asyncio
async def test_missing_local_file_gives_empty_reply(tmp_path) -> None:
    client, completions = make_client()

    assert await client.generate_with_image("describe", str(tmp_path / "nope.jpg")) == ""
    assert completions.requests == []
