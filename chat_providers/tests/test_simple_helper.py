"""generate_text / stream_text convenience helpers."""

from __future__ import annotations

from chat_providers import generate_text, stream_text
from chat_providers.bedrock import BedrockClaudeProvider
from chat_providers.mock import MockLanguageModel


def test_generate_text_returns_plain_text():
    assert generate_text(MockLanguageModel("chat-model"), "hello") == "Hello, world!"


def test_stream_text_yields_deltas_in_order():
    assert list(stream_text(MockLanguageModel("chat-model"), "hello")) == ["Hello", ", ", "world!"]


def test_helpers_over_bedrock(bedrock_client_factory, claude_response):
    client = bedrock_client_factory(claude_response("Hi", "there"))
    model = BedrockClaudeProvider(client)
    assert generate_text(model, "hello", max_output_tokens=50) == "Hi there"
    assert "".join(stream_text(model, "hello")) == "Hi there"
