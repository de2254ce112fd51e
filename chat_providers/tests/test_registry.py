"""Registry lookups and the test/production model tables."""

from __future__ import annotations

import pytest

from chat_providers.base.errors import ErrorCode, NoSuchModelError
from chat_providers.base.middleware import WrappedLanguageModel
from chat_providers.base.registry import custom_provider
from chat_providers.bedrock import BedrockClaudeProvider
from chat_providers.config.defaults import BEDROCK_FAILURE_SENTINEL
from chat_providers.mock import MockLanguageModel
from chat_providers.providers import build_provider_registry, get_provider_registry
from chat_providers.xai import XAIChatModel, XAIImageModel


def test_custom_provider_lookup_and_miss():
    model = MockLanguageModel("chat-model")
    registry = custom_provider(language_models={"chat-model": model})
    assert registry.language_model("chat-model") is model
    assert registry.language_model_names() == ("chat-model",)
    with pytest.raises(NoSuchModelError) as info:
        registry.language_model("nope")
    assert info.value.code is ErrorCode.NOT_FOUND
    with pytest.raises(NoSuchModelError):
        registry.image_model("small-model")


def test_test_mode_table(bedrock_client_factory):
    registry = build_provider_registry(test_mode=True, bedrock_client=bedrock_client_factory({}))
    assert set(registry.language_model_names()) == {
        "chat-model",
        "chat-model-reasoning",
        "title-model",
        "artifact-model",
        "claude-3-7-bedrock",
    }
    assert isinstance(registry.language_model("chat-model"), MockLanguageModel)
    reasoning = registry.language_model("chat-model-reasoning")
    assert isinstance(reasoning, WrappedLanguageModel)
    assert isinstance(registry.language_model("claude-3-7-bedrock"), BedrockClaudeProvider)
    assert registry.image_model_names() == ()


def test_test_mode_reasoning_model_extracts_think_block():
    registry = build_provider_registry(test_mode=True)
    result = registry.language_model("chat-model-reasoning").do_generate("anything")
    assert result.reasoning == "The user wants an answer."
    assert result.text == "Here is the answer."


def test_production_table(openai_client_factory, bedrock_client_factory):
    registry = build_provider_registry(
        test_mode=False,
        bedrock_client=bedrock_client_factory({}),
        openai_client=openai_client_factory(),
    )
    chat = registry.language_model("chat-model")
    assert isinstance(chat, XAIChatModel)
    assert chat.model_id == "grok-2-vision-1212"
    reasoning = registry.language_model("chat-model-reasoning")
    assert isinstance(reasoning, WrappedLanguageModel)
    assert reasoning.model_id == "grok-3-mini-beta"
    assert registry.language_model("title-model").model_id == "grok-2-1212"
    assert registry.language_model("artifact-model").model_id == "grok-2-1212"
    assert registry.language_model("claude-3-7-bedrock").provider == "bedrock"
    image = registry.image_model("small-model")
    assert isinstance(image, XAIImageModel)
    assert image.model_id == "grok-2-image"


def test_registry_bedrock_entry_is_callable(bedrock_client_factory, claude_response):
    client = bedrock_client_factory(claude_response("from", "claude"))
    registry = build_provider_registry(test_mode=True, bedrock_client=client)
    assert registry.language_model("claude-3-7-bedrock").do_generate("hi").text == "from claude"


def test_registry_bedrock_entry_masks_failures(bedrock_client_factory):
    registry = build_provider_registry(test_mode=True, bedrock_client=bedrock_client_factory(error=OSError("down")))
    assert registry.language_model("claude-3-7-bedrock").do_generate("hi").text == BEDROCK_FAILURE_SENTINEL


def test_mode_follows_env_toggle(enable_mock_providers):
    registry = get_provider_registry()
    assert isinstance(registry.language_model("title-model"), MockLanguageModel)
    assert get_provider_registry() is registry
