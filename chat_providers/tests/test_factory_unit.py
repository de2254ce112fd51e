"""ProviderFactory resolution, parameter merging and the package-level create()."""

from __future__ import annotations

import pytest

import chat_providers
from chat_providers.base.dto import AdapterParams
from chat_providers.base.errors import ErrorCode, ProviderError
from chat_providers.base.factory import ProviderFactory, UnknownProviderError, create_provider
from chat_providers.bedrock import BedrockClaudeProvider
from chat_providers.xai import XAIChatModel


def test_supported_names_are_stable():
    assert ProviderFactory.supported() == ("bedrock", "xai", "mock")


def test_unknown_provider():
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("nonexistent")


def test_name_is_normalized(bedrock_client_factory):
    adapter = ProviderFactory.create("  Bedrock ", client=bedrock_client_factory())
    assert isinstance(adapter, BedrockClaudeProvider)


def test_params_merge_and_extra_flattening(bedrock_client_factory):
    client = bedrock_client_factory()
    params = AdapterParams(model="anthropic.claude-x", region="us-west-2", extra={"client": client, "mask_errors": False})
    adapter = ProviderFactory.create("bedrock", params=params)
    assert adapter.model_id == "anthropic.claude-x"
    assert adapter.mask_errors is False


def test_explicit_kwargs_win_over_params(openai_client_factory):
    params = AdapterParams(model="grok-2-1212", api_key="k1")
    adapter = ProviderFactory.create("xai", params=params, model="grok-beta", client=openai_client_factory())
    assert isinstance(adapter, XAIChatModel)
    assert adapter.model_id == "grok-beta"


def test_constructor_type_error_is_wrapped():
    with pytest.raises(UnknownProviderError) as info:
        ProviderFactory.create("bedrock", api_key="not-a-bedrock-arg")
    assert isinstance(info.value.__cause__, TypeError)


def test_import_failure_is_wrapped(monkeypatch):
    monkeypatch.setitem(
        ProviderFactory._PROVIDERS,
        "broken",
        {"module": "chat_providers.does_not_exist", "class": "Nope", "model_kw": "model"},
    )
    with pytest.raises(UnknownProviderError) as info:
        ProviderFactory.create("broken")
    assert "Failed to import module" in str(info.value)


def test_create_provider_shortcut():
    adapter = create_provider("mock", model="title-model")
    assert adapter.model_id == "title-model"


def test_package_create_wraps_failures():
    with pytest.raises(ProviderError) as info:
        chat_providers.create("nonexistent")
    assert info.value.code is ErrorCode.UNKNOWN
    assert info.value.provider == "nonexistent"
    assert isinstance(info.value.__cause__, UnknownProviderError)


def test_package_create_passes_params():
    adapter = chat_providers.create("mock", params=AdapterParams(model="chat-model"))
    assert adapter.do_generate("hello").text == "Hello, world!"
