"""The application's model table.

Test mode (``CHAT_PROVIDERS_USE_MOCKS``) serves fixture-backed mock models;
production serves xAI Grok models. The Bedrock Claude adapter is registered
as ``claude-3-7-bedrock`` in both modes.
"""

from __future__ import annotations

import threading
from typing import Any, Optional

from .base.logging import get_logger, log_event
from .base.middleware import ExtractReasoningMiddleware, wrap_language_model
from .base.registry import CustomProvider, custom_provider
from .bedrock import BedrockClaudeProvider
from .config.defaults import (
    ARTIFACT_MODEL,
    CHAT_MODEL,
    CHAT_MODEL_REASONING,
    CLAUDE_BEDROCK_MODEL,
    REASONING_TAG,
    SMALL_IMAGE_MODEL,
    TITLE_MODEL,
    XAI_ARTIFACT_MODEL_ID,
    XAI_CHAT_MODEL_ID,
    XAI_IMAGE_MODEL_ID,
    XAI_REASONING_MODEL_ID,
    XAI_TITLE_MODEL_ID,
)
from .config.env import is_test_environment
from .mock import MockLanguageModel
from .xai import XAIChatModel, XAIImageModel

_REGISTRY: Optional[CustomProvider] = None
_REGISTRY_LOCK = threading.Lock()


def build_provider_registry(
    test_mode: Optional[bool] = None,
    bedrock_client: Any = None,
    openai_client: Any = None,
) -> CustomProvider:
    """Build the registry for test or production mode.

    Parameters:
        test_mode: Force the mode; ``None`` reads ``CHAT_PROVIDERS_USE_MOCKS``.
        bedrock_client: ``bedrock-runtime`` client shared by the Bedrock model.
        openai_client: OpenAI SDK client shared by the xAI models.
    """
    if test_mode is None:
        test_mode = is_test_environment()
    bedrock = BedrockClaudeProvider(client=bedrock_client)
    log_event(get_logger("chat_providers.registry"), "registry.build", test_mode=test_mode)
    if test_mode:
        return custom_provider(
            language_models={
                CHAT_MODEL: MockLanguageModel(CHAT_MODEL),
                CHAT_MODEL_REASONING: wrap_language_model(
                    MockLanguageModel(CHAT_MODEL_REASONING),
                    ExtractReasoningMiddleware(tag_name=REASONING_TAG),
                ),
                TITLE_MODEL: MockLanguageModel(TITLE_MODEL),
                ARTIFACT_MODEL: MockLanguageModel(ARTIFACT_MODEL),
                CLAUDE_BEDROCK_MODEL: bedrock,
            }
        )
    return custom_provider(
        language_models={
            CHAT_MODEL: XAIChatModel(XAI_CHAT_MODEL_ID, client=openai_client),
            CHAT_MODEL_REASONING: wrap_language_model(
                XAIChatModel(XAI_REASONING_MODEL_ID, client=openai_client),
                ExtractReasoningMiddleware(tag_name=REASONING_TAG),
            ),
            TITLE_MODEL: XAIChatModel(XAI_TITLE_MODEL_ID, client=openai_client),
            ARTIFACT_MODEL: XAIChatModel(XAI_ARTIFACT_MODEL_ID, client=openai_client),
            CLAUDE_BEDROCK_MODEL: bedrock,
        },
        image_models={
            SMALL_IMAGE_MODEL: XAIImageModel(XAI_IMAGE_MODEL_ID, client=openai_client),
        },
    )


def get_provider_registry() -> CustomProvider:
    """Return the process-wide registry, building it on first use."""
    global _REGISTRY
    if _REGISTRY is None:
        with _REGISTRY_LOCK:
            if _REGISTRY is None:
                _REGISTRY = build_provider_registry()
    return _REGISTRY


def reset_provider_registry() -> None:
    """Drop the cached registry (used by tests)."""
    global _REGISTRY
    with _REGISTRY_LOCK:
        _REGISTRY = None


__all__ = ["build_provider_registry", "get_provider_registry", "reset_provider_registry"]
