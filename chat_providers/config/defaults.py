"""chat_providers.config.defaults
==============================

Central place for the stable default values used across the package. They
can be overridden through environment variables or the external config file;
this module only holds constants (no I/O, no imports from other packages).
"""

from __future__ import annotations

# ---- Bedrock (Claude via InvokeModel) ----
BEDROCK_CLAUDE_DEFAULT_MODEL = "anthropic.claude-3-sonnet-20240229-v1:0"
# Protocol version tag Bedrock requires on Anthropic message bodies.
BEDROCK_ANTHROPIC_VERSION = "bedrock-2023-05-31"
# Completion limit sent on every Bedrock request.
BEDROCK_MAX_TOKENS = 1024
BEDROCK_RUNTIME_SERVICE = "bedrock-runtime"
BEDROCK_CONTENT_TYPE = "application/json"
# Text returned in place of a failed Bedrock call when failures are masked.
BEDROCK_FAILURE_SENTINEL = "[Error: Failed to get response from Bedrock Claude 3.7]"

# ---- xAI (Grok, OpenAI-compatible API) ----
XAI_DEFAULT_MODEL = "grok-2-1212"
XAI_DEFAULT_BASE_URL = "https://api.x.ai/v1"

# ---- Mock models (test environment) ----
MOCK_DEFAULT_MODEL = "mock-chat"

# ---- Registry model names ----
CHAT_MODEL = "chat-model"
CHAT_MODEL_REASONING = "chat-model-reasoning"
TITLE_MODEL = "title-model"
ARTIFACT_MODEL = "artifact-model"
CLAUDE_BEDROCK_MODEL = "claude-3-7-bedrock"
SMALL_IMAGE_MODEL = "small-model"

# Backing model ids for the production registry.
XAI_CHAT_MODEL_ID = "grok-2-vision-1212"
XAI_REASONING_MODEL_ID = "grok-3-mini-beta"
XAI_TITLE_MODEL_ID = "grok-2-1212"
XAI_ARTIFACT_MODEL_ID = "grok-2-1212"
XAI_IMAGE_MODEL_ID = "grok-2-image"
REASONING_TAG = "think"


__all__ = [
    "BEDROCK_CLAUDE_DEFAULT_MODEL",
    "BEDROCK_ANTHROPIC_VERSION",
    "BEDROCK_MAX_TOKENS",
    "BEDROCK_RUNTIME_SERVICE",
    "BEDROCK_CONTENT_TYPE",
    "BEDROCK_FAILURE_SENTINEL",
    "XAI_DEFAULT_MODEL",
    "XAI_DEFAULT_BASE_URL",
    "MOCK_DEFAULT_MODEL",
    "CHAT_MODEL",
    "CHAT_MODEL_REASONING",
    "TITLE_MODEL",
    "ARTIFACT_MODEL",
    "CLAUDE_BEDROCK_MODEL",
    "SMALL_IMAGE_MODEL",
    "XAI_CHAT_MODEL_ID",
    "XAI_REASONING_MODEL_ID",
    "XAI_TITLE_MODEL_ID",
    "XAI_ARTIFACT_MODEL_ID",
    "XAI_IMAGE_MODEL_ID",
    "REASONING_TAG",
]
