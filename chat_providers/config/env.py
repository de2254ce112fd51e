"""chat_providers.config.env
=========================

Environment variable names per provider and small lookup helpers.

Each provider maps config fields to an ordered tuple of environment variable
names (canonical first). Bedrock follows the AWS SDK conventions
(``AWS_REGION``, ``AWS_ACCESS_KEY_ID``, ...) rather than a provider prefix.

Helpers never raise on unknown providers or unset variables.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

ENV_FIELDS: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "bedrock": {
        "region": ("AWS_REGION", "AWS_DEFAULT_REGION"),
        "access_key_id": ("AWS_ACCESS_KEY_ID",),
        "secret_access_key": ("AWS_SECRET_ACCESS_KEY",),
        "model": ("BEDROCK_CLAUDE_MODEL_ID",),
        "mask_errors": ("BEDROCK_MASK_ERRORS",),
    },
    "xai": {
        "api_key": ("XAI_API_KEY",),
        "base_url": ("XAI_BASE_URL",),
        "model": ("XAI_MODEL",),
    },
    "mock": {
        "model": ("MOCK_MODEL",),
    },
}

USE_MOCKS_ENV = "CHAT_PROVIDERS_USE_MOCKS"
CONFIG_FILE_ENV = "CHAT_PROVIDERS_CONFIG_FILE"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a placeholder/test token.

    Heuristics (case-insensitive): contains 'placeholder', 'changeme' or
    'example', or starts with 'test_'.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def parse_bool(value: Optional[str], default: bool = False) -> bool:
    """Parse a boolean-ish string; unknown values fall back to ``default``."""
    if value is None:
        return default
    v = value.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    return default


def get_env_var_candidates(provider: str, field: str) -> Iterable[str]:
    """Yield the environment variable names for ``provider.field`` in priority order."""
    yield from ENV_FIELDS.get((provider or "").lower(), {}).get(field, ())


def resolve_env_value(provider: str, field: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_used)`` for the first set candidate, else ``(None, None)``.

    Blank values count as unset.
    """
    for name in get_env_var_candidates(provider, field):
        val = os.environ.get(name)
        if val is not None and val.strip():
            return val, name
    return None, None


def is_test_environment() -> bool:
    """True when the process should use the mock (test) model registry."""
    return parse_bool(os.environ.get(USE_MOCKS_ENV), default=False)


__all__ = [
    "ENV_FIELDS",
    "USE_MOCKS_ENV",
    "CONFIG_FILE_ENV",
    "is_placeholder",
    "parse_bool",
    "get_env_var_candidates",
    "resolve_env_value",
    "is_test_environment",
]
