"""Unified configuration layer for model providers.

Sources are merged in a fixed order (later wins):
    1. Built-in defaults (``chat_providers.config.defaults``)
    2. Optional external config file (JSON or YAML) named by
       ``CHAT_PROVIDERS_CONFIG_FILE``
    3. Environment variables (names in ``chat_providers.config.env``)
    4. In-code overrides passed to :func:`get_provider_config`

A ``.env`` file (``DOTENV_FILE``, default ``./.env``) is read once before the
environment is consulted; it never overrides a real value already set.

External config file example::

    bedrock:
      region: us-east-1
      model: anthropic.claude-3-7-sonnet-20250219-v1:0
    xai:
      base_url: https://api.x.ai/v1

YAML is read only when PyYAML is installed (``yaml`` extra).
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .defaults import (
    BEDROCK_CLAUDE_DEFAULT_MODEL,
    MOCK_DEFAULT_MODEL,
    XAI_DEFAULT_BASE_URL,
    XAI_DEFAULT_MODEL,
)
from .env import CONFIG_FILE_ENV, ENV_FIELDS, is_placeholder, parse_bool, resolve_env_value

try:  # Optional YAML support
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None  # type: ignore


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "bedrock": {
        "model": BEDROCK_CLAUDE_DEFAULT_MODEL,
        "region": None,
        # Missing credentials stay empty; the remote call then fails and is
        # reported through the adapter's failure path.
        "access_key_id": "",
        "secret_access_key": "",
        "mask_errors": True,
    },
    "xai": {"model": XAI_DEFAULT_MODEL, "base_url": XAI_DEFAULT_BASE_URL},
    "mock": {"model": MOCK_DEFAULT_MODEL},
}

_BOOL_FIELDS = frozenset({"mask_errors"})

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Read KEY=VALUE lines from the .env file once.

    Comments and blank lines are skipped. A variable already present in the
    environment is only replaced when its current value is a placeholder.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    data: Any
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text) if yaml is not None else {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the cached config file and .env state (used by tests)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field in ENV_FIELDS.get(provider, {}):
        val, _ = resolve_env_value(provider, field)
        if val is not None:
            out[field] = val
    return out


def _coerce_types(cfg: Dict[str, Any]) -> Dict[str, Any]:
    for key in _BOOL_FIELDS & cfg.keys():
        if isinstance(cfg[key], str):
            cfg[key] = parse_bool(cfg[key], default=True)
    return cfg


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None`` override values are ignored.
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = dict(DEFAULTS.get(name, {}))

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return _coerce_types(cfg)


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "get_provider_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
]
