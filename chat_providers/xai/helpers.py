"""Request/response shaping for the xAI OpenAI-compatible API.

Pure functions; the model classes in ``client.py`` own the SDK client,
logging and error handling.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..base.models import CallOptions, FinishReason, Message, Usage
from ..base.prompt import flatten_prompt

_ROLES = frozenset({"system", "user", "assistant"})

_FINISH_MAP: Dict[str, FinishReason] = {
    "stop": "stop",
    "end_turn": "stop",
    "length": "length",
    "content_filter": "content-filter",
    "tool_calls": "tool-calls",
    "function_call": "tool-calls",
}


def _as_message(item: Any) -> Optional[Dict[str, str]]:
    if isinstance(item, Mapping):
        if "role" not in item:
            return None
        role, content = item.get("role"), item.get("content")
    elif isinstance(item, Message) or (hasattr(item, "role") and hasattr(item, "content")):
        role, content = item.role, item.content
    else:
        return None
    if role not in _ROLES:
        role = "user"
    return {"role": str(role), "content": flatten_prompt(content)}


def to_chat_messages(prompt: Any) -> List[Dict[str, str]]:
    """Convert a prompt into chat-completions messages.

    A list whose items are all role-bearing messages keeps its roles (each
    message's content flattened); anything else becomes a single user turn.
    """
    if isinstance(prompt, (list, tuple)) and prompt:
        converted = [_as_message(item) for item in prompt]
        if all(m is not None for m in converted):
            return converted  # type: ignore[return-value]
    single = _as_message(prompt)
    if single is not None:
        return [single]
    return [{"role": "user", "content": flatten_prompt(prompt)}]


def build_chat_params(model: str, options: CallOptions, *, stream: bool = False) -> Dict[str, Any]:
    params: Dict[str, Any] = {"model": model, "messages": to_chat_messages(options.prompt)}
    if options.max_output_tokens is not None:
        params["max_tokens"] = options.max_output_tokens
    if options.temperature is not None:
        params["temperature"] = options.temperature
    if options.headers:
        params["extra_headers"] = dict(options.headers)
    if stream:
        params["stream"] = True
    return params


def map_finish_reason(value: Any) -> FinishReason:
    if value is None:
        return "unknown"
    return _FINISH_MAP.get(str(value), "other")


def usage_from_response(usage: Any) -> Usage:
    if usage is None:
        return Usage.unknown()
    return Usage.from_counts(
        getattr(usage, "prompt_tokens", None),
        getattr(usage, "completion_tokens", None),
        getattr(usage, "total_tokens", None),
    )


def extract_choice_text(resp: Any) -> str:
    choices = getattr(resp, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""


def extract_delta_text(chunk: Any) -> str:
    choices = getattr(chunk, "choices", None) or []
    if not choices:
        return ""
    delta = getattr(choices[0], "delta", None)
    return getattr(delta, "content", None) or ""


def extract_chunk_finish(chunk: Any) -> Optional[str]:
    choices = getattr(chunk, "choices", None) or []
    if not choices:
        return None
    return getattr(choices[0], "finish_reason", None)


__all__ = [
    "to_chat_messages",
    "build_chat_params",
    "map_finish_reason",
    "usage_from_response",
    "extract_choice_text",
    "extract_delta_text",
    "extract_chunk_finish",
]
