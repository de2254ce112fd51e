"""
CallOptions DTO passed to ``do_generate`` / ``do_stream``.

Mirrors the options object a chat application hands to a language model:
the prompt (any nested shape) plus optional sampling settings. Adapters that
cannot honour a setting report it as a warning instead of failing.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass
class CallOptions:
    """Normalized invocation options.

    Attributes:
        prompt: The prompt value; a string, a list, a message mapping, a
            :class:`Message`, or any nesting of these.
        max_output_tokens: Requested completion limit.
        temperature: Sampling temperature.
        headers: Extra request headers for HTTP-based adapters.
        extra: Escape hatch for adapter-specific controls.
    """

    prompt: Any
    max_output_tokens: Optional[int] = None
    temperature: Optional[float] = None
    headers: Dict[str, str] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def coerce(cls, value: Any) -> "CallOptions":
        """Accept a ``CallOptions``, an options mapping with a ``prompt`` key,
        or a bare prompt value.
        """
        if isinstance(value, CallOptions):
            return value
        if isinstance(value, Mapping) and "prompt" in value:
            return cls(
                prompt=value["prompt"],
                max_output_tokens=value.get("max_output_tokens"),
                temperature=value.get("temperature"),
                headers=dict(value.get("headers") or {}),
                extra=dict(value.get("extra") or {}),
            )
        return cls(prompt=value)

    def set_settings(self) -> Dict[str, Any]:
        """Return the sampling settings the caller actually set."""
        settings = {
            "max_output_tokens": self.max_output_tokens,
            "temperature": self.temperature,
        }
        return {k: v for k, v in settings.items() if v is not None}


__all__ = [
    "CallOptions",
]
