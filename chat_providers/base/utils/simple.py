"""Convenience helpers for simple model interactions.

Send a prompt through any ``LanguageModel`` and get plain text back without
handling result envelopes or stream parts.
"""
from __future__ import annotations

from typing import Any, Iterator, Optional

from ..interfaces import LanguageModel
from ..models import CallOptions


def generate_text(
    model: LanguageModel,
    prompt: Any,
    *,
    max_output_tokens: Optional[int] = None,
    temperature: Optional[float] = None,
) -> str:
    """Return the concatenated text content of one ``do_generate`` call.

    Reasoning parts are not included.
    """
    options = CallOptions(prompt=prompt, max_output_tokens=max_output_tokens, temperature=temperature)
    return model.do_generate(options).text


def stream_text(model: LanguageModel, prompt: Any) -> Iterator[str]:
    """Yield the text deltas of one ``do_stream`` call in order."""
    for part in model.do_stream(CallOptions(prompt=prompt)):
        if part.type == "text-delta" and part.delta:
            yield part.delta


__all__ = ["generate_text", "stream_text"]
