"""Base class for language model middleware.

Middleware sits between the caller and a wrapped model. Every hook has a
pass-through default so subclasses override only what they need.

Failure modes:
- Hooks may raise to abort the call; the exception reaches the caller
  unchanged.
"""

from __future__ import annotations

from typing import Callable, Literal

from ..interfaces import LanguageModel
from ..models import CallOptions, GenerateResult
from ..streaming import StreamResult

CallKind = Literal["generate", "stream"]


class LanguageModelMiddleware:
    """Pass-through middleware with overridable hooks."""

    def transform_options(self, options: CallOptions, kind: CallKind) -> CallOptions:
        """Rewrite the options before the wrapped model sees them."""
        return options

    def wrap_generate(
        self,
        do_generate: Callable[[], GenerateResult],
        options: CallOptions,
        model: LanguageModel,
    ) -> GenerateResult:
        """Run around a complete generation; call ``do_generate`` to proceed."""
        return do_generate()

    def wrap_stream(
        self,
        do_stream: Callable[[], StreamResult],
        options: CallOptions,
        model: LanguageModel,
    ) -> StreamResult:
        """Run around a streaming generation; call ``do_stream`` to proceed."""
        return do_stream()


__all__ = ["LanguageModelMiddleware", "CallKind"]
