"""Language model middleware: base hooks, the wrapping decorator and the
reasoning extraction middleware."""

from .middleware_base import CallKind, LanguageModelMiddleware
from .reasoning import ExtractReasoningMiddleware, split_reasoning
from .wrap import WrappedLanguageModel, wrap_language_model

__all__ = [
    "CallKind",
    "LanguageModelMiddleware",
    "ExtractReasoningMiddleware",
    "split_reasoning",
    "WrappedLanguageModel",
    "wrap_language_model",
]
