"""``wrap_language_model``: decorate a model with a middleware chain.

The first middleware in the list is outermost: it transforms options first
and sees the result last.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Union

from ..interfaces import LanguageModel
from ..models import CallOptions, GenerateResult
from ..streaming import StreamResult
from .middleware_base import LanguageModelMiddleware


class WrappedLanguageModel:
    """A :class:`LanguageModel` that routes calls through middleware."""

    def __init__(
        self,
        model: LanguageModel,
        middleware: Sequence[LanguageModelMiddleware],
        *,
        model_id: Optional[str] = None,
        provider: Optional[str] = None,
    ) -> None:
        self._model = model
        self._middleware: List[LanguageModelMiddleware] = list(middleware)
        self._model_id = model_id
        self._provider = provider

    @property
    def specification_version(self) -> str:
        return self._model.specification_version

    @property
    def provider(self) -> str:
        return self._provider or self._model.provider

    @property
    def model_id(self) -> str:
        return self._model_id or self._model.model_id

    @property
    def supported_urls(self) -> Mapping[str, Any]:
        return self._model.supported_urls

    @property
    def wrapped(self) -> LanguageModel:
        return self._model

    def _prepare(self, options: Any, kind: str) -> CallOptions:
        opts = CallOptions.coerce(options)
        for m in self._middleware:
            opts = m.transform_options(opts, kind)  # type: ignore[arg-type]
        return opts

    def do_generate(self, options: Any) -> GenerateResult:
        opts = self._prepare(options, "generate")

        def call(index: int) -> GenerateResult:
            if index == len(self._middleware):
                return self._model.do_generate(opts)
            return self._middleware[index].wrap_generate(lambda: call(index + 1), opts, self._model)

        return call(0)

    def do_stream(self, options: Any) -> StreamResult:
        opts = self._prepare(options, "stream")

        def call(index: int) -> StreamResult:
            if index == len(self._middleware):
                return self._model.do_stream(opts)
            return self._middleware[index].wrap_stream(lambda: call(index + 1), opts, self._model)

        return call(0)


def wrap_language_model(
    model: LanguageModel,
    middleware: Union[LanguageModelMiddleware, Sequence[LanguageModelMiddleware]],
    *,
    model_id: Optional[str] = None,
    provider: Optional[str] = None,
) -> WrappedLanguageModel:
    """Return ``model`` decorated with one middleware or a list of them."""
    items = [middleware] if isinstance(middleware, LanguageModelMiddleware) else list(middleware)
    return WrappedLanguageModel(model, items, model_id=model_id, provider=provider)


__all__ = ["WrappedLanguageModel", "wrap_language_model"]
