"""Deterministic mock language model backed by JSON fixtures.

Purpose
-------
Stand in for real models when the registry runs in test mode, and give unit
tests a ``LanguageModel`` that never touches the network. Responses come from
a declarative fixture catalog keyed by model name, then by flattened prompt.

External dependencies
---------------------
Standard library only. Fixtures are loaded via ``importlib.resources``.

Lookup order
------------
For model ``m`` and flattened prompt ``p``: ``models[m][p]``,
``models[m][p.lower()]``, the same keys in the ``"*"`` model block, then
``models[m]["*"]`` and ``models["*"]["*"]``. A miss yields empty text.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from typing import Any, Dict, Iterator, List, Mapping, Optional

from ..base.interfaces import HasDefaultModel
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import CallOptions, ContentPart, GenerateResult, ProviderMetadata, Usage
from ..base.prompt import flatten_prompt
from ..base.streaming import SINGLE_TEXT_BLOCK_ID, StreamPart, StreamResult
from ..config import get_model

_FIXTURE_RESOURCE = "chat_completions.json"


@dataclass
class FixtureResponse:
    """One fixture entry resolved for a call."""

    text: str
    meta: Mapping[str, Any]
    stream: List[str]
    prompt_key: str


def load_fixture_catalog(resource: str = _FIXTURE_RESOURCE) -> Dict[str, Any]:
    """Load the JSON fixture catalog bundled under ``chat_providers.mock.fixtures``."""
    data = resources.files("chat_providers.mock.fixtures").joinpath(resource).read_text(encoding="utf-8")
    return json.loads(data)


class MockLanguageModel(HasDefaultModel):
    """``LanguageModel`` that returns canned responses from fixtures."""

    def __init__(
        self,
        model_id: Optional[str] = None,
        catalog: Optional[Dict[str, Any]] = None,
        *,
        provider: str = "mock",
    ) -> None:
        """Parameters
        ----------
        model_id:
            Catalog key (usually the registry name, e.g. ``"chat-model"``).
            Defaults to the configured mock model.
        catalog:
            Pre-parsed catalog; tests inject custom ones.
        provider:
            Provider name reported in metadata. The factory passes the real
            provider key when it routes a real provider to the mock.
        """
        self._catalog = catalog if catalog is not None else load_fixture_catalog()
        self._model = model_id or get_model("mock") or str(self._catalog.get("default_model", "mock-chat"))
        self._provider = provider or "mock"
        self._logger = get_logger("chat_providers.mock")
        models = self._catalog.get("models", {})
        self._responses: Mapping[str, Any] = models.get(self._model, {}).get("responses", {})
        self._fallback_responses: Mapping[str, Any] = models.get("*", {}).get("responses", {})

    @property
    def specification_version(self) -> str:
        return "v2"

    @property
    def provider(self) -> str:
        return self._provider

    @property
    def model_id(self) -> str:
        return self._model

    @property
    def supported_urls(self) -> Dict[str, List[str]]:
        return {}

    def default_model(self) -> Optional[str]:
        return self._model

    def do_generate(self, options: Any) -> GenerateResult:
        opts = CallOptions.coerce(options)
        entry = self._select_response(flatten_prompt(opts.prompt))
        ctx = LogContext(provider=self._provider, model=self._model)
        normalized_log_event(self._logger, "generate.end", ctx, phase="finalize", emitted=bool(entry.text))
        return GenerateResult(
            content=[ContentPart(type="text", text=entry.text)],
            finish_reason="stop",
            usage=Usage.unknown(),
            raw_call={"fixture": entry.prompt_key},
            meta=self._build_metadata(entry),
        )

    def do_stream(self, options: Any) -> StreamResult:
        opts = CallOptions.coerce(options)
        entry = self._select_response(flatten_prompt(opts.prompt))
        return StreamResult(stream=self._replay(entry), raw_call={"fixture": entry.prompt_key})

    def _replay(self, entry: FixtureResponse) -> Iterator[StreamPart]:
        yield StreamPart.text_start(SINGLE_TEXT_BLOCK_ID)
        for chunk in entry.stream:
            yield StreamPart.text_delta(SINGLE_TEXT_BLOCK_ID, chunk)
        yield StreamPart.text_end(SINGLE_TEXT_BLOCK_ID)
        normalized_log_event(
            self._logger,
            "stream.end",
            LogContext(provider=self._provider, model=self._model),
            phase="finalize",
            emitted=len(entry.stream),
        )
        yield StreamPart.finish("stop", Usage.unknown())

    def _select_response(self, prompt: str) -> FixtureResponse:
        key = prompt.strip() or "*"
        responses = self._responses
        fallback = self._fallback_responses
        raw = (
            responses.get(key)
            or responses.get(key.lower())
            or fallback.get(key)
            or fallback.get(key.lower())
            or responses.get("*")
            or fallback.get("*")
            or {"text": "", "meta": {"extra": {"variant": "missing"}}}
        )
        text = str(raw.get("text", ""))
        stream = [str(c) for c in raw.get("stream", [])] or _chunk_text(text)
        return FixtureResponse(text=text, meta=raw.get("meta", {}) or {}, stream=stream, prompt_key=key)

    def _build_metadata(self, entry: FixtureResponse) -> ProviderMetadata:
        extra = dict(entry.meta.get("extra", {}))
        extra.setdefault("prompt_key", entry.prompt_key)
        extra.setdefault("mock_provider", True)
        return ProviderMetadata(provider_name=self._provider, model_name=self._model, extra=extra)


def _chunk_text(text: str, chunk_size: int = 16) -> List[str]:
    """Split text into fixed-size chunks for deterministic streaming."""
    if not text:
        return []
    return [text[i : i + chunk_size] for i in range(0, len(text), chunk_size)]


__all__ = ["MockLanguageModel", "load_fixture_catalog"]
