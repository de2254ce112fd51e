"""xAI (Grok) models.

Purpose:
- ``XAIChatModel``: ``LanguageModel`` over the xAI OpenAI-compatible chat
  completions endpoint, with real incremental streaming.
- ``XAIImageModel``: ``ImageModel`` over the images endpoint returning base64
  payloads.

External dependencies:
- ``openai`` SDK (``OpenAI(api_key, base_url)``). A client may be injected
  and shared between models; otherwise each model builds one lazily.

Failure semantics:
- Chat failures are reported in-band: ``do_generate`` returns finish reason
  ``"error"`` with ``meta.extra`` carrying the error and code; streams emit an
  ``error`` part followed by ``finish("error")``.
- Image failures raise :class:`ProviderError` (there is no in-band channel).
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Dict, Iterator, List, Optional

try:
    from openai import OpenAI
except Exception:  # pragma: no cover
    OpenAI = None  # type: ignore

from ..base.errors import ErrorCode, ProviderError, classify_exception
from ..base.interfaces import HasDefaultModel, ImageResult
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import CallOptions, ContentPart, FinishReason, GenerateResult, ProviderMetadata, Usage
from ..base.streaming import SINGLE_TEXT_BLOCK_ID, StreamPart, StreamResult
from ..config import get_provider_config
from .helpers import (
    build_chat_params,
    extract_choice_text,
    extract_chunk_finish,
    extract_delta_text,
    map_finish_reason,
    usage_from_response,
)

PROVIDER_NAME = "xai"


class _XAIClientMixin:
    """Shared configuration and lazy SDK client for xAI models."""

    _logger: logging.Logger

    def _init_client(self, client: Any, api_key: Optional[str], base_url: Optional[str]) -> Dict[str, Any]:
        cfg = get_provider_config(PROVIDER_NAME, overrides={"api_key": api_key, "base_url": base_url})
        self._api_key: Optional[str] = cfg.get("api_key")
        self._base_url: Optional[str] = cfg.get("base_url")
        self._client = client
        self._client_lock = threading.Lock()
        return cfg

    def _get_client(self, model: str) -> Any:
        if self._client is not None:
            return self._client
        if OpenAI is None:
            raise ProviderError(
                code=ErrorCode.SDK_MISSING,
                message="openai SDK is not installed",
                provider=PROVIDER_NAME,
                model=model,
            )
        if not self._api_key:
            raise ProviderError(
                code=ErrorCode.AUTH,
                message="XAI_API_KEY is not set",
                provider=PROVIDER_NAME,
                model=model,
            )
        with self._client_lock:
            if self._client is None:
                self._client = OpenAI(api_key=self._api_key, base_url=self._base_url)
        return self._client


def _error_code(exc: BaseException) -> ErrorCode:
    if isinstance(exc, ProviderError):
        return exc.code
    return classify_exception(exc)


class XAIChatModel(_XAIClientMixin, HasDefaultModel):
    """Grok chat model."""

    def __init__(
        self,
        model_id: Optional[str] = None,
        *,
        client: Any = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
    ) -> None:
        cfg = self._init_client(client, api_key, base_url)
        self._model = model_id or str(cfg.get("model"))
        self._logger = get_logger("chat_providers.xai")

    @property
    def specification_version(self) -> str:
        return "v2"

    @property
    def provider(self) -> str:
        return PROVIDER_NAME

    @property
    def model_id(self) -> str:
        return self._model

    @property
    def supported_urls(self) -> Dict[str, List[str]]:
        return {"image/*": [r"^https?://.*$"]}

    def default_model(self) -> Optional[str]:
        return self._model

    def do_generate(self, options: Any) -> GenerateResult:
        opts = CallOptions.coerce(options)
        ctx = LogContext(provider=PROVIDER_NAME, model=self._model)
        params = build_chat_params(self._model, opts)
        normalized_log_event(self._logger, "generate.start", ctx, phase="start", messages=len(params["messages"]))
        t0 = time.perf_counter()
        try:
            resp = self._get_client(self._model).chat.completions.create(**params)
        except Exception as exc:
            code = _error_code(exc)
            normalized_log_event(
                self._logger,
                "generate.error",
                ctx,
                phase="finalize",
                error=str(exc),
                error_code=code.value,
                level=logging.ERROR,
            )
            meta = ProviderMetadata(
                provider_name=PROVIDER_NAME,
                model_name=self._model,
                extra={"error": str(exc), "code": code.value},
            )
            return GenerateResult(content=[ContentPart(type="text", text="")], finish_reason="error", meta=meta)

        latency_ms = (time.perf_counter() - t0) * 1000.0
        text = extract_choice_text(resp)
        choices = getattr(resp, "choices", None) or []
        finish = map_finish_reason(getattr(choices[0], "finish_reason", None) if choices else None)
        usage = usage_from_response(getattr(resp, "usage", None))
        normalized_log_event(
            self._logger,
            "generate.end",
            ctx,
            phase="finalize",
            emitted=bool(text),
            tokens=usage,
            latency_ms=latency_ms,
        )
        meta = ProviderMetadata(
            provider_name=PROVIDER_NAME,
            model_name=self._model,
            request_id=getattr(resp, "id", None),
            latency_ms=latency_ms,
        )
        return GenerateResult(
            content=[ContentPart(type="text", text=text)],
            finish_reason=finish,
            usage=usage,
            raw_call={"model": self._model},
            meta=meta,
        )

    def do_stream(self, options: Any) -> StreamResult:
        opts = CallOptions.coerce(options)
        params = build_chat_params(self._model, opts, stream=True)
        return StreamResult(stream=self._stream_parts(params), raw_call={"model": self._model})

    def _stream_parts(self, params: Dict[str, Any]) -> Iterator[StreamPart]:
        ctx = LogContext(provider=PROVIDER_NAME, model=self._model)
        block_id = SINGLE_TEXT_BLOCK_ID
        normalized_log_event(self._logger, "stream.start", ctx, phase="start")
        yield StreamPart.text_start(block_id)
        emitted = 0
        finish: FinishReason = "unknown"
        usage = Usage.unknown()
        try:
            for chunk in self._get_client(self._model).chat.completions.create(**params):
                delta = extract_delta_text(chunk)
                if delta:
                    emitted += 1
                    yield StreamPart.text_delta(block_id, delta)
                reason = extract_chunk_finish(chunk)
                if reason is not None:
                    finish = map_finish_reason(reason)
                if getattr(chunk, "usage", None) is not None:
                    usage = usage_from_response(chunk.usage)
        except Exception as exc:
            code = _error_code(exc)
            normalized_log_event(
                self._logger,
                "stream.error",
                ctx,
                phase="mid_stream" if emitted else "start",
                emitted=emitted,
                error=str(exc),
                error_code=code.value,
                level=logging.ERROR,
            )
            yield StreamPart(type="error", error=str(exc))
            yield StreamPart.text_end(block_id)
            yield StreamPart.finish("error", usage)
            return
        normalized_log_event(self._logger, "stream.end", ctx, phase="finalize", emitted=emitted, tokens=usage)
        yield StreamPart.text_end(block_id)
        yield StreamPart.finish(finish, usage)


class XAIImageModel(_XAIClientMixin):
    """Grok image generation model."""

    def __init__(
        self,
        model_id: str,
        *,
        client: Any = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
    ) -> None:
        self._init_client(client, api_key, base_url)
        self._model = model_id
        self._logger = get_logger("chat_providers.xai")

    @property
    def provider(self) -> str:
        return PROVIDER_NAME

    @property
    def model_id(self) -> str:
        return self._model

    def do_generate(self, prompt: str, *, n: int = 1, size: Optional[str] = None) -> ImageResult:
        ctx = LogContext(provider=PROVIDER_NAME, model=self._model)
        warnings: List[Dict[str, Any]] = []
        # The xAI images endpoint rejects explicit sizes.
        if size is not None:
            warnings.append({"type": "unsupported-setting", "setting": "size"})
        normalized_log_event(self._logger, "image.start", ctx, phase="start", n=n)
        try:
            resp = self._get_client(self._model).images.generate(
                model=self._model,
                prompt=prompt,
                n=n,
                response_format="b64_json",
            )
        except Exception as exc:
            code = _error_code(exc)
            normalized_log_event(
                self._logger,
                "image.error",
                ctx,
                phase="finalize",
                error=str(exc),
                error_code=code.value,
                level=logging.ERROR,
            )
            if isinstance(exc, ProviderError):
                raise
            raise ProviderError(
                code=code,
                message=str(exc),
                provider=PROVIDER_NAME,
                model=self._model,
                raw=exc,
            ) from exc
        images = [d.b64_json for d in (getattr(resp, "data", None) or []) if getattr(d, "b64_json", None)]
        normalized_log_event(self._logger, "image.end", ctx, phase="finalize", emitted=len(images))
        return ImageResult(images=images, warnings=warnings)


__all__ = ["XAIChatModel", "XAIImageModel"]
