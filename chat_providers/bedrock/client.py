"""Bedrock Claude adapter.

Purpose:
- Expose Anthropic Claude hosted on Amazon Bedrock as a ``LanguageModel``
  (specification version ``v2``, provider ``bedrock``).
- Each call flattens the prompt to one string, sends it as a single user
  message through ``InvokeModel`` and joins the returned text blocks.

External dependencies:
- ``boto3`` (``bedrock-runtime`` client). A client may be injected; otherwise
  one is created lazily on first use from the merged provider config.

Failure semantics:
- :meth:`BedrockClaudeProvider.invoke` never raises: it returns an
  :class:`InvocationOutcome` carrying either the text or a
  :class:`RemoteCallFailed`, and logs failures at ERROR.
- With ``mask_errors`` (default) ``do_generate``/``do_stream`` substitute the
  fixed failure sentinel for the text and record the error in ``meta.extra``;
  otherwise they raise the ``RemoteCallFailed``.

Streaming:
- Bedrock is called without streaming. ``do_stream`` performs the full call
  and replays the result as one text block (``StreamResult.synthesized``).
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Dict, List, Optional

try:
    import boto3
except Exception:  # pragma: no cover
    boto3 = None  # type: ignore

from ..base.errors import ErrorCode, RemoteCallFailed
from ..base.interfaces import HasDefaultModel
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.metrics import InvocationCounters, InvocationCountersSnapshot
from ..base.models import (
    CallOptions,
    ContentPart,
    GenerateResult,
    InvocationOutcome,
    ProviderMetadata,
    Usage,
)
from ..base.prompt import flatten_prompt
from ..base.streaming import StreamResult, single_chunk_stream
from ..config import get_provider_config
from ..config.defaults import BEDROCK_FAILURE_SENTINEL, BEDROCK_RUNTIME_SERVICE
from .helpers import (
    PROVIDER_NAME,
    build_request,
    extract_response_text,
    invoke_model,
    to_remote_call_failed,
    unsupported_setting_warnings,
)


def create_bedrock_client(
    region: Optional[str] = None,
    access_key_id: str = "",
    secret_access_key: str = "",
) -> Any:
    """Create a ``bedrock-runtime`` client with explicit static credentials.

    Empty credentials are passed through as given; AWS rejects the signed
    request and the adapter reports that as a failed invocation.
    """
    if boto3 is None:
        raise RemoteCallFailed(
            code=ErrorCode.SDK_MISSING,
            message="boto3 is not installed",
            provider=PROVIDER_NAME,
        )
    session = boto3.session.Session()
    return session.client(
        BEDROCK_RUNTIME_SERVICE,
        region_name=region or None,
        aws_access_key_id=access_key_id,
        aws_secret_access_key=secret_access_key,
    )


class BedrockClaudeProvider(HasDefaultModel):
    """``LanguageModel`` backed by Claude on Amazon Bedrock."""

    def __init__(
        self,
        client: Any = None,
        *,
        model: Optional[str] = None,
        region: Optional[str] = None,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        mask_errors: Optional[bool] = None,
    ) -> None:
        cfg = get_provider_config(
            PROVIDER_NAME,
            overrides={
                "model": model,
                "region": region,
                "access_key_id": access_key_id,
                "secret_access_key": secret_access_key,
                "mask_errors": mask_errors,
            },
        )
        self._model: str = str(cfg["model"])
        self._region: Optional[str] = cfg.get("region")
        self._access_key_id: str = cfg.get("access_key_id") or ""
        self._secret_access_key: str = cfg.get("secret_access_key") or ""
        self._mask_errors = bool(cfg.get("mask_errors", True))
        self._client = client
        self._client_lock = threading.Lock()
        self._logger = get_logger("chat_providers.bedrock")
        self._counters = InvocationCounters(PROVIDER_NAME)

    # ----- LanguageModel surface -----
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
        return {}

    @property
    def mask_errors(self) -> bool:
        return self._mask_errors

    def default_model(self) -> Optional[str]:
        return self._model

    def counters_snapshot(self, reset: bool = False) -> InvocationCountersSnapshot:
        return self._counters.snapshot(reset=reset)

    # ----- client -----
    def _get_client(self) -> Any:
        """Return the injected client or build one on first use.

        Creation happens inside the guarded invocation so configuration
        problems (no region, missing SDK) surface as failed invocations.
        """
        if self._client is not None:
            return self._client
        with self._client_lock:
            if self._client is None:
                self._client = create_bedrock_client(
                    region=self._region,
                    access_key_id=self._access_key_id,
                    secret_access_key=self._secret_access_key,
                )
        return self._client

    # ----- invocation -----
    def invoke(self, prompt_text: str) -> InvocationOutcome:
        """Send ``prompt_text`` as one user message and return the outcome.

        Never raises; any failure (client creation, transport, service error,
        unreadable body) is returned as ``outcome.failure``.
        """
        request = build_request(self._model, prompt_text)
        ctx = LogContext(provider=PROVIDER_NAME, model=self._model)
        normalized_log_event(
            self._logger,
            "invoke.start",
            ctx,
            phase="start",
            prompt=prompt_text,
            max_tokens=request.max_tokens,
        )
        self._counters.record_start()
        t0 = time.perf_counter()
        try:
            reply = invoke_model(self._get_client(), request)
            text = extract_response_text(reply.body, model=self._model)
        except Exception as exc:
            latency_ms = (time.perf_counter() - t0) * 1000.0
            failure = to_remote_call_failed(exc, self._model)
            self._counters.record_failure(failure.code.value, int(latency_ms))
            normalized_log_event(
                self._logger,
                "invoke.error",
                ctx,
                phase="finalize",
                error=failure.message,
                error_code=failure.code.value,
                latency_ms=latency_ms,
                level=logging.ERROR,
            )
            return InvocationOutcome(failure=failure, latency_ms=latency_ms)

        latency_ms = (time.perf_counter() - t0) * 1000.0
        self._counters.record_success(int(latency_ms))
        normalized_log_event(
            self._logger,
            "invoke.end",
            ctx,
            phase="finalize",
            emitted=bool(text),
            response=reply.body,
            request_id=reply.request_id,
            latency_ms=latency_ms,
        )
        return InvocationOutcome(
            text=text,
            response=reply.body,
            request_id=reply.request_id,
            http_status=reply.http_status,
            latency_ms=latency_ms,
        )

    def _resolve_text(self, outcome: InvocationOutcome) -> str:
        if self._mask_errors:
            return outcome.text_or(BEDROCK_FAILURE_SENTINEL)
        return outcome.unwrap()

    def _metadata(self, outcome: InvocationOutcome, **extra: Any) -> ProviderMetadata:
        details: Dict[str, Any] = dict(extra)
        if outcome.failure is not None:
            details |= {
                "error": outcome.failure.message,
                "code": outcome.failure.code.value,
                "masked": True,
            }
        return ProviderMetadata(
            provider_name=PROVIDER_NAME,
            model_name=self._model,
            http_status=outcome.http_status,
            request_id=outcome.request_id,
            latency_ms=outcome.latency_ms,
            extra=details,
        )

    def do_generate(self, options: Any) -> GenerateResult:
        """Run one complete invocation.

        Returns a single text part with finish reason ``"stop"`` and unknown
        usage. Raises :class:`RemoteCallFailed` only when masking is off.
        """
        opts = CallOptions.coerce(options)
        outcome = self.invoke(flatten_prompt(opts.prompt))
        text = self._resolve_text(outcome)
        return GenerateResult(
            content=[ContentPart(type="text", text=text)],
            finish_reason="stop",
            usage=Usage.unknown(),
            raw_call={},
            warnings=unsupported_setting_warnings(opts.set_settings()),
            meta=self._metadata(outcome),
        )

    def do_stream(self, options: Any) -> StreamResult:
        """Run one complete invocation and replay it as a stream.

        The remote call finishes before this method returns; the stream then
        yields ``text-start``, one ``text-delta`` with the whole text,
        ``text-end`` and ``finish``, all on block id ``"1"``.
        """
        opts = CallOptions.coerce(options)
        outcome = self.invoke(flatten_prompt(opts.prompt))
        text = self._resolve_text(outcome)
        normalized_log_event(
            self._logger,
            "stream.replay",
            LogContext(provider=PROVIDER_NAME, model=self._model),
            phase="finalize",
            emitted=1,
            masked=(not outcome.ok) or None,
        )
        return StreamResult(
            stream=single_chunk_stream(text, finish_reason="stop", usage=Usage.unknown()),
            synthesized=True,
            raw_call={},
            warnings=unsupported_setting_warnings(opts.set_settings()),
        )


__all__ = ["BedrockClaudeProvider", "create_bedrock_client"]
