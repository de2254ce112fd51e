"""Bedrock helpers module.

Purpose:
- Side-effect-free pieces of the Bedrock ``InvokeModel`` round trip: request
  construction, SDK invocation, body decoding and response text extraction.
  The adapter in ``client.py`` composes them and owns logging and metrics.

External dependencies:
- A ``bedrock-runtime`` client from ``boto3`` (or any object exposing
  ``invoke_model`` with the same keyword arguments). This module never
  imports the SDK itself.

Failure semantics:
- Every helper raises on failure; nothing here masks errors. Response shapes
  that cannot be read as a Claude message (non-object bodies, error
  envelopes, a non-list ``content``) raise :class:`RemoteCallFailed`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..base.errors import ErrorCode, RemoteCallFailed, classify_exception
from ..base.models import InvocationRequest
from ..config.defaults import (
    BEDROCK_ANTHROPIC_VERSION,
    BEDROCK_CONTENT_TYPE,
    BEDROCK_MAX_TOKENS,
)

PROVIDER_NAME = "bedrock"

RETRYABLE_CODES = (ErrorCode.TRANSIENT, ErrorCode.RATE_LIMIT, ErrorCode.TIMEOUT, ErrorCode.UNAVAILABLE)


@dataclass
class InvokeModelReply:
    """Decoded ``InvokeModel`` reply."""

    body: Any
    request_id: Optional[str] = None
    http_status: Optional[int] = None


def build_request(model_id: str, prompt_text: str) -> InvocationRequest:
    """Build the immutable request record for one invocation."""
    return InvocationRequest(
        model_id=model_id,
        prompt_text=prompt_text,
        max_tokens=BEDROCK_MAX_TOKENS,
        anthropic_version=BEDROCK_ANTHROPIC_VERSION,
    )


def _decode_body(body: Any) -> Any:
    data = body.read() if hasattr(body, "read") else body
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8")
    if isinstance(data, str):
        return json.loads(data)
    return data


def invoke_model(client: Any, request: InvocationRequest) -> InvokeModelReply:
    """Send ``request`` through ``client.invoke_model`` and decode the JSON body.

    Raises:
        Exception: whatever the SDK raises (``botocore`` ``ClientError``,
            connection errors) or ``json.JSONDecodeError`` for a body that is
            not JSON.
    """
    response = client.invoke_model(
        modelId=request.model_id,
        contentType=BEDROCK_CONTENT_TYPE,
        accept=BEDROCK_CONTENT_TYPE,
        body=json.dumps(request.to_body()),
    )
    meta: Mapping[str, Any] = response.get("ResponseMetadata") or {}
    return InvokeModelReply(
        body=_decode_body(response.get("body")),
        request_id=meta.get("RequestId"),
        http_status=meta.get("HTTPStatusCode"),
    )


def extract_response_text(body: Any, model: Optional[str] = None) -> str:
    """Join the ``text`` of each ``content`` item with a single space.

    Items without a string ``text`` (e.g. tool use blocks) are skipped. A body
    with no ``content`` (or an empty one) yields ``""``.
    """
    if not isinstance(body, Mapping):
        raise RemoteCallFailed(
            code=ErrorCode.MALFORMED_RESPONSE,
            message=f"expected a JSON object, got {type(body).__name__}",
            provider=PROVIDER_NAME,
            model=model,
        )
    if body.get("type") == "error":
        err = body.get("error") if isinstance(body.get("error"), Mapping) else {}
        message = str(err.get("message") or "error response")
        code = classify_exception(Exception(f"{err.get('type', '')} {message}"))
        raise RemoteCallFailed(code=code, message=message, provider=PROVIDER_NAME, model=model)
    content = body.get("content")
    if not content:
        return ""
    if not isinstance(content, list):
        raise RemoteCallFailed(
            code=ErrorCode.MALFORMED_RESPONSE,
            message=f"'content' must be a list, got {type(content).__name__}",
            provider=PROVIDER_NAME,
            model=model,
        )
    return " ".join(
        item["text"] for item in content if isinstance(item, Mapping) and isinstance(item.get("text"), str)
    )


def to_remote_call_failed(exc: BaseException, model: Optional[str]) -> RemoteCallFailed:
    """Normalize any exception raised during an invocation into ``RemoteCallFailed``."""
    if isinstance(exc, RemoteCallFailed):
        return exc
    code = classify_exception(exc)
    return RemoteCallFailed(
        code=code,
        message=str(exc) or type(exc).__name__,
        provider=PROVIDER_NAME,
        model=model,
        retryable=code in RETRYABLE_CODES,
        raw=exc,
    )


def unsupported_setting_warnings(settings: Dict[str, Any]) -> list:
    """Warnings for caller settings the fixed Bedrock request ignores."""
    return [{"type": "unsupported-setting", "setting": name} for name in sorted(settings)]


__all__ = [
    "InvokeModelReply",
    "build_request",
    "invoke_model",
    "extract_response_text",
    "to_remote_call_failed",
    "unsupported_setting_warnings",
    "PROVIDER_NAME",
]
