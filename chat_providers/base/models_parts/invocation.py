"""
Remote invocation request and outcome records.

``InvocationRequest`` is the immutable description of one Bedrock
``InvokeModel`` call. ``InvocationOutcome`` is its explicit result: either the
joined response text or a :class:`RemoteCallFailed`. Callers choose whether to
surface the failure (``unwrap``) or mask it (``text_or``).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..errors import RemoteCallFailed


@dataclass(frozen=True)
class InvocationRequest:
    """One remote model invocation.

    Attributes:
        model_id: Bedrock model identifier.
        prompt_text: Flattened prompt sent as the single user message.
        max_tokens: Completion limit sent on the wire.
        anthropic_version: Protocol version tag required by Bedrock.
    """

    model_id: str
    prompt_text: str
    max_tokens: int
    anthropic_version: str

    def to_body(self) -> Dict[str, Any]:
        """Return the JSON request body."""
        return {
            "anthropic_version": self.anthropic_version,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": self.prompt_text}],
        }


@dataclass
class InvocationOutcome:
    """Success payload or typed failure of one remote invocation."""

    text: Optional[str] = None
    failure: Optional[RemoteCallFailed] = None
    response: Optional[Dict[str, Any]] = None
    request_id: Optional[str] = None
    http_status: Optional[int] = None
    latency_ms: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> str:
        """Return the response text or raise the recorded failure."""
        if self.failure is not None:
            raise self.failure
        return self.text or ""

    def text_or(self, fallback: str) -> str:
        """Return the response text, or ``fallback`` when the call failed."""
        if self.failure is not None:
            return fallback
        return self.text or ""


__all__ = ["InvocationRequest", "InvocationOutcome"]
