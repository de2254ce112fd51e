"""
Provider call metadata model.

Diagnostic metadata for one model invocation (latency, request identifier,
HTTP status, adapter notes). Masked failures record their error text and
code under ``extra`` so they stay observable even though the result looks
like a normal completion.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ProviderMetadata:
    """Execution metadata for a provider call.

    Attributes:
        provider_name: Canonical provider key (e.g., ``"bedrock"``).
        model_name: Resolved model identifier used for the call.
        http_status: HTTP status code when the SDK reports one.
        request_id: Provider request identifier when available.
        latency_ms: Wall-clock latency of the remote call in milliseconds.
        extra: JSON-serializable map for adapter-specific diagnostics.
    """

    provider_name: str
    model_name: str
    http_status: Optional[int] = None
    request_id: Optional[str] = None
    latency_ms: Optional[float] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the metadata fields."""
        return asdict(self)


__all__ = [
    "ProviderMetadata",
]
