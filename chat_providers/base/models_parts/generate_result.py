"""
GenerateResult DTO: the complete (non-streaming) result envelope.

Shape expected by the chat application: content parts, a finish reason, token
usage, the raw call description and warnings. ``meta`` carries adapter
diagnostics and is not part of that envelope.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from .content_part import ContentPart
from .provider_metadata import ProviderMetadata
from .usage import Usage


FinishReason = Literal["stop", "length", "content-filter", "tool-calls", "error", "other", "unknown"]


@dataclass
class GenerateResult:
    """Complete result of one ``do_generate`` call.

    Attributes:
        content: Ordered output parts.
        finish_reason: Why generation ended.
        usage: Token counts, possibly all unknown.
        raw_call: Description of the raw provider call, if exposed.
        warnings: Adapter warnings such as unsupported settings.
        meta: Adapter diagnostics (latency, masked error details).
    """

    content: List[ContentPart]
    finish_reason: FinishReason
    usage: Usage = field(default_factory=Usage)
    raw_call: Dict[str, Any] = field(default_factory=dict)
    warnings: List[Dict[str, Any]] = field(default_factory=list)
    meta: Optional[ProviderMetadata] = None

    @property
    def text(self) -> str:
        """Concatenated text of all ``text`` parts."""
        return "".join(p.text or "" for p in self.content if p.type == "text")

    @property
    def reasoning(self) -> Optional[str]:
        parts = [p.text or "" for p in self.content if p.type == "reasoning"]
        return "".join(parts) if parts else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": [p.to_dict() for p in self.content],
            "finish_reason": self.finish_reason,
            "usage": self.usage.to_dict(),
            "raw_call": self.raw_call,
            "warnings": list(self.warnings),
        }


__all__ = [
    "FinishReason",
    "GenerateResult",
]
