"""
Structured content part model for model output.

A result's ``content`` is a list of parts; adapters that only produce text
emit a single ``"text"`` part. The reasoning middleware adds ``"reasoning"``
parts ahead of the text it was extracted from.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional


ContentPartType = Literal[
    "text",          # Plain text content
    "reasoning",     # Model reasoning extracted from tagged spans
    "json",          # JSON content as string
    "tool_call",     # Tool call metadata
    "other",         # Catch-all for adapter-specific payloads
]


@dataclass
class ContentPart:
    """A single piece of model output.

    Attributes:
        type: Semantic kind of the part, e.g. ``"text"``.
        text: Textual content for human-readable parts.
        data: Adapter-specific payload for non-text parts.
    """

    type: ContentPartType
    text: Optional[str] = None
    data: Optional[Dict[str, Any]] = field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire shape ``{"type": ..., "text": ...}`` without empty keys."""
        out: Dict[str, Any] = {"type": self.type}
        if self.text is not None:
            out["text"] = self.text
        if self.data is not None:
            out["data"] = self.data
        return out


__all__ = [
    "ContentPart",
    "ContentPartType",
]
