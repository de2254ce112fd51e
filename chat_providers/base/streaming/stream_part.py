"""Stream part DTO for incremental delivery.

A stream is an ordered sequence of parts: ``text-start``, one or more
``text-delta``, ``text-end`` (optionally interleaved with the ``reasoning-*``
equivalents), then exactly one terminal ``finish`` part. An ``error`` part may
precede the ``finish`` part when an adapter reports failures in-band.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

from ..models import FinishReason, Usage

StreamPartType = Literal[
    "text-start",
    "text-delta",
    "text-end",
    "reasoning-start",
    "reasoning-delta",
    "reasoning-end",
    "error",
    "finish",
]

DELTA_TYPES = frozenset({"text-delta", "reasoning-delta"})


@dataclass
class StreamPart:
    """One event of an incremental result.

    Fields:
      type: part kind
      id: block identifier shared by the start/delta/end parts of one block
      delta: text carried by ``*-delta`` parts
      finish_reason: set on ``finish`` parts
      usage: set on ``finish`` parts
      error: set on ``error`` parts
    """

    type: StreamPartType
    id: Optional[str] = None
    delta: Optional[str] = None
    finish_reason: Optional[FinishReason] = None
    usage: Optional[Usage] = None
    error: Optional[str] = None

    @classmethod
    def text_start(cls, id: str) -> "StreamPart":
        return cls(type="text-start", id=id)

    @classmethod
    def text_delta(cls, id: str, delta: str) -> "StreamPart":
        return cls(type="text-delta", id=id, delta=delta)

    @classmethod
    def text_end(cls, id: str) -> "StreamPart":
        return cls(type="text-end", id=id)

    @classmethod
    def finish(cls, finish_reason: FinishReason, usage: Optional[Usage] = None) -> "StreamPart":
        return cls(type="finish", finish_reason=finish_reason, usage=usage or Usage.unknown())

    @property
    def is_terminal(self) -> bool:
        return self.type == "finish"

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type}
        if self.id is not None:
            out["id"] = self.id
        if self.delta is not None:
            out["delta"] = self.delta
        if self.finish_reason is not None:
            out["finish_reason"] = self.finish_reason
        if self.usage is not None:
            out["usage"] = self.usage.to_dict()
        if self.error is not None:
            out["error"] = self.error
        return out


__all__ = ["StreamPart", "StreamPartType", "DELTA_TYPES"]
