"""Stream result container and helpers.

``StreamResult`` wraps the part iterator handed back by ``do_stream``. Adapters
whose backend cannot stream build their stream with :func:`single_chunk_stream`
and mark the result ``synthesized`` so consumers know the whole text arrives
at once, after the remote call has completed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional

from ..models import ContentPart, FinishReason, GenerateResult, Usage
from .stream_part import DELTA_TYPES, StreamPart

SINGLE_TEXT_BLOCK_ID = "1"


@dataclass
class StreamResult:
    """Incremental result of one ``do_stream`` call.

    Attributes:
        stream: Iterator over the stream parts; consumed once.
        synthesized: True when the parts replay an already-complete response.
        raw_call: Description of the raw provider call, if exposed.
        warnings: Adapter warnings such as unsupported settings.
    """

    stream: Iterator[StreamPart]
    synthesized: bool = False
    raw_call: Dict[str, Any] = field(default_factory=dict)
    warnings: List[Dict[str, Any]] = field(default_factory=list)

    def __iter__(self) -> Iterator[StreamPart]:
        return iter(self.stream)


def single_chunk_stream(
    text: str,
    *,
    finish_reason: FinishReason = "stop",
    usage: Optional[Usage] = None,
    block_id: str = SINGLE_TEXT_BLOCK_ID,
) -> Iterator[StreamPart]:
    """Yield the fixed four-part sequence carrying ``text`` as one delta."""
    yield StreamPart.text_start(block_id)
    yield StreamPart.text_delta(block_id, text)
    yield StreamPart.text_end(block_id)
    yield StreamPart.finish(finish_reason, usage or Usage.unknown())


def accumulate_parts(parts: Iterable[StreamPart]) -> GenerateResult:
    """Fold a stream back into a :class:`GenerateResult`.

    Text and reasoning deltas are concatenated per kind; the terminal
    ``finish`` part supplies the finish reason and usage. A stream that ends
    without a ``finish`` part reports ``"unknown"``; an ``error`` part forces
    ``"error"``.
    """
    text_chunks: List[str] = []
    reasoning_chunks: List[str] = []
    finish_reason: FinishReason = "unknown"
    usage = Usage.unknown()
    errors: List[str] = []
    for part in parts:
        if part.type in DELTA_TYPES:
            if part.delta:
                (text_chunks if part.type == "text-delta" else reasoning_chunks).append(part.delta)
        elif part.type == "error":
            errors.append(part.error or "unknown error")
        elif part.type == "finish":
            finish_reason = part.finish_reason or "unknown"
            usage = part.usage or Usage.unknown()
    content: List[ContentPart] = []
    if reasoning_chunks:
        content.append(ContentPart(type="reasoning", text="".join(reasoning_chunks)))
    content.append(ContentPart(type="text", text="".join(text_chunks)))
    warnings: List[Dict[str, Any]] = [{"type": "stream-error", "message": e} for e in errors]
    return GenerateResult(
        content=content,
        finish_reason="error" if errors else finish_reason,
        usage=usage,
        warnings=warnings,
    )


__all__ = [
    "StreamResult",
    "single_chunk_stream",
    "accumulate_parts",
    "SINGLE_TEXT_BLOCK_ID",
]
