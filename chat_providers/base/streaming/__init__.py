"""Streaming package for the provider layer.

Exposes the stream part DTO, the stream result container and its helpers.
"""

from .stream_part import DELTA_TYPES, StreamPart, StreamPartType
from .streaming import SINGLE_TEXT_BLOCK_ID, StreamResult, accumulate_parts, single_chunk_stream

__all__ = [
    "StreamPart",
    "StreamPartType",
    "DELTA_TYPES",
    "StreamResult",
    "single_chunk_stream",
    "accumulate_parts",
    "SINGLE_TEXT_BLOCK_ID",
]
