"""Reasoning extraction middleware.

Some models interleave their chain of thought with the answer, wrapped in a
tag such as ``<think>...</think>``. :class:`ExtractReasoningMiddleware` moves
those spans out of the text:

* complete results get a ``reasoning`` content part followed by the text part
  with the tagged spans removed;
* streams get ``reasoning-start``/``reasoning-delta``/``reasoning-end`` parts
  in place of the tagged text. Tags may be split across deltas; a trailing
  fragment that could still become a tag is held back until the next delta
  (or the end of the block) decides it.
"""

from __future__ import annotations

import dataclasses
import re
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ..interfaces import LanguageModel
from ..models import CallOptions, ContentPart, GenerateResult
from ..streaming import StreamPart, StreamResult
from .middleware_base import LanguageModelMiddleware


def _partial_tag_length(buffer: str, tag: str) -> int:
    """Length of the longest suffix of ``buffer`` that is a proper prefix of ``tag``."""
    for k in range(min(len(tag) - 1, len(buffer)), 0, -1):
        if buffer.endswith(tag[:k]):
            return k
    return 0


def split_reasoning(text: str, open_tag: str, close_tag: str, separator: str) -> Tuple[Optional[str], str]:
    """Return ``(reasoning, remaining_text)``; reasoning is ``None`` when no span matched."""
    pattern = re.compile(re.escape(open_tag) + r"(.*?)" + re.escape(close_tag), re.DOTALL)
    matches = list(pattern.finditer(text))
    if not matches:
        return None, text
    reasoning = separator.join(m.group(1) for m in matches)
    remaining = text
    for m in reversed(matches):
        before = remaining[: m.start()]
        after = remaining[m.end() :]
        remaining = before + (separator if before and after else "") + after
    return reasoning, remaining


class _BlockSplitter:
    """Incremental tag splitter for one text block of a stream."""

    def __init__(self, block_id: str, open_tag: str, close_tag: str, separator: str, in_reasoning: bool) -> None:
        self._id = block_id
        self._open = open_tag
        self._close = close_tag
        self._separator = separator
        self._in_reasoning = in_reasoning
        self._buffer = ""
        self._reasoning_open = False
        self._reasoning_blocks = 0
        self._emitted = {True: False, False: False}
        self._pending_separator = False

    def _reasoning_id(self) -> str:
        return f"{self._id}-reasoning-{self._reasoning_blocks}"

    def _emit(self, text: str) -> Iterator[StreamPart]:
        if not text:
            return
        kind = self._in_reasoning
        if self._pending_separator and self._emitted[kind]:
            text = self._separator + text
        self._pending_separator = False
        self._emitted[kind] = True
        if kind:
            if not self._reasoning_open:
                self._reasoning_open = True
                yield StreamPart(type="reasoning-start", id=self._reasoning_id())
            yield StreamPart(type="reasoning-delta", id=self._reasoning_id(), delta=text)
        else:
            yield StreamPart.text_delta(self._id, text)

    def _close_reasoning(self) -> Iterator[StreamPart]:
        if self._reasoning_open:
            yield StreamPart(type="reasoning-end", id=self._reasoning_id())
            self._reasoning_open = False
            self._reasoning_blocks += 1

    def feed(self, delta: str) -> Iterator[StreamPart]:
        self._buffer += delta
        while True:
            tag = self._close if self._in_reasoning else self._open
            idx = self._buffer.find(tag)
            if idx == -1:
                keep = _partial_tag_length(self._buffer, tag)
                cut = len(self._buffer) - keep
                ready, self._buffer = self._buffer[:cut], self._buffer[cut:]
                yield from self._emit(ready)
                return
            yield from self._emit(self._buffer[:idx])
            self._buffer = self._buffer[idx + len(tag) :]
            if self._in_reasoning:
                yield from self._close_reasoning()
            self._in_reasoning = not self._in_reasoning
            self._pending_separator = True

    def flush(self) -> Iterator[StreamPart]:
        rest, self._buffer = self._buffer, ""
        yield from self._emit(rest)
        yield from self._close_reasoning()


class ExtractReasoningMiddleware(LanguageModelMiddleware):
    """Extract ``<tag_name>`` spans from model text as reasoning.

    Parameters:
        tag_name: Tag without angle brackets, e.g. ``"think"``.
        separator: Joins multiple reasoning spans and the text around a
            removed span.
        start_with_reasoning: Treat the output as starting inside an open tag
            (for models that omit the opening tag).
    """

    def __init__(self, tag_name: str, separator: str = "\n", start_with_reasoning: bool = False) -> None:
        self.tag_name = tag_name
        self.open_tag = f"<{tag_name}>"
        self.close_tag = f"</{tag_name}>"
        self.separator = separator
        self.start_with_reasoning = start_with_reasoning

    def wrap_generate(
        self,
        do_generate: Callable[[], GenerateResult],
        options: CallOptions,
        model: LanguageModel,
    ) -> GenerateResult:
        result = do_generate()
        content: List[ContentPart] = []
        for part in result.content:
            if part.type != "text" or part.text is None:
                content.append(part)
                continue
            text = self.open_tag + part.text if self.start_with_reasoning else part.text
            reasoning, remaining = split_reasoning(text, self.open_tag, self.close_tag, self.separator)
            if reasoning is None:
                content.append(part)
                continue
            content.append(ContentPart(type="reasoning", text=reasoning))
            content.append(dataclasses.replace(part, text=remaining))
        return dataclasses.replace(result, content=content)

    def wrap_stream(
        self,
        do_stream: Callable[[], StreamResult],
        options: CallOptions,
        model: LanguageModel,
    ) -> StreamResult:
        result = do_stream()
        return dataclasses.replace(result, stream=self._split_stream(result.stream))

    def _split_stream(self, parts: Iterable[StreamPart]) -> Iterator[StreamPart]:
        blocks: Dict[str, _BlockSplitter] = {}
        for part in parts:
            key = part.id or ""
            if part.type == "text-delta":
                splitter = blocks.get(key)
                if splitter is None:
                    splitter = _BlockSplitter(
                        key, self.open_tag, self.close_tag, self.separator, self.start_with_reasoning
                    )
                    blocks[key] = splitter
                yield from splitter.feed(part.delta or "")
                continue
            if part.type == "text-end" and key in blocks:
                yield from blocks.pop(key).flush()
            elif part.type == "finish":
                for splitter in blocks.values():
                    yield from splitter.flush()
                blocks.clear()
            yield part


__all__ = ["ExtractReasoningMiddleware", "split_reasoning"]
