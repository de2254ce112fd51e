"""Prompt flattening.

Chat applications hand models prompts of arbitrary shape: a string, a list of
messages, message mappings whose ``content`` is itself a list of parts, and
so on. Adapters whose backend takes a single text turn reduce such a value to
one newline-joined string.

The value is first parsed into a small tagged union (:class:`TextPrompt`,
:class:`SequencePrompt`, :class:`StructuredMessage`, :class:`EmptyPrompt`)
and :func:`flatten_prompt` then dispatches over the variants. Flattening is
lossy: message boundaries collapse into newlines and non-text values vanish.

Rules
-----
* text: returned unchanged.
* sequence: each element flattened, joined with ``"\\n"`` (empty elements
  kept, so ``flatten([a, b]) == flatten(a) + "\\n" + flatten(b)``).
* structured message, first match wins:
    1. ``content`` is text → that text;
    2. ``text`` is text → that text;
    3. ``content`` is a sequence → its elements flattened and newline-joined;
    4. otherwise every field value flattened, non-empty results newline-joined.
* anything else (numbers, ``None``, bytes, opaque objects) → ``""``.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import BaseModel

NEWLINE = "\n"


@dataclass(frozen=True)
class TextPrompt:
    text: str


@dataclass(frozen=True)
class SequencePrompt:
    items: Tuple["PromptNode", ...]


@dataclass(frozen=True)
class StructuredMessage:
    """A message-like object, kept as its ordered ``(field, node)`` pairs."""

    fields: Tuple[Tuple[str, "PromptNode"], ...]

    def get(self, name: str) -> Optional["PromptNode"]:
        for key, node in self.fields:
            if key == name:
                return node
        return None


@dataclass(frozen=True)
class EmptyPrompt:
    """A value that carries no text."""


PromptNode = Union[TextPrompt, SequencePrompt, StructuredMessage, EmptyPrompt]

_NODE_TYPES = (TextPrompt, SequencePrompt, StructuredMessage, EmptyPrompt)


def _structured_fields(value: Any) -> Optional[Tuple[Tuple[str, Any], ...]]:
    """Return the ordered fields of a message-like value, or ``None``."""
    if isinstance(value, Mapping):
        return tuple((str(k), v) for k, v in value.items())
    if isinstance(value, BaseModel):
        return tuple((str(k), v) for k, v in value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return tuple((f.name, getattr(value, f.name)) for f in dataclasses.fields(value))
    return None


def parse_prompt(value: Any) -> PromptNode:
    """Parse an arbitrary prompt value into a :data:`PromptNode`."""
    if isinstance(value, _NODE_TYPES):
        return value
    if isinstance(value, str):
        return TextPrompt(value)
    if isinstance(value, (list, tuple)):
        return SequencePrompt(tuple(parse_prompt(v) for v in value))
    fields = _structured_fields(value)
    if fields is not None:
        return StructuredMessage(tuple((k, parse_prompt(v)) for k, v in fields))
    return EmptyPrompt()


def _flatten_node(node: PromptNode) -> str:
    if isinstance(node, TextPrompt):
        return node.text
    if isinstance(node, SequencePrompt):
        return NEWLINE.join(_flatten_node(item) for item in node.items)
    if isinstance(node, StructuredMessage):
        content = node.get("content")
        if isinstance(content, TextPrompt):
            return content.text
        text = node.get("text")
        if isinstance(text, TextPrompt):
            return text.text
        if isinstance(content, SequencePrompt):
            return _flatten_node(content)
        flattened = (_flatten_node(child) for _, child in node.fields)
        return NEWLINE.join(s for s in flattened if s)
    return ""


def flatten_prompt(prompt: Any) -> str:
    """Reduce a prompt of any shape to a single string. Never raises."""
    return _flatten_node(parse_prompt(prompt))


__all__ = [
    "TextPrompt",
    "SequencePrompt",
    "StructuredMessage",
    "EmptyPrompt",
    "PromptNode",
    "parse_prompt",
    "flatten_prompt",
]
