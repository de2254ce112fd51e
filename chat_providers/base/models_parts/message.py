"""
Chat message DTO.

Prompts handed to the models may be plain strings, arbitrary nested values,
or lists of these messages. ``content`` is left loosely typed because the
prompt flattener accepts any nested shape.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal


# Message roles used across providers.
Role = Literal["system", "user", "assistant", "tool"]


@dataclass
class Message:
    """A chat message.

    Attributes:
        role: Author role (``"system"``, ``"user"``, ``"assistant"`` or ``"tool"``).
        content: Text, or a nested structure of parts (``{"type": "text",
            "text": ...}`` mappings, lists, further messages).
    """

    role: Role
    content: Any

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


__all__ = [
    "Message",
    "Role",
]
