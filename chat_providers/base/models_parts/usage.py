"""Token usage counts attached to results and finish stream parts."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Usage:
    """Token accounting for one invocation.

    Every count is ``None`` when the provider does not report it; the Bedrock
    adapter never does.
    """

    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    @classmethod
    def unknown(cls) -> "Usage":
        return cls()

    @classmethod
    def from_counts(cls, input_tokens: Any, output_tokens: Any, total_tokens: Any = None) -> "Usage":
        """Build usage from loosely typed counts; invalid values become ``None``.

        ``total_tokens`` is derived only when both components are known.
        """
        prompt = _coerce_count(input_tokens)
        completion = _coerce_count(output_tokens)
        total = _coerce_count(total_tokens)
        if total is None and prompt is not None and completion is not None:
            total = prompt + completion
        return cls(input_tokens=prompt, output_tokens=completion, total_tokens=total)

    def is_unknown(self) -> bool:
        return self.input_tokens is None and self.output_tokens is None and self.total_tokens is None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _coerce_count(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        n = int(value)
    except (TypeError, ValueError):
        return None
    return n if n >= 0 else None


__all__ = ["Usage"]
