"""HasDefaultModel Protocol (single-class module)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HasDefaultModel(Protocol):
    """Interface for adapters that resolve a default model from config."""

    def default_model(self) -> Optional[str]:  # pragma: no cover - trivial
        """Return the default model identifier, if available."""
        return None
