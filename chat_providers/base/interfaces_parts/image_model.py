"""ImageModel Protocol (single-class module) and its result DTO."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


@dataclass
class ImageResult:
    """Generated images as base64 strings plus adapter warnings."""

    images: List[str]
    warnings: List[Dict[str, Any]] = field(default_factory=list)


@runtime_checkable
class ImageModel(Protocol):
    """Contract for text-to-image models exposed through the registry."""

    @property
    def provider(self) -> str:
        ...

    @property
    def model_id(self) -> str:
        ...

    def do_generate(self, prompt: str, *, n: int = 1, size: Optional[str] = None) -> ImageResult:
        """Generate ``n`` images for ``prompt``."""
        ...
