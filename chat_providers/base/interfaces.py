"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports the single-class modules under
``chat_providers.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import HasDefaultModel, ImageModel, ImageResult, LanguageModel

__all__ = [
    "LanguageModel",
    "ImageModel",
    "ImageResult",
    "HasDefaultModel",
]
