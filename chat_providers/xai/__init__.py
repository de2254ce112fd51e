"""xAI (Grok) chat and image models."""

from .client import XAIChatModel, XAIImageModel

__all__ = ["XAIChatModel", "XAIImageModel"]
