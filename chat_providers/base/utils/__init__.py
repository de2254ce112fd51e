"""Small helpers built on the model interfaces."""

from .simple import generate_text, stream_text

__all__ = ["generate_text", "stream_text"]
