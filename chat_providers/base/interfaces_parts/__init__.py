"""Interface parts package: one Protocol per module."""

from .has_default_model import HasDefaultModel
from .image_model import ImageModel, ImageResult
from .language_model import LanguageModel

__all__ = ["LanguageModel", "ImageModel", "ImageResult", "HasDefaultModel"]
