"""Model registry keyed by logical model name.

``custom_provider`` builds an immutable table mapping the names a chat
application asks for (``"chat-model"``, ``"title-model"``, ...) to concrete
language and image model instances.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .errors import ErrorCode, NoSuchModelError
from .interfaces import ImageModel, LanguageModel


class CustomProvider:
    """Lookup table of language and image models."""

    def __init__(
        self,
        language_models: Optional[Mapping[str, LanguageModel]] = None,
        image_models: Optional[Mapping[str, ImageModel]] = None,
        name: str = "custom",
    ) -> None:
        self._language_models = MappingProxyType(dict(language_models or {}))
        self._image_models = MappingProxyType(dict(image_models or {}))
        self._name = name

    def language_model(self, model_id: str) -> LanguageModel:
        """Return the language model registered as ``model_id``.

        Raises:
            NoSuchModelError: when nothing is registered under that name.
        """
        try:
            return self._language_models[model_id]
        except KeyError:
            raise NoSuchModelError(
                code=ErrorCode.NOT_FOUND,
                message=f"no language model named '{model_id}'",
                provider=self._name,
                model=model_id,
            ) from None

    def image_model(self, model_id: str) -> ImageModel:
        try:
            return self._image_models[model_id]
        except KeyError:
            raise NoSuchModelError(
                code=ErrorCode.NOT_FOUND,
                message=f"no image model named '{model_id}'",
                provider=self._name,
                model=model_id,
            ) from None

    def language_model_names(self) -> Tuple[str, ...]:
        return tuple(self._language_models)

    def image_model_names(self) -> Tuple[str, ...]:
        return tuple(self._image_models)


def custom_provider(
    *,
    language_models: Optional[Mapping[str, LanguageModel]] = None,
    image_models: Optional[Mapping[str, ImageModel]] = None,
) -> CustomProvider:
    return CustomProvider(language_models=language_models, image_models=image_models)


__all__ = ["CustomProvider", "custom_provider"]
