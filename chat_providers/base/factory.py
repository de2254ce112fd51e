"""Adapter factory.

Purpose
-------
Create language model adapters from a canonical provider name. Adapter
modules are imported lazily with ``importlib`` so that importing the package
never pulls in ``boto3`` or ``openai``.

Mock routing
------------
When ``CHAT_PROVIDERS_USE_MOCKS`` is truthy, every real provider resolves to
:class:`chat_providers.mock.MockLanguageModel` reporting the requested
provider name, so higher layers run offline unchanged.

Failure semantics
-----------------
No retries or fallbacks; the factory either returns an instance or raises
:class:`UnknownProviderError`.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from ..config.env import is_test_environment
from .dto.adapter_params import AdapterParams


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized.

    Covers unknown names, import failures, a missing adapter class and
    constructor errors.
    """


class ProviderFactory:
    """Create adapters by canonical name (``bedrock``, ``xai``, ``mock``)."""

    # name -> import path, class, and the constructor keyword taking the model id
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "bedrock": {"module": "chat_providers.bedrock.client", "class": "BedrockClaudeProvider", "model_kw": "model"},
        "xai": {"module": "chat_providers.xai.client", "class": "XAIChatModel", "model_kw": "model_id"},
        "mock": {"module": "chat_providers.mock.client", "class": "MockLanguageModel", "model_kw": "model_id"},
    }

    @classmethod
    def create(
        cls,
        provider: str,
        *,
        params: Optional[AdapterParams] = None,
        **kwargs: Any,
    ) -> Any:
        """Create an adapter instance.

        Parameters
        ----------
        provider:
            Canonical provider name.
        params:
            Optional :class:`AdapterParams`; explicit ``kwargs`` win over it.
        **kwargs:
            Adapter constructor keywords.

        Raises
        ------
        UnknownProviderError
            Unknown provider, import failure, missing class or constructor error.
        """
        name = (provider or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        merged = cls._coerce_params(params, kwargs)
        if name != "mock" and is_test_environment():
            mock_spec = cls._PROVIDERS["mock"]
            model = merged.get("model") or merged.get(spec["model_kw"])
            merged = {"provider": name}
            if model:
                merged["model_id"] = model
            spec = mock_spec
        elif "model" in merged and spec["model_kw"] != "model":
            merged[spec["model_kw"]] = merged.pop("model")

        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except Exception as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:  # pragma: no cover - registry typo
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            return klass(**merged)
        except TypeError as exc:
            raise UnknownProviderError(f"Invalid arguments for '{provider}' adapter constructor: {exc}") from exc
        except Exception as exc:
            raise UnknownProviderError(f"Failed to initialize provider '{provider}': {exc}") from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Canonical provider names in deterministic order."""
        return tuple(cls._PROVIDERS.keys())

    @staticmethod
    def _coerce_params(params: Optional[AdapterParams], kwargs: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``AdapterParams`` into ``kwargs``.

        ``None`` fields are dropped, ``extra`` is flattened into the result and
        explicit ``kwargs`` always win.
        """
        if params is None:
            return dict(kwargs)
        merged: Dict[str, Any] = params.model_dump(exclude_none=True)
        extra = merged.pop("extra", {}) or {}
        merged |= extra
        merged.update(kwargs)
        return merged


def create_provider(provider: str, **kwargs: Any) -> Any:
    """Shortcut for :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
