"""chat_providers package

Language model adapters for a chat application: Claude on Amazon Bedrock,
xAI Grok chat and image models, and fixture-backed mocks, behind one
``LanguageModel`` contract and a registry keyed by logical model name.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`RemoteCallFailed`,
      :class:`NoSuchModelError`, :class:`ErrorCode`
    - Factory: :func:`create`, :class:`ProviderFactory`, :class:`AdapterParams`
    - Prompt: :func:`flatten_prompt`
    - Helpers: :func:`generate_text`, :func:`stream_text`

The registry (``chat_providers.providers``) is not imported here so that
``import chat_providers`` stays free of SDK imports.
"""

from typing import Optional

from .base.dto import AdapterParams
from .base.errors import ErrorCode, NoSuchModelError, ProviderError, RemoteCallFailed
from .base.factory import ProviderFactory
from .base.interfaces import HasDefaultModel, ImageModel, LanguageModel
from .base.models import CallOptions, GenerateResult
from .base.prompt import flatten_prompt
from .base.streaming import StreamPart, StreamResult
from .base.utils import generate_text, stream_text

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ProviderError",
    "RemoteCallFailed",
    "NoSuchModelError",
    "ErrorCode",
    "create",
    "ProviderFactory",
    "AdapterParams",
    "LanguageModel",
    "ImageModel",
    "HasDefaultModel",
    "CallOptions",
    "GenerateResult",
    "StreamPart",
    "StreamResult",
    "flatten_prompt",
    "generate_text",
    "stream_text",
]


def create(provider_name: str, *, params: Optional[AdapterParams] = None, **kwargs):
    """Instantiate an adapter via :class:`ProviderFactory`.

    Raises
    ------
    ProviderError
        With code ``UNKNOWN`` wrapping any factory failure.
    """
    try:
        return ProviderFactory.create(provider_name, params=params, **kwargs)
    except Exception as e:
        raise ProviderError(
            code=ErrorCode.UNKNOWN,
            message=f"Failed to create provider '{provider_name}': {e}",
            provider=provider_name,
        ) from e
