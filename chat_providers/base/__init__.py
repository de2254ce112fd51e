"""
Provider-agnostic base layer.

Exports the model contracts, DTOs, the prompt flattener, the model registry
and the adapter factory used by the concrete adapters:
- Interfaces: ``LanguageModel`` / ``ImageModel`` protocols
- Models (DTOs): call options, results, stream parts
- Registry: logical model names to instances
- Factory: lazy creation of adapters by canonical name
"""

from .errors import ErrorCode, NoSuchModelError, ProviderError, RemoteCallFailed
from .factory import ProviderFactory, UnknownProviderError
from .interfaces import HasDefaultModel, ImageModel, ImageResult, LanguageModel
from .middleware import ExtractReasoningMiddleware, LanguageModelMiddleware, wrap_language_model
from .models import (
    CallOptions,
    ContentPart,
    ContentPartType,
    GenerateResult,
    InvocationOutcome,
    InvocationRequest,
    Message,
    ProviderMetadata,
    Role,
    Usage,
)
from .prompt import flatten_prompt, parse_prompt
from .registry import CustomProvider, custom_provider
from .streaming import StreamPart, StreamResult, accumulate_parts, single_chunk_stream

__all__ = [
    # Errors
    "ErrorCode",
    "ProviderError",
    "RemoteCallFailed",
    "NoSuchModelError",
    # Models
    "Role",
    "Message",
    "ContentPartType",
    "ContentPart",
    "Usage",
    "ProviderMetadata",
    "CallOptions",
    "GenerateResult",
    "InvocationRequest",
    "InvocationOutcome",
    # Streaming
    "StreamPart",
    "StreamResult",
    "single_chunk_stream",
    "accumulate_parts",
    # Prompt
    "parse_prompt",
    "flatten_prompt",
    # Interfaces
    "LanguageModel",
    "ImageModel",
    "ImageResult",
    "HasDefaultModel",
    # Middleware
    "LanguageModelMiddleware",
    "ExtractReasoningMiddleware",
    "wrap_language_model",
    # Registry & factory
    "CustomProvider",
    "custom_provider",
    "ProviderFactory",
    "UnknownProviderError",
]
