"""
Provider-agnostic domain models (DTOs) public surface.

Re-exports the one-class-per-file implementations under
``chat_providers.base.models_parts``.
"""

from .models_parts.content_part import ContentPart, ContentPartType
from .models_parts.message import Message, Role
from .models_parts.usage import Usage
from .models_parts.provider_metadata import ProviderMetadata
from .models_parts.call_options import CallOptions
from .models_parts.generate_result import FinishReason, GenerateResult
from .models_parts.invocation import InvocationOutcome, InvocationRequest

__all__ = [
    "ContentPart",
    "ContentPartType",
    "Message",
    "Role",
    "Usage",
    "ProviderMetadata",
    "CallOptions",
    "FinishReason",
    "GenerateResult",
    "InvocationRequest",
    "InvocationOutcome",
]
