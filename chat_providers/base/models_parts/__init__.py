"""Models parts package public surface.

`chat_providers.base.models` remains the primary stable import path.
"""

from .content_part import ContentPart, ContentPartType
from .message import Message, Role
from .usage import Usage
from .provider_metadata import ProviderMetadata
from .call_options import CallOptions
from .generate_result import FinishReason, GenerateResult
from .invocation import InvocationOutcome, InvocationRequest

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
