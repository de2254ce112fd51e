"""Errors parts package public surface.

Prefer importing from `chat_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import NoSuchModelError, ProviderError, RemoteCallFailed
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "RemoteCallFailed",
    "NoSuchModelError",
    "classify_exception",
]
