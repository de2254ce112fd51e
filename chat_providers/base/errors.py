"""Unified provider error taxonomy public surface.

Re-exports the implementations under ``chat_providers.base.errors_parts`` to
keep a single stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import NoSuchModelError, ProviderError, RemoteCallFailed
from .errors_parts.classification import classify_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "RemoteCallFailed",
    "NoSuchModelError",
    "classify_exception",
]
