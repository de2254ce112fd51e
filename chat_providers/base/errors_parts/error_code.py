"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration used by model adapters, the registry and
error classification. Values are lowercase snake_case and are part of the
structured logging contract.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    UNSUPPORTED = "unsupported"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    MALFORMED_RESPONSE = "malformed_response"
    SDK_MISSING = "sdk_missing"
    INTERNAL = "internal"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
