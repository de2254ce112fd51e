"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Handles HTTP status extraction (attribute style used by the ``openai`` SDK and
the mapping style used by botocore ``ClientError.response``), botocore error
code names, and message-based heuristics as a fallback.
"""
from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, Mapping, Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


def _status_from_response(resp: Any) -> Optional[int]:
    if isinstance(resp, Mapping):
        meta = resp.get("ResponseMetadata")
        if isinstance(meta, Mapping):
            sc = meta.get("HTTPStatusCode")
            if isinstance(sc, int) and 100 <= sc < 600:
                return sc
        return None
    sc = getattr(resp, "status_code", None)
    if isinstance(sc, int) and 100 <= sc < 600:
        return sc
    return None


def _extract_status(exc: Any) -> Optional[int]:
    """Attempt to extract an HTTP status code from a provider exception.

    Supported shapes (checked in order):
    - ``exc.status_code`` / ``exc.status``
    - ``exc.response.status_code``
    - ``exc.response["ResponseMetadata"]["HTTPStatusCode"]`` (botocore)
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        return _status_from_response(resp)
    return None


def _extract_aws_error_code(exc: Any) -> Optional[str]:
    resp = getattr(exc, "response", None)
    if isinstance(resp, Mapping):
        err = resp.get("Error")
        if isinstance(err, Mapping) and isinstance(err.get("Code"), str):
            return err["Code"]
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    422: ErrorCode.VALIDATION,
    424: ErrorCode.TRANSIENT,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}

# Bedrock Runtime exception names as reported in ``Error.Code``.
_AWS_CODE_MAP: Dict[str, ErrorCode] = {
    "AccessDeniedException": ErrorCode.AUTH,
    "UnrecognizedClientException": ErrorCode.AUTH,
    "ExpiredTokenException": ErrorCode.AUTH,
    "ThrottlingException": ErrorCode.RATE_LIMIT,
    "ServiceQuotaExceededException": ErrorCode.RATE_LIMIT,
    "ModelTimeoutException": ErrorCode.TIMEOUT,
    "ValidationException": ErrorCode.VALIDATION,
    "ResourceNotFoundException": ErrorCode.NOT_FOUND,
    "ModelNotReadyException": ErrorCode.UNAVAILABLE,
    "ServiceUnavailableException": ErrorCode.UNAVAILABLE,
    "ModelErrorException": ErrorCode.SERVER_ERROR,
    "InternalServerException": ErrorCode.SERVER_ERROR,
}


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:  # pragma: no cover - simple mapping
    """Substring heuristic mapping for exceptions without status information."""
    if "rate" in msg and "limit" in msg:
        return ErrorCode.RATE_LIMIT
    PATTERN_GROUPS = (
        (ErrorCode.TIMEOUT, ("timeout", "timed out")),
        (ErrorCode.AUTH, ("auth", "api key", "unauthorized", "forbidden", "credential")),
        (ErrorCode.UNSUPPORTED, ("unsupported", "not supported")),
        (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
        (ErrorCode.UNAVAILABLE, ("unavailable", "temporarily down")),
        (ErrorCode.VALIDATION, ("validation", "invalid", "malformed")),
        (ErrorCode.SERVER_ERROR, ("server error", "internal error")),
    )
    for code, patterns in PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (sync/async).
        3. JSON decoding failures.
        4. botocore ``Error.Code`` names.
        5. HTTP status mapping.
        6. Substring heuristics.
        7. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (json.JSONDecodeError, UnicodeDecodeError)):
        return ErrorCode.MALFORMED_RESPONSE
    aws_code = _extract_aws_error_code(exc)
    if aws_code is not None and aws_code in _AWS_CODE_MAP:
        return _AWS_CODE_MAP[aws_code]
    status = _extract_status(exc)
    if status is not None and status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
