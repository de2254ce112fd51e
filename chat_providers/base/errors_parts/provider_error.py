"""
Structured provider error exception types.

`ProviderError` wraps SDK or transport exceptions with a normalized
`ErrorCode`. Two specializations cover the failure classes this package
raises on purpose: `RemoteCallFailed` for a failed model invocation and
`NoSuchModelError` for a registry lookup miss.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"bedrock"``).
        model: Optional model name associated with the failure.
        retryable: Hint for upstream callers (this package never retries).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


@dataclass
class RemoteCallFailed(ProviderError):
    """A remote model invocation failed (network, service or parse error).

    The underlying exception, when there is one, is available as ``cause``.
    """

    @property
    def cause(self) -> Optional[BaseException]:
        return self.raw


@dataclass
class NoSuchModelError(ProviderError):
    """Raised when a registry has no model registered under a logical name."""


__all__ = ["ProviderError", "RemoteCallFailed", "NoSuchModelError"]
