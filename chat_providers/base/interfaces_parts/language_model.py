"""LanguageModel Protocol (single-class module).

The contract a chat application consumes: two entry points over the same
options, one returning a complete result and one returning an incremental
result.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from ..models import GenerateResult
from ..streaming import StreamResult


@runtime_checkable
class LanguageModel(Protocol):
    """Minimal language model contract.

    Implementations accept a :class:`CallOptions` (or anything
    ``CallOptions.coerce`` understands), normalize the prompt for their
    backend and never leak SDK objects upstream.
    """

    @property
    def specification_version(self) -> str:
        """Interface revision implemented by the adapter (``"v2"``)."""
        ...

    @property
    def provider(self) -> str:
        """Canonical provider identifier, e.g. ``"bedrock"``."""
        ...

    @property
    def model_id(self) -> str:
        """Provider model identifier the adapter invokes."""
        ...

    @property
    def supported_urls(self) -> Mapping[str, Any]:
        """URL patterns the model can fetch natively (usually empty)."""
        ...

    def do_generate(self, options: Any) -> GenerateResult:
        """Return the complete result for one invocation."""
        ...

    def do_stream(self, options: Any) -> StreamResult:
        """Return the incremental result for one invocation."""
        ...
