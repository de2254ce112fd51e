"""Pytest configuration for the chat_providers test suite.

Every test runs with a clean provider environment: the variables the config
layer reads are removed, the .env lookup points at a missing file, and the
config and registry caches are reset. Fakes for the Bedrock runtime client and
the OpenAI SDK client are exposed as factory fixtures so no test touches the
network.
"""

from __future__ import annotations

import json
import types
from typing import Any, Callable, Dict, Iterator, List, Optional

import pytest

from chat_providers.config import reset_config_cache

_PROVIDER_ENV = (
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "BEDROCK_CLAUDE_MODEL_ID",
    "BEDROCK_MASK_ERRORS",
    "XAI_API_KEY",
    "XAI_BASE_URL",
    "XAI_MODEL",
    "MOCK_MODEL",
    "CHAT_PROVIDERS_USE_MOCKS",
    "CHAT_PROVIDERS_CONFIG_FILE",
    "CHAT_PROVIDERS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_provider_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Remove provider variables and reset module caches around each test."""
    from chat_providers.providers import reset_provider_registry

    for name in _PROVIDER_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    reset_provider_registry()
    yield
    reset_config_cache()
    reset_provider_registry()


@pytest.fixture()
def enable_mock_providers(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Enable the mock toggle for the duration of a test."""
    monkeypatch.setenv("CHAT_PROVIDERS_USE_MOCKS", "1")
    yield
    monkeypatch.delenv("CHAT_PROVIDERS_USE_MOCKS", raising=False)


class FakeStreamingBody:
    """Stands in for botocore's ``StreamingBody``."""

    def __init__(self, payload: bytes) -> None:
        self._payload = payload

    def read(self) -> bytes:
        return self._payload


class FakeBedrockClient:
    """Records ``invoke_model`` calls and replays one canned reply or error."""

    def __init__(
        self,
        body: Any = None,
        *,
        error: Optional[BaseException] = None,
        raw: Optional[bytes] = None,
    ) -> None:
        self.body = body
        self.error = error
        self.raw = raw
        self.calls: List[Dict[str, Any]] = []

    def invoke_model(self, **kwargs: Any) -> Dict[str, Any]:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        payload = self.raw if self.raw is not None else json.dumps(self.body).encode("utf-8")
        return {
            "body": FakeStreamingBody(payload),
            "contentType": "application/json",
            "ResponseMetadata": {"RequestId": "req-123", "HTTPStatusCode": 200},
        }

    def sent_body(self, index: int = -1) -> Dict[str, Any]:
        return json.loads(self.calls[index]["body"])


@pytest.fixture()
def bedrock_client_factory() -> Callable[..., FakeBedrockClient]:
    return FakeBedrockClient


def claude_body(*texts: str) -> Dict[str, Any]:
    return {
        "id": "msg_01",
        "type": "message",
        "role": "assistant",
        "content": [{"type": "text", "text": t} for t in texts],
        "stop_reason": "end_turn",
    }


@pytest.fixture()
def claude_response() -> Callable[..., Dict[str, Any]]:
    """Build a Claude ``messages`` response body from text blocks."""
    return claude_body


class FakeOpenAIClient:
    """Minimal shape of the OpenAI SDK client used by the xAI models."""

    def __init__(
        self,
        *,
        completion: Any = None,
        chunks: Optional[List[Any]] = None,
        images: Optional[List[str]] = None,
        error: Optional[BaseException] = None,
        fail_after: Optional[int] = None,
    ) -> None:
        self.completion = completion
        self.chunks = chunks or []
        self.images_b64 = images or []
        self.error = error
        self.fail_after = fail_after
        self.chat_calls: List[Dict[str, Any]] = []
        self.image_calls: List[Dict[str, Any]] = []
        self.chat = types.SimpleNamespace(completions=types.SimpleNamespace(create=self._create))
        self.images = types.SimpleNamespace(generate=self._generate)

    def _create(self, **kwargs: Any) -> Any:
        self.chat_calls.append(kwargs)
        if kwargs.get("stream"):
            return self._iter_chunks()
        if self.error is not None:
            raise self.error
        return self.completion

    def _iter_chunks(self) -> Iterator[Any]:
        for i, chunk in enumerate(self.chunks):
            if self.fail_after is not None and i == self.fail_after:
                raise self.error or RuntimeError("stream broke")
            yield chunk
        if self.fail_after is None and self.error is not None:
            raise self.error

    def _generate(self, **kwargs: Any) -> Any:
        self.image_calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return types.SimpleNamespace(data=[types.SimpleNamespace(b64_json=b) for b in self.images_b64])


def completion(text: str, finish_reason: str = "stop", prompt_tokens: int = 3, completion_tokens: int = 5) -> Any:
    return types.SimpleNamespace(
        id="cmpl-1",
        choices=[
            types.SimpleNamespace(
                message=types.SimpleNamespace(role="assistant", content=text),
                finish_reason=finish_reason,
            )
        ],
        usage=types.SimpleNamespace(
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=prompt_tokens + completion_tokens,
        ),
    )


def chunk(content: Optional[str], finish_reason: Optional[str] = None) -> Any:
    return types.SimpleNamespace(
        choices=[
            types.SimpleNamespace(
                delta=types.SimpleNamespace(content=content),
                finish_reason=finish_reason,
            )
        ],
        usage=None,
    )


@pytest.fixture()
def openai_client_factory() -> Callable[..., FakeOpenAIClient]:
    return FakeOpenAIClient


@pytest.fixture()
def openai_payloads() -> types.SimpleNamespace:
    """Builders for chat completion responses and stream chunks."""
    return types.SimpleNamespace(completion=completion, chunk=chunk)
