from __future__ import annotations

import json
import types

from botocore.exceptions import ClientError

from chat_providers.base.errors import (
    ErrorCode,
    NoSuchModelError,
    ProviderError,
    RemoteCallFailed,
    classify_exception,
)


def _client_error(code: str, status: int) -> ClientError:
    return ClientError(
        {"Error": {"Code": code, "Message": "m"}, "ResponseMetadata": {"HTTPStatusCode": status}},
        "InvokeModel",
    )


def test_classify_provider_error_passthrough():
    e = ProviderError(code=ErrorCode.AUTH, message="nope", provider="x")
    assert classify_exception(e) is ErrorCode.AUTH
    assert classify_exception(RemoteCallFailed(code=ErrorCode.TIMEOUT, message="t", provider="bedrock")) is ErrorCode.TIMEOUT


def test_classify_timeouts_and_decode_errors():
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT
    try:
        json.loads("{")
    except json.JSONDecodeError as exc:
        assert classify_exception(exc) is ErrorCode.MALFORMED_RESPONSE


def test_classify_bedrock_error_codes():
    assert classify_exception(_client_error("AccessDeniedException", 403)) is ErrorCode.AUTH
    assert classify_exception(_client_error("ThrottlingException", 429)) is ErrorCode.RATE_LIMIT
    assert classify_exception(_client_error("ModelTimeoutException", 408)) is ErrorCode.TIMEOUT
    assert classify_exception(_client_error("ValidationException", 400)) is ErrorCode.VALIDATION
    assert classify_exception(_client_error("ResourceNotFoundException", 404)) is ErrorCode.NOT_FOUND
    assert classify_exception(_client_error("ModelNotReadyException", 429)) is ErrorCode.UNAVAILABLE
    assert classify_exception(_client_error("InternalServerException", 500)) is ErrorCode.SERVER_ERROR


def test_classify_unknown_aws_code_falls_back_to_status():
    assert classify_exception(_client_error("SomethingNewException", 503)) is ErrorCode.UNAVAILABLE


def test_classify_http_status_mapping():
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT
    assert classify_exception(Exception("timed out waiting")) is ErrorCode.TIMEOUT
    assert classify_exception(Exception("unsupported parameter")) is ErrorCode.UNSUPPORTED
    assert classify_exception(Exception("Unable to locate credentials")) is ErrorCode.AUTH
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN


def test_error_types_are_provider_errors():
    failure = RemoteCallFailed(code=ErrorCode.UNKNOWN, message="x", provider="bedrock", raw=ValueError("v"))
    assert isinstance(failure, ProviderError)
    assert isinstance(failure.cause, ValueError)
    assert "bedrock" in str(failure)
    missing = NoSuchModelError(code=ErrorCode.NOT_FOUND, message="m", provider="custom", model="x")
    assert isinstance(missing, ProviderError)
    assert ErrorCode.RATE_LIMIT == "rate_limit"
