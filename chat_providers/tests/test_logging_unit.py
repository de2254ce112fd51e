"""Unit coverage for structured logging utilities and helpers."""

from __future__ import annotations

import io
import json
import logging

from chat_providers.base.log_support import JsonFormatter
from chat_providers.base.logging import (
    LogContext,
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)


def test_get_logger_env_overrides_level(monkeypatch, capsys):
    monkeypatch.setenv("CHAT_PROVIDERS_LOG_LEVEL", "ERROR")
    logger = get_logger(name="chat_providers.test", json_mode=True, level=logging.DEBUG)
    logger.info("hello")
    assert capsys.readouterr().err == ""
    logger.error("fail")
    data = json.loads(capsys.readouterr().err.strip())
    assert data["level"] == "ERROR"
    assert data["msg"] == "fail"
    monkeypatch.delenv("CHAT_PROVIDERS_LOG_LEVEL")
    get_logger(name="chat_providers.test")


def test_normalized_log_event_includes_required_keys(capsys):
    logger = get_logger(name="chat_providers.test2", json_mode=True)
    ctx = LogContext(provider="bedrock", model="m", request_id="r1")
    normalized_log_event(
        logger,
        "invoke.end",
        ctx,
        phase="finalize",
        attempt=1,
        error_code=None,
        emitted=True,
        tokens={"input_tokens": 1},
        extra_field=123,
        phase_override_ignored=None,
    )
    payload = json.loads(capsys.readouterr().err.strip())
    for k in ("structured", "phase", "attempt", "emitted", "tokens"):
        assert k in payload
    assert "error_code" not in payload
    assert "phase_override_ignored" not in payload
    assert payload["event"] == "invoke.end"
    assert payload["provider"] == "bedrock"
    assert payload["request_id"] == "r1"
    assert payload["extra_field"] == 123


def test_log_event_drops_none_unless_kept(capsys):
    logger = get_logger(name="chat_providers.test3")
    log_event(logger, "e1", a=None, b=2)
    log_event(logger, "e2", keep_none=True, a=None)
    first, second = [json.loads(ln) for ln in capsys.readouterr().err.splitlines()]
    assert "a" not in first and first["b"] == 2
    assert "a" in second and second["a"] is None


def test_json_formatter_hoists_json_message() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="chat_providers.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"provider": "bedrock", "event": "invoke.start"}),
        args=(),
        exc_info=None,
    )
    payload = json.loads(formatter.format(record))
    assert payload["provider"] == "bedrock"
    assert payload["logger"] == "chat_providers.test.json"
    assert "msg" not in payload


def test_child_logger_uses_parent_handler_without_duplicates() -> None:
    logger = get_logger(name="chat_providers.test.child", json_mode=False)
    base_logger = logging.getLogger("chat_providers")
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(base_logger.level)
    previous = base_logger.handlers[:]
    base_logger.handlers[:] = [handler]
    try:
        logger.info("alpha")
        handler.flush()
        assert [ln for ln in stream.getvalue().splitlines() if ln] == ["alpha"]
    finally:
        base_logger.handlers[:] = previous


def test_configure_logger_file_handler(tmp_path) -> None:
    log_path = tmp_path / "logs" / "providers.log"
    base = configure_logger(level="DEBUG", file_path=str(log_path), json_mode=True)
    try:
        get_logger("chat_providers.test.file").debug("to file")
        for h in base.handlers:
            h.flush()
        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["msg"] == "to file"
    finally:
        configure_logger(level=logging.INFO, file_path=None)
    assert all(getattr(h, "baseFilename", None) is None for h in base.handlers)
