"""Reasoning extraction middleware and the wrap_language_model decorator."""

from __future__ import annotations

from typing import Any, List

import pytest

from chat_providers.base.middleware import (
    ExtractReasoningMiddleware,
    LanguageModelMiddleware,
    split_reasoning,
    wrap_language_model,
)
from chat_providers.base.models import CallOptions, ContentPart, GenerateResult
from chat_providers.base.streaming import StreamPart, StreamResult, accumulate_parts


class ScriptedModel:
    """Language model returning fixed text and a fixed chunk list."""

    specification_version = "v2"
    provider = "scripted"
    model_id = "scripted-1"
    supported_urls: dict = {}

    def __init__(self, text: str = "", chunks: List[str] | None = None) -> None:
        self.text = text
        self.chunks = chunks or []
        self.seen: List[CallOptions] = []

    def do_generate(self, options: Any) -> GenerateResult:
        self.seen.append(options)
        return GenerateResult(content=[ContentPart(type="text", text=self.text)], finish_reason="stop")

    def do_stream(self, options: Any) -> StreamResult:
        self.seen.append(options)

        def parts():
            yield StreamPart.text_start("1")
            for c in self.chunks:
                yield StreamPart.text_delta("1", c)
            yield StreamPart.text_end("1")
            yield StreamPart.finish("stop")

        return StreamResult(stream=parts())


def _think():
    return ExtractReasoningMiddleware(tag_name="think")


def test_split_reasoning_variants():
    assert split_reasoning("plain", "<think>", "</think>", "\n") == (None, "plain")
    assert split_reasoning("<think>r</think>answer", "<think>", "</think>", "\n") == ("r", "answer")
    assert split_reasoning("a<think>r1</think>b<think>r2</think>c", "<think>", "</think>", "\n") == (
        "r1\nr2",
        "a\nb\nc",
    )


def test_generate_moves_reasoning_into_own_part():
    model = wrap_language_model(ScriptedModel("<think>consider</think>The answer."), _think())
    result = model.do_generate("q")
    assert [p.type for p in result.content] == ["reasoning", "text"]
    assert result.reasoning == "consider"
    assert result.text == "The answer."
    assert result.finish_reason == "stop"


def test_generate_without_tags_is_untouched():
    result = wrap_language_model(ScriptedModel("no tags here"), _think()).do_generate("q")
    assert [p.type for p in result.content] == ["text"]
    assert result.text == "no tags here"


def test_start_with_reasoning_assumes_open_tag():
    middleware = ExtractReasoningMiddleware(tag_name="think", start_with_reasoning=True)
    result = wrap_language_model(ScriptedModel("hidden</think>shown"), middleware).do_generate("q")
    assert result.reasoning == "hidden"
    assert result.text == "shown"


def test_stream_handles_tags_split_across_deltas():
    chunks = ["<thi", "nk>The user wants ", "an answer.</th", "ink>Here is ", "the answer."]
    model = wrap_language_model(ScriptedModel(chunks=chunks), _think())
    parts = list(model.do_stream("q"))
    types = [p.type for p in parts]
    assert types[0] == "text-start"
    assert types[-1] == "finish"
    assert types.index("reasoning-start") < types.index("reasoning-end")
    reasoning = "".join(p.delta for p in parts if p.type == "reasoning-delta")
    text = "".join(p.delta for p in parts if p.type == "text-delta")
    assert reasoning == "The user wants an answer."
    assert text == "Here is the answer."
    assert all("<" not in (p.delta or "") for p in parts)


def test_stream_matches_generate_after_accumulation():
    raw = "<think>why</think>because"
    generated = wrap_language_model(ScriptedModel(raw), _think()).do_generate("q")
    streamed = accumulate_parts(wrap_language_model(ScriptedModel(chunks=list(raw)), _think()).do_stream("q"))
    assert streamed.text == generated.text == "because"
    assert streamed.reasoning == generated.reasoning == "why"


def test_stream_flushes_partial_tag_lookalike():
    model = wrap_language_model(ScriptedModel(chunks=["value <thi"]), _think())
    text = "".join(p.delta for p in model.do_stream("q") if p.type == "text-delta")
    assert text == "value <thi"


def test_unclosed_reasoning_is_closed_at_block_end():
    model = wrap_language_model(ScriptedModel(chunks=["<think>never closed"]), _think())
    parts = list(model.do_stream("q"))
    types = [p.type for p in parts]
    assert types.count("reasoning-start") == types.count("reasoning-end") == 1
    assert types.index("reasoning-end") < types.index("finish")


def test_wrapped_model_exposes_inner_identity():
    inner = ScriptedModel("x")
    wrapped = wrap_language_model(inner, _think(), model_id="alias")
    assert wrapped.specification_version == "v2"
    assert wrapped.provider == "scripted"
    assert wrapped.model_id == "alias"
    assert wrapped.wrapped is inner


def test_middleware_order_and_option_transform():
    calls: List[str] = []

    class Tag(LanguageModelMiddleware):
        def __init__(self, name: str) -> None:
            self.name = name

        def transform_options(self, options, kind):
            calls.append(f"{self.name}:transform:{kind}")
            return options

        def wrap_generate(self, do_generate, options, model):
            calls.append(f"{self.name}:before")
            result = do_generate()
            calls.append(f"{self.name}:after")
            return result

    inner = ScriptedModel("ok")
    wrap_language_model(inner, [Tag("outer"), Tag("inner")]).do_generate({"prompt": "p"})
    assert calls == [
        "outer:transform:generate",
        "inner:transform:generate",
        "outer:before",
        "inner:before",
        "inner:after",
        "outer:after",
    ]
    assert isinstance(inner.seen[0], CallOptions)
    assert inner.seen[0].prompt == "p"


@pytest.mark.parametrize("kind", ["generate", "stream"])
def test_base_middleware_is_passthrough(kind):
    model = wrap_language_model(ScriptedModel("t", chunks=["t"]), LanguageModelMiddleware())
    if kind == "generate":
        assert model.do_generate("q").text == "t"
    else:
        assert accumulate_parts(model.do_stream("q")).text == "t"
