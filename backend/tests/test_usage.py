import asyncio

import pytest

from models.schemas.usage import TokenUsage
from services.gemini_client import Completion
from services.usage import (
    build_usage_record,
    calculate_chat_cost_usd,
    calculate_credits_from_usd,
    emit_usage,
)


def test_chat_cost_known_model():
    cost = calculate_chat_cost_usd("gpt-4o-mini", prompt_tokens=1000, completion_tokens=1000)
    assert cost == pytest.approx(0.00075)


def test_chat_cost_unknown_model_uses_default_pricing():
    assert calculate_chat_cost_usd("mystery", 1000, 0) == calculate_chat_cost_usd("gemini-2.5-flash", 1000, 0)


def test_credits_from_usd():
    cost_sar, credits = calculate_credits_from_usd(1.0)
    assert cost_sar == 3.75
    assert credits == 18.75


def test_build_usage_record():
    usage = TokenUsage(prompt_tokens=200_000, completion_tokens=100_000, total_tokens=300_000)
    record = build_usage_record(usage, model="gemini-2.5-flash", operation="career_analyze", provider="gemini")
    # 200k * 0.0003/1k + 100k * 0.0025/1k = 0.06 + 0.25
    assert record.cost_usd == 0.31
    assert record.cost_sar == pytest.approx(1.16, abs=0.01)
    assert record.user_id is None


def _completion(total=150):
    usage = TokenUsage(prompt_tokens=100, completion_tokens=total - 100, total_tokens=total)
    return Completion(content_json_text="{}", usage=usage, model="gemini-2.5-flash")


def test_emit_skips_without_usage():
    records = []
    assert emit_usage(records.append, None, operation="career_analyze") is None
    assert emit_usage(
        records.append, Completion(content_json_text="{}"), operation="career_analyze"
    ) is None
    assert records == []


def test_emit_sync_sink():
    records = []
    record = emit_usage(records.append, _completion(), operation="career_insights", user_id="u1")
    assert records == [record]
    assert record.operation == "career_insights"


def test_emit_sync_sink_failure_is_swallowed():
    def broken(record):
        raise ValueError("db offline")

    assert emit_usage(broken, _completion(), operation="career_analyze") is not None


def test_emit_default_sink_logs(caplog):
    with caplog.at_level("INFO", logger="services.usage"):
        emit_usage(None, _completion(), operation="career_analyze")
    assert "career_analyze" in caplog.text


@pytest.mark.asyncio
async def test_emit_async_sink_is_not_awaited_inline():
    received = []
    gate = asyncio.Event()

    async def sink(record):
        await gate.wait()
        received.append(record)

    emit_usage(sink, _completion(), operation="career_analyze")
    assert received == []
    gate.set()
    await asyncio.sleep(0.01)
    assert len(received) == 1


@pytest.mark.asyncio
async def test_emit_async_sink_failure_is_logged(caplog):
    async def sink(record):
        raise RuntimeError("billing down")

    emit_usage(sink, _completion(), operation="career_analyze")
    await asyncio.sleep(0.01)
    assert "Usage sink failed" in caplog.text
