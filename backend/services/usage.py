"""Token cost accounting and the fire-and-forget usage sink."""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Union

from models.schemas.usage import TokenUsage, UsageRecord
from services.gemini_client import Completion

logger = logging.getLogger(__name__)

USD_TO_SAR = 3.75
SAR_PER_CREDIT = 0.2  # 10 SAR buys 50 credits
CREDITS_PER_SAR = 1 / SAR_PER_CREDIT

# USD per 1k tokens
CHAT_PRICING: dict[str, dict[str, float]] = {
    "gemini-2.5-flash": {"input": 0.0003, "output": 0.0025},
    "gemini-2.5-flash-lite": {"input": 0.0001, "output": 0.0004},
    "gemini-2.5-pro": {"input": 0.00125, "output": 0.01},
    "gpt-4o-mini": {"input": 0.00015, "output": 0.0006},
    "gpt-4o": {"input": 0.005, "output": 0.015},
}
DEFAULT_PRICING_MODEL = "gemini-2.5-flash"

UsageSink = Callable[[UsageRecord], Union[None, Awaitable[None]]]

# Strong refs so scheduled sink tasks are not garbage collected mid-flight
_pending: set[asyncio.Task] = set()


def _round_two(value: float) -> float:
    return round(value * 100) / 100


def calculate_chat_cost_usd(model: str, prompt_tokens: int, completion_tokens: int) -> float:
    pricing = CHAT_PRICING.get(model) or CHAT_PRICING[DEFAULT_PRICING_MODEL]
    return (prompt_tokens / 1000) * pricing["input"] + (completion_tokens / 1000) * pricing["output"]


def calculate_credits_from_usd(cost_usd: float) -> tuple[float, float]:
    """Returns (cost_sar, credits), both rounded to 2 decimals."""
    cost_sar = cost_usd * USD_TO_SAR
    return _round_two(cost_sar), _round_two(cost_sar * CREDITS_PER_SAR)


def build_usage_record(
    usage: TokenUsage,
    *,
    model: str,
    operation: str,
    provider: str,
    user_id: str | None = None,
) -> UsageRecord:
    cost_usd = calculate_chat_cost_usd(model, usage.prompt_tokens, usage.completion_tokens)
    cost_sar, credits = calculate_credits_from_usd(cost_usd)
    return UsageRecord(
        user_id=user_id,
        provider=provider,
        model=model,
        operation=operation,
        prompt_tokens=usage.prompt_tokens,
        completion_tokens=usage.completion_tokens,
        total_tokens=usage.total_tokens,
        cost_usd=_round_two(cost_usd),
        cost_sar=cost_sar,
        credits=credits,
    )


def log_usage(record: UsageRecord) -> None:
    """Default sink: write the record to the application log."""
    logger.info(
        "AI usage op=%s model=%s user=%s tokens=%d credits=%.2f",
        record.operation,
        record.model,
        record.user_id or "-",
        record.total_tokens,
        record.credits,
    )


def _on_sink_done(task: asyncio.Task) -> None:
    _pending.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.warning("Usage sink failed: %s", exc)


def emit_usage(
    sink: Optional[UsageSink],
    completion: Completion | None,
    *,
    operation: str,
    user_id: str | None = None,
) -> UsageRecord | None:
    """Hand a usage record to the sink without waiting on it.

    Nothing is emitted when the completion carries no token usage. Sink
    errors are logged and never reach the caller.
    """
    if completion is None or completion.usage is None or completion.usage.total_tokens <= 0:
        return None

    record = build_usage_record(
        completion.usage,
        model=completion.model,
        operation=operation,
        provider=completion.provider,
        user_id=user_id,
    )
    sink = sink or log_usage
    try:
        result: Any = sink(record)
    except Exception as e:
        logger.warning("Usage sink failed: %s", e)
        return record

    if inspect.isawaitable(result):
        task = asyncio.ensure_future(result)
        _pending.add(task)
        task.add_done_callback(_on_sink_done)
    return record
