"""Shared dependencies for API routes."""

from services import gemini_client
from services.gemini_client import CompleteFn
from services.usage import UsageSink, log_usage


def get_complete_fn() -> CompleteFn:
    return gemini_client.complete


def get_usage_sink() -> UsageSink:
    return log_usage
