"""Shared test configuration, pytest markers and a fake generative adapter."""

import json

import pytest

from models.schemas.usage import TokenUsage
from services.gemini_client import Completion


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the real Gemini API (needs GEMINI_API_KEY)"
    )


class FakeAdapter:
    """Stands in for gemini_client.complete and records every call."""

    def __init__(self, document=None, text=None, usage=None, model="gemini-2.5-flash"):
        self.document = document
        self.text = text
        self.usage = usage
        self.model = model
        self.calls = []

    async def __call__(self, system_prompt, user_prompt, *, max_tokens, temperature, json_mode=True):
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "max_tokens": max_tokens,
                "temperature": temperature,
                "json_mode": json_mode,
            }
        )
        content = self.text if self.text is not None else json.dumps(self.document or {})
        return Completion(content_json_text=content, usage=self.usage, model=self.model)


@pytest.fixture
def fake_adapter():
    """Factory: fake_adapter(document=..., text=..., usage=...)."""
    return FakeAdapter


@pytest.fixture
def sample_usage():
    return TokenUsage(prompt_tokens=1200, completion_tokens=500, total_tokens=1700)
