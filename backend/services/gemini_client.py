"""Google Gemini API wrapper: the generative adapter behind career analysis."""

import json
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from google import genai
from google.genai import errors, types

from config import settings
from models.schemas.usage import TokenUsage

logger = logging.getLogger(__name__)

PROVIDER = "gemini"

_client: genai.Client | None = None


class GenerativeAdapterError(Exception):
    """Transport or auth failure talking to the generative provider."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        return self.status_code is None or self.status_code == 429 or self.status_code >= 500


@dataclass(frozen=True)
class Completion:
    content_json_text: str
    usage: Optional[TokenUsage] = None
    model: str = ""
    provider: str = PROVIDER


# Signature every adapter implementation (and test double) must follow
CompleteFn = Callable[..., Awaitable[Optional[Completion]]]


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


async def complete(
    system_prompt: str,
    user_prompt: str,
    *,
    max_tokens: int,
    temperature: float,
    json_mode: bool = True,
) -> Completion | None:
    """Send one prompt pair to Gemini.

    Returns None when no API key is configured. Provider errors are raised
    as GenerativeAdapterError; parsing the text is the caller's job.
    """
    client = get_client()
    if client is None:
        return None

    config = types.GenerateContentConfig(
        system_instruction=system_prompt,
        temperature=temperature,
        max_output_tokens=max_tokens,
        response_mime_type="application/json" if json_mode else None,
    )
    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=user_prompt,
            config=config,
        )
    except errors.APIError as e:
        logger.error("Gemini API error (%s): %s", e.code, e.message)
        raise GenerativeAdapterError(str(e.message or e), status_code=e.code) from e

    usage = None
    meta = response.usage_metadata
    if meta is not None:
        usage = TokenUsage(
            prompt_tokens=meta.prompt_token_count or 0,
            completion_tokens=meta.candidates_token_count or 0,
            total_tokens=meta.total_token_count or 0,
        )

    return Completion(
        content_json_text=response.text or "",
        usage=usage,
        model=settings.gemini_model,
    )


def parse_json_document(text: str | None) -> dict:
    """Best-effort parse of a JSON object. Anything unusable becomes {}."""
    if not text:
        return {}
    text = text.strip()
    # Strip markdown code fences if present
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse Gemini response as JSON: %s", e)
        return {}

    if not isinstance(document, dict):
        logger.warning("Gemini response is JSON but not an object (%s)", type(document).__name__)
        return {}
    return document
