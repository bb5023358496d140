"""Token usage and billing record emitted after each generative call."""

from pydantic import BaseModel


class TokenUsage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class UsageRecord(BaseModel):
    user_id: str | None = None
    provider: str
    model: str
    operation: str  # career_analyze | career_action_plan | career_insights
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    cost_usd: float = 0.0
    cost_sar: float = 0.0
    credits: float = 0.0
