"""Pydantic contracts shared by the career engine and the API."""

from models.schemas.career_profile import CareerProfile
from models.schemas.career_analysis import (
    CareerAnalysis,
    CareerMilestone,
    CareerPath,
    CurrentPosition,
    IndustryInsights,
    MarketInsights,
    SalaryRange,
    SkillGap,
    WeeklyAction,
)
from models.schemas.usage import TokenUsage, UsageRecord

__all__ = [
    "CareerProfile",
    "CareerAnalysis",
    "CareerMilestone",
    "CareerPath",
    "CurrentPosition",
    "IndustryInsights",
    "MarketInsights",
    "SalaryRange",
    "SkillGap",
    "WeeklyAction",
    "TokenUsage",
    "UsageRecord",
]
