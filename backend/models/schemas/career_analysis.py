"""Output contract of the career engine."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

Track = Literal["technical", "management", "specialist", "entrepreneurial"]
Level = Literal["entry", "junior", "mid", "senior", "lead", "director", "executive"]
SkillLevel = Literal["none", "beginner", "intermediate", "advanced", "expert"]
RequiredSkillLevel = Literal["beginner", "intermediate", "advanced", "expert"]
GapPriority = Literal["critical", "high", "medium", "low"]
ResourceType = Literal["course", "certification", "project", "book"]
ActionCategory = Literal["skill", "network", "project", "learning", "application"]
ActionPriority = Literal["high", "medium", "low"]
MarketDemand = Literal["low", "medium", "high", "very_high"]
Locale = Literal["en", "ar"]


class SalaryRange(BaseModel):
    """Monthly compensation band."""
    min: float = Field(ge=0)
    max: float = Field(ge=0)
    currency: str = "SAR"

    @model_validator(mode="after")
    def check_bounds(self):
        if self.min > self.max:
            raise ValueError("salary min must not exceed max")
        return self


class CareerMilestone(BaseModel):
    title: str
    years_from_now: int = Field(ge=0)
    salary_range: SalaryRange
    key_skills: list[str] = []
    description: str = ""


class CareerPath(BaseModel):
    id: str
    name: str
    description: str = ""
    track: Track
    timeline: list[CareerMilestone] = Field(min_length=1)
    salary_progression: list[float] = []  # midpoint per milestone
    probability: int = Field(ge=0, le=100)
    requirements: list[str] = []


class LearningResource(BaseModel):
    name: str
    type: ResourceType = "course"
    url: str | None = None


class SkillGap(BaseModel):
    skill: str
    current_level: SkillLevel = "beginner"
    required_level: RequiredSkillLevel = "advanced"
    priority: GapPriority = "medium"
    resources: list[LearningResource] = []
    estimated_time_to_acquire: str = ""


class WeeklyAction(BaseModel):
    id: str
    title: str
    description: str = ""
    category: ActionCategory = "skill"
    priority: ActionPriority = "medium"
    estimated_hours: float = Field(default=1, ge=0)
    completed: bool = False
    due_date: str | None = None
    week: int | None = None  # set by multi-week action plans only


class CurrentPosition(BaseModel):
    title: str
    level: Level
    years_experience: float = 0.0
    estimated_salary: SalaryRange
    market_demand: MarketDemand = "high"


class IndustryInsights(BaseModel):
    trending_skills: list[str] = []
    hot_industries: list[str] = []
    saudization_opportunities: list[str] = []
    salary_trends: str = ""


class CareerAnalysis(BaseModel):
    """Complete career analysis. Built fresh per request, never persisted."""
    current_position: CurrentPosition
    career_paths: list[CareerPath] = Field(min_length=1)
    skill_gaps: list[SkillGap] = []
    strengths: list[str] = []
    weekly_actions: list[WeeklyAction] = []
    career_score: int = Field(ge=0, le=100)
    industry_insights: IndustryInsights = IndustryInsights()


class MarketInsights(BaseModel):
    """Standalone industry briefing returned by the insights operation."""
    trending_roles: list[str] = []
    salary_trends: str = ""
    top_companies: list[str] = []
    in_demand_skills: list[str] = []
    saudization_info: str = ""
