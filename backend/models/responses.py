from pydantic import BaseModel

from models.schemas.career_analysis import CareerAnalysis, MarketInsights, WeeklyAction


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False


class CareerAnalysisResponse(BaseModel):
    result: CareerAnalysis


class ActionPlanResponse(BaseModel):
    result: list[WeeklyAction] = []


class IndustryInsightsResponse(BaseModel):
    result: MarketInsights
